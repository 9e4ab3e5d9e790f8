"""
Backtracking line searches for globalizing Newton-type iterations

Subpackages :
  - line_search
    - acceptance rules and the backtracking search itself
  - step
    - direction providers (Newton, gradient)
  - criterion
    - stopping criteria for the outer iteration
  - optimizer
    - the outer iteration that chains a step and a line search
  - helpers
    - finite differences and trajectory recording
"""

from . import defaults
from . import errors
from . import criterion
from . import helpers
from . import line_search
from . import step
from . import optimizer

from .errors import SearchExhausted
from .line_search import line_search_step
from .optimizer import newton_line_search

__version__ = '0.1.0'

__all__ = ['defaults', 'errors', 'criterion', 'helpers', 'line_search', 'step', 'optimizer',
           'SearchExhausted', 'line_search_step', 'newton_line_search']
