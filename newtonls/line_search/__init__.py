"""
Module containing the line searchers

Line Searches :
  - SimpleLineSearch
    - takes a simple step
  - BacktrackingSearch
    - halves the step until an acceptance rule holds
  - line_search_step
    - functional front end to BacktrackingSearch

Acceptance rules :
  - PlainDecrease
    - the cost must decrease
  - ArmijoRule
    - the cost must decrease by a fraction of the linear prediction
  - WolfeRule
    - Armijo rule and curvature condition
  - StrongWolfeRule
    - Armijo rule and strong curvature condition
"""

from .acceptance_rules import *
from .backtracking_search import *
from .simple_line_search import *

line_search__all__ = ['SimpleLineSearch', 'BacktrackingSearch', 'line_search_step',
                      'PlainDecrease', 'ArmijoRule', 'WolfeRule', 'StrongWolfeRule', 'acceptance_rule']
__all__ = line_search__all__
