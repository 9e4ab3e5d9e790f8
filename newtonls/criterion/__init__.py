"""
Module containing every criteria for converge test

Functions :
  - criterion() creates a composite criterion

Criteria :
  - Criterion
    - base class, sets istop when its test holds
  - IterationCriterion
    - stops when the iteration limit is reached
  - AbsoluteValueCriterion
    - stops when the absolute value error is below a certain level
  - AbsoluteParametersCriterion
    - stops when the absolute parameters error is below a certain level
  - GradientCriterion
    - stops when the gradient is below a certain level

Composite criteria :
  - OrComposition
    - returns True if one of the criteria returns True
  - AndComposition
    - returns True if all the criteria return True
"""

from .criteria import *
from .composite_criteria import *
from .facilities import *

criterion__all__ = ['Criterion', 'IterationCriterion', 'AbsoluteValueCriterion', 'AbsoluteParametersCriterion', 'GradientCriterion',
                    'OrComposition', 'AndComposition',
                    'criterion', ]

__all__ = criterion__all__
