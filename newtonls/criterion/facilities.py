"""
Proposes a way to create a composite criterion
"""

__all__ = ['criterion']

from .criteria import IterationCriterion, AbsoluteValueCriterion, AbsoluteParametersCriterion, GradientCriterion
from .composite_criteria import OrComposition

# keyword, criterion class, in evaluation order
_factories = (
              ('iterations_max', IterationCriterion),
              ('ftol', AbsoluteValueCriterion),
              ('xtol', AbsoluteParametersCriterion),
              ('gtol', GradientCriterion),
              )

def criterion(**kwargs):
  """
  Creates a composite criterion based on the formal parameters :
    - iterations_max indicates the maximum number of iteration
    - ftol is the maximum absolute change of the value function
    - xtol is the maximum absolute change of the parameters
    - gtol is the maximum gradient
  """
  return OrComposition(*[factory(kwargs[name]) for name, factory in _factories if name in kwargs])
