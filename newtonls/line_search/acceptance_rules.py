"""
Acceptance rules tested by the backtracking search on each trial step

Every rule is called with keyword arguments :
  - value is the cost at the origin of the search
  - trial_value is the cost at the candidate point
  - alpha is the trial step length
  - slope is the directional derivative at the origin
  - candidate, direction and gradient (a callable), used by the curvature rules
"""

import numpy

from .. import defaults
from ..errors import NewtonLS_ValueError

__all__ = ['PlainDecrease', 'ArmijoRule', 'WolfeRule', 'StrongWolfeRule',
           'acceptance_rule']


class PlainDecrease(object):
  """
  Accepts any candidate with a strictly lower cost
  """
  def __init__(self, **kwargs):
    pass

  def __call__(self, value, trial_value, **kwargs):
    return trial_value < value

class ArmijoRule(object):
  """
  The Armijo (sufficient decrease) rule
  """
  def __init__(self, c1 = defaults.parameters['c1'], **kwargs):
    """
    Can have :
      - the fraction of the predicted decrease that must be achieved (c1 = 1e-4)
    """
    if not 0. < c1 < 1.:
      raise NewtonLS_ValueError("c1 must lie in (0, 1), got %r" % (c1,))
    self.c1 = c1

  def __call__(self, value, trial_value, alpha, slope, **kwargs):
    return trial_value <= value + self.c1 * alpha * slope

class WolfeRule(ArmijoRule):
  """
  The Armijo rule plus the curvature condition, which rejects steps that are too short
  """
  def __init__(self, c1 = defaults.parameters['c1'], c2 = defaults.parameters['c2'], **kwargs):
    """
    Can have :
      - the Armijo factor (c1 = 1e-4)
      - the curvature factor, c1 < c2 < 1 (c2 = 0.9)
    """
    ArmijoRule.__init__(self, c1)
    if not c1 < c2 < 1.:
      raise NewtonLS_ValueError("c2 must lie in (c1, 1), got %r" % (c2,))
    self.c2 = c2

  def __call__(self, value, trial_value, alpha, slope, candidate, direction, gradient, **kwargs):
    if not ArmijoRule.__call__(self, value, trial_value, alpha, slope):
      return False
    return self.curvature(numpy.dot(gradient(candidate), direction), slope)

  def curvature(self, trial_slope, slope):
    return trial_slope >= self.c2 * slope

class StrongWolfeRule(WolfeRule):
  """
  The Armijo rule plus the strong curvature condition
  """
  def curvature(self, trial_slope, slope):
    return abs(trial_slope) <= self.c2 * abs(slope)


rules = {
         'decrease' : PlainDecrease,
         'armijo' : ArmijoRule,
         'wolfe' : WolfeRule,
         'strong_wolfe' : StrongWolfeRule,
         }

def acceptance_rule(criterion, **kwargs):
  """
  Returns a rule from its name ('decrease', 'armijo', 'wolfe', 'strong_wolfe'), built with kwargs
  Callables are returned unchanged
  """
  if isinstance(criterion, str):
    try:
      return rules[criterion](**kwargs)
    except KeyError:
      raise NewtonLS_ValueError("unknown acceptance rule %r, expected one of %s"
                                % (criterion, ', '.join(sorted(rules))))
  if callable(criterion):
    return criterion
  raise NewtonLS_ValueError("acceptance rule must be a name or a callable, got %r" % (criterion,))
