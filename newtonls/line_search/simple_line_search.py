"""
A simple line search, in fact no searches at all
"""

from .. import defaults

__all__ = ['SimpleLineSearch']


class SimpleLineSearch(object):
  """
  A simple line search, takes a point, adds a step and returns it
  With a Newton step this is the undamped Newton iteration
  """
  def __init__(self, alpha_step = defaults.parameters['alpha_step'], monitor = None, **kwargs):
    """
    Needs to have :
      - nothing
    Can have :
      - a step modifier, a factor to modulate the step (alpha_step = 1.)
      - a callable monitor(x, alpha) called on each step (monitor = None)
    """
    self.stepSize = alpha_step
    self.monitor = monitor

  def __call__(self, origin, state, **kwargs):
    """
    Returns a good candidate
    Parameters :
      - origin is the origin of the search
      - state is the state of the optimizer
    """
    state['alpha_step'] = self.stepSize
    state['trials'] = 1
    candidate = origin + self.stepSize * state['direction']
    if self.monitor is not None:
      self.monitor(candidate, self.stepSize)
    return candidate
