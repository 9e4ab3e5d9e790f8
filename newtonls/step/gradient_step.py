"""
Computes a gradient step for a specific function at a specific point
"""

import numpy

__all__ = ['GradientStep']


class GradientStep(object):
  """
  The steepest descent step, -gradient
  """
  def __init__(self, normalized = False):
    """
    Can have :
      - a flag to scale the step to unit length, so that the line search controls the actual length (normalized = False)
    """
    self.normalized = normalized

  def __call__(self, function, point, state):
    """
    Computes a gradient step based on a function and a point
    """
    gradient = function.gradient(point)
    state['gradient'] = gradient
    step = - gradient
    if self.normalized:
      norm = numpy.linalg.norm(numpy.ravel(gradient))
      if norm > 0.:
        step = step / norm
    state['direction'] = step
    return step
