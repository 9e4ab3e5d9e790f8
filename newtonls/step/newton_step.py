"""
Computes a Newton step for a specific function at a specific point
"""

import numpy
import numpy.linalg

__all__ = ['NewtonStep']


class NewtonStep(object):
  """
  The Newton step
  """
  def __call__(self, function, point, state):
    """
    Computes a Newton step based on a function and a point
    Scalar points use the derivative ratio -f'/f''
    """
    hessian = function.hessian(point)
    gradient = function.gradient(point)
    if numpy.ndim(point) == 0:
      step = -gradient / hessian
    else:
      step = (-numpy.linalg.solve(hessian, gradient)).reshape(numpy.shape(point))
    state['hessian'] = hessian
    state['gradient'] = gradient
    state['direction'] = step
    return step
