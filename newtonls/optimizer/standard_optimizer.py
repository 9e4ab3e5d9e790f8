"""
A standard optimizer
"""

import logging

import numpy

from .. import defaults
from ..errors import SearchExhausted
from . import optimizer

__all__ = ['StandardOptimizer']

logger = logging.getLogger(__name__)


class StandardOptimizer(optimizer.Optimizer):
  """
  A standard optimizer, takes a step and finds the best candidate
  Must give in self.optimalPoint the optimal point after optimization
  """
  def __init__(self, **kwargs):
    """
    Needs to have :
      - an object function to optimize (function), alternatively a function ('fun'), gradient ('gradient'), ...
      - a way to get a new point, that is a step (step)
      - a criterion to stop the optimization (criterion)
      - a starting point (x0)
      - a way to find the best point on a line (line_search)
    Can have :
      - a tolerance on the norm of the direction, below which no line search is done (ptol = 1e-10)
    """
    optimizer.Optimizer.__init__(self, **kwargs)
    self.stepKind = kwargs['step']
    self.optimalPoint = kwargs['x0']
    self.lineSearch = kwargs['line_search']
    self.ptol = kwargs.get('ptol', defaults.parameters['ptol'])

    self.state['new_parameters'] = self.optimalPoint
    self.state['new_value'] = self.function(self.optimalPoint)

    self.recordHistory(**self.state)

  def iterate(self):
    """
    Implementation of the optimization. Does one iteration.
    """
    self.state['old_parameters'] = self.optimalPoint
    self.state['old_value'] = self.state['new_value']

    direction = self.stepKind(self.function, self.optimalPoint, state = self.state)
    if numpy.linalg.norm(numpy.ravel(direction)) < self.ptol:
      self.state['istop'] = defaults.SMALL_DIRECTION
      self.state['alpha_step'] = 0.
      self.state['trials'] = 0
      self.recordHistory(**self.state)
      return

    try:
      self.optimalPoint = self.lineSearch(origin = self.optimalPoint,
                                          function = self.function,
                                          state = self.state)
    except SearchExhausted as err:
      logger.warning("iteration %d: %s", self.state['iteration'], err)
      self.state['istop'] = defaults.IS_LINE_SEARCH_FAILED
      raise

    self.state['new_parameters'] = self.optimalPoint
    self.state['new_value'] = self.function(self.optimalPoint)
    logger.debug("iteration %d: f = %g, alpha = %g", self.state['iteration'],
                 self.state['new_value'], self.state['alpha_step'])

    self.recordHistory(**self.state)
