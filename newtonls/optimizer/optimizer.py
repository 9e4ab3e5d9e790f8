"""
The core optimizer from which every other optimizer is derived
"""

import logging

from .. import defaults
from ..helpers import CenteredFiniteDifferences

__all__ = ['Optimizer', 'ObjectiveFunction']

logger = logging.getLogger(__name__)


class ObjectiveFunction(CenteredFiniteDifferences):
  """
  Bundles a cost function with its derivatives
  Missing derivatives are computed with centered finite differences
  """
  def __init__(self, fun, gradient = None, hessian = None, eps = defaults.parameters['eps']):
    CenteredFiniteDifferences.__init__(self, eps)
    self.fun = fun
    if gradient is not None:
      self.gradient = gradient
    if hessian is not None:
      self.hessian = hessian

  def __call__(self, x):
    return self.fun(x)

class Optimizer(object):
  """
  The simple optimizer class
  This class lacks some intel that must be populated/implemented in the subclasses :
    - optimalPoint is the current best point
    - the iterate function that does the real iteration loop
  """
  def __init__(self, **kwargs):
    """
    Initialization of the optimizer, saves the function and the criterion to use
    Needs to have :
      - a function to optimize (function), alternatively a cost ('fun') with optional 'gradient' and 'hessian'
      - a criterion to stop the optimization (criterion)
    Can have :
      - a recorder that will be called with the state after each iteration step (record = self.recordHistory)
    """
    # The global state of the optimizer, is passed to every sub module
    self.state = {}

    self.state['iteration'] = 0
    self.optimized = False

    if 'function' in kwargs:
      self.function = kwargs['function']
    else:
      self.function = ObjectiveFunction(kwargs['fun'], kwargs.get('gradient'), kwargs.get('hessian'),
                                        eps = kwargs.get('eps', defaults.parameters['eps']))

    self.state['function'] = self.function
    self.criterion = kwargs['criterion']
    self.recordHistory = kwargs.get('record') or self.recordHistory

  def optimize(self):
    """
    Does the optimization, call iterate and returns the optimal set of parameters
    """
    if not self.optimized:
      self.iterate() # needed because we need a do while loop
      self.state['iteration'] += 1
      while(not self.stopped()):
        self.iterate()
        self.state['iteration'] += 1

      self.optimized = True
      logger.info("stopped after %d iteration(s): %s", self.state['iteration'],
                  defaults.errors.get(self.state.get('istop'), "criterion satisfied"))

    return self.optimalPoint

  def stopped(self):
    """
    An iteration may stop the optimization itself by setting istop, otherwise the criterion decides
    """
    return 'istop' in self.state or self.criterion(self.state)

  def recordHistory(self, **kwargs):
    """
    Function that does nothing, called for saving parameters in the iteration loop, if needed
    """
    pass

  def iterate(self):
    """
    Does one iteration of the optimization
    Present here for readability
    """
    raise NotImplementedError
