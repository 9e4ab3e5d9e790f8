"""
The backtracking search : halves a unit step until an acceptance rule holds
"""

import logging

import numpy

from .. import defaults
from ..errors import NewtonLS_ValueError, SearchExhausted
from .acceptance_rules import acceptance_rule

__all__ = ['BacktrackingSearch', 'line_search_step']

logger = logging.getLogger(__name__)


class BacktrackingSearch(object):
  """
  The backtracking algorithm for enforcing an acceptance rule (Armijo by default)
  Trial steps are alpha_step, alpha_step * alpha_factor, alpha_step * alpha_factor**2, ...
  """
  def __init__(self, criterion = 'armijo', max_trials = defaults.parameters['max_trials'],
               alpha_step = defaults.parameters['alpha_step'],
               alpha_factor = defaults.parameters['alpha_factor'], monitor = None, **kwargs):
    """
    Can have :
      - an acceptance rule, a name or a callable (criterion = 'armijo')
      - the maximum number of rejected trials before failing (max_trials = 100)
      - the first step length tried (alpha_step = 1.)
      - a factor < 1 that decreases the step until the rule is valid (alpha_factor = 0.5)
      - a callable monitor(x, alpha) called on each accepted step (monitor = None)
    The other keyword arguments (c1, c2) parametrize a named rule
    """
    if max_trials < 1:
      raise NewtonLS_ValueError("max_trials must be a positive integer, got %r" % (max_trials,))
    if not 0. < alpha_factor < 1.:
      raise NewtonLS_ValueError("alpha_factor must lie in (0, 1), got %r" % (alpha_factor,))
    self.rule = acceptance_rule(criterion, **kwargs)
    self.maxTrials = max_trials
    self.stepSize = alpha_step
    self.stepFactor = alpha_factor
    self.monitor = monitor

  def __call__(self, origin, function, state, **kwargs):
    """
    Tries to find an acceptable candidate
    Parameters :
      - origin is the origin of the search
      - function is the function to minimize, with a gradient method for the curvature rules
      - state is the state of the optimizer, holding the direction and the gradient at origin
    """
    direction = state['direction']
    slope = numpy.dot(state['gradient'], direction)
    candidate, alpha, trials = self._search(origin, function, direction, function(origin), slope,
                                            getattr(function, 'gradient', None))
    state['alpha_step'] = alpha
    state['trials'] = trials
    return candidate

  def search(self, origin, function, gradient, direction):
    """
    Searches along direction from origin
    gradient is a callable, evaluated once at origin
    Returns the accepted point, the accepted step length and the number of trials
    """
    slope = numpy.dot(gradient(origin), direction)
    return self._search(origin, function, direction, function(origin), slope, gradient)

  def _search(self, origin, function, direction, value, slope, gradient):
    alpha = self.stepSize
    for trial in range(1, self.maxTrials + 1):
      candidate = origin + alpha * direction
      trial_value = function(candidate)
      if self.rule(value = value, trial_value = trial_value, alpha = alpha, slope = slope,
                   candidate = candidate, direction = direction, gradient = gradient):
        logger.debug("accepted alpha = %g after %d trial(s)", alpha, trial)
        if self.monitor is not None:
          self.monitor(candidate, alpha)
        return candidate, alpha, trial
      logger.debug("rejected alpha = %g: f = %g, f(origin) = %g", alpha, trial_value, value)
      last_alpha = alpha
      alpha = alpha * self.stepFactor

    logger.warning("line search exhausted after %d trials (slope = %g)", self.maxTrials, slope)
    raise SearchExhausted(self.maxTrials, last_alpha)


def line_search_step(x, function, gradient, direction, criterion = 'armijo',
                     c1 = defaults.parameters['c1'], max_trials = defaults.parameters['max_trials'],
                     monitor = None):
  """
  Takes one globalized step from x along direction
  Parameters :
    - x is the current point (scalar or array)
    - function is the cost, gradient its derivative (a callable, evaluated once at x)
    - direction should be a descent direction; this is not checked
    - criterion is 'decrease', 'armijo', 'wolfe', 'strong_wolfe' or a rule instance
    - c1 is the Armijo factor used by the named rules
    - max_trials is the number of halvings allowed before SearchExhausted is raised
    - monitor(x_new, alpha) is called once when a step is accepted
  Returns the new point and the accepted step length
  """
  search = BacktrackingSearch(criterion = criterion, c1 = c1, max_trials = max_trials, monitor = monitor)
  candidate, alpha, trials = search.search(x, function, gradient, direction)
  return candidate, alpha
