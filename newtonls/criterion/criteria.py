"""
A list of standard convergence criteria based on the number of iterations, the last values taken by the cost function and the associated points
"""

import numpy

from .. import defaults

__all__ = ['Criterion', 'IterationCriterion', 'AbsoluteValueCriterion', 'AbsoluteParametersCriterion',
           'GradientCriterion']


class Criterion(object):
  """
  Base criterion : when test(state) holds, state['istop'] is set to the istop code of the class
  """
  istop = defaults.SOLVED_WITH_UNIMPLEMENTED_OR_UNKNOWN_REASON

  def __call__(self, state, **kwargs):
    """
    Computes the stopping criterion
    """
    value = bool(self.test(state))
    if value:
      state['istop'] = self.istop
    return value

  def test(self, state):
    raise NotImplementedError

class IterationCriterion(Criterion):
  """
  A simple criterion that stops when the iteration limit is reached
  """
  istop = defaults.IS_MAX_ITER_REACHED

  def __init__(self, iterations_max = defaults.parameters['iterations_max']):
    self.iterations_max = iterations_max

  def test(self, state):
    return state['iteration'] > self.iterations_max

class AbsoluteValueCriterion(Criterion):
  """
  Stops when the cost changed by less than ftol during the last iteration
  """
  istop = defaults.SMALL_DELTA_F

  def __init__(self, ftol):
    self.error = ftol

  def test(self, state):
    return abs(state['new_value'] - state['old_value']) < self.error

class WeightedCriterion(Criterion):
  """
  A criterion comparing a weighted vector quantity to a tolerance, component by component
  """
  def __init__(self, tol, weight = None):
    """
    Initializes the criterion with a tolerance and the weight assigned for each parameter
    """
    self.error = tol
    self.weight = 1 if weight is None else weight

  def test(self, state):
    return numpy.all(self.weight * numpy.abs(self.quantity(state)) < self.error)

class AbsoluteParametersCriterion(WeightedCriterion):
  """
  Stops when every parameter moved by less than xtol during the last iteration
  """
  istop = defaults.SMALL_DELTA_X

  def quantity(self, state):
    return state['new_parameters'] - state['old_parameters']

class GradientCriterion(WeightedCriterion):
  """
  Stops when every component of the gradient at the current point is below gtol
  """
  istop = defaults.SMALL_DF

  def __init__(self, gtol = defaults.parameters['gtol'], weight = None):
    WeightedCriterion.__init__(self, gtol, weight)

  def quantity(self, state):
    return state['function'].gradient(state['new_parameters'])
