#/usr/bin/env python

import math
import unittest

import numpy
import pytest

from numpy.testing import assert_equal, assert_almost_equal
from newtonls.errors import NewtonLS_ValueError, SearchExhausted
from newtonls.helpers import TrajectoryRecorder
from newtonls.line_search import BacktrackingSearch, line_search_step


def square(x):
  return x ** 2

def square_derivative(x):
  return 2 * x

class CountingFunction(object):
  def __init__(self, f):
    self.f = f
    self.calls = 0

  def __call__(self, x):
    self.calls += 1
    return self.f(x)

class Function(object):
  def __call__(self, x):
    return (x[0] - 2) ** 2 + (2 * x[1] + 4) ** 2

  def gradient(self, x):
    return numpy.array((2 * (x[0] - 2), 4 * (2 * x[1] + 4)))


def test_plain_decrease_rejects_overshoot():
  x, alpha = line_search_step(1., square, square_derivative, -2., criterion = 'decrease')
  assert_equal(x, 0.)
  assert_equal(alpha, 0.5)

def test_armijo_accepts_unit_step():
  x, alpha = line_search_step(1., square, square_derivative, -1., criterion = 'armijo', c1 = 1e-4)
  assert_equal(x, 0.)
  assert_equal(alpha, 1.)

def test_exhausted_on_ascent_direction():
  function = CountingFunction(square)
  with pytest.raises(SearchExhausted) as excinfo:
    line_search_step(1., function, square_derivative, 1., criterion = 'armijo', max_trials = 5)
  assert excinfo.value.trials == 5
  assert excinfo.value.alpha == 1. / 16
  # the origin plus the five trial points
  assert function.calls == 6

def test_armijo_terminates_for_any_c1():
  quartic = lambda x: x ** 4 + x
  derivative = lambda x: 4 * x ** 3 + 1
  for c1 in (1e-4, 0.1, 0.5, 0.9):
    p = -derivative(1.)
    x, alpha = line_search_step(1., quartic, derivative, p, c1 = c1)
    assert quartic(x) < quartic(1.)
    assert 0. < alpha <= 1.

def test_accepted_alpha_is_power_of_two():
  function = Function()
  for origin in (numpy.zeros(2), numpy.array((5., 3.)), numpy.array((-10., 7.))):
    direction = -function.gradient(origin)
    x, alpha = line_search_step(origin, function, function.gradient, direction)
    j = -math.log2(alpha)
    assert j >= 0
    assert_equal(j, round(j))

def test_vector_gradient_direction():
  function = Function()
  origin = numpy.zeros(2)
  x, alpha = line_search_step(origin, function, function.gradient, -function.gradient(origin))
  assert_equal(alpha, 0.25)
  assert_equal(x, numpy.array((1., -4.)))
  assert_equal(origin, numpy.zeros(2))

def test_no_state_between_calls():
  function = Function()
  search = BacktrackingSearch()
  origin = numpy.zeros(2)
  first = search.search(origin, function, function.gradient, -function.gradient(origin))
  second = search.search(origin, function, function.gradient, -function.gradient(origin))
  assert_equal(first[0], second[0])
  assert_equal(first[1:], second[1:])

  x = first[0]
  again = search.search(x, function, function.gradient, -function.gradient(x))
  fresh = BacktrackingSearch().search(x, function, function.gradient, -function.gradient(x))
  assert_equal(again[0], fresh[0])
  assert_equal(again[1:], fresh[1:])

def test_monitor_called_on_acceptance():
  recorder = TrajectoryRecorder()
  x, alpha = line_search_step(1., square, square_derivative, -2., criterion = 'decrease', monitor = recorder)
  assert_equal(recorder.xhist, [0.])
  assert_equal(recorder.alphahist, [0.5])

def test_monitor_not_called_on_failure():
  recorder = TrajectoryRecorder()
  with pytest.raises(SearchExhausted):
    line_search_step(1., square, square_derivative, 1., max_trials = 3, monitor = recorder)
  assert len(recorder) == 0

def test_wolfe_rules_accept_minimizer():
  for criterion in ('wolfe', 'strong_wolfe'):
    x, alpha = line_search_step(1., square, square_derivative, -1., criterion = criterion)
    assert_equal(x, 0.)
    assert_equal(alpha, 1.)

class test_BacktrackingSearch(unittest.TestCase):
  def test_create(self):
    lineSearch = BacktrackingSearch()
    assert_equal(lineSearch.stepSize, 1.)
    assert_equal(lineSearch.stepFactor, 0.5)
    assert_equal(lineSearch.maxTrials, 100)
    assert_almost_equal(lineSearch.rule.c1, 1e-4)

  def test_call(self):
    lineSearch = BacktrackingSearch()
    state = {'gradient' : numpy.array((-4., 16.)), 'direction' : numpy.array((4., -16.))}
    function = Function()
    assert_equal(lineSearch(origin = numpy.zeros((2)), state = state, function = function), numpy.array((1., -4.)))
    assert_equal(state['alpha_step'], 0.25)
    assert_equal(state['trials'], 3)

  def test_call_exhausted(self):
    lineSearch = BacktrackingSearch(max_trials = 4)
    state = {'gradient' : numpy.array((-4., 16.)), 'direction' : numpy.array((-4., 16.))}
    function = Function()
    with pytest.raises(SearchExhausted) as excinfo:
      lineSearch(origin = numpy.zeros((2)), state = state, function = function)
    assert excinfo.value.trials == 4
    assert excinfo.value.alpha == 0.125
    assert 'alpha_step' not in state

  def test_invalid_parameters(self):
    for kwargs in ({'c1' : 0.}, {'c1' : 1.5}, {'max_trials' : 0}, {'alpha_factor' : 1.},
                   {'criterion' : 'goldstein'}, {'criterion' : 'wolfe', 'c2' : 1e-5}):
      with pytest.raises(NewtonLS_ValueError):
        BacktrackingSearch(**kwargs)

if __name__ == "__main__":
  unittest.main()
