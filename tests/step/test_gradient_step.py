#/usr/bin/env python

import unittest
import numpy

from numpy.testing import assert_equal, assert_almost_equal
from newtonls.step import GradientStep


class Function(object):
  def __call__(self, x):
    return (x[0] - 2) ** 2 + (2 * x[1] + 4) ** 2

  def gradient(self, x):
    return numpy.array((2 * (x[0] - 2), 4 * (2 * x[1] + 4)))

class test_GradientStep(unittest.TestCase):
  def test_call(self):
    step = GradientStep()
    state = {}
    function = Function()
    assert_equal(step(function = function, point = numpy.zeros((2)), state = state), numpy.array((4., -16.)))
    assert_equal(state['gradient'], numpy.array((-4., 16.)))
    assert_equal(state['direction'], numpy.array((4., -16.)))

  def test_call_normalized(self):
    step = GradientStep(normalized = True)
    state = {}
    function = Function()
    direction = step(function = function, point = numpy.array((2., 1.)), state = state)
    assert_almost_equal(direction, numpy.array((0., -1.)))
    assert_equal(state['gradient'], numpy.array((0., 24.)))

if __name__ == "__main__":
  unittest.main()
