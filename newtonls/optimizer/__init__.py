"""
Module containing the core optimizers

Optimizers :
  - Optimizer
    - a skeletton for defining a custom optimizer
    - calls iterate until the criterion indicates that the optimization has converged
  - StandardOptimizer
    - takes a step after a line search
  - newton_line_search
    - Newton's method with a backtracking line search

Functions :
  - ObjectiveFunction
    - bundles a cost with its derivatives, falling back to finite differences
"""

from .optimizer import *
from .standard_optimizer import *
from .newton import *

optimizer__all__ = ['Optimizer', 'ObjectiveFunction', 'StandardOptimizer', 'newton_line_search']

__all__ = optimizer__all__
