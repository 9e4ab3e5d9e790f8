"""
Module containing the direction providers used by the outer iteration

Steps :
  - GradientStep
    - compute a step based on the gradient of the function
  - NewtonStep
    - computes a step based on the hessian and the gradient of the function
"""

from .gradient_step import *
from .newton_step import *

step__all__ = ['GradientStep', 'NewtonStep']

__all__ = step__all__
