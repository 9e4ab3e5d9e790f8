"""
Helper functions

Finite Difference functions :
  - ForwardFiniteDifferences
  - CenteredFiniteDifferences

Monitors :
  - TrajectoryRecorder records the points and step lengths accepted by a line search
"""

from .finite_difference import *
from .trajectory_recorder import *

helpers__all__ = ['FiniteDifferencesFunction', 'ForwardFiniteDifferences',
                  'CenteredFiniteDifferences', 'TrajectoryRecorder']

__all__ = helpers__all__
