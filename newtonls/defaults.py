"""
Defines the default parameters for the line search framework
"""

__all__ = ['parameters', 'errors']

SMALL_DF = 2
SMALL_DELTA_X = 3
SMALL_DELTA_F = 4
SMALL_DIRECTION = 7
SOLVED_WITH_UNIMPLEMENTED_OR_UNKNOWN_REASON = 1000

IS_LINE_SEARCH_FAILED = -5
IS_MAX_ITER_REACHED = -7

parameters = {
              'alpha_step' : 1.,
              'alpha_factor' : 0.5,
              'c1' : 1e-4,
              'c2' : 0.9,
              'eps' : 1e-5,
              'gtol' : 1e-8,
              'iterations_max' : 100,
              'max_trials' : 100,
              'ptol' : 1e-10,
              }

errors = {
          SMALL_DF : "gradient norm is small enough",
          SMALL_DELTA_X : "absolute X difference is small enough",
          SMALL_DELTA_F : "absolute F(X) difference is small enough",
          SMALL_DIRECTION : "search direction is small enough",
          SOLVED_WITH_UNIMPLEMENTED_OR_UNKNOWN_REASON : "Unknown reason of convergence",

          IS_LINE_SEARCH_FAILED : "line search exhausted its trials",
          IS_MAX_ITER_REACHED : "maximum number of iterations reached",
          }
