"""
Newton's method globalized by a backtracking line search
"""

from .. import defaults
from ..criterion import IterationCriterion
from ..line_search import BacktrackingSearch
from ..step import NewtonStep
from .standard_optimizer import StandardOptimizer

__all__ = ['newton_line_search']


def newton_line_search(fun, gradient, hessian, x0, criterion = 'armijo',
                       c1 = defaults.parameters['c1'],
                       max_trials = defaults.parameters['max_trials'],
                       iterations_max = defaults.parameters['iterations_max'],
                       ptol = defaults.parameters['ptol'], monitor = None, record = None):
  """
  Minimizes fun from x0 with Newton directions and backtracking
  Parameters :
    - fun, gradient and hessian are callables; gradient or hessian may be None for finite differences
    - criterion is the acceptance rule of the line search ('decrease', 'armijo', 'wolfe', 'strong_wolfe')
    - c1 is the Armijo factor
    - max_trials is the number of halvings allowed per line search
    - iterations_max is the number of outer iterations allowed
    - ptol is the norm of the Newton direction below which the iteration has converged
    - monitor(x, alpha) is called after each accepted step
    - record(**state) is called after each iteration
  Returns the optimizer after the optimization, the solution is in optimalPoint
  SearchExhausted is propagated if a line search fails
  """
  optimi = StandardOptimizer(fun = fun, gradient = gradient, hessian = hessian, x0 = x0,
                             step = NewtonStep(),
                             line_search = BacktrackingSearch(criterion = criterion, c1 = c1,
                                                              max_trials = max_trials,
                                                              monitor = monitor),
                             criterion = IterationCriterion(iterations_max),
                             ptol = ptol, record = record)
  optimi.optimize()
  return optimi
