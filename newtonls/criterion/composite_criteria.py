"""
Composite criteria allow to use several criteria together, with and/or composition
"""

__all__ = ['OrComposition', 'AndComposition']


class CompositeCriterion(object):
  """
  Collects criteria given as positional or keyword arguments
  Every criterion is evaluated (no lazy evaluation) so that each one may set istop
  """
  def __init__(self, *args, **kwargs):
    self.criteria = list(kwargs.values()) + list(args)

  def __call__(self, state, **kwargs):
    return self.reduce([criterion(state, **kwargs) for criterion in self.criteria])

class OrComposition(CompositeCriterion):
  """
  True if one of the criteria is True
  """
  reduce = staticmethod(any)

class AndComposition(CompositeCriterion):
  """
  True if all the criteria are True
  """
  reduce = staticmethod(all)
