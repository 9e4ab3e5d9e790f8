"""
Records the accepted points and step lengths of a line search
"""

__all__ = ['TrajectoryRecorder']


class TrajectoryRecorder(object):
  """
  A monitor for the line searches, owned by the caller
  After the run, xhist holds the accepted points (preceded by x0 if given) and alphahist the accepted step lengths
  """
  def __init__(self, x0 = None):
    self.xhist = []
    self.alphahist = []
    if x0 is not None:
      self.xhist.append(x0)

  def __call__(self, x, alpha):
    self.xhist.append(x)
    self.alphahist.append(alpha)

  def __len__(self):
    return len(self.alphahist)
