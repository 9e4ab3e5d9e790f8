## Exceptions

from . import defaults

__all__ = ['NewtonLS_Error', 'NewtonLS_ValueError', 'SearchExhausted']


class NewtonLS_Error(Exception):
    def __init__(self, value=None):
        self.value = value
        self.code = None
    def __str__(self):
        return repr(self.value)
    def __repr__(self):
        return repr(self.value)

class NewtonLS_ValueError(NewtonLS_Error):
    pass

class SearchExhausted(NewtonLS_Error):
    """Raised when a backtracking search rejects every allowed trial.

    trials is the number of rejected trial steps, alpha the last step
    length that was tried.
    """
    def __init__(self, trials, alpha):
        self.trials = trials
        self.alpha = alpha
        NewtonLS_Error.__init__(self, 'no acceptable step after %d trials '
                                '(last alpha = %g)' % (trials, alpha))
        self.code = defaults.IS_LINE_SEARCH_FAILED
