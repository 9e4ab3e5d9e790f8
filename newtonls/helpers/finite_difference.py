from __future__ import division

import numpy as np

from .. import defaults

__all__ = ['FiniteDifferencesFunction', 'ForwardFiniteDifferences',
           'CenteredFiniteDifferences']


class FiniteDifferencesFunction(object):
    """Base class for cost functions that only define __call__.
    Points are scalars or 1D arrays; derivatives have the matching shape.
    """
    def __call__(self, params):
        raise NotImplementedError("Define in concrete sub-class")


class ForwardFiniteDifferences(FiniteDifferencesFunction):
    """
    A function that will be able to computes its derivatives with a forward difference formula
    """
    def __init__(self, eps=defaults.parameters['eps'], *args, **kwargs):
        """
        Creates the function :
        - eps is the amount of difference that will be used in the computations
        """
        self.eps = eps
        self.inveps = 1 / eps

    def gradient(self, params):
        """
        Computes the gradient of the function
        """
        if np.ndim(params) == 0:
            return (self(params + self.eps) - self(params)) * self.inveps
        params = np.asarray(params, dtype=float)
        grad = np.empty(params.shape)
        curValue = self(params)
        for i in range(0, len(params)):
            paramsb = params.copy()
            paramsb[i] += self.eps
            grad[i] = (self(paramsb) - curValue) * self.inveps
        return grad

    def hessian(self, params):
        """
        Computes the hessian of the function
        """
        if np.ndim(params) == 0:
            return (self.gradient(params) - self.gradient(params - self.eps)) * self.inveps
        params = np.asarray(params, dtype=float)
        hess = np.empty((len(params), len(params)))
        curGrad = self.gradient(params)
        for i in range(0, len(params)):
            paramsb = params.copy()
            paramsb[i] -= self.eps
            hess[i] = - (self.gradient(paramsb) - curGrad) * self.inveps
        return 0.5 * (hess + hess.T)


class CenteredFiniteDifferences(FiniteDifferencesFunction):
    """
    A function that will be able to computes its derivatives with a centered difference formula
    """
    def __init__(self, eps=defaults.parameters['eps'], *args, **kwargs):
        """
        Creates the function :
        - eps is the amount of difference that will be used in the computations
        """
        self.eps = eps # see the way this is used differently to inveps in gradient() below
        self.inveps = 1 / (2 * eps)

    def gradient(self, params):
        """
        Computes the gradient of the function
        """
        if np.ndim(params) == 0:
            return self.inveps * (self(params + self.eps) - self(params - self.eps))
        params = np.asarray(params, dtype=float)
        grad = np.empty(params.shape)
        for i in range(0, len(params)):
            paramsa = params.copy()
            paramsb = params.copy()
            paramsa[i] -= self.eps
            paramsb[i] += self.eps
            grad[i] = self.inveps * (self(paramsb) - self(paramsa))
        return grad

    def hessian(self, params):
        """
        Computes the hessian of the function
        """
        if np.ndim(params) == 0:
            return self.inveps * (self.gradient(params + self.eps) - self.gradient(params - self.eps))
        params = np.asarray(params, dtype=float)
        hess = np.empty((len(params), len(params)))
        for i in range(0, len(params)):
            paramsa = params.copy()
            paramsb = params.copy()
            paramsa[i] -= self.eps
            paramsb[i] += self.eps
            hess[i] = self.inveps * (self.gradient(paramsb) - self.gradient(paramsa))
        return 0.5 * (hess + hess.T)
