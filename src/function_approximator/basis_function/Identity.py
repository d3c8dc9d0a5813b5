import numpy as np

from function_approximator.basis_function.base import BasisFunction


class Identity(BasisFunction):

    """Basis function that passes a continuous state vector through unchanged.

    Parameters
    ----------
    n_features: int
        Length of the state vector.
    bias: bool
        Whether to append a constant 1 feature.
    """

    def __init__(self, n_features, bias=False):
        if n_features < 1:
            raise ValueError('n_features must be >= 1')
        self.n_features = n_features
        self.bias = bias

    def size(self):
        return self.n_features + (1 if self.bias else 0)

    def project(self, state):
        phi = np.asarray(state, dtype=np.float64).reshape(-1)
        if phi.shape[0] != self.n_features:
            raise ValueError('Expected a state of {} values, got {}.'.format(self.n_features, phi.shape[0]))
        if self.bias:
            phi = np.append(phi, 1.0)
        return phi
