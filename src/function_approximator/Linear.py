"""
Linear value functions over a basis projection.

Weights have one row per feature and one column per output (a single column for V, one per action for Q),
    so Q(s, a) = phi(s) . w[:, a].
"""
import numpy as np

from function_approximator.base import StateFunction, StateActionFunction, Differentiable
from function_approximator.basis_function import BasisFunction
from function_approximator.gradient import ColumnarGradient


class _LinearBase(Differentiable):

    def __init__(self, basis: BasisFunction, n_outputs: int):
        self.basis = basis
        self._weights = np.zeros((basis.size(), n_outputs))

    @property
    def weights(self):
        return self._weights

    def features(self, state) -> np.ndarray:
        phi = np.asarray(self.basis.project(state), dtype=np.float64).reshape(-1)
        if phi.shape[0] != self._weights.shape[0]:
            raise ValueError('Basis produced {} features, expected {}.'.format(phi.shape[0], self._weights.shape[0]))
        return phi

    def zero_gradient(self):
        return ColumnarGradient.zeros(self.weights_dim)


class LinearV(_LinearBase, StateFunction):

    def __init__(self, basis: BasisFunction):
        super().__init__(basis, 1)

    def evaluate(self, state):
        return float(self.features(state) @ self._weights[:, 0])

    def update(self, state, error):
        self._weights[:, 0] += error * self.features(state)

    def grad(self, state):
        return ColumnarGradient(self.weights_dim, {0: self.features(state)})


class LinearQ(_LinearBase, StateActionFunction):

    def __init__(self, basis: BasisFunction, n_actions: int):
        if n_actions < 1:
            raise ValueError('n_actions must be >= 1')
        super().__init__(basis, n_actions)

    @property
    def n_actions(self):
        return self._weights.shape[1]

    def evaluate(self, state, action):
        return float(self.features(state) @ self._weights[:, action])

    def evaluate_all(self, state):
        return self.features(state) @ self._weights

    def update(self, state, action, error):
        self._weights[:, action] += error * self.features(state)

    def grad(self, state, action):
        return ColumnarGradient(self.weights_dim, {action: self.features(state)})
