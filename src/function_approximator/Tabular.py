"""
Lookup-table value functions over integer states.
"""
import numpy as np

from function_approximator.base import StateFunction, StateActionFunction, Differentiable
from function_approximator.gradient import SparseGradient, TileGradient


class TabularV(StateFunction, Differentiable):

    def __init__(self, n_states: int):
        if n_states < 1:
            raise ValueError('n_states must be >= 1')
        self._weights = np.zeros((n_states, 1))

    @property
    def weights(self):
        return self._weights

    def evaluate(self, state):
        return float(self._weights[state, 0])

    def update(self, state, error):
        self._weights[state, 0] += error

    def grad(self, state):
        return TileGradient(self.weights_dim, (state, 0))

    def zero_gradient(self):
        return SparseGradient.zeros(self.weights_dim)


class TabularQ(StateActionFunction, Differentiable):

    def __init__(self, n_states: int, n_actions: int):
        if n_states < 1 or n_actions < 1:
            raise ValueError('n_states and n_actions must be >= 1')
        self._weights = np.zeros((n_states, n_actions))

    @property
    def weights(self):
        return self._weights

    @property
    def n_actions(self):
        return self._weights.shape[1]

    def evaluate(self, state, action):
        return float(self._weights[state, action])

    def evaluate_all(self, state):
        return self._weights[state].copy()

    def update(self, state, action, error):
        self._weights[state, action] += error

    def grad(self, state, action):
        return TileGradient(self.weights_dim, (state, action))

    def zero_gradient(self):
        return SparseGradient.zeros(self.weights_dim)
