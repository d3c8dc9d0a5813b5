"""
Least-squares temporal difference prediction.
"""
import warnings
from typing import List, Sequence

import numpy as np
import scipy.linalg

from algorithm.base import Algorithm
from common import Transition
from config import Config, ConfigItemDesc, checks
from function_approximator import LinearV


def least_squares(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Solve a x = b, falling back to the pseudo-inverse when a is singular.
    """
    try:
        return scipy.linalg.solve(a, b)
    except scipy.linalg.LinAlgError as e:
        warnings.warn('Least-squares system could not be solved exactly ({}); using the pseudo-inverse.'.format(e))
        return scipy.linalg.pinv(a) @ b


class LSTD(Algorithm):
    """
    Accumulates A = sum phi (phi - gamma phi')^T and b = sum r phi over batches of transitions and writes the
        solution of A theta = b into a linear state-value function.
    """

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Algorithm.get_class_config() + [
            ConfigItemDesc(name='regularisation',
                           check=checks.positive_float,
                           info='Initial diagonal of A, keeping the system solvable before enough data is seen.',
                           optional=True,
                           default=1e-6),
        ]

    def __init__(self, config: Config, v_func: LinearV):
        super().__init__(config)
        self.v_func = v_func
        n_features = v_func.weights_dim[0]
        self.a = np.eye(n_features) * self.config.regularisation
        self.b = np.zeros(n_features)

    def _accumulate(self, transition: Transition):
        phi_s = self.v_func.features(transition.state)
        self.b += transition.reward * phi_s
        if transition.terminated():
            self.a += np.outer(phi_s, phi_s)
        else:
            phi_ns = self.v_func.features(transition.next_state)
            self.a -= np.outer(phi_s, self.gamma * phi_ns - phi_s)

    def solve(self):
        self.v_func.weights[:, 0] = least_squares(self.a, self.b)

    def handle_batch(self, transitions: Sequence[Transition]):
        for transition in transitions:
            self._accumulate(transition)
        self.solve()

    def handle_transition(self, transition: Transition):
        self.handle_batch([transition])

    def handle_sequence(self, transitions: Sequence[Transition]):
        self.handle_batch(transitions)

    def predict_v(self, state):
        return self.v_func.evaluate(state)
