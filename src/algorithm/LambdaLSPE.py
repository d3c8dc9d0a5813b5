"""
Least-squares policy evaluation with lambda-returns.
"""
from typing import List, Sequence

import numpy as np

from algorithm.LSTD import least_squares
from algorithm.base import Predictor
from common import Transition
from config import Config, ConfigItemDesc, ParameterDesc, checks
from function_approximator import LinearV


class LambdaLSPE(Predictor):
    """
    Each batch is replayed backwards to accumulate the lambda-discounted sum of TD errors behind every state.
        The least-squares fit of V(s) + that sum over the batch is blended into the weights with the learning rate.
    """

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Predictor.get_class_config() + [
            ParameterDesc(name='trace_decay',
                          check=checks.unit_parameter,
                          info='Decay rate lambda of the accumulated TD errors in [0, 1].'),
            ConfigItemDesc(name='regularisation',
                           check=checks.positive_float,
                           info='Initial diagonal of A, keeping the system solvable before enough data is seen.',
                           optional=True,
                           default=1e-6),
        ]

    def __init__(self, config: Config, v_func: LinearV):
        super().__init__(config, v_func)
        self.trace_decay = self.config.trace_decay
        self._parameters.append(self.trace_decay)
        self._clear()

    def _clear(self):
        n_features = self.v_func.weights_dim[0]
        self.a = np.eye(n_features) * self.config.regularisation
        self.b = np.zeros(n_features)
        self.delta = 0.0

    def _accumulate(self, transition: Transition):
        phi_s = self.v_func.features(transition.state)
        v_s = float(phi_s @ self.v_func.weights[:, 0])

        if transition.terminated():
            # Going backwards, a terminal transition starts a new episode
            self.delta = transition.reward - v_s
        else:
            v_ns = self.v_func.evaluate(transition.next_state)
            residual = transition.reward + self.gamma * v_ns - v_s
            self.delta = residual + self.gamma * self.trace_decay.value * self.delta

        self.b += (v_s + self.delta) * phi_s
        self.a += np.outer(phi_s, phi_s)

    def handle_batch(self, transitions: Sequence[Transition]):
        for transition in reversed(list(transitions)):
            self._accumulate(transition)
        theta = least_squares(self.a, self.b)

        alpha = self.alpha
        w = self.v_func.weights[:, 0]
        self.v_func.weights[:, 0] = (1.0 - alpha) * w + alpha * theta
        self._clear()

    def handle_transition(self, transition: Transition):
        self.handle_batch([transition])

    def handle_sequence(self, transitions: Sequence[Transition]):
        self.handle_batch(transitions)
