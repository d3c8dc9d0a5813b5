import numpy as np

from common.utils import default_rng
from policy.base import Policy


class Random(Policy):
    """
    Uniform over all actions, regardless of their values.
    """

    def probabilities(self, state):
        return np.full(self.n_actions, 1.0 / self.n_actions)

    def probability(self, state, action):
        return 1.0 / self.n_actions

    def sample(self, state, rng=None):
        return int(default_rng(rng).choice(self.n_actions))

    def mode(self, state):
        raise ValueError('A uniform random policy has no mode.')
