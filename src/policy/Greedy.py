import numpy as np

from common.utils import default_rng
from common.vecmath import argmaxima
from policy.base import Policy


class Greedy(Policy):
    """
    Puts all probability on the maximal actions, split evenly among near-ties.

    A state whose values are all NaN has no maximal action: every action gets probability 0 and sampling falls back
        to a uniform draw, so the NaN carries on into the learner's update.
    """

    def probabilities(self, state):
        indices, _ = argmaxima(self.q_func.evaluate_all(state))
        probs = np.zeros(self.n_actions)
        if len(indices):
            probs[indices] = 1.0 / len(indices)
        return probs

    def probability(self, state, action):
        indices, _ = argmaxima(self.q_func.evaluate_all(state))
        return 1.0 / len(indices) if action in indices else 0.0

    def sample(self, state, rng=None):
        indices, _ = argmaxima(self.q_func.evaluate_all(state))
        if not len(indices):
            return int(default_rng(rng).choice(self.n_actions))
        return int(default_rng(rng).choice(indices))

    def mode(self, state):
        return self.q_func.find_max(state)[0]
