import numpy as np

from algorithm.TemporalDifference import TemporalDifference


class ExpectedSARSA(TemporalDifference):
    """
    Values the next state by its expected action value under the behaviour policy.
    """

    def _get_action_value(self, next_state):
        probs = self.behaviour_policy.probabilities(next_state)
        return float(np.dot(probs, self.q_func.evaluate_all(next_state)))
