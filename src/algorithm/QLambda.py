from algorithm.SARSALambda import SARSALambda
from common.vecmath import argmax_first


class QLambda(SARSALambda):
    """
    Watkins' Q(lambda): the trace is cut whenever the action taken is not the greedy one.
    """

    def _decay_rate(self, transition):
        qs = self.q_func.evaluate_all(transition.state)
        return self.gamma * self.lambda_ if transition.action == argmax_first(qs) else 0.0

    def _get_action_value(self, next_state):
        return self.q_func.find_max(next_state)[1]
