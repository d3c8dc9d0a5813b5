from algorithm.TOSARSALambda import TOSARSALambda
from common.vecmath import argmax_first


class TOQLambda(TOSARSALambda):
    """
    True online Watkins' Q(lambda): bootstraps on the greedy next value and cuts the trace after exploratory actions.
    """

    def _get_action_value(self, next_state):
        return self.q_func.find_max(next_state)[1]

    def _continues_trace(self, transition):
        return transition.action == argmax_first(self.q_func.evaluate_all(transition.state))
