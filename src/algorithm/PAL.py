from algorithm.QLearning import QLearning
from common.vecmath import argmax_first


class PAL(QLearning):
    """
    Persistent advantage learning.

    The TD error is lowered by the action gap of the current state, or of the next state if that is smaller,
        which widens the gap between the greedy action and the rest.
    """

    def _residual(self, transition):
        if transition.terminated():
            return transition.reward - self.q_func.evaluate(transition.state, transition.action)
        a = transition.action
        qs = self.q_func.evaluate_all(transition.state)
        nqs = self.q_func.evaluate_all(transition.next_state)

        a_star = argmax_first(qs)
        na_star = argmax_first(nqs)

        td_error = transition.reward + self.gamma * nqs[a_star] - qs[a]
        al_error = td_error - self.alpha * (qs[a_star] - qs[a])
        return float(max(al_error, td_error - self.alpha * (nqs[na_star] - nqs[a])))
