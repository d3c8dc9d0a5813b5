import abc
from typing import Any

from algorithm.base import Controller
from common import Transition


class TemporalDifference(Controller):
    """
    One-step TD control: Q(s, a) moves by alpha * (r + gamma * v(s') - Q(s, a)), or alpha * (r - Q(s, a)) when the
        episode ends. Subclasses choose how the next state is valued.
    """

    @abc.abstractmethod
    def _get_action_value(self, next_state: Any) -> float:
        raise NotImplementedError()

    def _residual(self, transition: Transition) -> float:
        s = transition.state
        qsa = self.q_func.evaluate(s, transition.action)
        if transition.terminated():
            return transition.reward - qsa
        return transition.reward + self.gamma * self._get_action_value(transition.next_state) - qsa

    def handle_transition(self, transition: Transition):
        residual = self._residual(transition)
        self._apply(self.q_func.update, transition.state, transition.action, self.alpha * residual)
