from typing import List

from algorithm.base import Controller
from common import Transition
from config import Config, ConfigItemDesc, ParameterDesc, checks
from function_approximator import Differentiable, StateActionFunction
from model import DutchTrace, TRACES, make_trace
from policy import Policy


class SARSALambda(Controller):
    """
    On-policy control with an eligibility trace over the value function's gradients.
    """

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Controller.get_class_config() + [
            ParameterDesc(name='trace_decay',
                          check=checks.unit_parameter,
                          info='Trace decay rate lambda in [0, 1]. A number or a decay schedule.'),
            ConfigItemDesc(name='trace',
                           check=checks.one_of(*TRACES),
                           info='Trace update rule. Choices: ' + ', '.join(TRACES),
                           optional=True,
                           default='accumulating'),
        ]

    def __init__(self,
                 config: Config,
                 q_func: StateActionFunction,
                 behaviour_policy: Policy = None,
                 rng=None):
        if not isinstance(q_func, Differentiable):
            raise TypeError('{} requires a differentiable action-value function, got {}.'
                            .format(type(self).__name__, type(q_func).__name__))
        super().__init__(config, q_func, behaviour_policy, rng=rng)
        self.trace_decay = self.config.trace_decay
        self._parameters.append(self.trace_decay)
        self.trace = make_trace(self.config.trace, q_func.zero_gradient(), self.alpha)

    @property
    def lambda_(self) -> float:
        return self.trace_decay.value

    def _decay_rate(self, transition: Transition) -> float:
        return self.gamma * self.lambda_

    def _get_action_value(self, next_state) -> float:
        next_action = self.sample_behaviour(next_state)
        return self.q_func.evaluate(next_state, next_action)

    def handle_transition(self, transition: Transition):
        s, a = transition.state, transition.action
        qsa = self.q_func.evaluate(s, a)

        if isinstance(self.trace, DutchTrace):
            self.trace.alpha = self.alpha
        self.trace.scale(self._decay_rate(transition))
        self.trace.update(self.q_func.grad(s, a))

        if transition.terminated():
            residual = transition.reward - qsa
        else:
            residual = transition.reward + self.gamma * self._get_action_value(transition.next_state) - qsa
        self._apply(self.q_func.update_grad_scaled, self.trace.buffer, self.alpha * residual)

        if transition.terminated():
            self.trace.reset()

    def handle_terminal(self):
        super().handle_terminal()
        self.trace.reset()
