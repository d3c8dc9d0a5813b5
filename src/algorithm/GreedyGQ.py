"""
Greedy-GQ: gradient-corrected off-policy control with linear function approximation.

A secondary state function W estimates the expected TD error and is used to correct the direction of the
    action-value update.
"""
from typing import List

from algorithm.base import Controller
from common import Transition
from config import Config, ConfigItemDesc, ParameterDesc, checks
from function_approximator import Differentiable, StateActionFunction, StateFunction
from policy import Policy


class GreedyGQ(Controller):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Controller.get_class_config() + [
            ParameterDesc(name='beta',
                          check=checks.nonnegative_parameter,
                          info='Step size of the correction function, relative to the learning rate.'),
        ]

    def __init__(self,
                 config: Config,
                 q_func: StateActionFunction,
                 w_func: StateFunction,
                 behaviour_policy: Policy = None,
                 rng=None):
        if not isinstance(q_func, Differentiable):
            raise TypeError('GreedyGQ requires a differentiable action-value function, got {}.'
                            .format(type(q_func).__name__))
        super().__init__(config, q_func, behaviour_policy, rng=rng)
        self.w_func = w_func
        self.beta = self.config.beta
        self._parameters.append(self.beta)

    def handle_transition(self, transition: Transition):
        s, a = transition.state, transition.action
        alpha, gamma = self.alpha, self.gamma
        step_w = alpha * self.beta.value

        estimate = self.w_func.evaluate(s)
        qsa = self.q_func.evaluate(s, a)

        if transition.terminated():
            residual = transition.reward - qsa

            self._apply(self.w_func.update, s, step_w * (residual - estimate))
            self._apply(self.q_func.update, s, a, alpha * residual)
            return

        ns = transition.next_state
        na = self.sample_target(ns)
        residual = transition.reward + gamma * self.q_func.evaluate(ns, na) - qsa

        phi_s = self.q_func.grad(s, a)
        phi_ns = self.q_func.grad(ns, na)
        update_q = phi_s.merge(phi_ns, lambda x, y: residual * x - estimate * gamma * y)

        self._apply(self.q_func.update_grad_scaled, update_q, alpha)
        self._apply(self.w_func.update, s, step_w * (residual - estimate))
