"""
Gradient-TD prediction (GTD2, TDC).

Both keep a secondary state function W, shaped like the primary one, that tracks the expected TD error given the
    features of a state. It is trained toward the TD error with step size alpha * beta and corrects the direction of
    the primary update, which keeps off-policy linear prediction stable.
"""
import abc
from typing import List

from algorithm.base import Predictor
from common import Transition
from config import Config, ConfigItemDesc, ParameterDesc, checks
from function_approximator import Differentiable, StateFunction
from function_approximator.gradient import GradientBuffer


class GradientTD(Predictor):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Predictor.get_class_config() + [
            ParameterDesc(name='beta',
                          check=checks.nonnegative_parameter,
                          info='Step size of the correction function, relative to the learning rate.'),
        ]

    def __init__(self, config: Config, v_func: StateFunction, w_func: StateFunction):
        for func in (v_func, w_func):
            if not isinstance(func, Differentiable):
                raise TypeError('{} requires differentiable state-value functions, got {}.'
                                .format(type(self).__name__, type(func).__name__))
        if v_func.weights_dim != w_func.weights_dim:
            raise ValueError('The value and correction functions must have the same shape, got {} and {}.'
                             .format(v_func.weights_dim, w_func.weights_dim))
        super().__init__(config, v_func)
        self.w_func = w_func
        self.beta = self.config.beta
        self._parameters.append(self.beta)

    @abc.abstractmethod
    def _direction(self, residual: float, estimate: float,
                   phi_s: GradientBuffer, phi_ns: GradientBuffer) -> GradientBuffer:
        raise NotImplementedError()

    def handle_transition(self, transition: Transition):
        s = transition.state
        alpha = self.alpha

        estimate = self.w_func.evaluate(s)
        pred = self.v_func.evaluate(s)
        phi_s = self.v_func.grad(s)

        if transition.terminated():
            # A terminal state has no features
            residual = transition.reward - pred
            phi_ns = self.v_func.zero_gradient()
        else:
            ns = transition.next_state
            residual = transition.reward + self.gamma * self.v_func.evaluate(ns) - pred
            phi_ns = self.v_func.grad(ns)

        self._apply(self.w_func.update_grad_scaled, phi_s, alpha * self.beta.value * (residual - estimate))
        self._apply(self.v_func.update_grad_scaled, self._direction(residual, estimate, phi_s, phi_ns), alpha)
