from typing import List

from algorithm.base import Predictor
from common import Transition
from config import Config, ConfigItemDesc, ParameterDesc, checks
from function_approximator import Differentiable, StateFunction
from model import DutchTrace, TRACES, make_trace


class TDLambda(Predictor):
    """
    TD(lambda) prediction: every TD error is applied along an eligibility trace of past state gradients.
    """

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Predictor.get_class_config() + [
            ParameterDesc(name='trace_decay',
                          check=checks.unit_parameter,
                          info='Trace decay rate lambda in [0, 1]. A number or a decay schedule.'),
            ConfigItemDesc(name='trace',
                           check=checks.one_of(*TRACES),
                           info='Trace update rule. Choices: ' + ', '.join(TRACES),
                           optional=True,
                           default='accumulating'),
        ]

    def __init__(self, config: Config, v_func: StateFunction):
        if not isinstance(v_func, Differentiable):
            raise TypeError('TDLambda requires a differentiable state-value function, got {}.'
                            .format(type(v_func).__name__))
        super().__init__(config, v_func)
        self.trace_decay = self.config.trace_decay
        self._parameters.append(self.trace_decay)
        self.trace = make_trace(self.config.trace, v_func.zero_gradient(), self.alpha)

    def handle_transition(self, transition: Transition):
        s = transition.state
        pred = self.v_func.evaluate(s)

        if isinstance(self.trace, DutchTrace):
            self.trace.alpha = self.alpha
        self.trace.scaled_update(self.gamma * self.trace_decay.value, self.v_func.grad(s))

        if transition.terminated():
            residual = transition.reward - pred
        else:
            residual = transition.reward + self.gamma * self.v_func.evaluate(transition.next_state) - pred
        self._apply(self.v_func.update_grad_scaled, self.trace.buffer, self.alpha * residual)

        if transition.terminated():
            self.trace.reset()

    def handle_terminal(self):
        super().handle_terminal()
        self.trace.reset()
