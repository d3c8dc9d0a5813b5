from typing import List

from algorithm.base import Controller
from common import Transition
from config import Config, ConfigItemDesc, ParameterDesc, checks
from function_approximator import Differentiable, StateActionFunction
from model import AccumulatingTrace
from policy import Policy


class TOSARSALambda(Controller):
    """
    True online SARSA(lambda).

    Uses a dutch trace e <- gamma*lambda*e + (1 - alpha*gamma*lambda * e.phi) * phi and corrects each update by the
        change in Q(s, a) since it was last bootstrapped on. Exact for linear value functions.
    """

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Controller.get_class_config() + [
            ParameterDesc(name='trace_decay',
                          check=checks.unit_parameter,
                          info='Trace decay rate lambda in [0, 1]. A number or a decay schedule.'),
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
        self.trace = AccumulatingTrace(q_func.zero_gradient())
        self.q_old = 0.0

    def _get_action_value(self, next_state) -> float:
        return self.q_func.evaluate(next_state, self.sample_behaviour(next_state))

    def _continues_trace(self, transition: Transition) -> bool:
        """
        Whether the trace keeps its history through this step. Otherwise it restarts from this step's gradient
            and is cleared once the step is applied.
        """
        return True

    def handle_transition(self, transition: Transition):
        s, a = transition.state, transition.action
        alpha = self.alpha
        c = self.gamma * self.trace_decay.value

        phi = self.q_func.grad(s, a)
        qsa = self.q_func.evaluate(s, a)

        continues = self._continues_trace(transition)
        if continues:
            k = 1.0 - alpha * c * self.trace.dot(phi)
            self.trace.scaled_update(c, phi.map(lambda y: k * y))
        else:
            self.trace.reset()
            self.trace.update(phi)

        if transition.terminated():
            next_q = 0.0
            residual = transition.reward - qsa
        else:
            next_q = self._get_action_value(transition.next_state)
            residual = transition.reward + self.gamma * next_q - qsa

        self._apply(self.q_func.update_grad_scaled, self.trace.buffer, alpha * (residual + qsa - self.q_old))
        self._apply(self.q_func.update_grad_scaled, phi, -alpha * (qsa - self.q_old))

        if transition.terminated():
            self.reset()
        else:
            self.q_old = next_q
            if not continues:
                self.trace.reset()

    def reset(self):
        self.q_old = 0.0
        self.trace.reset()

    def handle_terminal(self):
        super().handle_terminal()
        self.reset()
