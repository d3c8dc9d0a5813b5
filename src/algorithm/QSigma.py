"""
Q(sigma): n-step off-policy TD control.

Each step's bootstrap mixes the sampled next action value (weight sigma) with the expectation under the target
    policy (weight 1 - sigma). sigma = 1 recovers n-step SARSA with importance sampling; sigma = 0 recovers the
    n-step tree backup.
"""
from typing import List

import numpy as np

from algorithm.base import Controller
from common import Transition
from config import Config, ConfigItemDesc, ParameterDesc, checks
from function_approximator import StateActionFunction
from model import BackupEntry, BackupQueue
from policy import Policy


class QSigma(Controller):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Controller.get_class_config() + [
            ParameterDesc(name='sigma',
                          check=checks.unit_parameter,
                          info='Degree of sampling in [0, 1]. A number or a decay schedule.'),
            ConfigItemDesc(name='n_steps',
                           check=checks.positive_integer,
                           info='Number of steps in each backup. A positive integer.'),
        ]

    def __init__(self,
                 config: Config,
                 q_func: StateActionFunction,
                 behaviour_policy: Policy = None,
                 target_policy: Policy = None,
                 rng=None):
        super().__init__(config, q_func, behaviour_policy, target_policy, rng)
        self.sigma = self.config.sigma
        self._parameters.append(self.sigma)
        self.n_steps = self.config.n_steps
        self.backup = BackupQueue(self.n_steps)

    def handle_transition(self, transition: Transition):
        s, a = transition.state, transition.action
        q = self.q_func.evaluate(s, a)
        sigma = self.sigma.value

        if transition.terminated():
            self.backup.push(BackupEntry(s, a, q, transition.reward - q, sigma, 0.0, 1.0, terminal=True))
            self._consume()
            self.backup.clear()
            return

        ns = transition.next_state
        na = self.sample_behaviour(ns)
        nq = self.q_func.evaluate(ns, na)

        pi = self.target_policy.probability(ns, na)
        mu = self.behaviour_policy.probability(ns, na)
        exp_nqs = float(np.dot(self.target_policy.probabilities(ns), self.q_func.evaluate_all(ns)))

        residual = transition.reward + self.gamma * (sigma * nq + (1.0 - sigma) * exp_nqs) - q
        self.backup.push(BackupEntry(s, a, q, residual, sigma, pi, mu))
        self._consume()

    def _consume(self):
        if not self.backup.ready:
            return
        isr, g = self.backup.propagate(self.gamma)
        anchor = self.backup.pop()
        qsa = self.q_func.evaluate(anchor.state, anchor.action)
        self._apply(self.q_func.update, anchor.state, anchor.action, self.alpha * isr * (g - qsa))

    def handle_terminal(self):
        super().handle_terminal()
        self.backup.reset()
