from typing import List

from config import Config, checks, ConfigItemDesc
from function_approximator import StateActionFunction
from policy.Greedy import Greedy


class EpsilonGreedy(Greedy):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Greedy.get_class_config() + [
            ConfigItemDesc('epsilon',
                           check=checks.unit_float,
                           info='Epsilon to use for epsilon-greedy sampling.'),
            ConfigItemDesc('decay',
                           check=lambda x: checks.unit_float(x) and x > 0,
                           info='Decay rate for epsilon, applied at the end of every episode.',
                           optional=True,
                           default=1.0),
            ConfigItemDesc('min_epsilon',
                           check=checks.unit_float,
                           info='Minimum epsilon to not decay past.',
                           optional=True,
                           default=0.0)
        ]

    def __init__(self, q_func: StateActionFunction, config: Config = None):
        """
        Initialize new Epsilon Greedy policy (concrete)

        With probability epsilon an action is drawn uniformly from all actions;
        otherwise the greedy action is taken, ties split evenly.
        """
        super().__init__(q_func, config)
        self.epsilon = self.config.epsilon
        self.decay = self.config.decay
        self.min_epsilon = self.config.min_epsilon

    def probabilities(self, state):
        greedy = super().probabilities(state)
        return self.epsilon / self.n_actions + (1.0 - self.epsilon) * greedy

    def probability(self, state, action):
        return self.epsilon / self.n_actions + (1.0 - self.epsilon) * super().probability(state, action)

    def sample(self, state, rng=None):
        return super(Greedy, self).sample(state, rng)

    def update_params(self):
        self.epsilon *= self.decay

        if self.epsilon < self.min_epsilon:
            self.epsilon = self.min_epsilon

    def handle_terminal(self):
        self.update_params()
