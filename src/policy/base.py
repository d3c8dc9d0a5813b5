import abc
import numpy as np

from typing import List, Any

from config import Config, AbstractModuleFrame, ConfigItemDesc
from common.utils import default_rng
from function_approximator import StateActionFunction


class Policy(AbstractModuleFrame):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return []

    def __init__(self, q_func: StateActionFunction, config: Config = None):
        """
        Instantiate a new Policy Class (abstract)
        Base class which all Policies derive.

        A policy reads action values from a value function it shares with its controller; it never writes to it.
        :param q_func: The action-value function the policy acts on
        :param config: A config containing this policy's config. Policies without required settings may omit it.
        """
        self.config = Config(type(self), {}) if config is None else config.find_config_for_instance(self)
        self.q_func = q_func

    @property
    def n_actions(self) -> int:
        return self.q_func.n_actions

    @abc.abstractmethod
    def probabilities(self, state: Any) -> np.ndarray:
        """
        Probability of each action in state
        """
        raise NotImplementedError()

    def probability(self, state: Any, action: int) -> float:
        return float(self.probabilities(state)[action])

    def sample(self, state: Any, rng=None) -> int:
        """
        Draw an action for state.
        :param rng: numpy Generator; the global numpy random state when omitted
        """
        probs = self.probabilities(state)
        return int(default_rng(rng).choice(len(probs), p=probs))

    @abc.abstractmethod
    def mode(self, state: Any) -> int:
        """
        The most probable action
        """
        raise NotImplementedError()

    def handle_terminal(self):
        """
        Called at the end of every episode, e.g. to decay exploration.
        """
        pass
