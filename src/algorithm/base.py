import abc
import warnings
import numpy as np
from typing import Any, Callable, List, Sequence

from common import Transition
from common.parameter import Parameter
from config import Config, ConfigDesc, ConfigItemDesc, ParameterDesc, checks
from config.moduleframe import AbstractModuleFrame
from function_approximator import StateActionFunction, StateFunction, UpdateError
from policy import Greedy, Policy


class Algorithm(AbstractModuleFrame):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return [
            ParameterDesc(name='discount_factor',
                          check=checks.unit_parameter,
                          info='Discount factor of the MDP in [0, 1]. A number or a decay schedule.'),
        ]

    def __init__(self, config: Config):
        """
        Initialize an Algorithm (abstract)

        An Algorithm consumes transitions one at a time and updates the value function(s) it owns.
        :param config: A config containing this algorithm's config
        """
        self.global_config: Config = config
        self.config = config.find_config_for_instance(self)
        self.discount_factor: Parameter = self.config.discount_factor
        # Parameters stepped at the end of every episode
        self._parameters: List[Parameter] = [self.discount_factor]

    @property
    def gamma(self) -> float:
        return self.discount_factor.value

    @abc.abstractmethod
    def handle_transition(self, transition: Transition):
        raise NotImplementedError()

    def handle_sequence(self, transitions: Sequence[Transition]):
        for transition in transitions:
            self.handle_transition(transition)

    def handle_terminal(self):
        """
        Episode housekeeping: step decaying parameters.
        """
        for parameter in self._parameters:
            parameter.step()

    @abc.abstractmethod
    def predict_v(self, state: Any) -> float:
        raise NotImplementedError()

    def _apply(self, update: Callable, *args):
        """
        Run a single value-function update. A failing update is reported and skipped.
        """
        try:
            update(*args)
        except UpdateError as e:
            warnings.warn('{} skipped an update: {}'.format(type(self).__name__, e))


class Controller(Algorithm):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Algorithm.get_class_config() + [
            ParameterDesc(name='learning_rate',
                          check=checks.unit_parameter,
                          info='Learning rate in [0, 1]. A number or a decay schedule.'),
            ConfigDesc(name='behaviour_policy',
                       module_package='policy',
                       info='Policy used to pick actions for bootstrapping. Only used when no policy is passed in.',
                       optional=True,
                       default={'name': 'Random'}),
        ]

    def __init__(self,
                 config: Config,
                 q_func: StateActionFunction,
                 behaviour_policy: Policy = None,
                 target_policy: Policy = None,
                 rng=None):
        """
        Initialize a Controller (abstract)

        A controller learns an action-value function. The target policy defaults to the greedy policy over that
            function; both policies only read from it.
        :param config: A config containing this controller's config
        :param q_func: The action-value function to learn
        :param behaviour_policy: Overrides the behaviour policy described by the config
        :param target_policy: Overrides the greedy target policy
        :param rng: numpy Generator used for sampling; the global numpy random state when omitted
        """
        super().__init__(config)
        self.q_func = q_func
        self.learning_rate: Parameter = self.config.learning_rate
        self._parameters.append(self.learning_rate)
        if behaviour_policy is None:
            behaviour_config = self.config.behaviour_policy
            behaviour_policy = behaviour_config.module_class(q_func, behaviour_config)
        self.behaviour_policy = behaviour_policy
        self.target_policy = Greedy(q_func) if target_policy is None else target_policy
        self.rng = rng

    @property
    def alpha(self) -> float:
        return self.learning_rate.value

    def handle_terminal(self):
        super().handle_terminal()
        self.behaviour_policy.handle_terminal()
        if self.target_policy is not self.behaviour_policy:
            self.target_policy.handle_terminal()

    def predict_v(self, state):
        """
        Expected action value under the target policy.
        """
        return float(np.dot(self.target_policy.probabilities(state), self.q_func.evaluate_all(state)))

    def predict_qsa(self, state, action) -> float:
        return self.q_func.evaluate(state, action)

    def sample_target(self, state, rng=None) -> int:
        return self.target_policy.sample(state, self.rng if rng is None else rng)

    def sample_behaviour(self, state, rng=None) -> int:
        return self.behaviour_policy.sample(state, self.rng if rng is None else rng)


class Predictor(Algorithm):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return Algorithm.get_class_config() + [
            ParameterDesc(name='learning_rate',
                          check=checks.unit_parameter,
                          info='Learning rate in [0, 1]. A number or a decay schedule.'),
        ]

    def __init__(self, config: Config, v_func: StateFunction):
        """
        Initialize a Predictor (abstract)

        A predictor learns the state-value function of whatever policy generated its transitions.
        :param config: A config containing this predictor's config
        :param v_func: The state-value function to learn
        """
        super().__init__(config)
        self.v_func = v_func
        self.learning_rate: Parameter = self.config.learning_rate
        self._parameters.append(self.learning_rate)

    @property
    def alpha(self) -> float:
        return self.learning_rate.value

    def predict_v(self, state) -> float:
        return self.v_func.evaluate(state)
