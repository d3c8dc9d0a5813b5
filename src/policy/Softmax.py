from typing import List
import numpy as np

from config import Config, ConfigItemDesc, checks
from function_approximator import StateActionFunction
from policy.base import Policy


class Softmax(Policy):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return [
            ConfigItemDesc('temperature', checks.positive_float, info='Sampling temperature. Typically 1.0.')
        ]

    def __init__(self, q_func: StateActionFunction, config: Config = None):
        super().__init__(q_func, config)
        self.temperature = self.config.temperature

    def _softmax(self, x: np.ndarray) -> np.ndarray:
        """
        Takes of the softmax of function approximator values
        :param x:
        :return: numpy array representing probability distribution
        """
        if self.temperature != 1.0:
            x = x / self.temperature

        e_x = np.exp(x - np.max(x))
        return e_x / e_x.sum()

    def probabilities(self, state):
        return self._softmax(self.q_func.evaluate_all(state))

    def mode(self, state):
        return self.q_func.find_max(state)[0]
