import abc
from typing import Any, Tuple

import numpy as np

from common.vecmath import find_max
from function_approximator.gradient import GradientBuffer


class UpdateError(RuntimeError):
    """
    A single update of a value function could not be applied. Controllers skip such updates and keep learning.
    """
    pass


class ValueFunction(abc.ABC):
    """
    A parameterised function of states (and actions) whose weights are a single 2D matrix.
    """

    @property
    @abc.abstractmethod
    def weights(self) -> np.ndarray:
        raise NotImplementedError()

    @property
    def weights_dim(self) -> Tuple[int, int]:
        return tuple(self.weights.shape)

    @property
    def n_weights(self) -> int:
        rows, cols = self.weights_dim
        return rows * cols


class StateFunction(ValueFunction):
    """
    V(s)
    """

    @abc.abstractmethod
    def evaluate(self, state: Any) -> float:
        raise NotImplementedError()

    @abc.abstractmethod
    def update(self, state: Any, error: float):
        """
        Move V(s) by error.
        :raises UpdateError: if the update could not be applied
        """
        raise NotImplementedError()


class StateActionFunction(ValueFunction):
    """
    Q(s, a) over a finite set of actions 0..n_actions-1
    """

    @property
    @abc.abstractmethod
    def n_actions(self) -> int:
        raise NotImplementedError()

    @abc.abstractmethod
    def evaluate(self, state: Any, action: int) -> float:
        raise NotImplementedError()

    @abc.abstractmethod
    def evaluate_all(self, state: Any) -> np.ndarray:
        """
        Q(s, .) with one entry per action.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def update(self, state: Any, action: int, error: float):
        """
        Move Q(s, a) by error.
        :raises UpdateError: if the update could not be applied
        """
        raise NotImplementedError()

    def find_max(self, state: Any) -> Tuple[int, float]:
        """
        Greedy action and its value. Among equal values the last action wins.
        """
        return find_max(self.evaluate_all(state))


class Differentiable(abc.ABC):
    """
    Mixin for value functions that expose their gradient with respect to the weights.
    """

    @abc.abstractmethod
    def grad(self, *args) -> GradientBuffer:
        raise NotImplementedError()

    @abc.abstractmethod
    def zero_gradient(self) -> GradientBuffer:
        """
        An empty buffer of the layout best suited to accumulating this function's gradients (e.g. in a trace).
        """
        raise NotImplementedError()

    def update_grad_scaled(self, gradient: GradientBuffer, scale: float):
        """
        weights += scale * gradient
        :raises ValueError: if the gradient shape does not match the weights
        """
        gradient.addto(self.weights, scale)

    def update_grad(self, gradient: GradientBuffer):
        self.update_grad_scaled(gradient, 1.0)
