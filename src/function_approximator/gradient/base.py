import abc
from typing import Callable, Iterator, Tuple

import numpy as np

Index = Tuple[int, int]


class GradientBuffer(abc.ABC):
    """
    A partial derivative of a value function with respect to its weight matrix, in one of several storage layouts.

    Every buffer has a logical shape (rows, cols) matching the weights it applies to. Buffers of different shapes
        cannot be combined.

    Elementwise combinators take a function f(x, y) of two floats. Entries not stored in a buffer are passed as 0.
    """

    def __init__(self, dim: Tuple[int, int]):
        rows, cols = dim
        if rows < 0 or cols < 0:
            raise ValueError('Gradient dimensions must be non-negative, got {}.'.format(dim))
        self._dim = (int(rows), int(cols))

    @property
    def dim(self) -> Tuple[int, int]:
        return self._dim

    @classmethod
    @abc.abstractmethod
    def zeros(cls, dim: Tuple[int, int]) -> 'GradientBuffer':
        raise NotImplementedError()

    @abc.abstractmethod
    def copy(self) -> 'GradientBuffer':
        raise NotImplementedError()

    @abc.abstractmethod
    def items(self) -> Iterator[Tuple[Index, float]]:
        """
        Iterate over the stored ((row, col), value) entries.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def get(self, index: Index) -> float:
        raise NotImplementedError()

    @abc.abstractmethod
    def map_inplace(self, f: Callable[[float], float]):
        """
        Apply f to every stored entry.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def merge_inplace(self, other: 'GradientBuffer', f: Callable[[float, float], float]):
        """
        Combine other into this buffer elementwise with f(self_value, other_value) over the union of stored entries.
        :raises ValueError: dimension mismatch, or a layout that cannot hold the result
        :raises TypeError: a layout that cannot absorb the other buffer's layout
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def addto(self, weights: np.ndarray, scale: float = 1.0):
        """
        weights += scale * self, in place.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def reset(self):
        """
        Zero every stored entry.
        """
        raise NotImplementedError()

    def to_dense(self) -> np.ndarray:
        out = np.zeros(self.dim)
        for index, value in self.items():
            out[index] = value
        return out

    def to_sparse(self) -> 'GradientBuffer':
        from function_approximator.gradient.SparseGradient import SparseGradient
        return SparseGradient(self.dim, dict(self.items()))

    def map(self, f: Callable[[float], float]) -> 'GradientBuffer':
        ret = self.copy()
        ret.map_inplace(f)
        return ret

    def merge(self, other: 'GradientBuffer', f: Callable[[float, float], float]) -> 'GradientBuffer':
        """
        Elementwise combination into a new buffer. The result is dense when either side is dense, keeps the layout
            when both sides share one, and is sparse otherwise.
        """
        from function_approximator.gradient.DenseGradient import DenseGradient
        self._check_dim(other)
        if isinstance(self, DenseGradient):
            ret = self.copy()
        elif isinstance(other, DenseGradient):
            ret = DenseGradient(self.to_dense())
        elif type(self) is type(other) and self._keeps_layout_with(other):
            ret = self.copy()
        else:
            ret = self.to_sparse()
        ret.merge_inplace(other, f)
        return ret

    def _keeps_layout_with(self, other: 'GradientBuffer') -> bool:
        return True

    def dot(self, other) -> float:
        """
        Inner product with a weight-shaped array or another buffer.
        """
        other_arr = other.to_dense() if isinstance(other, GradientBuffer) else np.asarray(other)
        if other_arr.shape != self.dim:
            raise ValueError('Cannot take the inner product of shapes {} and {}.'.format(self.dim, other_arr.shape))
        return float(sum(value * other_arr[index] for index, value in self.items()))

    def _check_dim(self, other: 'GradientBuffer'):
        if other.dim != self.dim:
            raise ValueError('Gradient dimension mismatch: {} vs {}.'.format(self.dim, other.dim))

    def _check_weights(self, weights: np.ndarray):
        if tuple(weights.shape) != self.dim:
            raise ValueError('Gradient of shape {} does not match weights of shape {}.'
                             .format(self.dim, tuple(weights.shape)))

    def _check_index(self, index: Index):
        row, col = index
        if not (0 <= row < self.dim[0] and 0 <= col < self.dim[1]):
            raise IndexError('Index {} is outside of gradient bounds {}.'.format(index, self.dim))

    def __repr__(self):
        return '{}(dim={})'.format(type(self).__name__, self.dim)
