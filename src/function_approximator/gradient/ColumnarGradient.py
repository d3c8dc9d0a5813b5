from typing import Dict

import numpy as np

from function_approximator.gradient.base import GradientBuffer


class ColumnarGradient(GradientBuffer):
    """
    Gradient stored as a map from column to a dense column vector. Linear action-value functions keep one weight
        column per action, so a gradient only ever touches the columns of the actions involved.
    """

    def __init__(self, dim, columns: Dict[int, np.ndarray] = None):
        super().__init__(dim)
        self.columns = {}
        for col, vec in (columns or {}).items():
            self.set_column(col, vec)

    @classmethod
    def zeros(cls, dim):
        return cls(dim)

    def set_column(self, col: int, vec):
        col = int(col)
        if not 0 <= col < self.dim[1]:
            raise IndexError('Column {} is outside of gradient bounds {}.'.format(col, self.dim))
        vec = np.array(vec, dtype=np.float64).reshape(-1)
        if vec.shape[0] != self.dim[0]:
            raise ValueError('Column of length {} does not match {} rows.'.format(vec.shape[0], self.dim[0]))
        self.columns[col] = vec

    def copy(self):
        return ColumnarGradient(self.dim, self.columns)

    def items(self):
        for col, vec in list(self.columns.items()):
            for row, value in enumerate(vec):
                yield (row, col), float(value)

    def get(self, index):
        self._check_index(index)
        row, col = index
        return float(self.columns[col][row]) if col in self.columns else 0.0

    def map_inplace(self, f):
        vf = np.vectorize(f, otypes=[float])
        for col, vec in self.columns.items():
            self.columns[col] = vf(vec)

    def merge_inplace(self, other, f):
        self._check_dim(other)
        if not isinstance(other, ColumnarGradient):
            raise TypeError('Cannot merge a {} into a ColumnarGradient.'.format(type(other).__name__))
        vf = np.vectorize(f, otypes=[float])
        zeros = np.zeros(self.dim[0])
        for col in set(self.columns) | set(other.columns):
            self.columns[col] = vf(self.columns.get(col, zeros), other.columns.get(col, zeros))

    def addto(self, weights, scale=1.0):
        self._check_weights(weights)
        for col, vec in self.columns.items():
            weights[:, col] += scale * vec

    def reset(self):
        self.columns.clear()

    def to_dense(self):
        out = np.zeros(self.dim)
        for col, vec in self.columns.items():
            out[:, col] = vec
        return out
