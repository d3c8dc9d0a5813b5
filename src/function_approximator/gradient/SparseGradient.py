from typing import Dict

from function_approximator.gradient.base import GradientBuffer, Index


class SparseGradient(GradientBuffer):
    """
    Gradient stored as a map from (row, col) to value. Indices are validated against the shape.
    """

    def __init__(self, dim, entries: Dict[Index, float] = None):
        super().__init__(dim)
        self.data = {}
        for index, value in (entries or {}).items():
            index = (int(index[0]), int(index[1]))
            self._check_index(index)
            self.data[index] = float(value)

    @classmethod
    def zeros(cls, dim):
        return cls(dim)

    def copy(self):
        return SparseGradient(self.dim, self.data)

    def items(self):
        return iter(list(self.data.items()))

    def get(self, index):
        self._check_index(index)
        return self.data.get(index, 0.0)

    def set(self, index, value):
        index = (int(index[0]), int(index[1]))
        self._check_index(index)
        self.data[index] = float(value)

    def map_inplace(self, f):
        for index, value in self.data.items():
            self.data[index] = f(value)

    def merge_inplace(self, other, f):
        self._check_dim(other)
        other_entries = dict(other.items())
        for index in set(self.data) | set(other_entries):
            self.data[index] = f(self.data.get(index, 0.0), other_entries.get(index, 0.0))

    def addto(self, weights, scale=1.0):
        self._check_weights(weights)
        for index, value in self.data.items():
            weights[index] += scale * value

    def reset(self):
        self.data.clear()

    def to_sparse(self):
        return self.copy()
