import numpy as np

from function_approximator.gradient.base import GradientBuffer


def _vectorize(f):
    return np.vectorize(f, otypes=[float])


class DenseGradient(GradientBuffer):
    """
    Gradient stored as a full matrix.
    """

    def __init__(self, data: np.ndarray):
        data = np.array(data, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError('Dense gradients must be 2-dimensional, got shape {}.'.format(data.shape))
        super().__init__(data.shape)
        self.data = data

    @classmethod
    def zeros(cls, dim):
        return cls(np.zeros(dim))

    def copy(self):
        return DenseGradient(self.data)

    def items(self):
        for index, value in np.ndenumerate(self.data):
            yield index, float(value)

    def get(self, index):
        self._check_index(index)
        return float(self.data[index])

    def map_inplace(self, f):
        self.data = _vectorize(f)(self.data)

    def merge_inplace(self, other, f):
        self._check_dim(other)
        self.data = _vectorize(f)(self.data, other.to_dense())

    def addto(self, weights, scale=1.0):
        self._check_weights(weights)
        weights += scale * self.data

    def reset(self):
        self.data.fill(0)

    def to_dense(self):
        return self.data.copy()

    def dot(self, other):
        other_arr = other.to_dense() if isinstance(other, GradientBuffer) else np.asarray(other)
        if other_arr.shape != self.dim:
            raise ValueError('Cannot take the inner product of shapes {} and {}.'.format(self.dim, other_arr.shape))
        return float(np.sum(self.data * other_arr))
