from function_approximator.gradient.base import GradientBuffer, Index


class TileGradient(GradientBuffer):
    """
    One-hot gradient: a single active index with its activation, as produced by tabular value functions.
    """

    def __init__(self, dim, index: Index = None, activation: float = 1.0):
        super().__init__(dim)
        if index is not None:
            index = (int(index[0]), int(index[1]))
            self._check_index(index)
        self.index = index
        self.activation = float(activation) if index is not None else 0.0

    @classmethod
    def zeros(cls, dim):
        return cls(dim)

    def copy(self):
        return TileGradient(self.dim, self.index, self.activation)

    def items(self):
        if self.index is not None:
            yield self.index, self.activation

    def get(self, index):
        self._check_index(index)
        return self.activation if index == self.index else 0.0

    def map_inplace(self, f):
        if self.index is not None:
            self.activation = f(self.activation)

    def _keeps_layout_with(self, other):
        return self.index is None or other.index is None or self.index == other.index

    def merge_inplace(self, other, f):
        self._check_dim(other)
        if not isinstance(other, TileGradient):
            raise TypeError('Cannot merge a {} into a TileGradient.'.format(type(other).__name__))
        if other.index is None:
            self.map_inplace(lambda x: f(x, 0.0))
        elif self.index is None:
            self.index = other.index
            self.activation = f(0.0, other.activation)
        elif self.index == other.index:
            self.activation = f(self.activation, other.activation)
        else:
            raise ValueError('Cannot merge tiles with different active indices {} and {} in place.'
                             .format(self.index, other.index))

    def addto(self, weights, scale=1.0):
        self._check_weights(weights)
        if self.index is not None:
            weights[self.index] += scale * self.activation

    def reset(self):
        self.index = None
        self.activation = 0.0
