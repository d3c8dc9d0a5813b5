"""
Eligibility traces over gradient buffers.

A trace decays by a rate and absorbs new gradients. The rule it uses to combine its decayed value with an incoming
    gradient distinguishes accumulating, replacing and dutch traces.
"""
from function_approximator.gradient import GradientBuffer
from model.base import ElementModel


class EligibilityTrace(ElementModel):

    def __init__(self, buffer: GradientBuffer):
        """
        :param buffer: The initial (usually empty) buffer. A copy is restored on reset.
        """
        self._initial = buffer.copy()
        self.buffer = buffer.copy()

    @staticmethod
    def get_name():
        return 'eligibility_trace'

    def _combine(self, x: float, y: float, rate: float) -> float:
        """
        Combine decayed trace value x with incoming gradient value y.
        """
        return rate * x + y

    def scale(self, rate: float):
        self.buffer = self.buffer.map(lambda x: rate * x)

    def update(self, gradient: GradientBuffer):
        self.buffer = self.buffer.merge(gradient, lambda x, y: self._combine(x, y, 1.0))

    def scaled_update(self, rate: float, gradient: GradientBuffer):
        """
        Decay by rate and absorb gradient in one pass.
        """
        self.buffer = self.buffer.merge(gradient, lambda x, y: self._combine(x, y, rate))

    def reset(self):
        self.buffer = self._initial.copy()

    def to_dense(self):
        return self.buffer.to_dense()

    def dot(self, other) -> float:
        return self.buffer.dot(other)


class AccumulatingTrace(EligibilityTrace):
    pass


class ReplacingTrace(EligibilityTrace):
    """
    Accumulating rule clamped to [-1, 1].
    """

    def _combine(self, x, y, rate):
        return min(1.0, max(-1.0, rate * x + y))


class DutchTrace(EligibilityTrace):
    """
    The decayed value is further multiplied by (1 - alpha), alpha being the current learning rate.
    """

    def __init__(self, alpha: float, buffer: GradientBuffer):
        super().__init__(buffer)
        self.alpha = alpha

    def _combine(self, x, y, rate):
        return rate * (1.0 - self.alpha) * x + y


TRACES = {
    'accumulating': AccumulatingTrace,
    'replacing': ReplacingTrace,
    'dutch': DutchTrace,
}


def make_trace(name: str, buffer: GradientBuffer, alpha: float = 0.0) -> EligibilityTrace:
    """
    Build the trace registered under name in TRACES. Dutch traces also take the current learning rate.
    """
    trace_cls = TRACES[name]
    if trace_cls is DutchTrace:
        return DutchTrace(alpha, buffer)
    return trace_cls(buffer)
