# __init__.py
"""
Function approximator module.

Value functions V(s) and Q(s, a) with a 2D weight matrix, the gradient buffers they produce,
    and the basis projections linear value functions are built on.
"""
from .base import UpdateError, ValueFunction, StateFunction, StateActionFunction, Differentiable
from .Tabular import TabularV, TabularQ
from .Linear import LinearV, LinearQ
from .pytorch_fa import TorchLinearQ
