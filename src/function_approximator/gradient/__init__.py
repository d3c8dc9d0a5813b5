"""
Gradient buffers.

Partial derivatives of value functions with respect to their weights, stored densely, sparsely,
    as a single active tile, or column by column.
"""
from .base import GradientBuffer
from .DenseGradient import DenseGradient
from .SparseGradient import SparseGradient
from .TileGradient import TileGradient
from .ColumnarGradient import ColumnarGradient
