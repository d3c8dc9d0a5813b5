from .base import BasisFunction
from .ExactBasis import ExactBasis
from .Identity import Identity
