# __init__.py
"""
Policy module.

Policies map states to distributions over actions by reading a shared action-value function.
Concrete policies live in files named after their class, so that they can be loaded by name from a config.
"""
from .base import Policy
from .Greedy import Greedy
from .EpsilonGreedy import EpsilonGreedy
from .Random import Random
from .Softmax import Softmax
