"""
Common data and functions.
"""

from .utils import get_seed_state, set_initial_seed, set_seed_state
from .transition import Observation, Full, Partial, Terminal, Transition
from .trajectory import Trajectory
from .parameter import Parameter
