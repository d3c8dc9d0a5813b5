"""
Transition records fed to controllers.

A transition carries the source observation, the action taken, the scalar reward and the destination
    observation. Whether the episode ended is read from the destination observation alone.
"""
from typing import Any, NamedTuple

import numpy as np


class Observation(object):
    """
    An observed state. Subclasses distinguish fully observed, partially observed and terminal states.
    """
    __slots__ = ('state',)

    def __init__(self, state: Any):
        self.state = state

    @property
    def terminal(self) -> bool:
        return False

    def __eq__(self, other):
        return type(self) is type(other) and _state_eq(self.state, other.state)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.state)


class Full(Observation):
    __slots__ = ()


class Partial(Observation):
    __slots__ = ()


class Terminal(Observation):
    __slots__ = ()

    @property
    def terminal(self) -> bool:
        return True


def _state_eq(a, b) -> bool:
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        # numpy arrays compare elementwise, and only when shapes agree
        return np.shape(a) == np.shape(b) and bool(np.all(np.asarray(a) == np.asarray(b)))
    return bool(a == b)


class Transition(NamedTuple):
    from_: Observation
    action: Any
    reward: float
    to: Observation

    def terminated(self) -> bool:
        return self.to.terminal

    @property
    def state(self):
        return self.from_.state

    @property
    def next_state(self):
        return self.to.state
