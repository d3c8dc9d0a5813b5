import random
import numpy as np
from torch import manual_seed, get_rng_state, set_rng_state


def set_initial_seed(seed: int, use_pytorch: bool = False):
    # For repeatability
    random.seed(seed)
    np.random.seed(seed)

    if use_pytorch:
        manual_seed(seed)


def get_seed_state(use_pytorch: bool = False):
    seed_state = [
        random.getstate(),
        np.random.get_state(),
    ]

    if use_pytorch:
        seed_state.append(get_rng_state())

    return seed_state


def set_seed_state(seed_state, use_pytorch: bool = False):
    random.setstate(seed_state[0])
    np.random.set_state(seed_state[1])

    if use_pytorch:
        set_rng_state(seed_state[2])


def default_rng(rng=None):
    """
    The random source used for sampling: the given Generator, or the global numpy random state.
    """
    return np.random if rng is None else rng
