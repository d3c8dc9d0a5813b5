"""
Useful math functions.

Maximum search over action values. Ties are judged with an absolute tolerance so that values
    which differ only by float noise are treated as equal.
"""
from typing import Tuple

import numpy as np
import numba

TIE_TOLERANCE = 1e-7
_LOWEST = float(np.finfo(np.float64).min)


@numba.njit()
def _argmaxima(values, tolerance, out):
    # Writes the tied maximal indices into out; returns (count, running max).
    count = 0
    best = _LOWEST
    for i in range(values.shape[0]):
        v = values[i]
        if abs(v - best) < tolerance:
            out[count] = i
            count += 1
        elif v > best:
            best = v
            out[0] = i
            count = 1
    return count, best


def argmaxima(values) -> Tuple[np.ndarray, float]:
    """
    All indices whose value is within tolerance of the running maximum, and that maximum.

    The scan starts from the most negative float. A value within tolerance of the current best is appended;
        a strictly larger value resets the list.
    :param values: 1D sequence of values
    :return: (indices, max value)
    """
    values = np.asarray(values, dtype=np.float64)
    out = np.empty(values.shape[0], dtype=np.int64)
    count, best = _argmaxima(values, TIE_TOLERANCE, out)
    return out[:count].copy(), best


def find_max(values) -> Tuple[int, float]:
    """
    Index and value of the maximum. A later entry replaces the best unless the best is strictly greater,
        so the last of several equal maxima wins.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        raise ValueError('Cannot take the maximum of an empty set of values.')
    # Reverse so that argmax (which keeps the first occurrence) lands on the last tied index
    idx = values.size - 1 - int(np.argmax(values[::-1]))
    return idx, float(values[idx])


def argmax_first(values) -> int:
    """
    Index of the first maximum; a later entry only replaces the best when it exceeds it by more than tolerance.
    """
    values = np.asarray(values, dtype=np.float64)
    best = 0
    for i in range(1, values.size):
        if values[i] - values[best] > TIE_TOLERANCE:
            best = i
    return best


def argmax_choose(values, rng=None) -> int:
    """
    Argmax with uniform random tiebreaking among argmaxima. Without any maximum (all NaN) every index is a candidate.
    """
    rng = np.random if rng is None else rng
    indices, _ = argmaxima(values)
    if not len(indices):
        return int(rng.choice(len(values)))
    return int(rng.choice(indices))
