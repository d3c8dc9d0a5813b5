"""
Utility functions for configuration variables.
"""
import numbers


def _real(x):
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def positive_integer(x):
    return isinstance(x, int) and not isinstance(x, bool) and x > 0


def positive_float(x):
    return _real(x) and x > 0


def unit_float(x):
    return _real(x) and 0 <= x <= 1


def one_of(*choices):
    def check(x):
        return x in choices
    check.__name__ = 'one_of_' + '_'.join(str(c) for c in choices)
    return check


def unit_parameter(p):
    """
    A step parameter whose every scheduled value lies in [0, 1]
    """
    low, high = p.bounds
    return 0 <= low and high <= 1


def nonnegative_parameter(p):
    low, _ = p.bounds
    return low >= 0
