"""Floating-point helpers."""

import sys


def almost_equal(v1: float, v2: float) -> bool:
    """Tell whether two doubles are equal within a relative epsilon.

    Values that are both below 1e-10 in magnitude count as equal.
    """
    if abs(v1) < 1e-10 and abs(v2) < 1e-10:
        return True
    return abs(v1 - v2) < abs(min(v1, v2)) * sys.float_info.epsilon