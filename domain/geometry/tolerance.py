# domain/geometry/tolerance.py
from typing import Optional

from domain.geometry.constants import EPSILON


def is_approx(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """
    Check if two scalars are equal within a tolerance.

    Args:
        a: First value
        b: Second value
        epsilon: Maximum absolute difference to be considered equal.
                 If None, uses the default EPSILON value.

    Returns:
        True if abs(a - b) <= epsilon
    """
    if epsilon is None:
        epsilon = EPSILON
    return abs(a - b) <= epsilon
