from math import fabs
from typing import Protocol

from rootfind.config import MACHINE_EPSILON


class ScalarFunction(Protocol):
    """A real-valued function of one real variable."""

    def __call__(self, x: float) -> float: ...


def same_sign(x: float, y: float) -> bool:
    """True when x and y are both positive or both non-positive."""
    return (x > 0.0) == (y > 0.0)


def opposite_signs(x: float, y: float) -> bool:
    # Strict: zero is neither side, NaN is never opposite.
    return (x < 0.0 and y > 0.0) or (x > 0.0 and y < 0.0)


def accuracy_bound(root: float, t: float) -> float:
    """
    Worst-case distance between a returned root and a true zero,
    6 * eps * |root| + 2 * t.
    """
    return 6.0 * MACHINE_EPSILON * fabs(root) + 2.0 * t
