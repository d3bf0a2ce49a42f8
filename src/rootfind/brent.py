from __future__ import annotations

import logging
from dataclasses import dataclass
from math import fabs, isfinite, isnan
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from rootfind.config import DEFAULT_MAXITER, DEFAULT_TOLERANCE, MACHINE_EPSILON
from rootfind.exceptions import MaxIterationsExceededError, NoSignChangeError
from rootfind.utils import ScalarFunction, opposite_signs, same_sign

logger = logging.getLogger(__name__)

# -----------------------------
# Result container
# -----------------------------


@dataclass(frozen=True)
class RootResult:
    """
    Outcome of a Brent solve.

      root            best estimate b at termination
      fval            f(root)
      iterations      number of steps taken
      function_calls  evaluations of f, including both endpoints
      bracket         (lo, hi) from the final b and c; contains a sign change
    """

    root: float
    fval: float
    iterations: int
    function_calls: int
    bracket: Tuple[float, float]


# -----------------------------
# Brent's method
# -----------------------------


def _check_arguments(t: float, maxiter: Optional[int]) -> None:
    if not (isfinite(t) and t >= 0.0):
        raise ValueError(f"t must be finite and >= 0, got {t!r}")
    if maxiter is not None and maxiter < 0:
        raise ValueError(f"maxiter must be >= 0 or None, got {maxiter!r}")


def find_root_result(
    f: ScalarFunction,
    a: float,
    b: float,
    t: float = DEFAULT_TOLERANCE,
    *,
    maxiter: Optional[int] = DEFAULT_MAXITER,
    check_bracket: bool = True,
) -> RootResult:
    """Find a zero of f in [a, b] using Brent's method.

    f(a) and f(b) must have opposite signs (or one of them must be zero).
    The zero is located to within 6 * eps * |root| + 2 * t.

    With check_bracket=False the sign change is not verified and the result
    on a non-bracketing interval is undefined; maxiter is then the only
    guard against looping forever. maxiter=None removes the cap entirely.
    """
    _check_arguments(t, maxiter)

    a = float(a)
    b = float(b)
    fa = float(f(a))
    fb = float(f(b))
    calls = 2

    if check_bracket and fa != 0.0 and fb != 0.0:
        if isnan(fa) or isnan(fb) or not opposite_signs(fa, fb):
            logger.debug("No sign change on [%r, %r]: fa=%r fb=%r", a, b, fa, fb)
            raise NoSignChangeError(a, b, fa, fb)

    c, fc = a, fa
    d = e = b - a  # last and second-to-last steps
    iterations = 0

    while True:
        # Keep b as the point with the smallest |f|.
        if fabs(fc) < fabs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol = 2.0 * MACHINE_EPSILON * fabs(b) + t
        m = 0.5 * (c - b)

        if fabs(m) <= tol or fb == 0.0:
            logger.debug(
                "Converged to %r after %d iterations (%d calls)",
                b,
                iterations,
                calls,
            )
            return RootResult(
                root=b,
                fval=fb,
                iterations=iterations,
                function_calls=calls,
                bracket=(min(b, c), max(b, c)),
            )

        if maxiter is not None and iterations >= maxiter:
            logger.debug("Stopped after %d iterations at b=%r", iterations, b)
            raise MaxIterationsExceededError(maxiter, estimate=b)

        if fabs(e) < tol or fabs(fa) <= fabs(fb):
            d = e = m
            step = "bisection"
        else:
            s = fb / fa
            if a == c:
                step = "secant"
                p = 2.0 * m * s
                q = 1.0 - s
            else:
                step = "inverse quadratic"
                q = fa / fc
                r = fb / fc
                p = s * (2.0 * m * q * (q - r) - (b - a) * (r - 1.0))
                q = (q - 1.0) * (r - 1.0) * (s - 1.0)
            if p > 0.0:
                q = -q
            else:
                p = -p

            e_prev = e
            e = d
            # Stay inside the bracket and shrink faster than two steps ago.
            if 2.0 * p < 3.0 * m * q - fabs(tol * q) and p < fabs(0.5 * e_prev * q):
                d = p / q
            else:
                d = e = m
                step = "bisection"

        a, fa = b, fb
        if fabs(d) > tol:
            b += d
        elif m > 0.0:
            b += tol
        else:
            b -= tol

        fb = float(f(b))
        calls += 1
        iterations += 1
        logger.debug("iter %d (%s): b=%r fb=%r", iterations, step, b, fb)

        if same_sign(fb, fc):
            c, fc = a, fa
            d = e = b - a


def find_root(
    f: ScalarFunction,
    a: float,
    b: float,
    t: float = DEFAULT_TOLERANCE,
    *,
    maxiter: Optional[int] = DEFAULT_MAXITER,
    check_bracket: bool = True,
) -> float:
    """Find a zero of f in [a, b] using Brent's method. See find_root_result."""
    return find_root_result(
        f, a, b, t, maxiter=maxiter, check_bracket=check_bracket
    ).root


# -----------------------------
# Many brackets at once
# -----------------------------


def find_roots(
    f: ScalarFunction,
    a: ArrayLike,
    b: ArrayLike,
    t: float = DEFAULT_TOLERANCE,
    *,
    maxiter: Optional[int] = DEFAULT_MAXITER,
    check_bracket: bool = True,
) -> np.ndarray:
    """
    Solve f(x) = 0 independently on each bracket [a[i], b[i]].
    a and b are broadcast against each other; the result has the
    broadcast shape.
    """
    lo, hi = np.broadcast_arrays(
        np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)
    )
    roots = np.empty(lo.shape, dtype=np.float64)
    for idx in np.ndindex(lo.shape):
        roots[idx] = find_root(
            f,
            float(lo[idx]),
            float(hi[idx]),
            t,
            maxiter=maxiter,
            check_bracket=check_bracket,
        )
    return roots
