"""Exception classes raised by the root finders."""

from typing import Optional


class RootFindingError(Exception):
    """Base exception for root finding errors."""


class NoSignChangeError(RootFindingError, ValueError):
    """Raised when f(a) and f(b) do not bracket a root."""

    def __init__(self, a: float, b: float, fa: float, fb: float) -> None:
        self.a = a
        self.b = b
        self.fa = fa
        self.fb = fb
        super().__init__(
            f"f(a) and f(b) must have opposite signs: "
            f"f({a!r}) = {fa!r}, f({b!r}) = {fb!r}"
        )


class MaxIterationsExceededError(RootFindingError, RuntimeError):
    """Raised when the iteration cap is reached before convergence."""

    def __init__(self, maxiter: int, estimate: Optional[float] = None) -> None:
        self.maxiter = maxiter
        self.estimate = estimate
        super().__init__(
            f"Maximum iterations exceeded ({maxiter}), last estimate {estimate!r}"
        )
