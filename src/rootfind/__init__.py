from .brent import (
    RootResult,
    find_root,
    find_root_result,
    find_roots,
)
from .exceptions import (
    MaxIterationsExceededError,
    NoSignChangeError,
    RootFindingError,
)

__all__ = [
    "MaxIterationsExceededError",
    "NoSignChangeError",
    "RootFindingError",
    "RootResult",
    "find_root",
    "find_root_result",
    "find_roots",
]
