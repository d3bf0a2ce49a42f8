import logging
from math import cos, sqrt

import numpy as np

from rootfind.brent import find_root, find_root_result, find_roots
from rootfind.exceptions import NoSignChangeError
from rootfind.utils import accuracy_bound


def main() -> None:
    # -----------------------------
    # Square root of two
    # -----------------------------
    res = find_root_result(lambda x: x * x - 2.0, 0.0, 2.0, 1e-10)
    print("x^2 - 2 on [0, 2]:")
    print(f"  root={res.root:.12f}, error={abs(res.root - sqrt(2.0)):.2e}")
    print(f"  iterations={res.iterations}, calls={res.function_calls}")

    # -----------------------------
    # Cubic with the default tolerance
    # -----------------------------
    r = find_root(lambda x: x**3 - x - 2.0, 1.0, 2.0)
    print(f"\nx^3 - x - 2 on [1, 2]: root={r:.7f} (+/- {accuracy_bound(r, 1e-6):.1e})")

    # -----------------------------
    # Fixed point of cos, many brackets at once
    # -----------------------------
    roots = find_roots(lambda x: cos(x) - x, np.zeros(3), [1.0, 2.0, 3.0])
    print(f"\ncos(x) = x from three brackets: {roots}")

    # -----------------------------
    # Bad bracket
    # -----------------------------
    try:
        find_root(lambda x: x * x + 1.0, -1.0, 1.0)
    except NoSignChangeError as exc:
        print(f"\nx^2 + 1 on [-1, 1]: {exc}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
