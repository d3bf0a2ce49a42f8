"""
Package-wide defaults for the root finders.

Every value here can be overridden per call through keyword arguments.
"""

import numpy as np

DEFAULT_TOLERANCE = 1e-6
"""Absolute tolerance used when the caller does not pass one."""

DEFAULT_MAXITER = 5000
"""
Iteration cap. Shrinking the widest float64 bracket (2**1025) down to the
subnormal spacing (2**-1074) takes about 2100 halvings with t = 0; the
slack covers interpolation steps that shrink by less than half.
"""

MACHINE_EPSILON = float(np.finfo(np.float64).eps)
"""Relative spacing of float64 numbers around 1.0 (2**-52)."""
