"""
Common type aliases used throughout the SIMM core package.

This module defines type aliases for numpy arrays and other common types
to improve code readability and enable better static type checking.
"""

from typing import TypeAlias

import numpy as np
import numpy.typing as npt

# Array type aliases
FloatArray: TypeAlias = npt.NDArray[np.float64]
"""1D or 2D array of 64-bit floats."""

PathArray: TypeAlias = npt.NDArray[np.float64]
"""
2D array of shape (n_paths, n_timesteps) representing Monte Carlo paths.

Each row is a single simulation path, and each column is a time step.
"""

CurrencyCode: TypeAlias = str
"""ISO 4217 three-letter currency code (e.g., 'USD')."""
