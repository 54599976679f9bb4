"""
Stochastic values produced by Monte Carlo pricing.

A value is either deterministic (a single float) or a vector of
realisations, one per simulation path. Aggregation code only relies on
``scale`` and ``add``, so it does not care which representation is used.
"""

from typing import Protocol, runtime_checkable

import numpy as np

from simm_core._types import FloatArray


@runtime_checkable
class StochasticValue(Protocol):
    """Minimal algebra needed to form weighted sums of values."""

    def scale(self, weight: float) -> "StochasticValue":
        """Return this value multiplied by a scalar weight."""
        ...

    def add(self, other: "StochasticValue") -> "StochasticValue":
        """Return the pathwise sum of this value and ``other``."""
        ...


class RandomVariable:
    """
    Path-wise random variable, possibly deterministic.

    Attributes
    ----------
    realizations : float | FloatArray
        A float for deterministic values, otherwise an array of shape
        (n_paths,)

    Example
    -------
    >>> a = RandomVariable(np.array([1.0, 2.0, 3.0]))
    >>> b = RandomVariable.constant(10.0)
    >>> (a.scale(2.0).add(b)).average()
    14.0
    """

    __slots__ = ("_values",)

    def __init__(self, realizations: float | FloatArray) -> None:
        if np.ndim(realizations) == 0:
            self._values: float | FloatArray = float(realizations)
        else:
            values = np.array(realizations, dtype=np.float64)
            if values.ndim != 1:
                raise ValueError(
                    f"Realizations must be a scalar or 1D array, got shape {values.shape}"
                )
            values.setflags(write=False)
            self._values = values

    @classmethod
    def constant(cls, value: float) -> "RandomVariable":
        """Create a deterministic random variable."""
        return cls(float(value))

    @property
    def is_deterministic(self) -> bool:
        """True if the value is the same on every path."""
        return isinstance(self._values, float)

    @property
    def n_paths(self) -> int:
        """Number of paths, 1 for deterministic values."""
        return 1 if self.is_deterministic else len(self._values)

    @property
    def realizations(self) -> float | FloatArray:
        """Underlying float or read-only array of realisations."""
        return self._values

    def to_array(self, n_paths: int | None = None) -> FloatArray:
        """
        Realisations as an array, broadcasting deterministic values.

        Parameters
        ----------
        n_paths : int | None
            Length to broadcast a deterministic value to (default 1)
        """
        if self.is_deterministic:
            return np.full(n_paths or 1, self._values)
        return np.array(self._values)

    def scale(self, weight: float) -> "RandomVariable":
        """Multiply every realisation by ``weight``."""
        return RandomVariable(self._values * weight)

    def add(self, other: "RandomVariable | float") -> "RandomVariable":
        """Pathwise sum; deterministic operands broadcast."""
        other_values = other._values if isinstance(other, RandomVariable) else other
        return RandomVariable(self._values + other_values)

    def mult(self, other: "RandomVariable | float") -> "RandomVariable":
        """Pathwise product; deterministic operands broadcast."""
        other_values = other._values if isinstance(other, RandomVariable) else other
        return RandomVariable(self._values * other_values)

    def div(self, other: "RandomVariable | float") -> "RandomVariable":
        """Pathwise quotient; deterministic operands broadcast."""
        other_values = other._values if isinstance(other, RandomVariable) else other
        return RandomVariable(self._values / other_values)

    def average(self) -> float:
        """Monte Carlo expectation."""
        return float(np.mean(self._values))

    def variance(self) -> float:
        """Sample variance across paths (zero for deterministic values)."""
        return float(np.var(self._values))

    def __add__(self, other: "RandomVariable | float") -> "RandomVariable":
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: "RandomVariable | float") -> "RandomVariable":
        other_values = other._values if isinstance(other, RandomVariable) else other
        return RandomVariable(self._values - other_values)

    def __mul__(self, other: "RandomVariable | float") -> "RandomVariable":
        return self.mult(other)

    __rmul__ = __mul__

    def __truediv__(self, other: "RandomVariable | float") -> "RandomVariable":
        return self.div(other)

    def __neg__(self) -> "RandomVariable":
        return self.scale(-1.0)

    def __repr__(self) -> str:
        """Return string representation."""
        if self.is_deterministic:
            return f"RandomVariable({self._values})"
        return f"RandomVariable(n_paths={self.n_paths}, mean={self.average():.6g})"
