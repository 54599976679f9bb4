"""
Ornstein-Uhlenbeck short-rate model driving the Monte Carlo simulation.

The OU process is a mean-reverting stochastic process widely used
for modeling short-term interest rates.
"""

from dataclasses import dataclass

import numpy as np

from simm_core._types import FloatArray, PathArray
from simm_core.exceptions import ConfigurationError

SCHEMES = ("exact", "euler")


@dataclass
class OUShortRateModel:
    """
    Ornstein-Uhlenbeck (Vasicek) short-rate model.

    The short rate follows the SDE:
        dr = κ(θ - r) dt + σ dW

    where:
        κ = mean reversion speed
        θ = long-term mean rate
        σ = volatility
        r₀ = initial rate

    Attributes
    ----------
    kappa : float
        Mean reversion speed (higher = faster reversion)
    theta : float
        Long-term mean rate
    sigma : float
        Volatility of the short rate
    r0 : float
        Initial short rate at t=0

    Example
    -------
    >>> model = OUShortRateModel(kappa=0.1, theta=0.02, sigma=0.01, r0=0.02)
    >>> time_grid = np.linspace(0, 5, 21)  # 5Y quarterly
    >>> paths = model.simulate(n_paths=5000, time_grid=time_grid, seed=42)
    >>> print(f"Shape: {paths.shape}")  # (5000, 21)
    """

    kappa: float = 0.1
    theta: float = 0.02
    sigma: float = 0.01
    r0: float = 0.02

    def __post_init__(self) -> None:
        """Validate model parameters."""
        if self.kappa <= 0:
            raise ConfigurationError(f"kappa must be positive, got {self.kappa}")
        if self.sigma < 0:
            raise ConfigurationError(f"sigma must be non-negative, got {self.sigma}")

    def expected_rate(self, t: float) -> float:
        """
        Calculate expected rate at time t.

        Returns
        -------
        float
            E[r(t)] = θ + (r₀ - θ) * exp(-κt)
        """
        return self.theta + (self.r0 - self.theta) * np.exp(-self.kappa * t)

    def variance(self, t: float) -> float:
        """
        Calculate variance of rate at time t.

        Returns
        -------
        float
            Var[r(t)] = (σ² / 2κ) * (1 - exp(-2κt))
        """
        return (self.sigma**2 / (2 * self.kappa)) * (
            1 - np.exp(-2 * self.kappa * t)
        )

    def simulate(
        self,
        n_paths: int,
        time_grid: FloatArray,
        seed: int | None = None,
        scheme: str = "exact",
    ) -> PathArray:
        """
        Simulate short rate paths on ``time_grid``.

        Parameters
        ----------
        n_paths : int
            Number of Monte Carlo paths
        time_grid : FloatArray
            Array of time points in years, starting at 0
        seed : int | None
            Random seed for reproducibility
        scheme : str
            'exact' for the Gaussian transition, 'euler' for the
            Euler-Maruyama discretisation

        Returns
        -------
        PathArray
            Array of shape (n_paths, len(time_grid)) with simulated rates

        Notes
        -----
        Exact: r(t+dt) | r(t) ~ N(θ + (r(t) - θ) e^{-κdt}, σ²(1 - e^{-2κdt}) / 2κ)

        Euler: r(t+dt) = r(t) + κ(θ - r(t)) dt + σ √dt Z
        """
        if scheme not in SCHEMES:
            raise ConfigurationError(
                f"Unknown scheme {scheme!r}; expected one of: {', '.join(SCHEMES)}"
            )
        if seed is not None:
            np.random.seed(seed)

        steps = np.diff(np.asarray(time_grid, dtype=np.float64))
        shocks = np.random.standard_normal((n_paths, len(steps)))

        paths = np.empty((n_paths, len(steps) + 1))
        paths[:, 0] = self.r0
        for i, dt in enumerate(steps):
            r = paths[:, i]
            if scheme == "euler":
                mean = r + self.kappa * (self.theta - r) * dt
                vol = self.sigma * np.sqrt(dt)
            else:
                decay = np.exp(-self.kappa * dt)
                mean = self.theta + (r - self.theta) * decay
                vol = self.sigma * np.sqrt((1 - decay**2) / (2 * self.kappa))
            paths[:, i + 1] = mean + vol * shocks[:, i]

        return paths

    @classmethod
    def from_config(cls, config: "OUModelConfig") -> "OUShortRateModel":  # type: ignore[name-defined]
        """
        Create model from configuration object.

        Parameters
        ----------
        config : OUModelConfig
            Configuration with model parameters

        Returns
        -------
        OUShortRateModel
            Initialized model
        """
        return cls(
            kappa=config.kappa,
            theta=config.theta,
            sigma=config.sigma,
            r0=config.initial_rate,
        )


def build_numeraire_from_path(rates: PathArray, time_grid: FloatArray) -> PathArray:
    """
    Build the bank-account numeraire from simulated short rates.

    N(t_0) = 1 and N(t_i) = N(t_{i-1}) * exp(r(t_{i-1}) * (t_i - t_{i-1})),
    i.e. the rate observed at the start of each period accrues over it.

    Parameters
    ----------
    rates : PathArray
        Short rate paths, shape (n_paths, n_steps)
    time_grid : FloatArray
        Time points in years, shape (n_steps,)

    Returns
    -------
    PathArray
        Numeraire paths of the same shape as ``rates``

    Example
    -------
    >>> rates = np.array([[0.02, 0.025, 0.03]])
    >>> n = build_numeraire_from_path(rates, np.array([0.0, 0.25, 0.5]))
    >>> # n[0, i] = exp(sum(r[0, 0:i] * dt))
    """
    dt = np.diff(time_grid)
    growth = np.exp(rates[:, :-1] * dt)

    numeraire = np.ones_like(rates)
    numeraire[:, 1:] = np.cumprod(growth, axis=1)
    return numeraire
