"""
Monte Carlo simulation model handed to products for valuation.

Holds the simulated short rate and numeraire paths on a fixed time
grid. Products read numeraire values at their payment times; the
portfolio passes the model through untouched.
"""

import logging

import numpy as np

from simm_core._types import FloatArray, PathArray
from simm_core.exceptions import ConfigurationError, ValuationError
from simm_core.market.ir_model import OUShortRateModel, build_numeraire_from_path
from simm_core.stochastic.random_variable import RandomVariable

logger = logging.getLogger(__name__)

TIME_TOLERANCE = 1e-8


class ShortRateSimulation:
    """
    Simulated short rate paths with their bank-account numeraire.

    Attributes
    ----------
    time_grid : FloatArray
        Time points in years, shape (n_steps,)
    n_paths : int
        Number of simulated paths
    currency : str
        Currency the model discounts in

    Example
    -------
    >>> model = OUShortRateModel(kappa=0.1, theta=0.02, sigma=0.01, r0=0.02)
    >>> sim = ShortRateSimulation.generate(model, n_paths=1000, horizon=5.0)
    >>> growth = sim.numeraire(2.5).average()
    """

    def __init__(
        self,
        time_grid: FloatArray,
        short_rates: PathArray,
        currency: str = "USD",
    ) -> None:
        time_grid = np.asarray(time_grid, dtype=np.float64)
        short_rates = np.asarray(short_rates, dtype=np.float64)

        if time_grid.ndim != 1 or len(time_grid) < 2:
            raise ConfigurationError("Time grid must be 1D with at least two points")
        if np.any(np.diff(time_grid) <= 0):
            raise ConfigurationError("Time grid must be strictly increasing")
        if short_rates.ndim != 2 or short_rates.shape[1] != len(time_grid):
            raise ConfigurationError(
                f"Short rate paths must have shape (n_paths, {len(time_grid)}), "
                f"got {short_rates.shape}"
            )

        self._time_grid = time_grid
        self._short_rates = short_rates
        self._numeraire = build_numeraire_from_path(short_rates, time_grid)
        self.currency = currency

    @classmethod
    def generate(
        cls,
        model: OUShortRateModel,
        n_paths: int = 5000,
        horizon: float = 5.0,
        dt: float = 0.25,
        seed: int | None = 42,
        currency: str = "USD",
        scheme: str = "exact",
    ) -> "ShortRateSimulation":
        """
        Simulate a short rate model on a regular grid.

        Parameters
        ----------
        model : OUShortRateModel
            Short rate dynamics
        n_paths : int
            Number of Monte Carlo paths (default 5000)
        horizon : float
            Simulation horizon in years (default 5.0)
        dt : float
            Time step in years (default 0.25 = quarterly)
        seed : int | None
            Random seed (default 42)
        currency : str
            Model currency (default 'USD')
        scheme : str
            Discretisation, 'exact' or 'euler' (default 'exact')
        """
        if n_paths < 1:
            raise ConfigurationError(f"n_paths must be positive, got {n_paths}")
        if horizon <= 0:
            raise ConfigurationError(f"horizon must be positive, got {horizon}")
        if dt <= 0 or dt > horizon:
            raise ConfigurationError(f"dt must be in (0, horizon], got {dt}")

        n_steps = int(round(horizon / dt)) + 1
        time_grid = np.linspace(0, horizon, n_steps)
        rates = model.simulate(
            n_paths=n_paths, time_grid=time_grid, seed=seed, scheme=scheme
        )

        logger.debug(
            "Simulated %d %s paths over %d steps to %.2fY in %s",
            n_paths,
            scheme,
            n_steps,
            horizon,
            currency,
        )
        return cls(time_grid=time_grid, short_rates=rates, currency=currency)

    @classmethod
    def from_config(
        cls,
        simulation_config: "SimulationConfig",  # type: ignore[name-defined]  # noqa: F821
        model_config: "OUModelConfig",  # type: ignore[name-defined]  # noqa: F821
    ) -> "ShortRateSimulation":
        """
        Create a simulation from configuration.

        Parameters
        ----------
        simulation_config : SimulationConfig
            Monte Carlo settings
        model_config : OUModelConfig
            Short rate model parameters
        """
        return cls.generate(
            OUShortRateModel.from_config(model_config),
            n_paths=simulation_config.n_paths,
            horizon=simulation_config.horizon_years,
            dt=simulation_config.dt,
            seed=simulation_config.seed,
            currency=simulation_config.currency,
            scheme=simulation_config.scheme,
        )

    @property
    def time_grid(self) -> FloatArray:
        """Return the simulation time grid."""
        return self._time_grid.copy()

    @property
    def n_paths(self) -> int:
        """Number of simulation paths."""
        return self._short_rates.shape[0]

    @property
    def horizon(self) -> float:
        """Last simulated time in years."""
        return float(self._time_grid[-1])

    def time_index(self, t: float) -> int:
        """
        Index of ``t`` on the time grid.

        Raises
        ------
        ValuationError
            If ``t`` is not a grid point
        """
        idx = int(np.searchsorted(self._time_grid, t - TIME_TOLERANCE))
        if idx >= len(self._time_grid) or abs(self._time_grid[idx] - t) > TIME_TOLERANCE:
            raise ValuationError(
                f"Time {t} is not on the simulation time grid "
                f"[{self._time_grid[0]}, {self.horizon}]"
            )
        return idx

    def numeraire(self, t: float) -> RandomVariable:
        """Bank-account numeraire N(t) on every path."""
        return RandomVariable(self._numeraire[:, self.time_index(t)])

    def short_rate(self, t: float) -> RandomVariable:
        """Short rate r(t) on every path."""
        return RandomVariable(self._short_rates[:, self.time_index(t)])

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"{self.__class__.__name__}("
            f"n_paths={self.n_paths}, "
            f"horizon={self.horizon:.2f}Y, "
            f"currency={self.currency})"
        )
