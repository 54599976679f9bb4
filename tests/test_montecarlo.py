"""
Tests for stochastic values, the short rate model and the simulation handle.
"""

import numpy as np
import pytest

from simm_core.config import OUModelConfig, SimulationConfig
from simm_core.exceptions import ConfigurationError, ValuationError
from simm_core.market import OUShortRateModel, build_numeraire_from_path
from simm_core.montecarlo import ShortRateSimulation
from simm_core.stochastic import RandomVariable, StochasticValue


class TestRandomVariable:
    """Tests for the scale-and-add algebra."""

    def test_deterministic(self) -> None:
        """A float is a deterministic value."""
        rv = RandomVariable.constant(3.0)
        assert rv.is_deterministic
        assert rv.average() == 3.0
        assert rv.variance() == 0.0

    def test_scale_and_add_mixed(self) -> None:
        """Deterministic values broadcast against path-wise ones."""
        paths = RandomVariable(np.array([1.0, 2.0, 3.0]))
        result = paths.scale(2.0).add(RandomVariable.constant(10.0))
        assert not result.is_deterministic
        assert np.allclose(result.realizations, [12.0, 14.0, 16.0])

    def test_operators(self) -> None:
        """Operators delegate to the pathwise operations."""
        a = RandomVariable(np.array([1.0, 2.0]))
        b = RandomVariable(np.array([4.0, 8.0]))
        assert np.allclose((a + b).realizations, [5.0, 10.0])
        assert np.allclose((b - a).realizations, [3.0, 6.0])
        assert np.allclose((a * b).realizations, [4.0, 16.0])
        assert np.allclose((b / a).realizations, [4.0, 4.0])
        assert np.allclose((2.0 * a).realizations, [2.0, 4.0])
        assert np.allclose((-a).realizations, [-1.0, -2.0])

    def test_immutable(self) -> None:
        """Realisations are copied and read-only."""
        source = np.array([1.0, 2.0])
        rv = RandomVariable(source)
        source[0] = 100.0
        assert rv.realizations[0] == 1.0
        with pytest.raises(ValueError):
            rv.realizations[0] = 5.0

    def test_to_array_broadcasts(self) -> None:
        """Deterministic values broadcast to the requested length."""
        assert np.allclose(RandomVariable.constant(2.0).to_array(4), [2.0] * 4)

    def test_rejects_matrix(self) -> None:
        """Only scalars and 1D arrays are random variables."""
        with pytest.raises(ValueError):
            RandomVariable(np.ones((2, 2)))

    def test_protocol(self) -> None:
        """RandomVariable satisfies the stochastic value protocol."""
        assert isinstance(RandomVariable.constant(1.0), StochasticValue)


class TestShortRateModel:
    """Tests for the OU short rate model."""

    def test_simulated_mean(self, ou_model: OUShortRateModel) -> None:
        """Simulated mean is close to the analytical expectation."""
        grid = np.linspace(0, 5, 21)
        paths = ou_model.simulate(5000, grid, seed=1)
        assert paths.shape == (5000, 21)
        assert abs(paths[:, -1].mean() - ou_model.expected_rate(5.0)) < 1e-3

    def test_simulated_variance(self, ou_model: OUShortRateModel) -> None:
        """Exact transition reproduces the analytical variance."""
        paths = ou_model.simulate(20000, np.linspace(0, 5, 21), seed=3)
        assert paths[:, -1].var() == pytest.approx(ou_model.variance(5.0), rel=0.05)
        assert ou_model.variance(0.0) == 0.0

    def test_euler_scheme(self, ou_model: OUShortRateModel) -> None:
        """Euler paths match the analytical moments up to discretisation error."""
        grid = np.linspace(0, 5, 61)
        euler = ou_model.simulate(20000, grid, seed=3, scheme="euler")
        exact = ou_model.simulate(20000, grid, seed=3, scheme="exact")
        assert euler.shape == exact.shape
        assert not np.allclose(euler, exact)
        assert np.allclose(euler[:, 0], ou_model.r0)
        assert abs(euler[:, -1].mean() - ou_model.expected_rate(5.0)) < 1e-3
        assert euler[:, -1].var() == pytest.approx(ou_model.variance(5.0), rel=0.1)

    def test_euler_without_noise_follows_mean(self) -> None:
        """With zero volatility Euler steps are the explicit drift update."""
        model = OUShortRateModel(kappa=0.5, theta=0.03, sigma=0.0, r0=0.01)
        paths = model.simulate(2, np.array([0.0, 0.5, 1.0]), seed=0, scheme="euler")
        first = 0.01 + 0.5 * (0.03 - 0.01) * 0.5
        second = first + 0.5 * (0.03 - first) * 0.5
        assert np.allclose(paths, [[0.01, first, second]] * 2)

    def test_unknown_scheme_raises(self, ou_model: OUShortRateModel) -> None:
        """Only the exact and Euler schemes exist."""
        with pytest.raises(ConfigurationError, match="milstein"):
            ou_model.simulate(10, np.linspace(0, 1, 5), scheme="milstein")

    def test_invalid_kappa_raises(self) -> None:
        """Mean reversion must be positive."""
        with pytest.raises(ConfigurationError):
            OUShortRateModel(kappa=0.0)

    def test_numeraire_flat_rate(self) -> None:
        """Numeraire grows at exp(r t) for a flat rate."""
        grid = np.array([0.0, 0.25, 0.5, 1.0])
        numeraire = build_numeraire_from_path(np.full((2, 4), 0.04), grid)
        assert np.allclose(numeraire, np.exp(0.04 * grid))


class TestShortRateSimulation:
    """Tests for the simulation model handle."""

    def test_numeraire_starts_at_one(self, stochastic_simulation: ShortRateSimulation) -> None:
        """N(0) = 1 on every path."""
        assert np.allclose(stochastic_simulation.numeraire(0.0).realizations, 1.0)

    def test_time_index(self, flat_rate_simulation: ShortRateSimulation) -> None:
        """Grid times resolve to their index."""
        assert flat_rate_simulation.time_index(0.0) == 0
        assert flat_rate_simulation.time_index(2.5) == 10
        assert flat_rate_simulation.time_index(5.0) == 20

    @pytest.mark.parametrize("t", [0.1, 5.25, -0.25])
    def test_off_grid_raises(self, flat_rate_simulation: ShortRateSimulation, t: float) -> None:
        """Times off the grid or beyond the horizon are valuation errors."""
        with pytest.raises(ValuationError):
            flat_rate_simulation.numeraire(t)

    def test_seed_reproducible(self, ou_model: OUShortRateModel) -> None:
        """Same seed gives the same paths."""
        a = ShortRateSimulation.generate(ou_model, n_paths=200, seed=7)
        b = ShortRateSimulation.generate(ou_model, n_paths=200, seed=7)
        assert np.allclose(a.short_rate(5.0).realizations, b.short_rate(5.0).realizations)

    def test_invalid_n_paths_raises(self, ou_model: OUShortRateModel) -> None:
        """Invalid n_paths should raise error."""
        with pytest.raises(ConfigurationError):
            ShortRateSimulation.generate(ou_model, n_paths=0)

    def test_shape_mismatch_raises(self) -> None:
        """Rate paths must match the grid."""
        with pytest.raises(ConfigurationError):
            ShortRateSimulation(np.linspace(0, 1, 5), np.zeros((3, 4)))

    def test_from_config(self) -> None:
        """Monthly configuration builds a monthly grid."""
        sim = ShortRateSimulation.from_config(
            SimulationConfig(n_paths=100, horizon_years=1.0, time_step="monthly", currency="EUR"),
            OUModelConfig(kappa=0.1, theta=0.02, sigma=0.01, initial_rate=0.02),
        )
        assert sim.n_paths == 100
        assert sim.currency == "EUR"
        assert len(sim.time_grid) == 13

    def test_from_config_euler(self, ou_model: OUShortRateModel) -> None:
        """The configured scheme reaches the model."""
        config = SimulationConfig(n_paths=100, horizon_years=1.0, scheme="euler", seed=11)
        sim = ShortRateSimulation.from_config(
            config, OUModelConfig(kappa=0.1, theta=0.02, sigma=0.01, initial_rate=0.02)
        )
        direct = ShortRateSimulation.generate(
            ou_model, n_paths=100, horizon=1.0, seed=11, scheme="euler"
        )
        assert np.allclose(sim.short_rate(1.0).realizations, direct.short_rate(1.0).realizations)
