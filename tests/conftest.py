"""
Pytest fixtures for SIMM core testing.

Provides reusable fixtures for coordinates, simulations, products and
stub products with fixed values.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pytest

from simm_core.coordinates import (
    MarginType,
    ProductClass,
    RiskClass,
    RiskCoordinate,
    Vertex,
)
from simm_core.market import OUShortRateModel
from simm_core.montecarlo import ShortRateSimulation
from simm_core.products import InterestRateSwap, Product, ZeroCouponBond
from simm_core.stochastic import RandomVariable


@dataclass
class OpaqueProduct(Product):
    """Product with fixed value and cashflow that cannot report underlyings."""

    value_amount: float | np.ndarray = 0.0
    cashflow_amount: float | np.ndarray = 0.0
    currency: str = "USD"
    error: Exception | None = None
    calls: list[tuple[str, Any]] = field(default_factory=list)
    models: list[Any] = field(default_factory=list)

    def value(self, evaluation_time: float, model: Any) -> RandomVariable:
        self.calls.append(("value", evaluation_time))
        self.models.append(model)
        if self.error is not None:
            raise self.error
        return RandomVariable(self.value_amount)

    def cashflow(self, initial_time: float, final_time: float, model: Any) -> RandomVariable:
        self.calls.append(("cashflow", (initial_time, final_time)))
        self.models.append(model)
        if self.error is not None:
            raise self.error
        return RandomVariable(self.cashflow_amount)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Opaque", "currency": self.currency}


@dataclass
class StubProduct(OpaqueProduct):
    """Fixed-value product reporting a set of underlyings."""

    names: set[str] | None = None

    def underlyings(self) -> set[str] | None:
        return None if self.names is None else set(self.names)


@pytest.fixture
def make_product() -> Callable[..., StubProduct]:
    """Factory for fixed-value products that report underlyings."""
    return StubProduct


@pytest.fixture
def make_opaque_product() -> Callable[..., OpaqueProduct]:
    """Factory for fixed-value products without the underlyings capability."""
    return OpaqueProduct


@pytest.fixture
def flat_rate_simulation() -> ShortRateSimulation:
    """Deterministic 2% short rate on a 5-year quarterly grid, 10 paths."""
    time_grid = np.linspace(0, 5, 21)
    rates = np.full((10, len(time_grid)), 0.02)
    return ShortRateSimulation(time_grid=time_grid, short_rates=rates, currency="USD")


@pytest.fixture
def ou_model() -> OUShortRateModel:
    """Standard OU short-rate model."""
    return OUShortRateModel(kappa=0.1, theta=0.02, sigma=0.01, r0=0.02)


@pytest.fixture
def stochastic_simulation(ou_model: OUShortRateModel) -> ShortRateSimulation:
    """Seeded 2000-path simulation on a 5-year quarterly grid."""
    return ShortRateSimulation.generate(ou_model, n_paths=2000, horizon=5.0, seed=42)


@pytest.fixture
def sample_swap() -> InterestRateSwap:
    """Sample 5Y payer swap."""
    return InterestRateSwap(
        notional=10_000_000,
        fixed_rate=0.02,
        maturity=5.0,
        pay_fixed=True,
        payment_freq=0.5,
    )


@pytest.fixture
def sample_bond() -> ZeroCouponBond:
    """Sample 3Y zero coupon bond."""
    return ZeroCouponBond(notional=1_000_000, maturity=3.0)


@pytest.fixture
def ir_delta_coordinate() -> RiskCoordinate:
    """5Y USD interest rate delta without a bucket."""
    return RiskCoordinate(
        vertex=Vertex.Y5,
        sub_curve=None,
        qualifier="USD",
        bucket_key=None,
        risk_class=RiskClass.INTEREST_RATE,
        margin_type=MarginType.DELTA,
        product_class=ProductClass.RATES_FX,
    )
