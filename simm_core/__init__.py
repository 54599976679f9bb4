"""
SIMM Core - risk coordinates and portfolio valuation.

Risk-factor coordinates for SIMM initial margin aggregation, with the
CRIF to SIMM bucket mapping, and a weighted portfolio of products
valued path-wise under a shared Monte Carlo model.

Example
-------
>>> from simm_core import OUShortRateModel, ShortRateSimulation, InterestRateSwap, Portfolio
>>> sim = ShortRateSimulation.generate(OUShortRateModel(), n_paths=5000, horizon=5.0)
>>> swap = InterestRateSwap(notional=1e7, fixed_rate=0.02, maturity=5.0)
>>> portfolio = Portfolio([swap], [1.0], currency="USD")
>>> value = portfolio.value(0.0, sim).average()
"""

__version__ = "1.0.0"

# Core types
from simm_core._types import CurrencyCode, FloatArray, PathArray

# Errors
from simm_core.exceptions import (
    CapabilityError,
    ConfigurationError,
    SimmCoreError,
    ValuationError,
)

# Coordinates
from simm_core.coordinates import (
    MarginType,
    ProductClass,
    Qualifier,
    RiskClass,
    RiskCoordinate,
    SubCurve,
    Vertex,
)

# Stochastic values
from simm_core.stochastic import RandomVariable, StochasticValue

# Market models and simulation
from simm_core.market import OUShortRateModel
from simm_core.montecarlo import ShortRateSimulation

# Products
from simm_core.products import (
    InterestRateSwap,
    Portfolio,
    Product,
    ReportsUnderlyings,
    ZeroCouponBond,
)

# Configuration
from simm_core.config import PortfolioConfig, SimulationConfig, build_portfolio, load_config

# Reporting
from simm_core.reporting import aggregate_by_bucket, create_sensitivity_table

__all__ = [
    # Version
    "__version__",
    # Types
    "CurrencyCode",
    "FloatArray",
    "PathArray",
    # Errors
    "SimmCoreError",
    "ConfigurationError",
    "CapabilityError",
    "ValuationError",
    # Coordinates
    "RiskCoordinate",
    "Qualifier",
    "Vertex",
    "SubCurve",
    "RiskClass",
    "MarginType",
    "ProductClass",
    # Stochastic
    "RandomVariable",
    "StochasticValue",
    # Market
    "OUShortRateModel",
    "ShortRateSimulation",
    # Products
    "Product",
    "ReportsUnderlyings",
    "ZeroCouponBond",
    "InterestRateSwap",
    "Portfolio",
    # Config
    "SimulationConfig",
    "PortfolioConfig",
    "build_portfolio",
    "load_config",
    # Reporting
    "create_sensitivity_table",
    "aggregate_by_bucket",
]
