"""
Configuration module for the SIMM core package.

Provides Pydantic-validated configuration models and YAML loading utilities
for simulation parameters, short rate models, and weighted portfolios.
"""

from simm_core.config.loader import (
    build_portfolio,
    build_product,
    create_default_model_config,
    load_config,
    load_portfolio_config,
    load_simulation_config,
)
from simm_core.config.models import (
    InterestRateSwapConfig,
    OUModelConfig,
    PortfolioConfig,
    SimulationConfig,
    TradeConfig,
    ZeroCouponBondConfig,
)

__all__ = [
    # Models
    "OUModelConfig",
    "SimulationConfig",
    "TradeConfig",
    "InterestRateSwapConfig",
    "ZeroCouponBondConfig",
    "PortfolioConfig",
    # Loaders
    "load_config",
    "load_portfolio_config",
    "load_simulation_config",
    "build_portfolio",
    "build_product",
    "create_default_model_config",
]
