"""
YAML configuration loading utilities.

Provides functions to load and validate configuration from YAML files,
returning properly typed Pydantic model instances, and to build the
corresponding model and portfolio objects.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from simm_core.config.models import (
    InterestRateSwapConfig,
    OUModelConfig,
    PortfolioConfig,
    SimulationConfig,
    ZeroCouponBondConfig,
)
from simm_core.products.base import Product
from simm_core.products.cashflow import ZeroCouponBond
from simm_core.products.portfolio import Portfolio
from simm_core.products.swap import InterestRateSwap

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """
    Load a YAML file and return its contents as a dictionary.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    yaml.YAMLError
        If the file contains invalid YAML
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_portfolio_config(path: Path | str) -> PortfolioConfig:
    """
    Load portfolio configuration from a YAML file.

    Parameters
    ----------
    path : Path | str
        Path to the portfolio configuration YAML file

    Returns
    -------
    PortfolioConfig
        Validated portfolio configuration

    Example
    -------
    >>> portfolio = load_portfolio_config("data/portfolio.yaml")
    >>> print(f"Loaded {portfolio.n_trades} trades")
    """
    path = Path(path)
    data = _load_yaml(path)

    # Handle nested 'portfolio' key if present
    if "portfolio" in data:
        data = data["portfolio"]

    config = PortfolioConfig(**data)
    logger.debug("Loaded %d trades from %s", config.n_trades, path)
    return config


def load_simulation_config(path: Path | str) -> tuple[SimulationConfig, OUModelConfig]:
    """
    Load simulation and short rate model settings from one YAML file.

    The file holds a ``simulation`` section and a ``model`` section; a
    missing section falls back to defaults.
    """
    data = _load_yaml(Path(path))

    simulation = SimulationConfig(**data.get("simulation", {}))
    if "model" in data:
        model = OUModelConfig(**data["model"])
    else:
        model = create_default_model_config()
    return simulation, model


def load_config(
    portfolio_path: Path | str | None = None,
    simulation_path: Path | str | None = None,
) -> dict[str, Any]:
    """
    Load complete configuration from YAML files.

    Parameters
    ----------
    portfolio_path : Path | str | None
        Path to portfolio configuration file
    simulation_path : Path | str | None
        Path to simulation configuration file

    Returns
    -------
    dict[str, Any]
        Dictionary containing:
        - 'portfolio': PortfolioConfig (if portfolio_path provided)
        - 'simulation': SimulationConfig (if simulation_path provided)
        - 'model': OUModelConfig (if simulation_path provided)
    """
    result: dict[str, Any] = {}

    if portfolio_path is not None:
        result["portfolio"] = load_portfolio_config(portfolio_path)

    if simulation_path is not None:
        result["simulation"], result["model"] = load_simulation_config(simulation_path)

    return result


def build_product(config: InterestRateSwapConfig | ZeroCouponBondConfig) -> Product:
    """Create the product described by a trade configuration."""
    if isinstance(config, InterestRateSwapConfig):
        return InterestRateSwap.from_config(config)
    return ZeroCouponBond.from_config(config)


def build_portfolio(config: PortfolioConfig) -> Portfolio:
    """
    Create a portfolio from configuration.

    Raises
    ------
    ConfigurationError
        If the trades are not all in the configured currency
    """
    products = [build_product(trade) for trade in config.trades]
    weights = [trade.weight for trade in config.trades]
    return Portfolio(
        products,
        weights,
        currency=config.currency,
        initial_lifetime=config.initial_lifetime,
    )


def create_default_model_config() -> OUModelConfig:
    """
    Create a default short rate model configuration with typical values.

    Returns
    -------
    OUModelConfig
        Default model configuration suitable for testing
    """
    return OUModelConfig(
        kappa=0.10,
        theta=0.02,
        sigma=0.01,
        initial_rate=0.02,
    )
