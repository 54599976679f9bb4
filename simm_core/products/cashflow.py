"""
Zero coupon bond: a single fixed payment at maturity.
"""

from dataclasses import dataclass
from typing import Any

from simm_core.exceptions import ConfigurationError
from simm_core.montecarlo.simulation import ShortRateSimulation
from simm_core.products.base import Product
from simm_core.stochastic.random_variable import RandomVariable


@dataclass
class ZeroCouponBond(Product):
    """
    Pays ``notional`` in ``currency`` at ``maturity``.

    Value at t <= T is notional × N(t) / N(T), path-wise.

    Attributes
    ----------
    notional : float
        Amount paid at maturity
    maturity : float
        Payment time in years
    currency : str
        Payment currency
    curve : str
        Discount curve name reported as underlying

    Example
    -------
    >>> bond = ZeroCouponBond(notional=1_000_000, maturity=2.0)
    >>> bond.underlyings()
    {'USD-OIS'}
    """

    notional: float
    maturity: float
    currency: str = "USD"
    curve: str = "OIS"

    def __post_init__(self) -> None:
        """Validate bond parameters."""
        if self.notional <= 0:
            raise ConfigurationError(f"Notional must be positive, got {self.notional}")
        if self.maturity <= 0:
            raise ConfigurationError(f"Maturity must be positive, got {self.maturity}")

    def underlyings(self) -> set[str]:
        """Discount curve the bond depends on."""
        return {f"{self.currency}-{self.curve}"}

    def value(self, evaluation_time: float, model: ShortRateSimulation) -> RandomVariable:
        """Deflated payment if it is not yet paid, zero otherwise."""
        if self.maturity < evaluation_time:
            return RandomVariable.constant(0.0)
        self._check_model_currency(model)

        deflator = model.numeraire(evaluation_time) / model.numeraire(self.maturity)
        return deflator.scale(self.notional)

    def cashflow(
        self, initial_time: float, final_time: float, model: ShortRateSimulation
    ) -> RandomVariable:
        """Notional if maturity falls in (initial_time, final_time]."""
        self._check_model_currency(model)
        if initial_time < self.maturity <= final_time:
            return RandomVariable.constant(self.notional)
        return RandomVariable.constant(0.0)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": "ZCB",
            "notional": self.notional,
            "maturity": self.maturity,
            "currency": self.currency,
            "curve": self.curve,
        }

    @classmethod
    def from_config(cls, config: "ZeroCouponBondConfig") -> "ZeroCouponBond":  # noqa: F821
        """Create bond from configuration."""
        return cls(
            notional=config.notional,
            maturity=config.maturity_years,
            currency=config.currency,
            curve=config.curve,
        )
