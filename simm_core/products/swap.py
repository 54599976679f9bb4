"""
Interest Rate Swap priced path-wise under the short rate simulation.

The floating leg pays the realised bank-account return over each
accrual period, the fixed leg pays a fixed coupon.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from simm_core._types import FloatArray
from simm_core.exceptions import ConfigurationError
from simm_core.montecarlo.simulation import ShortRateSimulation
from simm_core.products.base import Product
from simm_core.stochastic.random_variable import RandomVariable


@dataclass
class InterestRateSwap(Product):
    """
    Interest Rate Swap.

    A payer swap pays fixed and receives floating.
    A receiver swap receives fixed and pays floating.

    Coupons paid at Tᵢ for the accrual period [Tᵢ₋₁, Tᵢ]:
    - Fixed: N × K × τᵢ
    - Float: N × [N(Tᵢ) / N(Tᵢ₋₁) - 1]

    where:
        N = notional
        K = fixed rate
        τᵢ = Tᵢ - Tᵢ₋₁
        N(t) = bank-account numeraire

    Attributes
    ----------
    notional : float
        Notional amount
    fixed_rate : float
        Fixed coupon rate (decimal, e.g., 0.02 for 2%)
    maturity : float
        Swap maturity in years
    pay_fixed : bool
        True for payer swap (pay fixed, receive float)
    payment_freq : float
        Payment frequency in years (0.5 = semi-annual)
    start : float
        Swap start date in years (default 0)
    currency : str
        Swap currency
    index : str
        Floating rate index reported as underlying

    Example
    -------
    >>> swap = InterestRateSwap(
    ...     notional=10_000_000,
    ...     fixed_rate=0.02,
    ...     maturity=5.0,
    ...     pay_fixed=True
    ... )
    >>> value = swap.value(0.0, simulation)  # doctest: +SKIP
    """

    notional: float
    fixed_rate: float
    maturity: float
    pay_fixed: bool = True
    payment_freq: float = 0.5
    start: float = 0.0
    currency: str = "USD"
    index: str = "OIS"

    def __post_init__(self) -> None:
        """Validate swap parameters."""
        if self.notional <= 0:
            raise ConfigurationError(f"Notional must be positive, got {self.notional}")
        if self.maturity <= 0:
            raise ConfigurationError(f"Maturity must be positive, got {self.maturity}")
        if self.payment_freq <= 0 or self.payment_freq > 1:
            raise ConfigurationError(
                f"Payment frequency must be in (0, 1], got {self.payment_freq}"
            )
        if self.start < 0:
            raise ConfigurationError(f"Start date must be non-negative, got {self.start}")
        if self.start >= self.maturity:
            raise ConfigurationError(
                f"Start ({self.start}) must be before maturity ({self.maturity})"
            )

    def underlyings(self) -> set[str]:
        """Floating rate index the swap depends on."""
        return {f"{self.currency}-{self.index}"}

    def get_cash_flow_dates(self) -> FloatArray:
        """
        Get payment dates for the swap.

        Returns
        -------
        FloatArray
            Array of payment dates from start to maturity
        """
        n_payments = int(round((self.maturity - self.start) / self.payment_freq, 10))
        dates = self.start + np.arange(1, n_payments + 1) * self.payment_freq
        # Ensure maturity is included
        if len(dates) == 0 or dates[-1] < self.maturity - 1e-10:
            dates = np.append(dates, self.maturity)
        return dates

    def _accrual_periods(self) -> list[tuple[float, float]]:
        dates = self.get_cash_flow_dates()
        starts = np.concatenate([[self.start], dates[:-1]])
        return [(float(s), float(e)) for s, e in zip(starts, dates)]

    def _coupon(
        self, period_start: float, payment_date: float, model: ShortRateSimulation
    ) -> RandomVariable:
        """Net coupon paid at ``payment_date`` from our perspective."""
        growth = model.numeraire(payment_date) / model.numeraire(period_start)
        floating = (growth - 1.0).scale(self.notional)
        fixed = self.notional * self.fixed_rate * (payment_date - period_start)

        if self.pay_fixed:
            return floating - fixed
        return -floating + fixed

    def value(self, evaluation_time: float, model: ShortRateSimulation) -> RandomVariable:
        """
        Path-wise value of the remaining coupons.

        Coupons paid at or after ``evaluation_time`` are deflated with
        N(t) / N(Tᵢ) and summed.
        """
        remaining = [
            (start, end)
            for start, end in self._accrual_periods()
            if end >= evaluation_time
        ]
        if not remaining:
            return RandomVariable.constant(0.0)
        self._check_model_currency(model)

        numeraire_now = model.numeraire(evaluation_time)
        total = RandomVariable.constant(0.0)
        for start, end in remaining:
            coupon = self._coupon(start, end, model)
            total = total + coupon * numeraire_now / model.numeraire(end)
        return total

    def cashflow(
        self, initial_time: float, final_time: float, model: ShortRateSimulation
    ) -> RandomVariable:
        """Undiscounted net coupons paid in (initial_time, final_time]."""
        self._check_model_currency(model)

        total = RandomVariable.constant(0.0)
        for start, end in self._accrual_periods():
            if initial_time < end <= final_time:
                total = total + self._coupon(start, end, model)
        return total

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": "IRS",
            "notional": self.notional,
            "fixed_rate": self.fixed_rate,
            "maturity": self.maturity,
            "pay_fixed": self.pay_fixed,
            "payment_freq": self.payment_freq,
            "start": self.start,
            "currency": self.currency,
            "index": self.index,
        }

    @classmethod
    def from_config(cls, config: "InterestRateSwapConfig") -> "InterestRateSwap":  # noqa: F821
        """
        Create swap from configuration.

        Parameters
        ----------
        config : InterestRateSwapConfig
            Swap configuration

        Returns
        -------
        InterestRateSwap
            Configured swap instance
        """
        return cls(
            notional=config.notional,
            fixed_rate=config.fixed_rate,
            maturity=config.maturity_years,
            pay_fixed=config.pay_fixed,
            payment_freq=config.payment_frequency,
            start=config.start_years,
            currency=config.currency,
            index=config.index,
        )
