"""
Tests for products module: zero coupon bond and swap pricing.
"""

import numpy as np
import pytest

from simm_core.exceptions import ConfigurationError, ValuationError
from simm_core.montecarlo import ShortRateSimulation
from simm_core.products import InterestRateSwap, ZeroCouponBond


class TestZeroCouponBond:
    """Tests for Zero Coupon Bond."""

    def test_value_at_inception_flat_rate(
        self, flat_rate_simulation: ShortRateSimulation
    ) -> None:
        """Under a flat 2% rate the value is notional × exp(-rT)."""
        bond = ZeroCouponBond(notional=1_000_000, maturity=3.0)
        value = bond.value(0.0, flat_rate_simulation)
        assert np.allclose(value.realizations, 1_000_000 * np.exp(-0.02 * 3.0))

    def test_value_at_maturity_is_notional(
        self, flat_rate_simulation: ShortRateSimulation
    ) -> None:
        """A payment at the evaluation time is still included."""
        bond = ZeroCouponBond(notional=100.0, maturity=3.0)
        assert np.allclose(bond.value(3.0, flat_rate_simulation).realizations, 100.0)

    def test_value_after_maturity_is_zero(
        self, flat_rate_simulation: ShortRateSimulation
    ) -> None:
        """Payments before the evaluation time are excluded."""
        bond = ZeroCouponBond(notional=100.0, maturity=3.0)
        assert bond.value(3.25, flat_rate_simulation).average() == 0.0

    def test_pathwise_value(self, stochastic_simulation: ShortRateSimulation) -> None:
        """Value at t=0 is notional / N(T) on every path."""
        bond = ZeroCouponBond(notional=1.0, maturity=2.0)
        expected = 1.0 / stochastic_simulation.numeraire(2.0).realizations
        assert np.allclose(bond.value(0.0, stochastic_simulation).realizations, expected)

    def test_cashflow_window(self, flat_rate_simulation: ShortRateSimulation) -> None:
        """The notional is paid in (t0, t1] containing maturity only."""
        bond = ZeroCouponBond(notional=100.0, maturity=3.0)
        assert bond.cashflow(2.0, 3.0, flat_rate_simulation).average() == 100.0
        assert bond.cashflow(3.0, 4.0, flat_rate_simulation).average() == 0.0

    def test_currency_mismatch_raises(self, flat_rate_simulation: ShortRateSimulation) -> None:
        """A EUR bond cannot be valued by a USD model."""
        bond = ZeroCouponBond(notional=100.0, maturity=1.0, currency="EUR")
        with pytest.raises(ValuationError):
            bond.value(0.0, flat_rate_simulation)

    def test_invalid_notional_raises(self) -> None:
        """Non-positive notional should raise error."""
        with pytest.raises(ConfigurationError):
            ZeroCouponBond(notional=0.0, maturity=1.0)


class TestInterestRateSwap:
    """Tests for Interest Rate Swap."""

    def test_swap_cash_flow_dates(self, sample_swap: InterestRateSwap) -> None:
        """Test cash flow date generation."""
        dates = sample_swap.get_cash_flow_dates()
        expected = np.array([0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0])
        assert np.allclose(dates, expected)

    def test_stub_period_appended(self) -> None:
        """Maturity is a payment date even off the regular schedule."""
        swap = InterestRateSwap(notional=1.0, fixed_rate=0.01, maturity=1.25, payment_freq=0.5)
        assert np.allclose(swap.get_cash_flow_dates(), [0.5, 1.0, 1.25])

    def test_flat_rate_coupons(self, flat_rate_simulation: ShortRateSimulation) -> None:
        """Floating coupon is the realised accrual exp(r τ) - 1."""
        swap = InterestRateSwap(
            notional=1_000_000, fixed_rate=0.01, maturity=1.0, payment_freq=0.5
        )
        coupon = 1_000_000 * (np.exp(0.02 * 0.5) - 1.0) - 1_000_000 * 0.01 * 0.5
        cashflow = swap.cashflow(0.0, 1.0, flat_rate_simulation)
        assert np.allclose(cashflow.realizations, 2 * coupon)

    def test_value_is_deflated_coupons(
        self, flat_rate_simulation: ShortRateSimulation
    ) -> None:
        """Value at t=0 discounts each coupon at the flat rate."""
        swap = InterestRateSwap(
            notional=1_000_000, fixed_rate=0.01, maturity=1.0, payment_freq=0.5
        )
        coupon = 1_000_000 * (np.exp(0.02 * 0.5) - 1.0) - 1_000_000 * 0.01 * 0.5
        expected = coupon * (np.exp(-0.02 * 0.5) + np.exp(-0.02 * 1.0))
        assert np.allclose(swap.value(0.0, flat_rate_simulation).realizations, expected)

    def test_payer_receiver_opposite_sign(
        self, stochastic_simulation: ShortRateSimulation
    ) -> None:
        """Payer and receiver swaps have opposite values on every path."""
        payer = InterestRateSwap(notional=1e7, fixed_rate=0.02, maturity=5.0, pay_fixed=True)
        receiver = InterestRateSwap(notional=1e7, fixed_rate=0.02, maturity=5.0, pay_fixed=False)

        v_payer = payer.value(1.0, stochastic_simulation).realizations
        v_receiver = receiver.value(1.0, stochastic_simulation).realizations
        assert np.allclose(v_payer, -v_receiver)

    def test_lifetime_cashflow_is_sum_of_windows(
        self, stochastic_simulation: ShortRateSimulation, sample_swap: InterestRateSwap
    ) -> None:
        """Cashflows over adjacent windows add up to the lifetime cashflow."""
        whole = sample_swap.cashflow(0.0, 5.0, stochastic_simulation).realizations
        first = sample_swap.cashflow(0.0, 2.5, stochastic_simulation).realizations
        second = sample_swap.cashflow(2.5, 5.0, stochastic_simulation).realizations
        assert np.allclose(whole, first + second)

    def test_expired_swap_returns_zero(
        self, flat_rate_simulation: ShortRateSimulation, sample_swap: InterestRateSwap
    ) -> None:
        """Nothing is left to value after the last payment."""
        assert sample_swap.value(5.25, flat_rate_simulation).average() == 0.0

    def test_off_grid_payment_raises(self, flat_rate_simulation: ShortRateSimulation) -> None:
        """Payment dates must be simulated times."""
        swap = InterestRateSwap(notional=1.0, fixed_rate=0.01, maturity=1.1)
        with pytest.raises(ValuationError, match="time grid"):
            swap.value(0.0, flat_rate_simulation)

    def test_underlyings(self, sample_swap: InterestRateSwap) -> None:
        """The swap reports its floating index."""
        assert sample_swap.underlyings() == {"USD-OIS"}

    def test_swap_to_dict(self, sample_swap: InterestRateSwap) -> None:
        """Test serialization to dict."""
        d = sample_swap.to_dict()
        assert d["type"] == "IRS"
        assert d["notional"] == 10_000_000
        assert d["currency"] == "USD"

    def test_invalid_maturity_raises(self) -> None:
        """Zero or negative maturity should raise error."""
        with pytest.raises(ConfigurationError):
            InterestRateSwap(notional=1e7, fixed_rate=0.02, maturity=0)

    def test_start_after_maturity_raises(self) -> None:
        """Start must precede maturity."""
        with pytest.raises(ConfigurationError):
            InterestRateSwap(notional=1e7, fixed_rate=0.02, maturity=2.0, start=3.0)
