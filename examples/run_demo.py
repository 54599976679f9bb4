#!/usr/bin/env python3
"""
SIMM Core - Demo Script

This script demonstrates the complete workflow:
1. Define a weighted portfolio of swaps and bonds
2. Run a Monte Carlo short rate simulation
3. Value the portfolio and its cashflows path-wise
4. Key interest rate sensitivities by risk coordinate
5. Aggregate sensitivities in the CRIF and SIMM bucket views

Usage:
    python examples/run_demo.py
"""

import logging

from simm_core import (
    InterestRateSwap,
    MarginType,
    OUShortRateModel,
    Portfolio,
    ProductClass,
    RiskClass,
    RiskCoordinate,
    ShortRateSimulation,
    SubCurve,
    Vertex,
    ZeroCouponBond,
)
from simm_core.reporting import (
    aggregate_by_bucket,
    create_portfolio_summary_table,
    create_sensitivity_table,
)

BUMP = 1e-4


def bucket_delta(portfolio: Portfolio, model: OUShortRateModel, seed: int) -> float:
    """Parallel 1bp delta of the portfolio's mean value at t=0."""
    base = ShortRateSimulation.generate(model, n_paths=5000, horizon=5.0, seed=seed)
    bumped_model = OUShortRateModel(
        kappa=model.kappa,
        theta=model.theta + BUMP,
        sigma=model.sigma,
        r0=model.r0 + BUMP,
    )
    bumped = ShortRateSimulation.generate(bumped_model, n_paths=5000, horizon=5.0, seed=seed)
    return portfolio.value(0.0, bumped).average() - portfolio.value(0.0, base).average()


def main() -> None:
    """Run the SIMM core demo."""
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("SIMM Core - Demo")
    print("=" * 60)
    print()

    # =========================================================================
    # 1. Define Portfolio
    # =========================================================================
    print("1. Defining portfolio...")

    two_year = Portfolio(
        [
            InterestRateSwap(notional=10_000_000, fixed_rate=0.025, maturity=2.0),
            ZeroCouponBond(notional=5_000_000, maturity=2.0),
        ],
        [1.0, -1.0],
        currency="USD",
    )
    five_year = Portfolio(
        [
            InterestRateSwap(notional=15_000_000, fixed_rate=0.020, maturity=5.0, pay_fixed=False),
        ],
        [1.0],
        currency="USD",
        initial_lifetime=5.0,
    )
    portfolio = Portfolio([two_year, five_year], [1.0, 0.5], currency="USD")
    print(f"   Underlyings: {sorted(portfolio.underlyings())}")
    print()

    # =========================================================================
    # 2. Simulate
    # =========================================================================
    print("2. Running Monte Carlo simulation...")

    model = OUShortRateModel(kappa=0.10, theta=0.02, sigma=0.01, r0=0.02)
    simulation = ShortRateSimulation.generate(model, n_paths=5000, horizon=5.0, seed=42)
    print(f"   {simulation}")
    print()

    # =========================================================================
    # 3. Value
    # =========================================================================
    print("3. Valuing portfolio...")

    value = portfolio.value(0.0, simulation)
    cashflow = portfolio.cashflow(0.0, 1.0, simulation)
    print(f"   Mean value at t=0:        {value.average():>15,.0f}")
    print(f"   Mean cashflow in (0, 1Y]: {cashflow.average():>15,.0f}")
    print()
    print(create_portfolio_summary_table(portfolio, simulation).to_string(index=False))
    print()

    # =========================================================================
    # 4. Sensitivities by risk coordinate
    # =========================================================================
    print("4. Computing bucketed interest rate delta...")

    sensitivities = {
        RiskCoordinate(
            Vertex.Y2, SubCurve.OIS, "USD", None,
            RiskClass.INTEREST_RATE, MarginType.DELTA, ProductClass.RATES_FX,
        ): bucket_delta(two_year, model, seed=42),
        RiskCoordinate(
            Vertex.Y5, SubCurve.OIS, "USD", None,
            RiskClass.INTEREST_RATE, MarginType.DELTA, ProductClass.RATES_FX,
        ): 0.5 * bucket_delta(five_year, model, seed=42),
    }
    print(create_sensitivity_table(sensitivities).to_string(index=False))
    print()

    # =========================================================================
    # 5. Aggregate
    # =========================================================================
    print("5. Aggregating by bucket...")
    print("   CRIF view:")
    print(aggregate_by_bucket(sensitivities, view="crif").to_string(index=False))
    print("   SIMM view:")
    print(aggregate_by_bucket(sensitivities, view="simm").to_string(index=False))


if __name__ == "__main__":
    main()
