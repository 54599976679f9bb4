"""
Products valued path-wise under a Monte Carlo model.

Provides:
- The ``Product`` interface and the optional ``ReportsUnderlyings`` capability
- Zero coupon bonds and interest rate swaps
- ``Portfolio``, a weighted aggregate of products
"""

from simm_core.products.base import Product, ReportsUnderlyings
from simm_core.products.cashflow import ZeroCouponBond
from simm_core.products.portfolio import Portfolio
from simm_core.products.swap import InterestRateSwap

__all__ = [
    "Product",
    "ReportsUnderlyings",
    "ZeroCouponBond",
    "InterestRateSwap",
    "Portfolio",
]
