"""
Market models for Monte Carlo valuation.

Provides the Ornstein-Uhlenbeck short-rate model and the bank-account
numeraire built from its paths.
"""

from simm_core.market.ir_model import OUShortRateModel, build_numeraire_from_path

__all__ = [
    "OUShortRateModel",
    "build_numeraire_from_path",
]
