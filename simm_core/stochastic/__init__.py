"""
Stochastic value types for Monte Carlo valuation.
"""

from simm_core.stochastic.random_variable import RandomVariable, StochasticValue

__all__ = [
    "RandomVariable",
    "StochasticValue",
]
