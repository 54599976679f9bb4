"""
Monte Carlo simulation model used to price products path-wise.
"""

from simm_core.montecarlo.simulation import ShortRateSimulation

__all__ = [
    "ShortRateSimulation",
]
