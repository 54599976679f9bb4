"""
Reporting module for sensitivity and portfolio tables.

Provides DataFrame builders keyed by risk coordinates and a per-position
portfolio valuation summary.
"""

from simm_core.reporting.tables import (
    aggregate_by_bucket,
    create_portfolio_summary_table,
    create_sensitivity_table,
)

__all__ = [
    "create_sensitivity_table",
    "aggregate_by_bucket",
    "create_portfolio_summary_table",
]
