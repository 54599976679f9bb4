"""
Table generation utilities for sensitivity and portfolio reporting.

Creates pandas DataFrames keyed by risk coordinates, with both the
CRIF and the SIMM view of each bucket.
"""

from collections.abc import Mapping
from typing import Any, Literal

import numpy as np
import pandas as pd

from simm_core.coordinates.coordinate import RiskCoordinate
from simm_core.products.portfolio import Portfolio

SENSITIVITY_COLUMNS = [
    "risk_class",
    "margin_type",
    "product_class",
    "qualifier",
    "vertex",
    "sub_curve",
    "crif_bucket",
    "simm_bucket",
    "amount",
]


def _name(member: Any) -> str | None:
    return None if member is None else member.name


def create_sensitivity_table(
    sensitivities: Mapping[RiskCoordinate, float],
) -> pd.DataFrame:
    """
    Create one row per risk coordinate.

    Parameters
    ----------
    sensitivities : Mapping[RiskCoordinate, float]
        Sensitivity amount per coordinate

    Returns
    -------
    pd.DataFrame
        Table with the coordinate axes, both bucket views and the amount
    """
    rows = [
        {
            "risk_class": coordinate.risk_class.name,
            "margin_type": coordinate.margin_type.name,
            "product_class": coordinate.product_class.name,
            "qualifier": str(coordinate.qualifier),
            "vertex": None if coordinate.vertex is None else str(coordinate.vertex),
            "sub_curve": _name(coordinate.sub_curve),
            "crif_bucket": coordinate.crif_bucket,
            "simm_bucket": coordinate.simm_bucket,
            "amount": float(amount),
        }
        for coordinate, amount in sensitivities.items()
    ]
    return pd.DataFrame(rows, columns=SENSITIVITY_COLUMNS)


def aggregate_by_bucket(
    sensitivities: Mapping[RiskCoordinate, float],
    view: Literal["simm", "crif"] = "simm",
) -> pd.DataFrame:
    """
    Net sensitivities per risk class, margin type and bucket.

    Parameters
    ----------
    sensitivities : Mapping[RiskCoordinate, float]
        Sensitivity amount per coordinate
    view : str
        'simm' groups interest rate risk by currency, 'crif' by the
        record bucket

    Returns
    -------
    pd.DataFrame
        Columns risk_class, margin_type, bucket, amount
    """
    if view not in ("simm", "crif"):
        raise ValueError(f"View must be 'simm' or 'crif', got {view}")

    table = create_sensitivity_table(sensitivities)
    bucket_column = f"{view}_bucket"
    grouped = (
        table.rename(columns={bucket_column: "bucket"})
        .groupby(["risk_class", "margin_type", "bucket"], dropna=False, sort=True)[
            "amount"
        ]
        .sum()
        .reset_index()
    )
    return grouped


def create_portfolio_summary_table(
    portfolio: Portfolio,
    model: Any,
    evaluation_time: float = 0.0,
) -> pd.DataFrame:
    """
    Summarise each position of a portfolio and the total.

    Parameters
    ----------
    portfolio : Portfolio
        Portfolio to report
    model : Any
        Simulation model used for valuation
    evaluation_time : float
        Time in years at which values are observed

    Returns
    -------
    pd.DataFrame
        Product, currency, weight, mean value and weighted mean value
    """
    rows = []
    for product, weight in zip(portfolio.products, portfolio.weights):
        mean_value = product.value(evaluation_time, model).average()
        rows.append(
            {
                "Product": type(product).__name__,
                "Currency": product.currency,
                "Weight": weight,
                "Mean Value": mean_value,
                "Weighted Value": weight * mean_value,
            }
        )

    rows.append(
        {
            "Product": "Total",
            "Currency": portfolio.currency,
            "Weight": np.nan,
            "Mean Value": np.nan,
            "Weighted Value": portfolio.value(evaluation_time, model).average(),
        }
    )
    return pd.DataFrame(rows)
