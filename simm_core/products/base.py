"""
Base classes for products valued under a Monte Carlo model.

A product is only ever used through this interface: value, cashflow and
currency. Reporting underlyings is an optional capability checked at
runtime.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from simm_core.exceptions import ValuationError
from simm_core.stochastic.random_variable import StochasticValue


@runtime_checkable
class ReportsUnderlyings(Protocol):
    """Capability of naming the market underlyings a product depends on."""

    def underlyings(self) -> set[str] | None:
        """Return the identifiers of the product's underlyings."""
        ...


class Product(ABC):
    """
    Abstract base class for all products.

    Attributes
    ----------
    currency : str | None
        Currency in which the product's value is expressed

    Methods
    -------
    value(evaluation_time, model)
        Value of the product observed at evaluation_time, path-wise
    cashflow(initial_time, final_time, model)
        Cashflows paid in (initial_time, final_time], path-wise
    """

    currency: str | None

    @abstractmethod
    def value(self, evaluation_time: float, model: Any) -> StochasticValue:
        """
        Value of the product at ``evaluation_time``.

        Cashflows paid strictly before ``evaluation_time`` are not included.
        For a Monte Carlo model this is the path-wise sum of cashflows
        deflated to evaluation time.

        Parameters
        ----------
        evaluation_time : float
            Time in years at which the value is observed
        model : Any
            Simulation model used for pricing

        Returns
        -------
        StochasticValue
            Value on every path

        Raises
        ------
        ValuationError
            If the model cannot price the product
        """

    @abstractmethod
    def cashflow(
        self, initial_time: float, final_time: float, model: Any
    ) -> StochasticValue:
        """
        Cashflows paid in the interval (initial_time, final_time].

        Parameters
        ----------
        initial_time : float
            Interval start in years (exclusive)
        final_time : float
            Interval end in years (inclusive)
        model : Any
            Simulation model used for pricing

        Returns
        -------
        StochasticValue
            Undiscounted sum of cashflows on every path
        """

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """
        Convert product to dictionary for serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary representation of the product
        """

    def _check_model_currency(self, model: Any) -> None:
        """Reject models simulating another currency."""
        model_currency = getattr(model, "currency", None)
        if model_currency is not None and model_currency != self.currency:
            raise ValuationError(
                f"{self.__class__.__name__} in {self.currency} cannot be valued "
                f"by a model in {model_currency}"
            )
