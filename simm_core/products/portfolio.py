"""
Weighted portfolio of products valued under a shared model.

The value of the portfolio is

    Σᵢ weightᵢ × productᵢ

accumulated in list order. Products are accessed through the ``Product``
interface only, so portfolios may contain other portfolios.
"""

import logging
import warnings
from collections.abc import Sequence
from typing import Any

import numpy as np

from simm_core._types import CurrencyCode, FloatArray
from simm_core.exceptions import CapabilityError, ConfigurationError
from simm_core.products.base import Product, ReportsUnderlyings
from simm_core.stochastic.random_variable import RandomVariable, StochasticValue

logger = logging.getLogger(__name__)


class Portfolio(Product):
    """
    Portfolio of products scaled by weights.

    Currency conversion is not supported: if a currency is given, every
    product must be in that currency. Without one, the portfolio reports
    the currency of its first product.

    Parameters
    ----------
    products : Sequence[Product]
        Products in the portfolio
    weights : Sequence[float]
        One weight per product; negative weights are short positions
    currency : str | None
        Reporting currency, validated against every product
    initial_lifetime : float
        Advisory lifetime in years; not used in valuation

    Raises
    ------
    ConfigurationError
        If lengths differ or a product is not in the given currency

    Example
    -------
    >>> portfolio = Portfolio([swap, bond], [1.0, -0.5], currency="USD")
    >>> value = portfolio.value(0.0, simulation)  # doctest: +SKIP
    """

    def __init__(
        self,
        products: Sequence[Product],
        weights: Sequence[float],
        currency: CurrencyCode | None = None,
        initial_lifetime: float = 0.0,
    ) -> None:
        if len(products) != len(weights):
            raise ConfigurationError(
                f"Got {len(products)} products but {len(weights)} weights"
            )

        if currency is not None:
            for product in products:
                if product.currency != currency:
                    raise ConfigurationError(
                        f"Product currency {product.currency} does not match "
                        f"portfolio currency {currency}; currency conversion is "
                        "not supported"
                    )

        self._products: tuple[Product, ...] = tuple(products)
        self._weights: tuple[float, ...] = tuple(float(w) for w in weights)
        self._declared_currency = currency
        self._initial_lifetime = float(initial_lifetime)

        logger.debug(
            "Created portfolio of %d products (currency=%s)",
            len(self._products),
            self.currency,
        )

    @classmethod
    def single(cls, product: Product, weight: float) -> "Portfolio":
        """Portfolio holding one product, in that product's currency."""
        return cls([product], [weight], currency=product.currency)

    @property
    def currency(self) -> CurrencyCode | None:  # type: ignore[override]
        """Currency of the first product, ``None`` for an empty portfolio."""
        if not self._products:
            return None
        return self._products[0].currency

    @property
    def products(self) -> list[Product]:
        """Copy of the product list."""
        return list(self._products)

    @property
    def weights(self) -> FloatArray:
        """Copy of the weights."""
        return np.array(self._weights, dtype=np.float64)

    @property
    def initial_lifetime(self) -> float:
        """Advisory lifetime in years."""
        return self._initial_lifetime

    def __len__(self) -> int:
        return len(self._products)

    def underlyings(self) -> set[str]:
        """
        Union of the underlyings of all products.

        Raises
        ------
        CapabilityError
            If a product cannot report its underlyings
        """
        names: set[str] = set()
        for product in self._products:
            if not isinstance(product, ReportsUnderlyings):
                raise CapabilityError(
                    f"{type(product).__name__} cannot be queried for underlyings"
                )
            product_names = product.underlyings()
            if product_names:
                names.update(product_names)
        return names

    def value(self, evaluation_time: float, model: Any) -> StochasticValue:
        """
        Weighted sum of product values at ``evaluation_time``.

        Each product is valued once, in list order. Exclusion of cashflows
        before ``evaluation_time`` is left to the products.

        Parameters
        ----------
        evaluation_time : float
            Time in years at which the value is observed
        model : Any
            Simulation model passed unchanged to every product

        Returns
        -------
        StochasticValue
            Portfolio value on every path
        """
        values: StochasticValue = RandomVariable.constant(0.0)
        for product, weight in zip(self._products, self._weights):
            values = product.value(evaluation_time, model).scale(weight).add(values)
        return values

    def cashflow(self, initial_time: float, final_time: float, model: Any) -> StochasticValue:
        """Weighted sum of product cashflows in (initial_time, final_time]."""
        cashflows: StochasticValue = RandomVariable.constant(0.0)
        for product, weight in zip(self._products, self._weights):
            cashflows = (
                product.cashflow(initial_time, final_time, model)
                .scale(weight)
                .add(cashflows)
            )
        return cashflows

    def value_at_fixing(
        self, evaluation_time: float, fixing_date: float, model: Any
    ) -> StochasticValue | None:
        """
        Value conditional on a fixing date.

        Not supported: always returns ``None``. Callers must not treat the
        result as a value.
        """
        warnings.warn(
            "Portfolio.value_at_fixing is not supported and returns None",
            RuntimeWarning,
            stacklevel=2,
        )
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": "Portfolio",
            "currency": self._declared_currency,
            "initial_lifetime": self._initial_lifetime,
            "products": [
                {"weight": weight, "product": product.to_dict()}
                for product, weight in zip(self._products, self._weights)
            ],
        }

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"{self.__class__.__name__}("
            f"n_products={len(self._products)}, "
            f"currency={self.currency})"
        )
