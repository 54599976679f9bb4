"""
Closed taxonomy enumerations used to classify SIMM risk factors.

Each axis parses from its exact member name, which is the vocabulary
used by persisted risk-input records.
"""

from enum import Enum
from typing import TypeVar

from simm_core.exceptions import ConfigurationError

E = TypeVar("E", bound=Enum)


def parse_member(enum_cls: type[E], name: str) -> E:
    """
    Look up an enumeration member by its exact name.

    Parameters
    ----------
    enum_cls : type[Enum]
        Enumeration to search
    name : str
        Member name, e.g. 'INTEREST_RATE'

    Returns
    -------
    Enum
        The matching member

    Raises
    ------
    ConfigurationError
        If ``name`` is not a member name of ``enum_cls``
    """
    try:
        return enum_cls[name]
    except (KeyError, TypeError):
        valid = ", ".join(enum_cls.__members__)
        raise ConfigurationError(
            f"Invalid {enum_cls.__name__} {name!r}; expected one of: {valid}"
        ) from None


class RiskClass(Enum):
    """SIMM risk classes."""

    INTEREST_RATE = "InterestRate"
    CREDIT_QUALIFYING = "CreditQualifying"
    CREDIT_NON_QUALIFYING = "CreditNonQualifying"
    EQUITY = "Equity"
    COMMODITY = "Commodity"
    FX = "FX"

    @classmethod
    def parse(cls, name: str) -> "RiskClass":
        """Parse from the exact member name."""
        return parse_member(cls, name)


class MarginType(Enum):
    """Margin components computed per risk class."""

    DELTA = "Delta"
    VEGA = "Vega"
    CURVATURE = "Curvature"
    BASE_CORRELATION = "BaseCorr"

    @classmethod
    def parse(cls, name: str) -> "MarginType":
        """Parse from the exact member name."""
        return parse_member(cls, name)


class ProductClass(Enum):
    """SIMM product classes. Margin is aggregated per product class first."""

    RATES_FX = "RatesFX"
    CREDIT = "Credit"
    EQUITY = "Equity"
    COMMODITY = "Commodity"

    @classmethod
    def parse(cls, name: str) -> "ProductClass":
        """Parse from the exact member name."""
        return parse_member(cls, name)


class SubCurve(Enum):
    """
    Interest-rate sub-curves as labelled in CRIF (label2).

    Only meaningful for the interest-rate risk class.
    """

    OIS = "OIS"
    LIBOR1M = "Libor1m"
    LIBOR3M = "Libor3m"
    LIBOR6M = "Libor6m"
    LIBOR12M = "Libor12m"
    PRIME = "Prime"
    MUNICIPAL = "Municipal"

    @classmethod
    def parse(cls, name: str) -> "SubCurve":
        """Parse from the exact member name."""
        return parse_member(cls, name)
