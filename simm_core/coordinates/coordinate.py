"""
Risk coordinates: the key under which sensitivities are aggregated.

A coordinate classifies a sensitivity along every SIMM taxonomy axis
and translates between the bucket numbering used in CRIF records and
the grouping used by margin aggregation.
"""

import warnings
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from simm_core.coordinates.qualifier import Qualifier
from simm_core.coordinates.taxonomy import MarginType, ProductClass, RiskClass, SubCurve
from simm_core.coordinates.vertex import Vertex, parse_crif_tenor
from simm_core.exceptions import ConfigurationError

# CRIF leaves the bucket of interest rate sensitivities empty
DEFAULT_INTEREST_RATE_CRIF_BUCKET = "1"

_REQUIRED_AXES = (
    ("risk_class", RiskClass),
    ("margin_type", MarginType),
    ("product_class", ProductClass),
)


def _coerce(enum_cls: type[Enum], value: Any, field_name: str) -> Enum:
    """Parse a string into ``enum_cls``; reject every other non-member."""
    if isinstance(value, str):
        return enum_cls.parse(value)  # type: ignore[attr-defined]
    raise ConfigurationError(
        f"{field_name} must be a {enum_cls.__name__}, got {value!r}"
    )


@dataclass(frozen=True)
class RiskCoordinate:
    """
    Immutable, hashable classification of a sensitivity.

    Two coordinates are equal when all seven axes are equal. Absent
    optional axes (``None``) compare equal only to other absent values.
    String arguments are parsed into their typed form (member names for
    the taxonomy axes, tenor strings for the vertex); any other value of
    the wrong type raises ``ConfigurationError``.

    Attributes
    ----------
    vertex : Vertex | None
        Tenor point; absent for risk types without a term structure
    sub_curve : SubCurve | None
        Interest rate sub-curve; absent for other risk classes
    qualifier : Qualifier
        Currency, currency pair, ISIN, commodity name, ...
    bucket_key : str | None
        Raw bucket as found in the risk input record
    risk_class : RiskClass
        SIMM risk class
    margin_type : MarginType
        Delta, vega, curvature or base correlation
    product_class : ProductClass
        SIMM product class

    Example
    -------
    >>> c = RiskCoordinate(Vertex.Y5, None, "EUR", None,
    ...                    RiskClass.INTEREST_RATE, MarginType.DELTA,
    ...                    ProductClass.RATES_FX)
    >>> c.crif_bucket, c.simm_bucket
    ('1', 'EUR')
    """

    vertex: Vertex | None
    sub_curve: SubCurve | None
    qualifier: Qualifier
    bucket_key: str | None
    risk_class: RiskClass
    margin_type: MarginType
    product_class: ProductClass

    def __post_init__(self) -> None:
        if isinstance(self.qualifier, str):
            object.__setattr__(self, "qualifier", Qualifier(self.qualifier))
        elif not isinstance(self.qualifier, Qualifier):
            raise ConfigurationError(
                f"qualifier must be a Qualifier or str, got {self.qualifier!r}"
            )

        if self.vertex is not None and not isinstance(self.vertex, Vertex):
            object.__setattr__(self, "vertex", _coerce(Vertex, self.vertex, "vertex"))
        if self.sub_curve is not None and not isinstance(self.sub_curve, SubCurve):
            object.__setattr__(
                self, "sub_curve", _coerce(SubCurve, self.sub_curve, "sub_curve")
            )
        for name, enum_cls in _REQUIRED_AXES:
            value = getattr(self, name)
            if not isinstance(value, enum_cls):
                object.__setattr__(self, name, _coerce(enum_cls, value, name))

        if self.bucket_key is not None and not isinstance(self.bucket_key, str):
            raise ConfigurationError(
                f"bucket_key must be a str or None, got {self.bucket_key!r}"
            )

    @property
    def risk_type(self) -> MarginType:
        """Margin type under its CRIF name."""
        return self.margin_type

    @property
    def crif_bucket(self) -> str | None:
        """
        Bucket as numbered in CRIF records.

        Interest rate records without a bucket belong to bucket ``"1"``.
        """
        if self.risk_class is RiskClass.INTEREST_RATE and self.bucket_key is None:
            return DEFAULT_INTEREST_RATE_CRIF_BUCKET
        return self.bucket_key

    @property
    def simm_bucket(self) -> str | None:
        """
        Bucket as grouped by SIMM aggregation.

        Interest rate risk is bucketed by currency, so the bucket is read
        from the qualifier and the raw bucket key is ignored.
        """
        if self.risk_class is RiskClass.INTEREST_RATE:
            return self.qualifier.currency
        return self.bucket_key

    def with_sub_curve(self, sub_curve: SubCurve | None) -> "RiskCoordinate":
        """Return a copy of this coordinate on another sub-curve."""
        return replace(self, sub_curve=sub_curve)

    @classmethod
    def from_crif_strings(
        cls,
        tenor: str,
        qualifier: str,
        bucket: str,
        risk_class: str,
        margin_type: str,
        product_class: str,
    ) -> "RiskCoordinate":
        """
        Build a coordinate from the plain strings of a risk input record.

        .. deprecated::
            Construct ``RiskCoordinate`` from typed values instead.

        An empty ``bucket`` is read as an absent bucket key, so the result
        equals a typed coordinate with ``bucket_key=None``, not one with
        ``bucket_key=""``. CRIF leaves the bucket of interest rate records
        empty, and those must land in the default CRIF bucket.

        Parameters
        ----------
        tenor : str
            Tenor string such as '2W' or '30Y'; empty for no vertex
        qualifier : str
            Qualifier string
        bucket : str
            Bucket identifier; empty for no bucket
        risk_class : str
            ``RiskClass`` member name
        margin_type : str
            ``MarginType`` member name
        product_class : str
            ``ProductClass`` member name

        Raises
        ------
        ConfigurationError
            If the tenor or any enumeration name cannot be parsed
        """
        warnings.warn(
            "RiskCoordinate.from_crif_strings is deprecated; "
            "construct RiskCoordinate from typed values",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls(
            vertex=parse_crif_tenor(tenor),
            sub_curve=None,
            qualifier=Qualifier(qualifier),
            bucket_key=bucket if bucket else None,
            risk_class=RiskClass.parse(risk_class),
            margin_type=MarginType.parse(margin_type),
            product_class=ProductClass.parse(product_class),
        )
