"""
Tenor vertices of the SIMM interest-rate maturity ladder.
"""

from enum import Enum
from functools import total_ordering

from simm_core.exceptions import ConfigurationError

_YEARS_PER_UNIT = {"W": 7.0 / 365.0, "M": 1.0 / 12.0, "Y": 1.0}


@total_ordering
class Vertex(Enum):
    """
    A point on the maturity ladder.

    Members are ordered by tenor length, so ``Vertex.W2 < Vertex.Y1``.
    The value of each member is its canonical tenor string.

    Example
    -------
    >>> Vertex.parse("10y")
    <Vertex.Y10: '10Y'>
    >>> Vertex.Y10.years
    10.0
    """

    W2 = "2W"
    M1 = "1M"
    M3 = "3M"
    M6 = "6M"
    Y1 = "1Y"
    Y2 = "2Y"
    Y3 = "3Y"
    Y5 = "5Y"
    Y10 = "10Y"
    Y15 = "15Y"
    Y20 = "20Y"
    Y30 = "30Y"

    @property
    def years(self) -> float:
        """Tenor length in years."""
        return int(self.value[:-1]) * _YEARS_PER_UNIT[self.value[-1]]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.years < other.years

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, tenor: str) -> "Vertex":
        """
        Parse a tenor string such as '2W', '1y' or '30Y'.

        Parameters
        ----------
        tenor : str
            Tenor string; the unit letter is case-insensitive

        Returns
        -------
        Vertex
            Matching vertex

        Raises
        ------
        ConfigurationError
            If the string is not one of the ladder tenors
        """
        canonical = tenor.strip().upper() if isinstance(tenor, str) else tenor
        try:
            return cls(canonical)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Invalid tenor {tenor!r}; expected one of: {valid}"
            ) from None


def parse_crif_tenor(tenor: str) -> Vertex | None:
    """
    Parse the CRIF label1 column into a vertex.

    CRIF rows for risk types without a term structure leave label1
    empty; those map to ``None``.
    """
    if tenor is None or not tenor.strip():
        return None
    return Vertex.parse(tenor)
