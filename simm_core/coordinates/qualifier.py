"""
Qualifier values narrowing a risk factor within its risk class.
"""

from dataclasses import dataclass

from simm_core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Qualifier:
    """
    The CRIF qualifier of a risk factor.

    For interest rate and FX delta factors this is a currency, e.g. ``USD``.
    For FX vega it is a currency pair, represented by the concatenated
    currencies, e.g. ``USDEUR``. For equities it is an ISIN or index name,
    for commodities a human-readable identifier such as ``Freight``.

    Attributes
    ----------
    value : str
        The raw identifier string
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ConfigurationError(
                f"Qualifier must be a string, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    @property
    def is_currency(self) -> bool:
        """True if the qualifier is a three-letter currency code."""
        return len(self.value) == 3 and self.value.isalpha()

    @property
    def is_currency_pair(self) -> bool:
        """True if the qualifier is two concatenated currency codes."""
        return len(self.value) == 6 and self.value.isalpha()

    @property
    def currency(self) -> str:
        """
        Currency code of the qualifier.

        Returns the first currency for a currency pair.

        Raises
        ------
        ConfigurationError
            If the qualifier is neither a currency nor a currency pair
        """
        if not (self.is_currency or self.is_currency_pair):
            raise ConfigurationError(
                f"Qualifier {self.value!r} does not carry a currency code"
            )
        return self.value[:3].upper()

    @property
    def currency_pair(self) -> tuple[str, str]:
        """Base and quote currency of a currency-pair qualifier."""
        if not self.is_currency_pair:
            raise ConfigurationError(
                f"Qualifier {self.value!r} is not a currency pair"
            )
        return self.value[:3].upper(), self.value[3:].upper()
