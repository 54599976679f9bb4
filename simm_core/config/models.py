"""
Pydantic configuration models for the SIMM core package.

These models provide validation and type-safe configuration for:
- Short rate model parameters
- Simulation parameters (Monte Carlo settings)
- Portfolio specifications (weighted trade definitions)
"""

from typing import Annotated, Literal, Union

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator


def _validate_currency(v: str) -> str:
    if len(v) != 3 or not v.isalpha():
        raise ValueError(f"Currency must be a three-letter code, got {v!r}")
    return v.upper()


ValidatedCurrency = Annotated[str, AfterValidator(_validate_currency)]


class OUModelConfig(BaseModel):
    """
    Ornstein-Uhlenbeck short-rate model parameters.

    The OU process follows: dr = kappa * (theta - r) * dt + sigma * dW

    Attributes
    ----------
    kappa : float
        Mean reversion speed (typically 0.01 to 1.0)
    theta : float
        Long-term mean rate (e.g., 0.02 for 2%)
    sigma : float
        Volatility (e.g., 0.01 for 100bps)
    initial_rate : float
        Starting short rate

    Example
    -------
    >>> config = OUModelConfig(kappa=0.1, theta=0.02, sigma=0.01, initial_rate=0.02)
    """

    kappa: float = Field(gt=0, le=2.0, description="Mean reversion speed")
    theta: float = Field(ge=-0.02, le=0.20, description="Long-term mean rate")
    sigma: float = Field(ge=0, le=0.10, description="Volatility")
    initial_rate: float = Field(ge=-0.02, le=0.20, description="Starting short rate")

    @field_validator("kappa")
    @classmethod
    def kappa_realistic(cls, v: float) -> float:
        """Validate mean reversion speed is realistic."""
        if v > 1.0:
            import warnings

            warnings.warn(
                f"Mean reversion speed {v} > 1.0 is aggressive; "
                "typical values are 0.01-0.5",
                UserWarning,
                stacklevel=2,
            )
        return v


class SimulationConfig(BaseModel):
    """
    Monte Carlo simulation parameters.

    Attributes
    ----------
    n_paths : int
        Number of Monte Carlo paths
    horizon_years : float
        Simulation horizon in years
    time_step : str
        Time step frequency ('monthly' or 'quarterly')
    seed : int | None
        Random seed for reproducibility
    currency : str
        Currency simulated by the model
    scheme : str
        Short rate discretisation ('exact' or 'euler')
    """

    n_paths: int = Field(ge=100, le=100000, default=5000)
    horizon_years: float = Field(ge=0.25, le=30, default=5.0)
    time_step: Literal["monthly", "quarterly"] = "quarterly"
    seed: int | None = Field(default=42)
    currency: ValidatedCurrency = "USD"
    scheme: Literal["exact", "euler"] = "exact"

    @property
    def dt(self) -> float:
        """Time step in years."""
        return 1 / 12 if self.time_step == "monthly" else 0.25


class TradeConfig(BaseModel):
    """
    Fields shared by every trade in a portfolio.

    Attributes
    ----------
    weight : float
        Portfolio weight; negative for short positions
    currency : str
        Trade currency
    """

    weight: float = 1.0
    currency: ValidatedCurrency = "USD"


class ZeroCouponBondConfig(TradeConfig):
    """
    Zero coupon bond configuration.

    Attributes
    ----------
    notional : float
        Amount paid at maturity
    maturity_years : float
        Payment time in years
    curve : str
        Discount curve name
    """

    type: Literal["ZCB"] = "ZCB"
    notional: float = Field(gt=0)
    maturity_years: float = Field(gt=0, le=50)
    curve: str = "OIS"


class InterestRateSwapConfig(TradeConfig):
    """
    Interest rate swap configuration.

    Attributes
    ----------
    notional : float
        Notional amount
    fixed_rate : float
        Fixed rate (decimal, e.g., 0.02 for 2%)
    maturity_years : float
        Time to maturity in years
    start_years : float
        Start of the first accrual period in years
    pay_fixed : bool
        True for payer swap (pay fixed, receive float)
    payment_frequency : float
        Payment frequency in years (e.g., 0.5 for semi-annual)
    index : str
        Floating rate index name
    """

    type: Literal["IRS"] = "IRS"
    notional: float = Field(gt=0)
    fixed_rate: float = Field(ge=-0.02, le=0.20)
    maturity_years: float = Field(gt=0, le=50)
    start_years: float = Field(ge=0, default=0.0)
    pay_fixed: bool = True
    payment_frequency: float = Field(gt=0, le=1, default=0.5)
    index: str = "OIS"

    @model_validator(mode="after")
    def start_before_maturity(self) -> "InterestRateSwapConfig":
        """Validate the swap starts before it matures."""
        if self.start_years >= self.maturity_years:
            raise ValueError(
                f"Start ({self.start_years}) must be before maturity "
                f"({self.maturity_years})"
            )
        return self


TradeConfigType = Annotated[
    Union[InterestRateSwapConfig, ZeroCouponBondConfig],
    Field(discriminator="type"),
]


class PortfolioConfig(BaseModel):
    """
    Weighted portfolio of trades.

    Attributes
    ----------
    currency : str | None
        Reporting currency; every trade must match it when given
    initial_lifetime : float
        Advisory portfolio lifetime in years
    trades : list[TradeConfigType]
        Trade definitions, discriminated by their ``type`` field
    """

    currency: ValidatedCurrency | None = None
    initial_lifetime: float = Field(ge=0, default=0.0)
    trades: list[TradeConfigType] = Field(default_factory=list)

    @property
    def n_trades(self) -> int:
        """Total number of trades."""
        return len(self.trades)

    @property
    def gross_notional(self) -> float:
        """Sum of absolute weighted notionals."""
        return sum(abs(t.weight) * t.notional for t in self.trades)
