"""Data contracts for accrual calculations."""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from compounding.core.accrual import AccrualInput, AccrualResult


class AccrualRequest(BaseModel):
    """Numeric inputs required to compute an accrual projection."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., description="Starting balance at period 0.")
    annualRatePercent: float = Field(
        ...,
        description="Annual interest rate in percent (e.g. 5 for 5%). Negative values model decay.",
    )
    years: float = Field(..., le=1000, description="Length of the projection in years (at most 1000).")
    periodicContribution: float = Field(
        0.0,
        description="Amount added once per contribution period. Negative values model withdrawals.",
    )
    compoundingPeriodsPerYear: int = Field(12, description="Compounding periods per year (1, 4, 12, ...).")
    contributionPeriodsPerYear: int = Field(12, description="Contribution periods per year.")
    granularity: Optional[Literal["year", "period"]] = Field(
        None,
        description="Series reporting interval; the server default applies when omitted.",
    )

    def to_input(self) -> AccrualInput:
        return AccrualInput(
            principal=self.principal,
            annual_rate_percent=self.annualRatePercent,
            years=self.years,
            periodic_contribution=self.periodicContribution,
            compounding_periods_per_year=self.compoundingPeriodsPerYear,
            contribution_periods_per_year=self.contributionPeriodsPerYear,
        )


class AccrualFormRequest(BaseModel):
    """Raw text fields exactly as the calculator form holds them."""

    model_config = ConfigDict(extra="ignore")

    principal: Optional[Union[str, float]] = None
    rate: Optional[Union[str, float]] = None
    time: Optional[Union[str, float]] = None
    contribution: Optional[Union[str, float]] = None
    compoundFrequency: Optional[Union[str, int]] = "monthly"
    contributionFrequency: Optional[Union[str, int]] = "monthly"
    granularity: Optional[Literal["year", "period"]] = None


class SeriesPoint(BaseModel):
    """Single point of a balance series."""

    period: int = Field(..., ge=1)
    balance: float


class AccrualResponse(BaseModel):
    """Projected balance series and summary figures."""

    endingBalance: float
    totalContributed: float
    totalInterest: float
    granularity: Literal["year", "period"]
    series: List[SeriesPoint]

    @classmethod
    def from_result(cls, result: AccrualResult, granularity: str) -> "AccrualResponse":
        return cls(
            endingBalance=result.ending_balance,
            totalContributed=result.total_contributed,
            totalInterest=result.total_interest,
            granularity=granularity,
            series=[SeriesPoint(period=period, balance=balance) for period, balance in result.series],
        )


class ChartData(BaseModel):
    labels: List[int]
    values: List[float]


class AccrualDisplayResponse(BaseModel):
    """Formatted summary strings and chart data for the form view."""

    summary: Dict[str, str]
    chart: ChartData
    result: AccrualResponse
