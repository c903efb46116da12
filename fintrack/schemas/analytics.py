from pydantic import BaseModel, ConfigDict, Field

from fintrack.schemas.common import Money


class CategoryBreakdownRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    amount: Money
    color: str
    percentage: Money = Field(serialization_alias="value")


class AnalyticsReportRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    month: str | None
    income: Money
    expenses: list[CategoryBreakdownRead]
    total_expenses: Money = Field(serialization_alias="totalExpenses")
    net_savings: Money = Field(serialization_alias="netSavings")
    savings_rate: int = Field(serialization_alias="savingsRate")


class AnalyticsResponse(BaseModel):
    message: str
    analytics: AnalyticsReportRead
