"""Aggregation result models."""

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, Field

from pokerlog.models.session import Session


class Bucket(BaseModel):
    """One aggregation cell: a month, a weekday, or a calendar day."""

    key: Union[int, str] = Field(..., description="Month index, weekday index or YYYY-MM-DD")
    label: str = Field(..., description="Display label (Jan, Sun, 2024-01-05)")
    profit: float = Field(default=0.0, description="Summed profit")
    sessions: int = Field(default=0, ge=0, description="Number of sessions")
    hours: float = Field(default=0.0, ge=0, description="Summed hours")

    model_config = {"frozen": True}


class Summary(BaseModel):
    """Totals and rates over a set of sessions."""

    total_profit: float = Field(default=0.0, description="Sum of profit")
    total_hours: float = Field(default=0.0, ge=0, description="Sum of hours")
    session_count: int = Field(default=0, ge=0, description="Number of sessions")
    avg_profit_per_session: float = Field(default=0.0, description="Profit per session")
    hourly_rate: float = Field(default=0.0, description="Profit per hour")

    model_config = {"frozen": True}


class YearReport(BaseModel):
    """Year-to-date statistics for one year."""

    year: int = Field(..., description="Report year")
    start: date = Field(..., description="First day of the range (Jan 1)")
    end: date = Field(..., description="Last day of the range (as-of date)")
    sessions: list[Session] = Field(default_factory=list, description="YTD sessions, newest first")
    summary: Summary = Field(default_factory=Summary)
    months: list[Bucket] = Field(default_factory=list)
    weekdays: list[Bucket] = Field(default_factory=list)
    days: list[Bucket] = Field(default_factory=list)
    best_month: Optional[Bucket] = Field(default=None, description="None when no data")
    best_weekday: Optional[Bucket] = Field(default=None, description="None when no data")
    best_day: Optional[Bucket] = Field(default=None, description="None when no data")

    model_config = {"frozen": True}
