from datetime import datetime

from pydantic import BaseModel

from ..awards.models import ApplicationPeriod, EligibilityResult, TimeRemaining
from ..hours.models import DateGroup
from ..lookup.service import SearchResult


class HealthStatus(BaseModel):
    status: str
    version: str


class HourDetailOut(BaseModel):
    category: str
    hours: float
    count: int


class DateGroupOut(BaseModel):
    date: str
    raw_date: str
    hour_details: list[HourDetailOut]

    @classmethod
    def from_group(cls, group: DateGroup) -> "DateGroupOut":
        return cls(
            date=group.display_date,
            raw_date=group.raw_date,
            hour_details=[
                HourDetailOut(category=d.category, hours=d.hours, count=d.count) for d in group.hour_details
            ],
        )


class EligibilityOut(BaseModel):
    eligible: bool
    age_group: str | None
    award: str | None
    reason: str | None = None

    @classmethod
    def from_result(cls, result: EligibilityResult) -> "EligibilityOut":
        return cls(
            eligible=result.eligible,
            age_group=result.age_group,
            award=result.award.value if result.award else None,
            reason=result.reason,
        )


class SearchResponse(BaseModel):
    found: bool
    match_count: int
    total_hours: float
    annual_hours: float
    hours_by_date: list[DateGroupOut]
    eligibility: EligibilityOut | None = None

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            found=result.found,
            match_count=result.match_count,
            total_hours=result.total_hours,
            annual_hours=result.annual_hours,
            hours_by_date=[DateGroupOut.from_group(group) for group in result.date_groups],
            eligibility=EligibilityOut.from_result(result.eligibility) if result.eligibility else None,
        )


class CountdownOut(BaseModel):
    days: int
    hours: int
    minutes: int
    seconds: int
    total_ms: int


class ApplicationPeriodOut(BaseModel):
    status: str
    open_date: datetime
    close_date: datetime
    target_date: datetime
    message: str
    time_remaining: CountdownOut

    @classmethod
    def from_period(cls, period: ApplicationPeriod, remaining: TimeRemaining) -> "ApplicationPeriodOut":
        return cls(
            status=period.status.value,
            open_date=period.open_date,
            close_date=period.close_date,
            target_date=period.target_date,
            message=period.message,
            time_remaining=CountdownOut(
                days=remaining.days,
                hours=remaining.hours,
                minutes=remaining.minutes,
                seconds=remaining.seconds,
                total_ms=remaining.total_ms,
            ),
        )
