from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Award(Enum):
    """PVSA award levels, highest first"""

    GOLD = "Gold"
    SILVER = "Silver"
    BRONZE = "Bronze"


class PeriodStatus(Enum):
    """Where "now" falls relative to the application window"""

    BEFORE = "before"
    DURING = "during"
    AFTER = "after"


@dataclass(frozen=True)
class AgeGroup:
    """An eligible age band with its award hour thresholds"""

    label: str
    min_age: int
    max_age: int
    bronze: float
    silver: float
    gold: float

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age

    def award_for(self, hours: float) -> Award | None:
        """Return the highest award whose threshold the hours meet"""
        for award, threshold in ((Award.GOLD, self.gold), (Award.SILVER, self.silver), (Award.BRONZE, self.bronze)):
            if hours >= threshold:
                return award
        return None


@dataclass(frozen=True)
class EligibilityResult:
    eligible: bool
    age_group: str | None
    award: Award | None
    reason: str | None = None


@dataclass(frozen=True)
class ApplicationPeriod:
    status: PeriodStatus
    open_date: datetime
    close_date: datetime
    target_date: datetime
    message: str


@dataclass(frozen=True)
class TimeRemaining:
    """Time left until a target instant; components are negative once it has passed"""

    days: int
    hours: int
    minutes: int
    seconds: int
    total_ms: int
