from dataclasses import dataclass


@dataclass(frozen=True)
class Classification:
    """Hour category assigned to a single activity description"""

    category: str
    hours: float


@dataclass(frozen=True)
class HourDetail:
    """Aggregated hours for one category on one date"""

    category: str
    hours: float
    count: int


@dataclass(frozen=True)
class DateGroup:
    """All hour categories logged on a single date"""

    raw_date: str
    display_date: str
    hour_details: tuple[HourDetail, ...]


@dataclass(frozen=True)
class HoursSummary:
    """Result of aggregating a volunteer's matched rows"""

    date_groups: tuple[DateGroup, ...]
    total_hours: float
    annual_hours: float
