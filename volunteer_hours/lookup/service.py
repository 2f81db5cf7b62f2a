import logging
from dataclasses import dataclass
from datetime import date

from ..awards.eligibility import evaluate_award
from ..awards.models import EligibilityResult
from ..hours.aggregator import aggregate
from ..hours.models import DateGroup
from ..hours.records import match_records, parse_rows
from ..sheets.client import SheetError
from ..sheets.models import SheetSource


logger = logging.getLogger(__name__)


class MissingSearchTermsError(LookupError):
    """Raised when a search has neither a name nor an ID"""

    pass


@dataclass(frozen=True)
class SearchResult:
    """Everything shown to a volunteer after looking up their hours"""

    found: bool
    match_count: int
    total_hours: float
    annual_hours: float
    date_groups: tuple[DateGroup, ...]
    eligibility: EligibilityResult | None = None


class VolunteerHoursService:
    """Looks up volunteer hours in a sheet fetched once and kept in memory"""

    def __init__(self, sheet_source: SheetSource) -> None:
        self.sheet_source = sheet_source
        self._rows: list[str] | None = None

    @property
    def rows(self) -> list[str]:
        return self._rows or []

    @property
    def data_ready(self) -> bool:
        return bool(self._rows)

    def load(self) -> list[str]:
        """Fetch and parse the sheet unless it is already cached"""
        if self._rows is None:
            self.reload()
        return self.rows

    def reload(self) -> list[str]:
        """Fetch the sheet again, replacing any cached rows"""
        try:
            text = self.sheet_source.get_sheet_text()
        except SheetError:
            logger.error("Could not load volunteer hours data")
            raise

        self._rows = parse_rows(text)
        logger.info(f"Data loaded successfully, found {len(self._rows)} rows")
        return self._rows

    def search(
        self,
        name: str,
        volunteer_id: str,
        birthdate: str | None = None,
        today: date | None = None,
    ) -> SearchResult:
        """Find a volunteer's rows and summarize their hours and award eligibility"""
        if not (name or "").strip() and not (volunteer_id or "").strip():
            raise MissingSearchTermsError("Please enter at least your name or ID number.")

        matches = match_records(self.load(), name, volunteer_id)
        summary = aggregate(matches, today=today)
        logger.info(f"Search matched {len(matches)} rows totalling {summary.total_hours:g} hours")

        eligibility = None
        if birthdate is not None:
            eligibility = evaluate_award(birthdate, summary.annual_hours, today=today)

        return SearchResult(
            found=bool(matches),
            match_count=len(matches),
            total_hours=summary.total_hours,
            annual_hours=summary.annual_hours,
            date_groups=summary.date_groups,
            eligibility=eligibility,
        )
