import logging
from datetime import date

from .calendar import age_on, eligibility_cutoff_date
from .models import AgeGroup, EligibilityResult


logger = logging.getLogger(__name__)

AGE_GROUPS: tuple[AgeGroup, ...] = (
    AgeGroup(label="Teens (11-15)", min_age=11, max_age=15, bronze=50, silver=75, gold=100),
    AgeGroup(label="Young Adults (16-25)", min_age=16, max_age=25, bronze=100, silver=175, gold=250),
)
MIN_ELIGIBLE_AGE = AGE_GROUPS[0].min_age
MAX_ELIGIBLE_AGE = AGE_GROUPS[-1].max_age


def parse_birthdate(birthdate: str | None) -> date | None:
    """Parse a birthdate entered as DD/MM/YYYY.

    Activity dates in the sheet are MM/DD/YYYY; birthdates are entered day
    first. Returns None for anything that is not a real calendar date, e.g.
    "31/02/2020".
    """
    if not birthdate:
        return None

    parts = birthdate.strip().split("/")
    if len(parts) != 3:
        return None

    try:
        day, month, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        logger.debug(f"Rejected birthdate {birthdate!r}")
        return None


def age_group_for(age: int) -> AgeGroup | None:
    return next((group for group in AGE_GROUPS if group.contains(age)), None)


def evaluate_award(
    birthdate: date | str | None, annual_hours: float, today: date | None = None
) -> EligibilityResult:
    """Determine PVSA eligibility from a birthdate and program-year hours.

    Args:
        birthdate: Birthdate as a date or a DD/MM/YYYY string
        annual_hours: Hours logged in the current program year
        today: Reference date for the application calendar, defaults to today

    """
    if isinstance(birthdate, str):
        birthdate = parse_birthdate(birthdate)
    if birthdate is None:
        return EligibilityResult(eligible=False, age_group=None, award=None, reason="Valid birthdate is required")

    age = age_on(birthdate, eligibility_cutoff_date(today or date.today()))
    group = age_group_for(age)
    if group is None:
        return EligibilityResult(
            eligible=False,
            age_group=None,
            award=None,
            reason=f"Age {age} is outside the eligible age groups ({MIN_ELIGIBLE_AGE}-{MAX_ELIGIBLE_AGE} years)",
        )

    award = group.award_for(annual_hours)
    if award is None:
        return EligibilityResult(
            eligible=False,
            age_group=group.label,
            award=None,
            reason=f"Insufficient volunteer hours ({annual_hours:g}). Minimum required: {group.bronze:g}",
        )

    return EligibilityResult(eligible=True, age_group=group.label, award=award)
