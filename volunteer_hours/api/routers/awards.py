from fastapi import APIRouter

from ...awards.eligibility import evaluate_award
from ...awards.period import application_period, countdown
from ..schemas import ApplicationPeriodOut, EligibilityOut


router = APIRouter(prefix="/awards", tags=["awards"])


@router.get("/application-period")
async def get_application_period() -> ApplicationPeriodOut:
    """Return the current application window phase and time left to its next milestone."""
    period = application_period()
    return ApplicationPeriodOut.from_period(period, countdown(period.target_date))


@router.get("/eligibility")
async def get_eligibility(hours: float, birthdate: str | None = None) -> EligibilityOut:
    """Return award eligibility for a DD/MM/YYYY birthdate and program-year hours."""
    return EligibilityOut.from_result(evaluate_award(birthdate, hours))
