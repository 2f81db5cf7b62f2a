import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from ...lookup.service import MissingSearchTermsError, VolunteerHoursService
from ...sheets.client import SheetError
from ..dependencies import get_lookup_service
from ..schemas import SearchResponse


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hours", tags=["hours"])


@router.get("/search")
def search_hours(
    service: Annotated[VolunteerHoursService, Depends(get_lookup_service)],
    name: str = "",
    volunteer_id: Annotated[str, Query(alias="id")] = "",
    birthdate: str | None = None,
) -> SearchResponse:
    """Return the hour breakdown and award eligibility for a volunteer."""
    try:
        result = service.search(name, volunteer_id, birthdate=birthdate)
    except MissingSearchTermsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SheetError:
        logger.exception("Error loading volunteer hours data")
        raise HTTPException(
            status_code=503, detail="Could not load volunteer hours data. Please try again later."
        )

    if not result.found:
        raise HTTPException(status_code=404, detail="No records found. Please check your name and ID and try again.")

    return SearchResponse.from_result(result)
