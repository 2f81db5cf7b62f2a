from functools import lru_cache

from ..config import build_sheet_source, load_config
from ..lookup.service import VolunteerHoursService


@lru_cache
def get_lookup_service() -> VolunteerHoursService:
    """Return the process-wide lookup service, built from the environment on first use"""
    return VolunteerHoursService(build_sheet_source(load_config()))
