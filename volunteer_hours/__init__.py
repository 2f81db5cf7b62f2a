"""Volunteer Hours - look up logged volunteer hours and PVSA award eligibility.

This package reads a volunteer log exported from Google Sheets, groups a
volunteer's activities into hour categories by date, and checks their
program-year hours against the President's Volunteer Service Award tiers.
"""

__version__ = "0.1.0"

from .awards.eligibility import evaluate_award, parse_birthdate
from .awards.period import application_period, countdown
from .hours.aggregator import aggregate, calculate_total_hours
from .hours.classifier import classify
from .hours.records import match_records, parse_rows
from .lookup.service import VolunteerHoursService


__all__ = [
    "VolunteerHoursService",
    "aggregate",
    "application_period",
    "calculate_total_hours",
    "classify",
    "countdown",
    "evaluate_award",
    "match_records",
    "parse_birthdate",
    "parse_rows",
]
