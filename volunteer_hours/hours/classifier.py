from typing import NamedTuple

from .models import Classification
from .records import leading_int


class CategoryRule(NamedTuple):
    """A keyword rule mapping matching descriptions to a fixed hour credit"""

    keywords: tuple[str, ...]
    category: str
    hours: float


OTHER_CATEGORY = "Other"

# Checked in order, first match wins
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(("referral",), "Volunteer Referral", 0.5),
    CategoryRule(("event",), "Volunteer Event", 2),
    CategoryRule(("meeting",), "Meeting Attendance", 1),
    CategoryRule(("instagram", "repost"), "Instagram Repost", 0.5),
)


def extract_hours(text: str | None) -> int | None:
    """Extract N from a "(N hours)" style annotation, or None if absent"""
    if not text:
        return None

    open_paren = text.find("(")
    if open_paren == -1:
        return None
    hours_word = text.find(" hour", open_paren)
    if hours_word == -1:
        return None

    return leading_int(text[open_paren + 1 : hours_word])


def classify(description: str | None) -> Classification:
    """Determine the hour category and credit for an activity description"""
    text = (description or "").lower()

    for rule in CATEGORY_RULES:
        if any(keyword in text for keyword in rule.keywords):
            return Classification(category=rule.category, hours=rule.hours)

    return Classification(category=OTHER_CATEGORY, hours=extract_hours(text) or 0)
