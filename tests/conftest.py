import pytest

from volunteer_hours.lookup.service import VolunteerHoursService


def make_row(activity_date: str, identity: str, description: str) -> str:
    """Build a sheet row in the form-response column layout"""
    return f"3/1/2025 10:00:00,{activity_date},volunteer@example.com,{identity},Lincoln High,11,yes,{description}"


class FakeSheetSource:
    def __init__(self, text: str) -> None:
        self.text = text
        self.calls = 0

    def get_sheet_text(self) -> str:
        self.calls += 1
        return self.text


SHEET_TEXT = "\n".join(
    [
        "Timestamp,Date,Email,Name and ID,School,Grade,Consent,Description",
        make_row("1/2/2025", "Jane Doe 1234", "Team meeting"),
        make_row("1/2/2025", "Jane Doe 1234", "Fall fundraiser event"),
        make_row("12/15/2024", "Jane Doe 1234", "Instagram repost"),
        make_row("12/15/2024", "John Smith 5678", "Team meeting"),
        "",
        "   ",
    ]
)


@pytest.fixture
def sheet_source() -> FakeSheetSource:
    return FakeSheetSource(SHEET_TEXT)


@pytest.fixture
def lookup_service(sheet_source: FakeSheetSource) -> VolunteerHoursService:
    return VolunteerHoursService(sheet_source)
