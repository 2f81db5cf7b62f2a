# volunteer_hours/sheets/models.py
from typing import Protocol


class SheetSource(Protocol):
    """Anything that can produce the volunteer log as delimited text"""

    def get_sheet_text(self) -> str:
        """Return the raw sheet contents, one row per line"""
        ...
