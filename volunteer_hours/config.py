import os
from typing import TypedDict

from dotenv import load_dotenv

from .sheets.client import GoogleSheetsClient, PublishedSheetClient
from .sheets.models import SheetSource


class AppConfig(TypedDict):
    """Configuration for the application"""

    SHEET_CSV_URL: str | None
    SPREADSHEET_ID: str | None
    SHEET_NAME: str | None
    GOOGLE_CREDENTIALS: str | None
    HOST: str
    PORT: int


def load_config() -> AppConfig:
    """Load configuration from environment variables.

    The sheet is read from ``SHEET_CSV_URL`` when set, otherwise through the
    Sheets API, which needs ``SPREADSHEET_ID``, ``SHEET_NAME`` and
    ``GOOGLE_CREDENTIALS``.
    """
    load_dotenv()

    sheet_vars = {
        "SPREADSHEET_ID": os.getenv("SPREADSHEET_ID"),
        "SHEET_NAME": os.getenv("SHEET_NAME"),
        "GOOGLE_CREDENTIALS": os.getenv("GOOGLE_CREDENTIALS"),
    }
    csv_url = os.getenv("SHEET_CSV_URL")

    if not csv_url:
        missing = [k for k, v in sheet_vars.items() if not v]
        if missing:
            raise OSError(f"Set SHEET_CSV_URL or the missing environment variables: {', '.join(missing)}")

    return {
        "SHEET_CSV_URL": csv_url,
        **sheet_vars,
        "HOST": os.getenv("HOST", "0.0.0.0"),
        "PORT": int(os.getenv("PORT", "8000")),
    }


def build_sheet_source(config: AppConfig) -> SheetSource:
    """Create the sheet client the configuration asks for"""
    if config["SHEET_CSV_URL"]:
        return PublishedSheetClient(csv_url=config["SHEET_CSV_URL"])

    return GoogleSheetsClient(
        spreadsheet_id=config["SPREADSHEET_ID"],
        sheet_name=config["SHEET_NAME"],
        credentials_path=config["GOOGLE_CREDENTIALS"],
    )
