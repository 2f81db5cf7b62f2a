import logging

import httpx
from google.api_core import retry
from google.oauth2 import service_account
from googleapiclient.discovery import build

from ..hours.records import FIELD_DELIMITER


logger = logging.getLogger(__name__)

# Upper bound in seconds on retrying one read
RETRY_TIMEOUT = 30.0

SHEETS_RETRY = retry.Retry(timeout=RETRY_TIMEOUT)
EXPORT_RETRY = retry.Retry(predicate=retry.if_exception_type(httpx.TransportError), timeout=RETRY_TIMEOUT)


class SheetError(Exception):
    """Custom exception for sheet-related errors"""

    pass


class GoogleSheetsClient:
    """Reads the volunteer log through the Google Sheets API"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]

    def __init__(self, spreadsheet_id: str, sheet_name: str, credentials_path: str) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self.credentials_path = credentials_path
        self.service = self._build_sheets_service()

    def _build_sheets_service(self):
        """Create and return an authorized Sheets API service object"""
        try:
            creds = service_account.Credentials.from_service_account_file(self.credentials_path, scopes=self.SCOPES)
            return build("sheets", "v4", credentials=creds)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}")

    @SHEETS_RETRY
    def get_sheet_values(self) -> list[list[str]]:
        """Get every populated row of the sheet with retry logic"""
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=self.sheet_name)
                .execute()
            )
            return result.get("values", [])
        except Exception as e:
            logger.error(f"Error reading sheet values: {e}")
            raise SheetError(f"Failed to read sheet {self.sheet_name}: {str(e)}")

    def get_sheet_text(self) -> str:
        """Return the sheet as delimited text, one line per row"""
        values = self.get_sheet_values()
        logger.info(f"Read {len(values)} rows from {self.sheet_name}")
        return "\n".join(FIELD_DELIMITER.join(str(cell) for cell in row) for row in values)


class PublishedSheetClient:
    """Reads the volunteer log from a sheet's "publish to web" CSV export"""

    def __init__(self, csv_url: str, timeout: float = 10.0) -> None:
        self.csv_url = csv_url
        self.timeout = timeout

    @EXPORT_RETRY
    def _fetch(self) -> httpx.Response:
        response = httpx.get(self.csv_url, timeout=self.timeout, follow_redirects=True)
        response.raise_for_status()
        return response

    def get_sheet_text(self) -> str:
        """Download the CSV export"""
        try:
            response = self._fetch()
        except Exception as e:
            logger.error(f"Error downloading sheet export: {e}")
            raise SheetError(f"Failed to download sheet export: {str(e)}")

        logger.info(f"Downloaded {len(response.content)} bytes of sheet data")
        return response.text
