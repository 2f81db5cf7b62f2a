import logging
import re


logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
IDENTITY_COLUMN = 3

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def leading_int(text: str) -> int | None:
    """Read the integer at the start of ``text``, ignoring anything after it.

    "2.5" reads as 2 and "2025 10:00:00" as 2025; text without leading digits
    gives None.
    """
    match = LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def split_fields(row: str) -> list[str]:
    """Split a row into its positional fields"""
    return row.split(FIELD_DELIMITER)


def parse_rows(text: str) -> list[str]:
    """Split raw sheet text into rows, dropping blank lines"""
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip()]


def match_records(rows: list[str], name: str, volunteer_id: str) -> list[str]:
    """Return rows whose identity column contains the name/ID search key.

    The key is ``"<name> <id>"`` lower-cased and trimmed. An empty key matches
    nothing rather than the whole sheet.
    """
    search_key = f"{name or ''} {volunteer_id or ''}".strip().lower()
    if not search_key:
        return []

    matches = []
    for row in rows:
        fields = split_fields(row)
        if len(fields) <= IDENTITY_COLUMN:
            continue
        if search_key in fields[IDENTITY_COLUMN].lower():
            matches.append(row)

    logger.debug(f"Matched {len(matches)} of {len(rows)} rows")
    return matches
