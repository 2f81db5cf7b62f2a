from volunteer_hours.hours.records import leading_int, match_records, parse_rows

from .conftest import make_row


def test_parse_rows_drops_blank_lines():
    text = "a,b,c\n\n   \n\t\nd,e,f\r\n\r\n"

    rows = parse_rows(text)

    assert rows == ["a,b,c", "d,e,f\r"]
    assert all(row.strip() for row in rows)


def test_parse_rows_empty_input():
    assert parse_rows("") == []


def test_match_records_is_case_insensitive():
    rows = [make_row("1/2/2025", "Jane Doe 1234", "Team meeting"), make_row("1/2/2025", "John Smith", "Team meeting")]

    assert match_records(rows, "JANE doe", "1234") == rows[:1]


def test_match_records_with_only_an_id():
    rows = [make_row("1/2/2025", "Jane Doe 1234", "Team meeting")]

    assert match_records(rows, "", "1234") == rows


def test_match_records_empty_key_matches_nothing():
    rows = [make_row("1/2/2025", "Jane Doe 1234", "Team meeting"), "a,b,c, "]

    assert match_records(rows, "", "") == []
    assert match_records(rows, "  ", "  ") == []


def test_match_records_skips_short_rows():
    rows = ["only,three,fields", "x,y,z,jane"]

    assert match_records(rows, "jane", "") == ["x,y,z,jane"]


def test_match_records_only_searches_identity_column():
    rows = [make_row("1/2/2025", "John Smith", "meeting with jane")]

    assert match_records(rows, "jane", "") == []


def test_leading_int_reads_digits_before_other_text():
    assert leading_int("2.5") == 2
    assert leading_int(" 2025 10:00:00") == 2025
    assert leading_int("-3") == -3
    assert leading_int("two") is None
    assert leading_int("") is None
