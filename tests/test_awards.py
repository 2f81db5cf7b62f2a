from datetime import date, datetime, timedelta

import pytest

from volunteer_hours.awards.calendar import (
    age_on,
    eligibility_cutoff_date,
    months_before,
    next_application_date,
    program_year,
)
from volunteer_hours.awards.eligibility import evaluate_award, parse_birthdate
from volunteer_hours.awards.models import Award, PeriodStatus
from volunteer_hours.awards.period import application_period, countdown

TODAY = date(2025, 1, 10)
TEEN_BIRTHDATE = date(2012, 1, 1)
YOUNG_ADULT_BIRTHDATE = date(2005, 6, 1)


# ---------------------------------------------------------------------------
# Program calendar
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2025, 8, 31), (date(2024, 9, 1), date(2025, 8, 31))),
        (date(2025, 9, 1), (date(2025, 9, 1), date(2026, 8, 31))),
        (date(2025, 1, 1), (date(2024, 9, 1), date(2025, 8, 31))),
        (date(2025, 12, 31), (date(2025, 9, 1), date(2026, 8, 31))),
    ],
)
def test_program_year(today, expected):
    assert program_year(today) == expected


def test_next_application_date_includes_the_15th():
    assert next_application_date(date(2025, 9, 15)) == date(2025, 9, 15)
    assert next_application_date(date(2025, 9, 16)) == date(2026, 9, 15)
    assert next_application_date(date(2025, 2, 1)) == date(2025, 9, 15)


def test_cutoff_is_six_months_before_application():
    assert eligibility_cutoff_date(TODAY) == date(2025, 3, 15)
    assert eligibility_cutoff_date(date(2025, 10, 1)) == date(2026, 3, 15)


def test_months_before_wraps_the_year():
    assert months_before(date(2025, 3, 15), 6) == date(2024, 9, 15)


def test_age_on():
    assert age_on(date(2010, 3, 15), date(2025, 3, 15)) == 15
    assert age_on(date(2010, 3, 16), date(2025, 3, 15)) == 14
    assert age_on(date(2010, 4, 1), date(2025, 3, 15)) == 14


# ---------------------------------------------------------------------------
# Birthdates
# ---------------------------------------------------------------------------


def test_parse_birthdate_is_day_first():
    assert parse_birthdate("05/03/2010") == date(2010, 3, 5)
    assert parse_birthdate(" 1/12/2009 ") == date(2009, 12, 1)


@pytest.mark.parametrize("text", ["31/02/2020", "31/04/2020", "aa/01/2010", "01/2010", "1/1/1/2010", "", None])
def test_parse_birthdate_rejects_invalid(text):
    assert parse_birthdate(text) is None


# ---------------------------------------------------------------------------
# Award evaluation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "hours, award",
    [(100, Award.GOLD), (99, Award.SILVER), (75, Award.SILVER), (74.5, Award.BRONZE), (50, Award.BRONZE)],
)
def test_teen_award_thresholds(hours, award):
    result = evaluate_award(TEEN_BIRTHDATE, hours, today=TODAY)

    assert result.eligible
    assert result.age_group == "Teens (11-15)"
    assert result.award is award
    assert result.reason is None


@pytest.mark.parametrize("hours, award", [(250, Award.GOLD), (175, Award.SILVER), (100, Award.BRONZE)])
def test_young_adult_award_thresholds(hours, award):
    result = evaluate_award(YOUNG_ADULT_BIRTHDATE, hours, today=TODAY)

    assert result.age_group == "Young Adults (16-25)"
    assert result.award is award


def test_insufficient_hours_names_bronze_minimum():
    result = evaluate_award(TEEN_BIRTHDATE, 49.5, today=TODAY)

    assert not result.eligible
    assert result.award is None
    assert result.age_group == "Teens (11-15)"
    assert result.reason == "Insufficient volunteer hours (49.5). Minimum required: 50"


def test_age_outside_groups():
    result = evaluate_award(date(2020, 1, 1), 500, today=TODAY)

    assert not result.eligible
    assert result.age_group is None
    assert result.reason == "Age 5 is outside the eligible age groups (11-25 years)"


def test_invalid_birthdate_string_requires_birthdate():
    result = evaluate_award("31/02/2020", 120, today=TODAY)

    assert not result.eligible
    assert result.award is None
    assert result.reason == "Valid birthdate is required"


def test_birthdate_string_is_parsed_day_first():
    # 1 April 2009 is 15 on the cutoff, read month first (4 January) it would be 16
    assert evaluate_award("01/04/2009", 100, today=TODAY).age_group == "Teens (11-15)"
    assert evaluate_award("04/01/2009", 100, today=TODAY).age_group == "Young Adults (16-25)"


# ---------------------------------------------------------------------------
# Application period and countdown
# ---------------------------------------------------------------------------


def test_application_period_during():
    period = application_period(datetime(2025, 9, 10, 12, 0))

    assert period.status is PeriodStatus.DURING
    assert period.target_date.date() == date(2025, 9, 15)
    assert period.message == "Application Deadline:"


def test_application_period_closing_day_is_inclusive():
    assert application_period(datetime(2025, 9, 15, 23, 0)).status is PeriodStatus.DURING


def test_application_period_before():
    period = application_period(datetime(2025, 8, 31, 23, 0))

    assert period.status is PeriodStatus.BEFORE
    assert period.target_date == datetime(2025, 9, 1)
    assert period.message == "Applications Open In:"


def test_application_period_after():
    period = application_period(datetime(2025, 9, 16))

    assert period.status is PeriodStatus.AFTER
    assert period.open_date == datetime(2025, 9, 1)
    assert period.target_date == datetime(2026, 9, 1)
    assert period.message == "Applications are now closed. See you next year!"


def test_countdown():
    now = datetime(2025, 9, 10)
    target = now + timedelta(days=1, hours=2, minutes=3, seconds=4, milliseconds=500)

    remaining = countdown(target, now)

    assert (remaining.days, remaining.hours, remaining.minutes, remaining.seconds) == (1, 2, 3, 4)
    assert remaining.total_ms == 93_784_500


def test_countdown_past_target_is_negative():
    now = datetime(2025, 9, 10)

    remaining = countdown(now - timedelta(milliseconds=1500), now)

    assert remaining.total_ms == -1500
    assert (remaining.days, remaining.hours, remaining.minutes, remaining.seconds) == (-1, -1, -1, -2)
