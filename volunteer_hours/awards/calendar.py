"""Fixed annual calendar of the PVSA award program.

The program year runs September 1 to August 31. Applications open on
September 1 and close on September 15, and an applicant's age group is fixed
six months before the application date.
"""

from datetime import date

PROGRAM_YEAR_START_MONTH = 9
APPLICATION_MONTH = 9
APPLICATION_OPEN_DAY = 1
APPLICATION_CLOSE_DAY = 15
CUTOFF_MONTHS_BEFORE_APPLICATION = 6


def program_year(today: date) -> tuple[date, date]:
    """Return the inclusive (start, end) dates of the current program year"""
    start_year = today.year if today.month >= PROGRAM_YEAR_START_MONTH else today.year - 1
    return date(start_year, PROGRAM_YEAR_START_MONTH, 1), date(start_year + 1, 8, 31)


def next_application_date(today: date) -> date:
    """Return the next September 15th, counting today if it is the 15th"""
    this_year = date(today.year, APPLICATION_MONTH, APPLICATION_CLOSE_DAY)
    if today > this_year:
        return this_year.replace(year=today.year + 1)
    return this_year


def months_before(day: date, months: int) -> date:
    """Shift a date back by whole calendar months, keeping the day of month"""
    month_index = day.year * 12 + (day.month - 1) - months
    return day.replace(year=month_index // 12, month=month_index % 12 + 1)


def eligibility_cutoff_date(today: date) -> date:
    """Return the date on which an applicant's age determines their group"""
    return months_before(next_application_date(today), CUTOFF_MONTHS_BEFORE_APPLICATION)


def age_on(birthdate: date, on_date: date) -> int:
    """Return whole years of age reached by ``on_date``"""
    age = on_date.year - birthdate.year
    if (on_date.month, on_date.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age
