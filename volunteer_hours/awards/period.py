import math
from datetime import date, datetime, time, timedelta

from .calendar import APPLICATION_CLOSE_DAY, APPLICATION_MONTH, APPLICATION_OPEN_DAY
from .models import ApplicationPeriod, PeriodStatus, TimeRemaining


MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

BEFORE_MESSAGE = "Applications Open In:"
DURING_MESSAGE = "Application Deadline:"
AFTER_MESSAGE = "Applications are now closed. See you next year!"


def _open_date(year: int) -> datetime:
    return datetime(year, APPLICATION_MONTH, APPLICATION_OPEN_DAY)


def application_period(now: datetime | None = None) -> ApplicationPeriod:
    """Return the phase of this year's September 1-15 application window"""
    now = now or datetime.now()
    open_date = _open_date(now.year)
    # the window includes all of the closing day
    close_date = datetime.combine(date(now.year, APPLICATION_MONTH, APPLICATION_CLOSE_DAY), time.max)

    if now < open_date:
        status, target_date, message = PeriodStatus.BEFORE, open_date, BEFORE_MESSAGE
    elif now <= close_date:
        status, target_date, message = PeriodStatus.DURING, close_date, DURING_MESSAGE
    else:
        status, target_date, message = PeriodStatus.AFTER, _open_date(now.year + 1), AFTER_MESSAGE

    return ApplicationPeriod(
        status=status, open_date=open_date, close_date=close_date, target_date=target_date, message=message
    )


def countdown(target: datetime, now: datetime | None = None) -> TimeRemaining:
    """Break the time until ``target`` into days, hours, minutes and seconds"""
    now = now or datetime.now()
    difference = (target - now) // timedelta(milliseconds=1)

    return TimeRemaining(
        days=math.floor(difference / MS_PER_DAY),
        hours=math.floor(math.fmod(difference, MS_PER_DAY) / MS_PER_HOUR),
        minutes=math.floor(math.fmod(difference, MS_PER_HOUR) / MS_PER_MINUTE),
        seconds=math.floor(math.fmod(difference, MS_PER_MINUTE) / MS_PER_SECOND),
        total_ms=difference,
    )
