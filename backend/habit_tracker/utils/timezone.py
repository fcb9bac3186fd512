"""
Timezone Utilities - Centralized calendar and clock handling

Every "day" in the application is a local calendar day in the configured
timezone, identified by its YYYY-MM-DD key.
"""
from datetime import date, datetime, timedelta
from typing import List, Optional
import pytz

from habit_tracker.core.config import settings
from habit_tracker.core.constants import DAY_KEY_FORMAT, TRAILING_WINDOW_DAYS


# Application timezone
LOCAL_TZ = pytz.timezone(settings.APP_TIMEZONE)


def get_local_tz():
    """
    Get the application timezone object

    Returns:
        pytz timezone configured through APP_TIMEZONE
    """
    return LOCAL_TZ


def get_local_now() -> datetime:
    """
    Get current datetime in the application timezone

    Returns:
        Timezone-aware datetime object
    """
    return datetime.now(LOCAL_TZ)


def get_local_today() -> date:
    """
    Get today's date in the application timezone

    Returns:
        date object for today
    """
    return get_local_now().date()


def localize(value: datetime) -> datetime:
    """
    Make a datetime timezone-aware, assuming naive values are local time

    Args:
        value: Naive or aware datetime

    Returns:
        Aware datetime
    """
    if value.tzinfo is None:
        return LOCAL_TZ.localize(value)
    return value


def day_key(day: date) -> str:
    """Format a calendar day as its YYYY-MM-DD key"""
    return day.strftime(DAY_KEY_FORMAT)


def parse_day_key(key: str) -> date:
    """
    Parse a YYYY-MM-DD key back into a date

    Raises:
        ValueError: If the key is not a valid calendar day
    """
    return datetime.strptime(key, DAY_KEY_FORMAT).date()


def weekday_code(day: date) -> int:
    """
    Weekday code of a date, 1 = Sunday ... 7 = Saturday

    isoweekday() is 1 = Monday ... 7 = Sunday, so shift by one and wrap.
    """
    return day.isoweekday() % 7 + 1


def last_n_days(n: int = TRAILING_WINDOW_DAYS, today: Optional[date] = None) -> List[date]:
    """
    Trailing window of calendar days, oldest first, ending with today

    Args:
        n: Number of days in the window
        today: Last day of the window (defaults to local today)

    Returns:
        List of n dates
    """
    today = today or get_local_today()
    return [today - timedelta(days=offset) for offset in reversed(range(n))]
