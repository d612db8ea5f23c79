#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Calendar day helpers shared by the recurrence engine and the presentation layer.

All values are timezone-naive calendar days. Weekdays are indexed from Sunday (0) to
Saturday (6), which differs from `datetime.date.weekday()`.
"""

import datetime
import math

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from cadence.aliases import DayOfWeek, WeekOfMonth
from cadence.constants import DAYS_IN_WEEK, LAST_WEEK_OF_MONTH, MAX_WEEK_OF_MONTH
from cadence.exceptions import ParseError

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

POSITION_NAMES: dict[int, str] = {
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    LAST_WEEK_OF_MONTH: "last",
}


def start_of_day(value: datetime.date | datetime.datetime) -> datetime.date:
    """Drop the time of day, if any, and return the calendar day."""
    # nb: datetime is a subclass of date, check it first
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def day_of_week(day: datetime.date) -> DayOfWeek:
    """Return the weekday of `day`, counting from Sunday (0) to Saturday (6)."""
    return day.isoweekday() % DAYS_IN_WEEK


def week_of_month(day: datetime.date) -> WeekOfMonth:
    """Position of `day` among the days of the month sharing its weekday.

    Returns
    -------
    position
        1 to 4 for the first to the fourth occurrence, -1 when `day` is the last
        occurrence of its weekday in the month. A weekday that occurs exactly four
        times therefore reports its fourth occurrence as -1.
    """
    if (day + relativedelta(weeks=1)).month != day.month:
        return LAST_WEEK_OF_MONTH
    return min(math.ceil(day.day / DAYS_IN_WEEK), MAX_WEEK_OF_MONTH)


def months_between(start: datetime.date, day: datetime.date) -> int:
    """Number of calendar months from `start` to `day`, ignoring the day of month.
    Negative when `day` falls in an earlier month."""
    return (day.year - start.year) * 12 + (day.month - start.month)


def day_name(day: DayOfWeek) -> str:
    return WEEKDAY_NAMES[day]


def position_name(position: WeekOfMonth) -> str:
    return POSITION_NAMES.get(position, POSITION_NAMES[1])


def parse_day(text: str | datetime.date) -> datetime.date:
    """Parse a user supplied date string (eg "2024-01-15", "15 Jan 2024") into a
    calendar day. Dates are passed through, datetimes are truncated to midnight.

    Raises
    ------
    ParseError
        If `text` cannot be interpreted as a date.
    """
    if isinstance(text, datetime.date):
        return start_of_day(text)
    try:
        return date_parser.parse(str(text)).date()
    except (ValueError, OverflowError) as e:
        raise ParseError(f"Invalid date: {text}") from e
