#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
from typing import Any

from cadence.calendar_utils import start_of_day


def is_in_range(
    day: Any, start: datetime.date, end: datetime.date | None = None
) -> bool:
    """Check if `day` falls between `start` and `end` (inclusive), comparing
    calendar days only. There is no upper bound if `end` is not set.

    Returns False if `day` is not a date.
    """
    if not isinstance(day, datetime.date):
        return False
    day = start_of_day(day)
    if day < start_of_day(start):
        return False
    if end is not None and day > start_of_day(end):
        return False
    return True
