#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Enumerate the occurrences of a recurrence rule."""

import datetime
import logging
from enum import StrEnum, auto
from typing import NamedTuple

from cadence.constants import (
    DEFAULT_MAX_DATES,
    DEFAULT_PREVIEW_COUNT,
    ITERATION_CAP_MULTIPLIER,
    MAX_SCAN_DAYS,
)
from cadence.matcher import matches
from cadence.rule import RecurrenceRule, RecurrenceType

logger = logging.getLogger(__name__)

DAYS_PER_UNIT = {
    RecurrenceType.DAILY: 1,
    RecurrenceType.WEEKLY: 7,
    RecurrenceType.MONTHLY: 31,
    RecurrenceType.YEARLY: 366,
}


class StopReason(StrEnum):
    """Why an enumeration stopped."""

    COUNT_REACHED = auto()
    ITERATION_CAP = auto()
    END_DATE = auto()
    EMPTY_REQUEST = auto()


class GeneratedDates(NamedTuple):
    """The result of enumerating a rule.

    Parameters
    ----------
    dates
        Occurrences in ascending order.
    has_more
        True if the scan stopped because the requested number of dates was found or
        because the iteration cap was hit, False if the rule end date was passed first.
        It does not tell whether an occurrence exists after the last returned date;
        use `stop_reason` to tell the two cases apart.
    stop_reason
        The condition which ended the scan.
    """

    dates: list[datetime.date]
    has_more: bool
    stop_reason: StopReason


def _period_days(rule: RecurrenceRule) -> int:
    """Upper bound on the number of days spanned by one interval of `rule`."""
    return DAYS_PER_UNIT[rule.type] * rule.interval


def generate(
    rule: RecurrenceRule, max_count: int = DEFAULT_MAX_DATES
) -> GeneratedDates:
    """Walk forward one day at a time from `rule.start_date`, collecting the days which
    match `rule`.

    Parameters
    ----------
    rule
        The recurrence rule to enumerate.
    max_count
        Maximum number of dates to return. The scan covers at most ten rule periods
        per requested date (eg `max_count * 10 * 7 * interval` days for a weekly rule),
        which guarantees termination for rules that can never match. The scan never
        exceeds one 400 year calendar cycle and stops at `datetime.date.max`.
    """
    max_count = max(max_count, 0)
    dates: list[datetime.date] = []
    current = rule.start_date
    end_date = rule.end_date
    iterations = 0
    max_iterations = min(
        max_count * ITERATION_CAP_MULTIPLIER * _period_days(rule),
        MAX_SCAN_DAYS,
        (datetime.date.max - current).days + 1,
    )
    passed_end_date = False

    while len(dates) < max_count and iterations < max_iterations:
        iterations += 1
        if end_date is not None and current > end_date:
            passed_end_date = True
            break
        if matches(current, rule):
            dates.append(current)
        if current == datetime.date.max:
            break
        current += datetime.timedelta(days=1)

    if max_count == 0:
        stop_reason = StopReason.EMPTY_REQUEST
    elif passed_end_date:
        stop_reason = StopReason.END_DATE
    elif len(dates) >= max_count:
        stop_reason = StopReason.COUNT_REACHED
    else:
        stop_reason = StopReason.ITERATION_CAP
        logger.debug(
            f"Stopped scanning {rule.type} rule after {iterations} days with "
            f"{len(dates)} of {max_count} dates found"
        )
    return GeneratedDates(
        dates=dates,
        has_more=stop_reason in (StopReason.COUNT_REACHED, StopReason.ITERATION_CAP),
        stop_reason=stop_reason,
    )


def preview(
    rule: RecurrenceRule, count: int = DEFAULT_PREVIEW_COUNT
) -> list[datetime.date]:
    """Return the first `count` occurrences of `rule`."""
    return generate(rule, count).dates[:count]
