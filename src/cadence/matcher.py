#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Decide whether a calendar day is an occurrence of a recurrence rule."""

import datetime

from cadence.calendar_utils import (
    day_of_week,
    months_between,
    start_of_day,
    week_of_month,
)
from cadence.constants import DAYS_IN_WEEK
from cadence.rule import MonthlyByDate, MonthlyByWeekday, RecurrenceRule, RecurrenceType


def matches(day: datetime.date, rule: RecurrenceRule) -> bool:
    """Check whether `day` satisfies `rule`.

    The check is pure and holds for days on either side of the rule start date,
    although the enumerator only asks about days on or after it. The rule end date
    is not taken into account.
    """
    day = start_of_day(day)
    match rule.type:
        case RecurrenceType.DAILY:
            return _days_since_start(day, rule) % rule.interval == 0
        case RecurrenceType.WEEKLY:
            return _matches_weekly(day, rule)
        case RecurrenceType.MONTHLY:
            return _matches_monthly(day, rule)
        case RecurrenceType.YEARLY:
            return _matches_yearly(day, rule)
        case _:
            return False


def _days_since_start(day: datetime.date, rule: RecurrenceRule) -> int:
    return (day - rule.start_date).days


def _matches_weekly(day: datetime.date, rule: RecurrenceRule) -> bool:
    weeks_since_start = _days_since_start(day, rule) // DAYS_IN_WEEK
    if weeks_since_start % rule.interval != 0:
        return False
    # None means any weekday, an empty selection means no weekday at all
    if rule.days_of_week is None:
        return True
    return day_of_week(day) in rule.days_of_week


def _matches_monthly(day: datetime.date, rule: RecurrenceRule) -> bool:
    if months_between(rule.start_date, day) % rule.interval != 0:
        return False

    start = rule.start_date
    pattern = rule.monthly_pattern
    match pattern:
        case None:
            return day.day == start.day
        case MonthlyByDate():
            target_day = pattern.day_of_month
            if target_day is None:
                target_day = start.day
            return day.day == target_day
        case MonthlyByWeekday():
            target_weekday = pattern.weekday
            if target_weekday is None:
                target_weekday = day_of_week(start)
            target_position = pattern.position
            if target_position is None:
                target_position = week_of_month(start)
            return (
                day_of_week(day) == target_weekday
                and week_of_month(day) == target_position
            )
        case _:
            return False


def _matches_yearly(day: datetime.date, rule: RecurrenceRule) -> bool:
    start = rule.start_date
    # no leap day handling, a rule starting on Feb 29 only recurs in leap years
    return (
        (day.year - start.year) % rule.interval == 0
        and day.month == start.month
        and day.day == start.day
    )
