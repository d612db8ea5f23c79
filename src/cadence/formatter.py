#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

from cadence.calendar_utils import day_name, day_of_week, position_name, week_of_month
from cadence.rule import MonthlyByWeekday, RecurrenceRule, RecurrenceType


def _base_text(interval: int, single: str, unit: str) -> str:
    return single if interval == 1 else f"Every {interval} {unit}"


def _weekday_position_text(pattern: MonthlyByWeekday, start: datetime.date) -> str:
    weekday = pattern.weekday if pattern.weekday is not None else day_of_week(start)
    position = pattern.position if pattern.position is not None else week_of_month(start)
    return f"the {position_name(position)} {day_name(weekday)}"


def describe(rule: RecurrenceRule) -> str:
    """Format a recurrence rule as human-readable text, eg "Every 2 weeks on Monday,
    Friday"."""
    match rule.type:
        case RecurrenceType.DAILY:
            return _base_text(rule.interval, "Daily", "days")
        case RecurrenceType.WEEKLY:
            text = _base_text(rule.interval, "Weekly", "weeks")
            if rule.days_of_week:
                day_names = ", ".join(day_name(day) for day in rule.days_of_week)
                return f"{text} on {day_names}"
            return text
        case RecurrenceType.MONTHLY:
            text = _base_text(rule.interval, "Monthly", "months")
            if isinstance(rule.monthly_pattern, MonthlyByWeekday):
                pattern_text = _weekday_position_text(
                    rule.monthly_pattern, rule.start_date
                )
                return f"{text} on {pattern_text}"
            return text
        case RecurrenceType.YEARLY:
            return _base_text(rule.interval, "Yearly", "years")
        case _:
            return "Custom"
