#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""State behind a recurring date picker. Every change to the recurrence rule
recomputes the preview dates immediately."""

import datetime
import logging
from collections.abc import Iterable

from cadence.aliases import DayOfWeek
from cadence.calendar_utils import day_of_week, start_of_day
from cadence.constants import DEFAULT_MAX_PREVIEW_DATES
from cadence.enumerator import preview
from cadence.formatter import describe
from cadence.rule import MonthlyByDate, MonthlyPattern, RecurrenceRule, RecurrenceType

logger = logging.getLogger(__name__)


def _default_rule(today: datetime.date) -> RecurrenceRule:
    return RecurrenceRule(type=RecurrenceType.DAILY, interval=1, start_date=today)


class DatePickerState:
    """Holds the rule being edited alongside the dates it generates.

    Parameters
    ----------
    today
        The day the picker opens on, which is also the default rule start date.
        Defaults to the current date.
    max_preview_dates
        How many occurrences are kept in `preview_dates`.

    Notes
    -----
    Not thread safe; callers serialise updates.
    """

    def __init__(
        self,
        today: datetime.date | None = None,
        max_preview_dates: int = DEFAULT_MAX_PREVIEW_DATES,
    ):
        self._today = start_of_day(today or datetime.date.today())
        self.max_preview_dates = max_preview_dates
        self.recurrence_rule = _default_rule(self._today)
        self.selected_date = self._today
        self.is_open = False
        self.preview_dates: list[datetime.date] = []

    @property
    def description(self) -> str:
        return describe(self.recurrence_rule)

    def _update_rule(self, **changes) -> None:
        self.recurrence_rule = self.recurrence_rule.evolve(**changes)
        logger.debug(f"Recurrence rule updated with {changes}")
        self.generate_preview_dates()

    def set_recurrence_type(self, type_: RecurrenceType) -> None:
        """Switch the rule type, resetting the fields which only apply to a given type.
        Weekly rules start on the weekday of the start date and monthly rules
        repeat on the start date's day of month."""
        type_ = RecurrenceType(type_)
        days_of_week, monthly_pattern = None, None
        if type_ == RecurrenceType.WEEKLY:
            days_of_week = (day_of_week(self.recurrence_rule.start_date),)
        elif type_ == RecurrenceType.MONTHLY:
            monthly_pattern = MonthlyByDate()
        self._update_rule(
            type=type_, days_of_week=days_of_week, monthly_pattern=monthly_pattern
        )

    def set_interval(self, interval: int) -> None:
        self._update_rule(interval=max(1, interval))

    def set_days_of_week(self, days: Iterable[DayOfWeek]) -> None:
        self._update_rule(days_of_week=tuple(sorted(days)))

    def set_monthly_pattern(self, pattern: MonthlyPattern) -> None:
        self._update_rule(monthly_pattern=pattern)

    def set_start_date(self, day: datetime.date) -> None:
        day = start_of_day(day)
        self.selected_date = day
        self._update_rule(start_date=day)

    def set_end_date(self, day: datetime.date | None) -> None:
        self._update_rule(end_date=start_of_day(day) if day is not None else None)

    def set_selected_date(self, day: datetime.date) -> None:
        self.selected_date = start_of_day(day)

    def set_is_open(self, is_open: bool) -> None:
        self.is_open = is_open

    def generate_preview_dates(self) -> None:
        self.preview_dates = preview(self.recurrence_rule, self.max_preview_dates)

    def reset(self) -> None:
        """Restore the initial daily rule starting on `today`."""
        self.recurrence_rule = _default_rule(self._today)
        self.selected_date = self._today
        self.is_open = False
        self.generate_preview_dates()
