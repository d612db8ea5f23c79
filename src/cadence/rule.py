#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""The recurrence rule data model."""

import datetime
from enum import StrEnum, auto
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cadence.aliases import DayOfMonth, DayOfWeek, WeekOfMonth
from cadence.calendar_utils import start_of_day
from cadence.exceptions import InvalidRuleError


class RecurrenceType(StrEnum):
    DAILY = auto()
    WEEKLY = auto()
    MONTHLY = auto()
    YEARLY = auto()


class MonthlyByDate(BaseModel):
    """Repeat on the same numeric day of the month.

    Parameters
    ----------
    day_of_month
        The day on which the rule recurs. Defaults to the day of month of the
        rule start date.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["date"] = "date"
    day_of_month: DayOfMonth | None = None


class MonthlyByWeekday(BaseModel):
    """Repeat on the nth weekday of the month (eg the second Tuesday).

    Parameters
    ----------
    weekday
        Target weekday (0 for Sunday). Defaults to the weekday of the rule start date.
    position
        1 to 4 for the first to the fourth occurrence of `weekday`, -1 for the last.
        Defaults to the position of the rule start date within its month.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["weekday"] = "weekday"
    weekday: DayOfWeek | None = None
    position: WeekOfMonth | None = None


MonthlyPattern = Annotated[MonthlyByDate | MonthlyByWeekday, Field(discriminator="kind")]


class RecurrenceRule(BaseModel):
    """Describes a repeating calendar pattern.

    Parameters
    ----------
    type
        The unit the rule repeats in.
    interval
        Spacing between repetitions, in units of `type`. Every 2 weeks has `interval=2`.
    days_of_week
        Weekly rules only. Weekdays (0 for Sunday) on which the rule recurs. `None`
        accepts any weekday in a matching week while an empty tuple matches nothing,
        which represents a picker where no days have been chosen yet.
    monthly_pattern
        Monthly rules only. Defaults to recurring on the start date's day of month.
    start_date
        The first day considered. Anchors the interval of every rule type.
    end_date
        Last day (inclusive) on which the rule may recur. Unbounded if not set.

    Notes
    -----
    1. Fields that do not apply to `type` are kept but ignored when matching.
    2. Datetimes are truncated to their calendar day.
    """

    model_config = ConfigDict(frozen=True)

    type: RecurrenceType
    interval: int = 1
    days_of_week: tuple[DayOfWeek, ...] | None = None
    monthly_pattern: MonthlyPattern | None = None
    start_date: datetime.date
    end_date: datetime.date | None = None

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        # raised as is by pydantic since it is not a ValueError
        if v < 1:
            raise InvalidRuleError(f"Interval must be a positive integer, got {v}")
        return v

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def normalise_day(cls, v: Any) -> Any:
        if isinstance(v, datetime.date):
            return start_of_day(v)
        return v

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy of the rule with `changes` applied."""
        data = dict(self)
        data.update(changes)
        return self.__class__.model_validate(data)
