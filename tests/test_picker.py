#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

import pytest

from cadence.picker import DatePickerState
from cadence.rule import MonthlyByDate, MonthlyByWeekday, RecurrenceType


@pytest.fixture
def picker(base_date: datetime.date) -> DatePickerState:
    return DatePickerState(today=base_date)


def test_initial_state(picker: DatePickerState, base_date: datetime.date):
    assert picker.recurrence_rule.type == RecurrenceType.DAILY
    assert picker.recurrence_rule.interval == 1
    assert picker.recurrence_rule.start_date == base_date
    assert picker.recurrence_rule.end_date is None
    assert picker.selected_date == base_date
    assert not picker.is_open
    assert picker.preview_dates == []
    assert picker.max_preview_dates == 10


def test_generate_preview_dates(picker: DatePickerState, base_date: datetime.date):
    picker.generate_preview_dates()
    assert len(picker.preview_dates) == 10
    assert picker.preview_dates[0] == base_date


def test_default_today():
    assert DatePickerState().recurrence_rule.start_date == datetime.date.today()


def test_set_recurrence_type_weekly(picker: DatePickerState):
    picker.set_recurrence_type(RecurrenceType.WEEKLY)
    # base date is a Monday
    assert picker.recurrence_rule.days_of_week == (1,)
    assert picker.recurrence_rule.monthly_pattern is None
    assert picker.preview_dates[:2] == [
        datetime.date(2024, 1, 1),
        datetime.date(2024, 1, 8),
    ]
    assert picker.description == "Weekly on Monday"


def test_set_recurrence_type_monthly(picker: DatePickerState):
    picker.set_recurrence_type(RecurrenceType.WEEKLY)
    picker.set_recurrence_type("monthly")
    assert picker.recurrence_rule.type == RecurrenceType.MONTHLY
    assert picker.recurrence_rule.days_of_week is None
    assert picker.recurrence_rule.monthly_pattern == MonthlyByDate()
    assert picker.preview_dates[1] == datetime.date(2024, 2, 1)


def test_set_recurrence_type_clears_type_specific_fields(picker: DatePickerState):
    picker.set_recurrence_type(RecurrenceType.MONTHLY)
    picker.set_recurrence_type(RecurrenceType.YEARLY)
    assert picker.recurrence_rule.days_of_week is None
    assert picker.recurrence_rule.monthly_pattern is None


@pytest.mark.parametrize("interval, expected", [(3, 3), (0, 1), (-2, 1)])
def test_set_interval_clamps(picker: DatePickerState, interval: int, expected: int):
    picker.set_interval(interval)
    assert picker.recurrence_rule.interval == expected


def test_set_interval_recomputes(picker: DatePickerState):
    picker.set_interval(2)
    assert picker.preview_dates[1] == datetime.date(2024, 1, 3)


def test_set_days_of_week_sorts(picker: DatePickerState):
    picker.set_recurrence_type(RecurrenceType.WEEKLY)
    picker.set_days_of_week([5, 1, 3])
    assert picker.recurrence_rule.days_of_week == (1, 3, 5)
    assert picker.preview_dates[:3] == [
        datetime.date(2024, 1, 1),
        datetime.date(2024, 1, 3),
        datetime.date(2024, 1, 5),
    ]


def test_no_days_selected(picker: DatePickerState):
    picker.set_recurrence_type(RecurrenceType.WEEKLY)
    picker.set_days_of_week([])
    assert picker.recurrence_rule.days_of_week == ()
    assert picker.preview_dates == []


def test_set_monthly_pattern(picker: DatePickerState):
    picker.set_recurrence_type(RecurrenceType.MONTHLY)
    picker.set_monthly_pattern(MonthlyByWeekday(weekday=2, position=-1))
    assert picker.preview_dates[:2] == [
        datetime.date(2024, 1, 30),
        datetime.date(2024, 2, 27),
    ]
    assert picker.description == "Monthly on the last Tuesday"


def test_set_start_date(picker: DatePickerState):
    picker.set_start_date(datetime.datetime(2024, 3, 10, 14, 0))
    assert picker.recurrence_rule.start_date == datetime.date(2024, 3, 10)
    assert picker.selected_date == datetime.date(2024, 3, 10)
    assert picker.preview_dates[0] == datetime.date(2024, 3, 10)


def test_set_end_date(picker: DatePickerState):
    picker.set_end_date(datetime.datetime(2024, 1, 3, 18, 0))
    assert picker.recurrence_rule.end_date == datetime.date(2024, 1, 3)
    assert picker.preview_dates == [
        datetime.date(2024, 1, 1),
        datetime.date(2024, 1, 2),
        datetime.date(2024, 1, 3),
    ]
    picker.set_end_date(None)
    assert picker.recurrence_rule.end_date is None
    assert len(picker.preview_dates) == 10


def test_selection_and_visibility_do_not_touch_the_preview(picker: DatePickerState):
    picker.set_selected_date(datetime.datetime(2024, 5, 5, 10))
    picker.set_is_open(True)
    assert picker.selected_date == datetime.date(2024, 5, 5)
    assert picker.is_open
    assert picker.preview_dates == []


def test_reset(picker: DatePickerState, base_date: datetime.date):
    picker.set_recurrence_type(RecurrenceType.YEARLY)
    picker.set_interval(5)
    picker.set_start_date(datetime.date(2025, 6, 1))
    picker.set_is_open(True)
    picker.reset()
    assert picker.recurrence_rule.type == RecurrenceType.DAILY
    assert picker.recurrence_rule.interval == 1
    assert picker.recurrence_rule.start_date == base_date
    assert picker.selected_date == base_date
    assert not picker.is_open
    assert len(picker.preview_dates) == 10
