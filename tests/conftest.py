#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

import pytest

from cadence.rule import RecurrenceRule, RecurrenceType

# a Monday
BASE_DATE = datetime.date(2024, 1, 1)


@pytest.fixture
def base_date() -> datetime.date:
    return BASE_DATE


@pytest.fixture
def daily_rule() -> RecurrenceRule:
    return RecurrenceRule(type=RecurrenceType.DAILY, interval=1, start_date=BASE_DATE)


@pytest.fixture
def weekly_rule() -> RecurrenceRule:
    return RecurrenceRule(
        type=RecurrenceType.WEEKLY,
        interval=1,
        days_of_week=[1, 3, 5],
        start_date=BASE_DATE,
    )


@pytest.fixture
def no_days_rule() -> RecurrenceRule:
    return RecurrenceRule(
        type=RecurrenceType.WEEKLY, interval=1, days_of_week=[], start_date=BASE_DATE
    )
