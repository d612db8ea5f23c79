#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
import logging

import hydra
from dateutil.relativedelta import relativedelta
from omegaconf import DictConfig, OmegaConf

from cadence.calendar_utils import parse_day
from cadence.display import display_month, display_preview
from cadence.enumerator import generate
from cadence.exceptions import ParseError
from cadence.formatter import describe
from cadence.rule import RecurrenceRule, RecurrenceType

logger = logging.getLogger(__name__)


def _parse_type(value: str) -> RecurrenceType:
    try:
        return RecurrenceType(str(value).lower())
    except ValueError as e:
        raise ParseError(f"Unknown recurrence type {value}") from e


def _parse_interval(value: int | str) -> int:
    try:
        interval = int(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid interval {value}") from e
    if interval < 1:
        logger.warning(f"Interval must be at least 1, got {interval}. Using 1 instead.")
        interval = 1
    return interval


def build_rule(cfg: DictConfig) -> RecurrenceRule:
    """Create a rule from the `rule` node of the preview config.

    Raises
    ------
    ParseError
        If the type, interval or one of the dates cannot be parsed.
    """
    days_of_week = cfg.get("days_of_week")
    monthly_pattern = cfg.get("monthly_pattern")
    end_date = cfg.get("end_date")
    return RecurrenceRule(
        type=_parse_type(cfg.type),
        interval=_parse_interval(cfg.get("interval", 1)),
        days_of_week=(
            tuple(days_of_week) if days_of_week is not None else None
        ),
        monthly_pattern=(
            OmegaConf.to_container(monthly_pattern, resolve=True)
            if monthly_pattern is not None
            else None
        ),
        start_date=parse_day(cfg.start_date),
        end_date=parse_day(end_date) if end_date is not None else None,
    )


@hydra.main(
    config_name="preview",
    config_path="pkg://cadence.configs.endpoints",
)
def preview_rule(cfg: DictConfig):
    rule = build_rule(cfg.rule)
    description = describe(rule)
    logger.info(f"Previewing '{description}' starting {rule.start_date}")
    result = generate(rule, cfg.count)
    display_preview(result.dates, description, has_more=result.has_more)
    if not cfg.show_calendar:
        return
    first_month = rule.start_date.replace(day=1)
    for offset in range(cfg.months):
        display_month(
            first_month + relativedelta(months=offset),
            result.dates,
            today=datetime.date.today(),
        )
