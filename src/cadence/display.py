#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Render recurrence previews in the terminal with `rich`."""

import calendar
import datetime
from collections.abc import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cadence.calendar_utils import WEEKDAY_NAMES

DATE_FORMAT = "%a, %b %d, %Y"
MONTH_FORMAT = "%B %Y"
SUNDAY = 6
"""`calendar` module index for Sunday, the first column of the month grid."""


def build_month_grid(year: int, month: int) -> list[list[datetime.date]]:
    """Weeks covering `month`, each a list of seven dates starting on a Sunday. The
    first and last weeks are padded with days from the adjacent months."""
    return calendar.Calendar(firstweekday=SUNDAY).monthdatescalendar(year, month)


def display_preview(
    dates: list[datetime.date],
    description: str,
    has_more: bool = False,
    console: Console | None = None,
):
    """Display upcoming occurrences as a numbered `rich` table.

    ┏━━━┳━━━━━━━━━━━━━━━━━━┓
    ┃ # ┃ Date             ┃
    ┡━━━╇━━━━━━━━━━━━━━━━━━┩
    """  # noqa

    console = console or Console()
    table = Table(
        title=description, show_header=True, header_style="bold magenta"
    )
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Date", style="white")
    for i, day in enumerate(dates, start=1):
        table.add_row(str(i), day.strftime(DATE_FORMAT))
    if not dates:
        table.add_row("", Text("No dates match this rule", style="dim"))
    console.print(table)
    if has_more:
        console.print("[dim]More dates follow...[/dim]")


def display_month(
    month_start: datetime.date,
    highlighted: Iterable[datetime.date],
    today: datetime.date | None = None,
    console: Console | None = None,
):
    """Display the month containing `month_start` as a calendar grid, with the
    `highlighted` dates in bold green and `today` underlined. Days outside the
    month are dimmed."""
    console = console or Console()
    highlighted = set(highlighted)
    table = Table(
        title=month_start.strftime(MONTH_FORMAT),
        show_header=True,
        header_style="bold magenta",
    )
    for name in WEEKDAY_NAMES:
        table.add_column(name[:2], justify="right")

    for week in build_month_grid(month_start.year, month_start.month):
        cells = []
        for day in week:
            style = ""
            if day.month != month_start.month:
                style = "dim"
            elif day in highlighted:
                style = "bold green"
            if day == today:
                style = f"{style} underline".strip()
            cells.append(Text(str(day.day), style=style))
        table.add_row(*cells)
    console.print(table)
