# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console
from rich.table import Table

from lifegrid.color import SETTING_COLOR, VALUE_COLOR
from lifegrid.model.day_category import Layout
from lifegrid.model.timeline import Timeline
from lifegrid.service.timeline import lifespan_day_count
from lifegrid.time import date_to_display_str
from lifegrid.view.view.views.header import header


def count_elapsed_days(days: list[pendulum.Date], elapsed_date: pendulum.Date) -> int:
    """Count the days of a timeline on or before the elapsed date."""
    return sum(1 for day in days if day <= elapsed_date)


def summary_view(
    timeline: Timeline,
    elapsed_date: pendulum.Date,
    layout: Optional[Layout] = None,
    viewport: Optional[tuple[float, float]] = None,
) -> None:
    """
    Display lifespan statistics and, when given, the grid of a layout pass.

    Args:
        timeline: The committed timeline
        elapsed_date: Boundary between elapsed and future days
        layout: Optional layout pass to describe
        viewport: Width and height the layout was computed for
    """
    header("summary")

    console = Console()
    days = timeline["days"]
    total = len(days)
    elapsed = count_elapsed_days(days, elapsed_date)

    table = Table()
    table.add_column("Setting", style=SETTING_COLOR)
    table.add_column("Value", style=VALUE_COLOR)

    table.add_row("birthdate", date_to_display_str(timeline["birthdate"]))
    table.add_row("life expectancy", f"{timeline['life_expectancy']} years")
    table.add_row(
        "lifespan",
        f"{lifespan_day_count(timeline['birthdate'], timeline['life_expectancy'])} days",
    )
    table.add_row("timeline entries", str(total))
    table.add_row("elapsed date", date_to_display_str(elapsed_date))
    table.add_row("days elapsed", str(elapsed))
    table.add_row("days remaining", str(total - elapsed))
    if total > 0:
        table.add_row("elapsed", f"{elapsed / total:.1%}")

    if layout is not None:
        grid = layout["grid"]
        if viewport is not None:
            table.add_row("viewport", f"{viewport[0]:g} x {viewport[1]:g}")
        table.add_row("grid", f"{grid['columns']} columns x {grid['rows']} rows")
        table.add_row("unit size", f"{grid['unit_size']:.3f}")
        table.add_row("column offset", f"{layout['column_offset']:.3f}")
        table.add_row("days placed", str(len(layout["placements"])))
        if layout["unplaced"]:
            table.add_row("days unplaced", f"[red]{layout['unplaced']}[/red]")

    console.print(table)
