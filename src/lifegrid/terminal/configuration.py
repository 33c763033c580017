# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lifegrid import configuration
from lifegrid.color import PALETTE_KEYS, SETTING_COLOR, VALUE_COLOR, rgba_from_value
from lifegrid.repository.configuration import CONFIGURATION_REPO
from lifegrid.terminal.custom_typer import AliasedTyperGroup
from lifegrid.terminal.parse import parse_colors, parse_date
from lifegrid.terminal.validate import (
    clamp_life_expectancy,
    validate_spacing,
    validate_unit_ratio,
    validate_viewport_size,
)
from lifegrid.time import date_to_str_optional

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style=SETTING_COLOR)
    table.add_column("Value", style=VALUE_COLOR)

    table.add_row("birthdate", config["birthdate"] or "None")
    table.add_row("life_expectancy", f"{config['life_expectancy']} years")
    table.add_row(
        "elapsed_date",
        "today" if config["elapsed_date_is_today"] else str(config["elapsed_date"]),
    )
    table.add_row("display_weekends", _enabled(config["display_weekends"]))
    table.add_row("display_birthday", _enabled(config["display_birthday"]))
    table.add_row("col_spacing", f"{config['col_spacing']:g}")
    table.add_row("row_spacing", f"{config['row_spacing']:g}")
    table.add_row("border_spacing", f"{config['border_spacing']:g}")
    table.add_row("unit_ratio", f"{config['unit_ratio']:g}")
    table.add_row(
        "viewport", f"{config['viewport_width']} x {config['viewport_height']}"
    )
    table.add_row("show_header", _enabled(config["show_header"]))

    colors = config.get("colors") or {}
    for key in PALETTE_KEYS:
        if key not in colors:
            continue
        rgba = rgba_from_value(colors[key])
        swatch = Text("■ ", style=f"rgb({rgba[0]},{rgba[1]},{rgba[2]})")
        swatch.append(",".join(str(channel) for channel in rgba), style=VALUE_COLOR)
        table.add_row(f"color.{key}", swatch)

    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table())
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    birthdate: Annotated[
        Optional[str],
        typer.Option("--birthdate", "-b", help="Birthdate (YYYY-MM-DD)"),
    ] = None,
    life_expectancy: Annotated[
        Optional[int],
        typer.Option(
            "--life-expectancy",
            "-l",
            callback=clamp_life_expectancy,
            help="Life expectancy in years, clamped to 1-120",
        ),
    ] = None,
    elapsed_date: Annotated[
        Optional[str],
        typer.Option(
            "--elapsed-date",
            "-e",
            help="Date separating elapsed from future days (YYYY-MM-DD); implies --no-elapsed-today",
        ),
    ] = None,
    elapsed_date_is_today: Annotated[
        Optional[bool],
        typer.Option(
            "--elapsed-today/--no-elapsed-today",
            help="Use the current date as the elapsed date at every run",
        ),
    ] = None,
    display_weekends: Annotated[
        Optional[bool],
        typer.Option(
            "--weekends/--no-weekends",
            help="Color weekends separately from weekdays",
        ),
    ] = None,
    display_birthday: Annotated[
        Optional[bool],
        typer.Option(
            "--birthday/--no-birthday",
            help="Highlight every birthday",
        ),
    ] = None,
    col_spacing: Annotated[
        Optional[float],
        typer.Option(
            "--col-spacing",
            callback=validate_spacing,
            help="Gap between grid-columns, in cells",
        ),
    ] = None,
    row_spacing: Annotated[
        Optional[float],
        typer.Option(
            "--row-spacing",
            callback=validate_spacing,
            help="Gap between grid-rows, in cells",
        ),
    ] = None,
    border_spacing: Annotated[
        Optional[float],
        typer.Option(
            "--border-spacing",
            callback=validate_spacing,
            help="Margin around the grid, in cells",
        ),
    ] = None,
    unit_ratio: Annotated[
        Optional[float],
        typer.Option(
            "--unit-ratio",
            callback=validate_unit_ratio,
            help="Fraction of each cell that is painted, in (0, 1]",
        ),
    ] = None,
    viewport_width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            callback=validate_viewport_size,
            help="Default viewport width in pixels",
        ),
    ] = None,
    viewport_height: Annotated[
        Optional[int],
        typer.Option(
            "--height",
            callback=validate_viewport_size,
            help="Default viewport height in pixels",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the header above views",
        ),
    ] = None,
    color: Annotated[
        Optional[list[str]],
        typer.Option(
            "--color",
            help=f"KEY=R,G,B[,A] with KEY one of {', '.join(PALETTE_KEYS)} (accepts multiple)",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if elapsed_date is not None and elapsed_date_is_today is None:
        elapsed_date_is_today = False

    CONFIGURATION_REPO.update_config(
        birthdate=date_to_str_optional(parse_date(birthdate)),
        life_expectancy=life_expectancy,
        elapsed_date=date_to_str_optional(parse_date(elapsed_date)),
        elapsed_date_is_today=elapsed_date_is_today,
        display_weekends=display_weekends,
        display_birthday=display_birthday,
        col_spacing=col_spacing,
        row_spacing=row_spacing,
        border_spacing=border_spacing,
        unit_ratio=unit_ratio,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        show_header=show_header,
        colors=parse_colors(color),
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(title="Updated Configuration"))
