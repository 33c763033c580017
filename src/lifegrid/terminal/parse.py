# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from lifegrid.color import PALETTE_KEYS, rgba_from_value
from lifegrid.model.lifespan_config import Rgba
from lifegrid.time import date_from_value, today_local


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = date_param.strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_value(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        try:
            return today_local().add(days=int(date))
        except (OverflowError, ValueError) as e:
            raise typer.BadParameter(f"Invalid day offset: {e}")

    if date == "today" or date == "t":
        return today_local()

    raise typer.BadParameter(
        f"Unrecognized date '{date}'; use YYYY-MM-DD, today, or a day offset"
    )


def parse_colors(color_params: Optional[list[str]]) -> Optional[dict[str, Rgba]]:
    """Parse repeated KEY=R,G,B[,A] options into a palette update."""
    if color_params is None:
        return None

    colors: dict[str, Rgba] = {}
    for color_param in color_params:
        key, separator, value = color_param.partition("=")
        key = key.strip()
        if not separator:
            raise typer.BadParameter(f"Expected KEY=R,G,B,A, got '{color_param}'")
        if key not in PALETTE_KEYS:
            raise typer.BadParameter(
                f"Unknown color '{key}'; choose from {', '.join(PALETTE_KEYS)}"
            )
        try:
            colors[key] = rgba_from_value(value)
        except ValueError as e:
            raise typer.BadParameter(str(e))
    return colors
