# SPDX-License-Identifier: MIT

import logging
import math

from lifegrid.error import InvalidConfiguration, InvalidViewport
from lifegrid.model.grid import GridParameters
from lifegrid.service.validate import validate_spacing

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def unit_size_for_columns(
    columns: int, width: float, col_spacing: float, border_spacing: float
) -> float:
    """Edge length of one cell when the width holds this many grid-columns."""
    return width / (
        DAYS_PER_WEEK * columns
        + col_spacing * (columns - 1)
        + 2 * border_spacing
    )


def rows_for_unit_size(
    unit_size: float, height: float, row_spacing: float, border_spacing: float
) -> int:
    """Number of whole grid-rows of this unit size that fit in the height."""
    rows = math.floor(
        (height - 2 * border_spacing * unit_size + row_spacing * unit_size)
        / (unit_size + row_spacing * unit_size)
    )
    return max(rows, 0)


def solve_grid(
    day_count: int,
    weekday_offset: int,
    width: float,
    height: float,
    col_spacing: float,
    row_spacing: float,
    border_spacing: float,
) -> GridParameters:
    """
    Find the fewest grid-columns whose rows hold every day.

    Tries 1, 2, 3, ... grid-columns. Each try shrinks the unit size to fit the
    width, derives how many rows fit the height at that size, and is accepted
    once 7 * columns * rows reaches the days still to place. Capacity grows
    with the column count, so the first accepted count is the smallest one.

    Args:
        day_count: Number of days in the timeline
        weekday_offset: Weekday of the first day, 0 = Monday
        width: Viewport width
        height: Viewport height
        col_spacing: Gap between grid-columns, in cells
        row_spacing: Gap between grid-rows, in cells
        border_spacing: Margin around the grid, in cells

    Returns:
        The accepted columns, rows and unit size

    Raises:
        InvalidViewport: If width or height is not positive, or no column count
            up to the number of days can hold them
        InvalidConfiguration: If weekday_offset is outside 0-6 or a spacing is negative
    """
    if width <= 0 or height <= 0:
        raise InvalidViewport(f"Viewport must be positive, got {width}x{height}")
    if not (0 <= weekday_offset < DAYS_PER_WEEK):
        raise InvalidConfiguration(
            f"Weekday offset must be between 0 and 6, got {weekday_offset}"
        )
    if day_count < 0:
        raise InvalidConfiguration(f"Day count must not be negative, got {day_count}")
    validate_spacing("Column spacing", col_spacing)
    validate_spacing("Row spacing", row_spacing)
    validate_spacing("Border spacing", border_spacing)

    # Signed: the first partial week can leave nothing to place
    days_to_place = day_count - weekday_offset
    max_columns = max(days_to_place, 1)

    for columns in range(1, max_columns + 1):
        unit_size = unit_size_for_columns(columns, width, col_spacing, border_spacing)
        rows = rows_for_unit_size(unit_size, height, row_spacing, border_spacing)
        if DAYS_PER_WEEK * columns * rows >= days_to_place:
            logger.debug(
                "Grid for %d days in %sx%s: %d columns, %d rows, unit %.3f",
                day_count,
                width,
                height,
                columns,
                rows,
                unit_size,
            )
            return {"columns": columns, "rows": rows, "unit_size": unit_size}

    raise InvalidViewport(
        f"Viewport {width}x{height} cannot hold {day_count} days "
        f"within {max_columns} columns"
    )
