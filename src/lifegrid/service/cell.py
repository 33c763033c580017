# SPDX-License-Identifier: MIT

from lifegrid.error import InvalidViewport
from lifegrid.model.grid import CellRect, DayPosition, GridParameters
from lifegrid.service.grid import DAYS_PER_WEEK


def locate_day(index: int, weekday_offset: int, rows: int) -> DayPosition:
    """
    Place the index-th day of a timeline on the grid.

    Weeks run top to bottom inside a grid-column, then continue in the next
    grid-column. The first week starts at the first day's weekday, so its
    leading slots stay empty.
    """
    if rows <= 0:
        raise InvalidViewport("Grid has no rows to place days in")
    column_capacity = DAYS_PER_WEEK * rows
    slot = index + weekday_offset
    return {
        "grid_column": slot // column_capacity,
        "grid_row": (slot % column_capacity) // DAYS_PER_WEEK,
        "weekday": slot % DAYS_PER_WEEK + 1,
    }


def column_offset(
    grid: GridParameters,
    day_count: int,
    weekday_offset: int,
    col_spacing: float,
) -> float:
    """
    Horizontal shift per grid-column that spreads out empty trailing columns.

    When the last grid-columns would be left entirely empty, their width is
    shared between the gaps of the occupied grid-columns so the grid spans the
    viewport instead of ending early. Fewer than two occupied grid-columns
    have no gap to widen and get no shift.
    """
    rows = grid["rows"]
    columns = grid["columns"]
    if rows <= 0:
        return 0.0

    column_capacity = DAYS_PER_WEEK * rows
    used_slots = day_count + weekday_offset
    # Signed: a grid filled to the last slot leaves a negative remainder
    spare_slots = columns * column_capacity - used_slots
    if spare_slots < column_capacity:
        return 0.0

    empty_columns = spare_slots // column_capacity
    occupied_columns = columns - empty_columns
    if occupied_columns < 2:
        return 0.0

    column_width = grid["unit_size"] * (DAYS_PER_WEEK + col_spacing)
    return empty_columns * column_width / (occupied_columns - 1)


def map_cell(
    grid: GridParameters,
    position: DayPosition,
    col_offset: float,
    col_spacing: float,
    row_spacing: float,
    border_spacing: float,
    unit_ratio: float,
) -> CellRect:
    """Compute the painted rectangle of a day, inset so only unit_ratio of the cell is filled."""
    unit_size = grid["unit_size"]
    grid_column = position["grid_column"]
    grid_row = position["grid_row"]

    x = (
        unit_size
        * (
            border_spacing
            + position["weekday"]
            + DAYS_PER_WEEK * grid_column
            + col_spacing * grid_column
        )
        + grid_column * col_offset
    )
    y = unit_size * (border_spacing + grid_row + row_spacing * grid_row)

    inset = (1 - unit_ratio) / 2 * unit_size
    return {
        "x": x + inset,
        "y": y + inset,
        "width": unit_ratio * unit_size,
        "height": unit_ratio * unit_size,
    }
