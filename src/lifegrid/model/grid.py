# SPDX-License-Identifier: MIT

from typing import TypedDict


class GridParameters(TypedDict):
    columns: int
    rows: int
    unit_size: float


class DayPosition(TypedDict):
    grid_column: int
    grid_row: int
    # 1 = Monday ... 7 = Sunday
    weekday: int


class CellRect(TypedDict):
    x: float
    y: float
    width: float
    height: float
