# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional, TypedDict

import pendulum

from lifegrid.model.grid import CellRect, GridParameters
from lifegrid.model.lifespan_config import Rgba


class DayCategory(Enum):
    WEEKDAY = "weekday"
    WEEKDAY_ELAPSED = "weekday_elapsed"
    WEEKEND = "weekend"
    WEEKEND_ELAPSED = "weekend_elapsed"
    BIRTHDAY = "birthday"
    BIRTHDAY_ELAPSED = "birthday_elapsed"


class DayClassification(TypedDict):
    category: DayCategory
    # Overlay drawn as a stroke on top of the fill, never a fill of its own
    is_today: bool


class Stroke(TypedDict):
    width: float
    color: Rgba


class CellStyle(TypedDict):
    fill: Rgba
    rounding: float
    stroke: Optional[Stroke]


class CellPlacement(TypedDict):
    date: pendulum.Date
    rect: CellRect
    classification: DayClassification
    style: CellStyle


class Layout(TypedDict):
    grid: GridParameters
    column_offset: float
    placements: list[CellPlacement]
    unplaced: int
