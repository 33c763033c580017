# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from lifegrid.model.day_category import (
    CellStyle,
    DayCategory,
    DayClassification,
    Stroke,
)
from lifegrid.model.lifespan_config import ColorPalette

# ISO weekday numbers
SATURDAY = 6
SUNDAY = 7


def is_weekend(day: pendulum.Date) -> bool:
    return day.isoweekday() in (SATURDAY, SUNDAY)


def is_birthday(day: pendulum.Date, birthdate: pendulum.Date) -> bool:
    return day.month == birthdate.month and day.day == birthdate.day


def classify_day(
    day: pendulum.Date,
    birthdate: pendulum.Date,
    elapsed_date: pendulum.Date,
    display_weekends: bool = True,
    display_birthday: bool = True,
) -> DayClassification:
    """
    Classify a day for painting.

    The fill category combines elapsed/future with weekday/weekend, and a
    birthday overrides weekday/weekend when highlighting is enabled. The
    today overlay depends only on the elapsed date.
    """
    elapsed = day <= elapsed_date

    if display_birthday and is_birthday(day, birthdate):
        category = DayCategory.BIRTHDAY_ELAPSED if elapsed else DayCategory.BIRTHDAY
    elif display_weekends and is_weekend(day):
        category = DayCategory.WEEKEND_ELAPSED if elapsed else DayCategory.WEEKEND
    else:
        category = DayCategory.WEEKDAY_ELAPSED if elapsed else DayCategory.WEEKDAY

    return {"category": category, "is_today": day == elapsed_date}


def resolve_style(
    classification: DayClassification,
    colors: ColorPalette,
    unit_size: float,
    unit_ratio: float,
) -> CellStyle:
    stroke: Optional[Stroke] = None
    if classification["is_today"]:
        stroke = {"width": unit_size * 0.1 + 0.5, "color": colors["today"]}

    return {
        "fill": colors[classification["category"].value],  # type: ignore[literal-required]
        "rounding": unit_size * unit_ratio / 16,
        "stroke": stroke,
    }
