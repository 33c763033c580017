# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

Rgba = tuple[int, int, int, int]


class ColorPalette(TypedDict):
    weekday: Rgba
    weekday_elapsed: Rgba
    weekend: Rgba
    weekend_elapsed: Rgba
    birthday: Rgba
    birthday_elapsed: Rgba
    today: Rgba
    background: Rgba


class LifespanConfig(TypedDict):
    birthdate: Optional[pendulum.Date]
    life_expectancy: int
    elapsed_date: pendulum.Date
    elapsed_date_is_today: bool
    display_weekends: bool
    display_birthday: bool
    col_spacing: float
    row_spacing: float
    border_spacing: float
    unit_ratio: float
    colors: ColorPalette
