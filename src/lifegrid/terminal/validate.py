# SPDX-License-Identifier: MIT

from typing import Optional

import typer

MIN_LIFE_EXPECTANCY = 1
MAX_LIFE_EXPECTANCY = 120


def clamp_life_expectancy(life_expectancy: Optional[int]) -> Optional[int]:
    if life_expectancy is None:
        return None
    return min(max(life_expectancy, MIN_LIFE_EXPECTANCY), MAX_LIFE_EXPECTANCY)


def validate_spacing(spacing: Optional[float]) -> Optional[float]:
    if spacing is None:
        return None
    if spacing < 0:
        raise typer.BadParameter("Spacing must not be negative")
    return spacing


def validate_unit_ratio(unit_ratio: Optional[float]) -> Optional[float]:
    if unit_ratio is None:
        return None
    if not (0 < unit_ratio <= 1):
        raise typer.BadParameter("Unit ratio must be greater than 0 and at most 1")
    return unit_ratio


def validate_viewport_size(size: Optional[int]) -> Optional[int]:
    if size is None:
        return None
    if size <= 0:
        raise typer.BadParameter("Viewport size must be positive")
    return size
