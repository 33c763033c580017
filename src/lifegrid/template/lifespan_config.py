# SPDX-License-Identifier: MIT

from lifegrid.color import get_default_palette
from lifegrid.model.lifespan_config import LifespanConfig
from lifegrid.time import today_local


def get_lifespan_config_template() -> LifespanConfig:
    return {
        "birthdate": None,
        "life_expectancy": 80,
        "elapsed_date": today_local(),
        "elapsed_date_is_today": True,
        "display_weekends": True,
        "display_birthday": True,
        "col_spacing": 1.0,
        "row_spacing": 0.0,
        "border_spacing": 1.0,
        "unit_ratio": 0.8,
        "colors": get_default_palette(),
    }
