# SPDX-License-Identifier: MIT

from lifegrid.color import get_default_palette
from lifegrid.configuration import Configuration


def get_configuration_template() -> Configuration:
    return {
        "birthdate": None,
        "life_expectancy": 80,
        "elapsed_date": None,
        "elapsed_date_is_today": True,
        "display_weekends": True,
        "display_birthday": True,
        "col_spacing": 1.0,
        "row_spacing": 0.0,
        "border_spacing": 1.0,
        "unit_ratio": 0.8,
        "viewport_width": 1920,
        "viewport_height": 1080,
        "show_header": True,
        "colors": {
            key: list(value) for key, value in get_default_palette().items()
        },
    }
