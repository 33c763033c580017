# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "lifegrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    birthdate: Optional[str]
    life_expectancy: int
    elapsed_date: Optional[str]
    elapsed_date_is_today: bool
    display_weekends: bool
    display_birthday: bool
    col_spacing: float
    row_spacing: float
    border_spacing: float
    unit_ratio: float
    viewport_width: int
    viewport_height: int
    show_header: bool
    colors: NotRequired[dict[str, list[int]]]
