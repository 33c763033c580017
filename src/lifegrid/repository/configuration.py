# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from lifegrid import configuration, time
from lifegrid.color import PALETTE_KEYS, get_default_palette, rgba_from_value
from lifegrid.error import InvalidConfiguration
from lifegrid.model.lifespan_config import ColorPalette, LifespanConfig, Rgba
from lifegrid.template.configuration import get_configuration_template


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: add any setting missing from an older config file
        raw_config = cast(dict[str, Any], self._config)
        for key, value in get_configuration_template().items():
            if key not in raw_config:
                raw_config[key] = value

        # YAML loads unquoted dates as date objects
        for key in ("birthdate", "elapsed_date"):
            if raw_config[key] is not None and not isinstance(raw_config[key], str):
                raw_config[key] = time.date_to_str(time.date_from_value(raw_config[key]))

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        birthdate: Optional[str] = None,
        life_expectancy: Optional[int] = None,
        elapsed_date: Optional[str] = None,
        elapsed_date_is_today: Optional[bool] = None,
        display_weekends: Optional[bool] = None,
        display_birthday: Optional[bool] = None,
        col_spacing: Optional[float] = None,
        row_spacing: Optional[float] = None,
        border_spacing: Optional[float] = None,
        unit_ratio: Optional[float] = None,
        viewport_width: Optional[int] = None,
        viewport_height: Optional[int] = None,
        show_header: Optional[bool] = None,
        colors: Optional[dict[str, Rgba]] = None,
    ) -> None:
        self.is_dirty = True

        if birthdate is not None:
            self.config["birthdate"] = birthdate
        if life_expectancy is not None:
            self.config["life_expectancy"] = life_expectancy
        if elapsed_date is not None:
            self.config["elapsed_date"] = elapsed_date
        if elapsed_date_is_today is not None:
            self.config["elapsed_date_is_today"] = elapsed_date_is_today
        if display_weekends is not None:
            self.config["display_weekends"] = display_weekends
        if display_birthday is not None:
            self.config["display_birthday"] = display_birthday
        if col_spacing is not None:
            self.config["col_spacing"] = col_spacing
        if row_spacing is not None:
            self.config["row_spacing"] = row_spacing
        if border_spacing is not None:
            self.config["border_spacing"] = border_spacing
        if unit_ratio is not None:
            self.config["unit_ratio"] = unit_ratio
        if viewport_width is not None:
            self.config["viewport_width"] = viewport_width
        if viewport_height is not None:
            self.config["viewport_height"] = viewport_height
        if show_header is not None:
            self.config["show_header"] = show_header
        if colors is not None:
            configured_colors = self.config.setdefault("colors", {})
            for key, color in colors.items():
                configured_colors[key] = list(color)

    def get_lifespan_config(self) -> LifespanConfig:
        """
        Build the draft LifespanConfig from the stored settings.

        Raises:
            InvalidConfiguration: If a stored date or color cannot be read
        """
        config = self.config
        try:
            birthdate = time.date_from_value_optional(config["birthdate"])
            elapsed_date = time.date_from_value_optional(config["elapsed_date"])
        except ValueError as e:
            raise InvalidConfiguration(f"Invalid date in configuration: {e}") from e

        return {
            "birthdate": birthdate,
            "life_expectancy": config["life_expectancy"],
            "elapsed_date": elapsed_date if elapsed_date is not None else time.today_local(),
            "elapsed_date_is_today": config["elapsed_date_is_today"],
            "display_weekends": config["display_weekends"],
            "display_birthday": config["display_birthday"],
            "col_spacing": float(config["col_spacing"]),
            "row_spacing": float(config["row_spacing"]),
            "border_spacing": float(config["border_spacing"]),
            "unit_ratio": float(config["unit_ratio"]),
            "colors": self.__get_palette(),
        }

    def __get_palette(self) -> ColorPalette:
        palette = cast(dict[str, Rgba], get_default_palette())
        for key, value in (self.config.get("colors") or {}).items():
            if key not in PALETTE_KEYS:
                raise InvalidConfiguration(f"Unknown color '{key}' in configuration")
            try:
                palette[key] = rgba_from_value(value)
            except ValueError as e:
                raise InvalidConfiguration(str(e)) from e
        return cast(ColorPalette, palette)


CONFIGURATION_REPO = ConfigurationRepository()
