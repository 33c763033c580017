# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

import pendulum

from lifegrid.error import MissingBirthdate
from lifegrid.model.day_category import CellPlacement, Layout
from lifegrid.model.lifespan_config import LifespanConfig
from lifegrid.model.timeline import Timeline
from lifegrid.service.cell import column_offset, locate_day, map_cell
from lifegrid.service.classify import classify_day, resolve_style
from lifegrid.service.grid import solve_grid
from lifegrid.service.timeline import generate_timeline
from lifegrid.service.validate import validate_lifespan_config
from lifegrid.time import Clock, date_to_str, today_local

logger = logging.getLogger(__name__)


class LifespanSession:
    """
    Owns a committed configuration snapshot and the timeline generated from it.

    The draft configuration handed to commit() is copied, so later edits to
    the draft never reach a layout pass until they are committed again.
    """

    def __init__(self, clock: Clock = today_local) -> None:
        self._clock = clock
        self._config: Optional[LifespanConfig] = None
        self._timeline: Optional[Timeline] = None

    @property
    def config(self) -> LifespanConfig:
        if self._config is None:
            raise MissingBirthdate("No configuration has been committed")
        return self._config

    @property
    def timeline(self) -> Timeline:
        if self._timeline is None:
            raise MissingBirthdate("No configuration has been committed")
        return self._timeline

    @property
    def birthdate(self) -> pendulum.Date:
        birthdate = self.config["birthdate"]
        if birthdate is None:
            raise MissingBirthdate()
        return birthdate

    def commit(self, draft: LifespanConfig) -> None:
        """
        Copy a draft configuration into the session.

        The timeline is regenerated only when the birthdate or life expectancy
        differ from the previous commit.
        """
        validate_lifespan_config(draft)
        snapshot = deepcopy(draft)

        if (
            self._timeline is None
            or self._timeline["birthdate"] != snapshot["birthdate"]
            or self._timeline["life_expectancy"] != snapshot["life_expectancy"]
        ):
            timeline = generate_timeline(
                snapshot["birthdate"], snapshot["life_expectancy"]
            )
        else:
            logger.debug("Keeping timeline of %d days", len(self._timeline["days"]))
            timeline = self._timeline

        self._config = snapshot
        self._timeline = timeline

    def elapsed_date(self) -> pendulum.Date:
        if self.config["elapsed_date_is_today"]:
            return self._clock()
        return self.config["elapsed_date"]

    def weekday_offset(self) -> int:
        return self.birthdate.weekday()

    def layout(self, width: float, height: float) -> Layout:
        """
        Run one layout pass for a viewport.

        Returns:
            The grid, the column offset and one placement per day that fits.
            Days past the grid's capacity are counted in "unplaced".

        Raises:
            MissingBirthdate: If nothing has been committed
            InvalidViewport: If the viewport cannot hold the grid
        """
        config = self.config
        days = self.timeline["days"]
        weekday_offset = self.weekday_offset()
        elapsed_date = self.elapsed_date()

        grid = solve_grid(
            len(days),
            weekday_offset,
            width,
            height,
            config["col_spacing"],
            config["row_spacing"],
            config["border_spacing"],
        )
        offset = column_offset(grid, len(days), weekday_offset, config["col_spacing"])

        placements: list[CellPlacement] = []
        unplaced = 0
        for index, day in enumerate(days):
            if grid["rows"] == 0:
                unplaced += 1
                continue
            position = locate_day(index, weekday_offset, grid["rows"])
            if position["grid_column"] >= grid["columns"]:
                unplaced += 1
                continue

            classification = classify_day(
                day,
                self.birthdate,
                elapsed_date,
                config["display_weekends"],
                config["display_birthday"],
            )
            placements.append(
                {
                    "date": day,
                    "rect": map_cell(
                        grid,
                        position,
                        offset,
                        config["col_spacing"],
                        config["row_spacing"],
                        config["border_spacing"],
                        config["unit_ratio"],
                    ),
                    "classification": classification,
                    "style": resolve_style(
                        classification,
                        config["colors"],
                        grid["unit_size"],
                        config["unit_ratio"],
                    ),
                }
            )

        if unplaced:
            logger.warning(
                "%d of %d days did not fit the %dx%d grid (elapsed date %s)",
                unplaced,
                len(days),
                grid["columns"],
                grid["rows"],
                date_to_str(elapsed_date),
            )

        return {
            "grid": grid,
            "column_offset": offset,
            "placements": placements,
            "unplaced": unplaced,
        }
