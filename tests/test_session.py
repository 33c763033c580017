import unittest

import pendulum

from lifegrid.error import InvalidConfiguration, InvalidViewport, MissingBirthdate
from lifegrid.model.day_category import DayCategory
from lifegrid.model.lifespan_config import LifespanConfig
from lifegrid.service.session import LifespanSession
from lifegrid.template.lifespan_config import get_lifespan_config_template

CLOCK_DATE = pendulum.date(2001, 6, 1)


def _fixed_clock() -> pendulum.Date:
    return CLOCK_DATE


def _draft(**overrides: object) -> LifespanConfig:
    draft = get_lifespan_config_template()
    draft["birthdate"] = pendulum.date(2001, 1, 1)  # a Monday
    draft["life_expectancy"] = 1
    draft.update(overrides)  # type: ignore[typeddict-item]
    return draft


class TestLifespanSession(unittest.TestCase):
    def test_nothing_committed(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        with self.assertRaises(MissingBirthdate):
            session.layout(800, 600)
        with self.assertRaises(MissingBirthdate):
            _ = session.timeline

    def test_commit_requires_birthdate(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        with self.assertRaises(MissingBirthdate):
            session.commit(_draft(birthdate=None))

    def test_commit_rejects_invalid_ratio(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        for ratio in (0.0, 1.5, -0.2):
            with self.subTest(ratio=ratio):
                with self.assertRaises(InvalidConfiguration):
                    session.commit(_draft(unit_ratio=ratio))

    def test_snapshot_is_isolated_from_draft(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        draft = _draft()
        session.commit(draft)

        draft["life_expectancy"] = 50
        draft["colors"]["weekday"] = (1, 2, 3, 4)

        self.assertEqual(session.config["life_expectancy"], 1)
        self.assertNotEqual(session.config["colors"]["weekday"], (1, 2, 3, 4))
        self.assertEqual(len(session.timeline["days"]), 365)

    def test_timeline_regenerated_only_when_lifespan_changes(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        session.commit(_draft())
        first = session.timeline

        session.commit(_draft(col_spacing=3.0, display_weekends=False))
        self.assertIs(session.timeline, first)

        session.commit(_draft(life_expectancy=2))
        self.assertIsNot(session.timeline, first)
        self.assertEqual(len(session.timeline["days"]), 730)

        second = session.timeline
        session.commit(_draft(life_expectancy=2, birthdate=pendulum.date(2001, 1, 2)))
        self.assertIsNot(session.timeline, second)

    def test_elapsed_date_follows_clock(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        session.commit(_draft(elapsed_date_is_today=True))
        self.assertEqual(session.elapsed_date(), CLOCK_DATE)

        frozen = pendulum.date(2001, 3, 3)
        session.commit(_draft(elapsed_date_is_today=False, elapsed_date=frozen))
        self.assertEqual(session.elapsed_date(), frozen)

    def test_live_clock_is_read_at_evaluation_time(self) -> None:
        dates = [pendulum.date(2001, 2, 1), pendulum.date(2001, 2, 2)]
        session = LifespanSession(clock=lambda: dates[0])
        session.commit(_draft())
        self.assertEqual(session.elapsed_date(), dates[0])
        dates.pop(0)
        self.assertEqual(session.elapsed_date(), pendulum.date(2001, 2, 2))

    def test_layout_places_every_day(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        session.commit(_draft())
        layout = session.layout(400, 300)

        placements = layout["placements"]
        self.assertEqual(layout["unplaced"], 0)
        self.assertEqual(len(placements), 365)
        self.assertEqual(
            [placement["date"] for placement in placements], session.timeline["days"]
        )

        today = [p for p in placements if p["classification"]["is_today"]]
        self.assertEqual(len(today), 1)
        self.assertEqual(today[0]["date"], CLOCK_DATE)
        self.assertIsNotNone(today[0]["style"]["stroke"])

        self.assertEqual(
            placements[0]["classification"]["category"], DayCategory.BIRTHDAY_ELAPSED
        )
        self.assertEqual(
            placements[-1]["classification"]["category"], DayCategory.WEEKDAY
        )

    def test_layout_accounts_for_every_day(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        # 2000-01-01 is a Saturday, so the first week is mostly empty
        session.commit(_draft(birthdate=pendulum.date(2000, 1, 1), life_expectancy=3))
        for width, height in ((1920, 1080), (640, 480), (300, 900)):
            with self.subTest(viewport=(width, height)):
                layout = session.layout(width, height)
                self.assertEqual(
                    len(layout["placements"]) + layout["unplaced"],
                    len(session.timeline["days"]),
                )

    def test_layout_counts_days_past_capacity(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        session.commit(_draft(birthdate=pendulum.date(2000, 1, 1), life_expectancy=3))
        days = session.timeline["days"]

        with self.assertLogs("lifegrid.service.session", level="WARNING") as logs:
            layout = session.layout(100, 126)

        self.assertEqual((layout["grid"]["columns"], layout["grid"]["rows"]), (4, 39))
        self.assertEqual(layout["unplaced"], 9)
        self.assertEqual(len(layout["placements"]), len(days) - 9)
        self.assertEqual(
            [placement["date"] for placement in layout["placements"]],
            days[: len(days) - 9],
        )
        self.assertIn("9 of 1096 days", logs.output[0])

    def test_layout_is_deterministic(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        session.commit(_draft(life_expectancy=5))
        self.assertEqual(session.layout(1024, 768), session.layout(1024, 768))

    def test_layout_rejects_degenerate_viewport(self) -> None:
        session = LifespanSession(clock=_fixed_clock)
        session.commit(_draft())
        with self.assertRaises(InvalidViewport):
            session.layout(0, 600)


if __name__ == "__main__":
    unittest.main(verbosity=2)
