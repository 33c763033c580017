import unittest

import pendulum

from lifegrid.color import get_default_palette
from lifegrid.model.day_category import DayCategory
from lifegrid.service.classify import classify_day, is_weekend, resolve_style

BIRTHDATE = pendulum.date(1990, 5, 17)
ELAPSED = pendulum.date(2024, 5, 15)  # a Wednesday


class TestClassifyDay(unittest.TestCase):
    def test_weekday_and_weekend_around_elapsed_date(self) -> None:
        cases = [
            (pendulum.date(2024, 5, 14), DayCategory.WEEKDAY_ELAPSED),
            (pendulum.date(2024, 5, 16), DayCategory.WEEKDAY),
            (pendulum.date(2024, 5, 11), DayCategory.WEEKEND_ELAPSED),
            (pendulum.date(2024, 5, 19), DayCategory.WEEKEND),
        ]
        for day, category in cases:
            with self.subTest(day=str(day)):
                self.assertEqual(
                    classify_day(day, BIRTHDATE, ELAPSED)["category"], category
                )

    def test_elapsed_date_itself_is_elapsed_and_today(self) -> None:
        classification = classify_day(ELAPSED, BIRTHDATE, ELAPSED)
        self.assertEqual(classification["category"], DayCategory.WEEKDAY_ELAPSED)
        self.assertTrue(classification["is_today"])

    def test_today_overlay_on_every_category(self) -> None:
        saturday = pendulum.date(2024, 5, 18)
        birthday = pendulum.date(2024, 5, 17)
        for day in (saturday, birthday):
            with self.subTest(day=str(day)):
                classification = classify_day(day, BIRTHDATE, day)
                self.assertTrue(classification["is_today"])
        self.assertEqual(
            classify_day(birthday, BIRTHDATE, birthday)["category"],
            DayCategory.BIRTHDAY_ELAPSED,
        )
        self.assertFalse(
            classify_day(pendulum.date(2024, 5, 16), BIRTHDATE, ELAPSED)["is_today"]
        )

    def test_birthday_in_another_year(self) -> None:
        future_birthday = pendulum.date(2030, 5, 17)
        self.assertEqual(
            classify_day(future_birthday, BIRTHDATE, ELAPSED)["category"],
            DayCategory.BIRTHDAY,
        )
        past_birthday = pendulum.date(2001, 5, 17)
        self.assertEqual(
            classify_day(past_birthday, BIRTHDATE, ELAPSED)["category"],
            DayCategory.BIRTHDAY_ELAPSED,
        )

    def test_birthday_highlighting_disabled(self) -> None:
        # 2031-05-17 is a Saturday
        day = pendulum.date(2031, 5, 17)
        self.assertEqual(
            classify_day(day, BIRTHDATE, ELAPSED, display_birthday=False)["category"],
            DayCategory.WEEKEND,
        )
        day = pendulum.date(2030, 5, 17)
        self.assertEqual(
            classify_day(day, BIRTHDATE, ELAPSED, display_birthday=False)["category"],
            DayCategory.WEEKDAY,
        )

    def test_weekends_disabled(self) -> None:
        saturday = pendulum.date(2024, 5, 25)
        self.assertTrue(is_weekend(saturday))
        self.assertEqual(
            classify_day(saturday, BIRTHDATE, ELAPSED, display_weekends=False)[
                "category"
            ],
            DayCategory.WEEKDAY,
        )


class TestResolveStyle(unittest.TestCase):
    def test_fill_from_palette(self) -> None:
        colors = get_default_palette()
        style = resolve_style(
            {"category": DayCategory.WEEKEND_ELAPSED, "is_today": False},
            colors,
            unit_size=16.0,
            unit_ratio=0.5,
        )
        self.assertEqual(style["fill"], colors["weekend_elapsed"])
        self.assertAlmostEqual(style["rounding"], 0.5)
        self.assertIsNone(style["stroke"])

    def test_today_adds_stroke_over_fill(self) -> None:
        colors = get_default_palette()
        style = resolve_style(
            {"category": DayCategory.BIRTHDAY, "is_today": True},
            colors,
            unit_size=10.0,
            unit_ratio=0.8,
        )
        self.assertEqual(style["fill"], colors["birthday"])
        self.assertIsNotNone(style["stroke"])
        assert style["stroke"] is not None
        self.assertAlmostEqual(style["stroke"]["width"], 1.5)
        self.assertEqual(style["stroke"]["color"], colors["today"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
