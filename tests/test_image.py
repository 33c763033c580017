import unittest

import pendulum

from lifegrid.service.session import LifespanSession
from lifegrid.template.lifespan_config import get_lifespan_config_template
from lifegrid.view.image import render_layout_image


class TestRenderLayoutImage(unittest.TestCase):
    def setUp(self) -> None:
        draft = get_lifespan_config_template()
        draft["birthdate"] = pendulum.date(2001, 1, 1)
        draft["life_expectancy"] = 1
        self.session = LifespanSession(clock=lambda: pendulum.date(2001, 6, 1))
        self.session.commit(draft)
        self.background = draft["colors"]["background"]

    def test_image_matches_viewport(self) -> None:
        layout = self.session.layout(400, 300)
        image = render_layout_image(layout, 400, 300, self.background)
        self.assertEqual(image.size, (400, 300))

    def test_cells_are_painted_over_background(self) -> None:
        layout = self.session.layout(400, 300)
        image = render_layout_image(layout, 400, 300, self.background)

        rect = layout["placements"][0]["rect"]
        center = (
            int(rect["x"] + rect["width"] / 2),
            int(rect["y"] + rect["height"] / 2),
        )
        self.assertNotEqual(image.getpixel(center), self.background[:3])
        self.assertEqual(image.getpixel((0, 0)), self.background[:3])


if __name__ == "__main__":
    unittest.main(verbosity=2)
