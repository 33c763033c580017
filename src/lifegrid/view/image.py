# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from PIL import Image, ImageDraw

from lifegrid.model.day_category import CellPlacement, Layout
from lifegrid.model.lifespan_config import Rgba

logger = logging.getLogger(__name__)


def _draw_cell(draw: ImageDraw.ImageDraw, placement: CellPlacement) -> None:
    rect = placement["rect"]
    style = placement["style"]
    box = (
        rect["x"],
        rect["y"],
        rect["x"] + rect["width"],
        rect["y"] + rect["height"],
    )
    radius = int(style["rounding"])

    draw.rounded_rectangle(box, radius=radius, fill=style["fill"])

    stroke = style["stroke"]
    if stroke is not None:
        draw.rounded_rectangle(
            box,
            radius=radius,
            outline=stroke["color"],
            width=max(1, round(stroke["width"])),
        )


def render_layout_image(
    layout: Layout, width: int, height: int, background: Rgba
) -> Image.Image:
    """
    Paint every placement of a layout pass.

    Fill colors are blended with their alpha over the background, and the
    today stroke is drawn on top of the fill.
    """
    image = Image.new("RGB", (width, height), background[:3])
    draw = ImageDraw.Draw(image, "RGBA")

    for placement in layout["placements"]:
        _draw_cell(draw, placement)

    return image


def save_layout_png(
    layout: Layout, width: int, height: int, background: Rgba, out_path: Path
) -> Path:
    image = render_layout_image(layout, width, height, background)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(out_path, format="PNG")
    logger.debug("Wrote %d cells to %s", len(layout["placements"]), out_path)
    return out_path
