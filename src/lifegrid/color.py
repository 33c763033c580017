# SPDX-License-Identifier: MIT

from lifegrid.model.lifespan_config import ColorPalette, Rgba

# Console styles for terminal output
SETTING_COLOR = "cyan"
VALUE_COLOR = "magenta"
ERROR_COLOR = "red"

PALETTE_KEYS = (
    "weekday",
    "weekday_elapsed",
    "weekend",
    "weekend_elapsed",
    "birthday",
    "birthday_elapsed",
    "today",
    "background",
)


def get_default_palette() -> ColorPalette:
    """Return the default cell colors.

    Elapsed variants share the hue of their future counterpart at a lower alpha.
    """
    return {
        "weekday": (255, 255, 255, 100),
        "weekday_elapsed": (255, 255, 255, 20),
        "weekend": (225, 225, 250, 100),
        "weekend_elapsed": (225, 225, 250, 20),
        "birthday": (255, 196, 110, 160),
        "birthday_elapsed": (255, 196, 110, 40),
        "today": (255, 255, 255, 255),
        "background": (27, 27, 27, 255),
    }


def rgba_from_value(value: object) -> Rgba:
    """Convert a loaded [r, g, b, a] list (or 'r,g,b,a' string) to an RGBA tuple."""
    if isinstance(value, str):
        parts: list[object] = [part.strip() for part in value.split(",")]
    elif isinstance(value, (list, tuple)):
        parts = list(value)
    else:
        raise ValueError(f"Unsupported color value: {value!r}")

    if len(parts) == 3:
        parts.append(255)
    if len(parts) != 4:
        raise ValueError(f"Color must have 3 or 4 channels: {value!r}")

    channels = tuple(int(part) for part in parts)  # type: ignore[call-overload]
    if any(channel < 0 or channel > 255 for channel in channels):
        raise ValueError(f"Color channels must be between 0 and 255: {value!r}")
    return channels  # type: ignore[return-value]
