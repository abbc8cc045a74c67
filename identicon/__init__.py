"""Deterministic mirrored block identicons rendered with Pillow."""

from .checksum import build_grid, create_checksum, pattern
from .color import HSL, complementary, parse_color, to_hsl, to_rgb
from .config import (
    DEFAULT_PIXELS,
    DEFAULT_SIZE,
    MAX_PIXELS,
    MAX_SIZE,
    MIN_PIXELS,
    MIN_SIZE,
    Settings,
    get_settings,
)
from .errors import ConfigError, EncodeError, IdenticonError, InvalidInputError, OptionError, SaveError
from .icon import Icon, new
from .models import IconSpec
from .options import (
    with_background_color,
    with_complementary_background,
    with_foreground_color,
    with_pixels,
    with_size,
)
from .render import draw_pattern

__version__ = "0.1.0"

__all__ = [
    "HSL",
    "DEFAULT_PIXELS",
    "DEFAULT_SIZE",
    "MAX_PIXELS",
    "MAX_SIZE",
    "MIN_PIXELS",
    "MIN_SIZE",
    "ConfigError",
    "EncodeError",
    "Icon",
    "IconSpec",
    "IdenticonError",
    "InvalidInputError",
    "OptionError",
    "SaveError",
    "Settings",
    "build_grid",
    "complementary",
    "create_checksum",
    "draw_pattern",
    "get_settings",
    "new",
    "parse_color",
    "pattern",
    "to_hsl",
    "to_rgb",
    "with_background_color",
    "with_complementary_background",
    "with_foreground_color",
    "with_pixels",
    "with_size",
]
