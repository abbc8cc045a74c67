"""RGB / HSL conversion and colour helpers.

Colours are plain ``(r, g, b)`` tuples with 0-255 channels. HSL is only used
to compute complementary colours and is never stored on an icon.
"""
import colorsys
from typing import NamedTuple, Tuple

from PIL import ImageColor

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)

# absorbs float noise on channels that are exact integers before truncation
_EPSILON = 1e-6


class HSL(NamedTuple):
    h: float  # degrees, [0, 360)
    s: float  # [0, 1]
    l: float  # [0, 1]  # noqa: E741


def to_hsl(rgb: Color) -> HSL:
    r, g, b = (c / 255.0 for c in rgb[:3])
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return HSL((h * 360.0) % 360.0, s, l)


def to_rgb(hsl: HSL) -> Color:
    """Convert back to 0-255 channels, truncating like an 8-bit cast."""
    r, g, b = colorsys.hls_to_rgb((hsl.h % 360.0) / 360.0, hsl.l, hsl.s)
    return tuple(min(255, max(0, int(c * 255 + _EPSILON))) for c in (r, g, b))


def complementary(rgb: Color) -> Color:
    """Rotate the hue by 180 degrees, keeping saturation and luminance."""
    hsl = to_hsl(rgb)
    if hsl.h < 180:
        h = hsl.h + 180
    else:
        h = hsl.h - 180
    return to_rgb(hsl._replace(h=h))


def parse_color(value) -> Color:
    """Normalise a user supplied colour to an opaque ``(r, g, b)`` tuple.

    Accepts 3- or 4-item sequences (alpha is dropped) and any colour string
    understood by Pillow, e.g. ``"#7a1015"`` or ``"white"``.
    """
    if value is None:
        raise ValueError("color can not be None")
    if isinstance(value, str):
        try:
            value = ImageColor.getrgb(value)
        except ValueError as e:
            raise ValueError(f"unknown color {value!r}") from e
    try:
        channels = tuple(value)
    except TypeError:
        raise ValueError(f"color must be a string or an RGB(A) sequence, got {value!r}") from None
    if len(channels) not in (3, 4):
        raise ValueError(f"color needs 3 or 4 channels, got {len(channels)}")
    rgb = channels[:3]
    for c in rgb:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            raise ValueError(f"color channels must be integers in 0..255, got {rgb!r}")
    return tuple(rgb)


def to_hex(rgb: Color) -> str:
    return '#%02x%02x%02x' % tuple(rgb[:3])
