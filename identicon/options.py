"""Functional options for `identicon.new`.

Each option is a callable applied to a private `IconDraft`. An option that
gets a bad value raises `OptionError`; `apply_options` keeps going and hands
back every failure so they can be reported together.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, List

from .color import Color, complementary, parse_color
from .config import MAX_PIXELS, MAX_SIZE, MIN_PIXELS, MIN_SIZE
from .errors import OptionError


@dataclass
class IconDraft:
    name: str
    size: int
    pixels: int
    foreground: Color
    background: Color


Option = Callable[[IconDraft], None]


def with_pixels(p: int) -> Option:
    """Set the number of pixels per side of the icon.

    For best results ``p`` should be a multiple of the grid size.
    """
    def option(draft: IconDraft) -> None:
        if isinstance(p, bool) or not isinstance(p, int):
            raise OptionError(f"pixel length must be an integer, got {p!r}")
        if p < MIN_PIXELS:
            raise OptionError(f"pixel length needs to be at least {MIN_PIXELS}, got {p}")
        if p > MAX_PIXELS:
            raise OptionError(f"pixel length can not exceed {MAX_PIXELS}, got {p}")
        draft.pixels = int(p)
    return option


def with_size(s: int) -> Option:
    """Set the number of blocks per column and row."""
    def option(draft: IconDraft) -> None:
        if isinstance(s, bool) or not isinstance(s, int):
            raise OptionError(f"grid size must be an integer, got {s!r}")
        if s < MIN_SIZE:
            raise OptionError(f"grid size can not be less than {MIN_SIZE}, got {s}")
        if s > MAX_SIZE:
            raise OptionError(f"grid size can not exceed max of {MAX_SIZE}, got {s}")
        draft.size = int(s)
    return option


def with_foreground_color(c) -> Option:
    def option(draft: IconDraft) -> None:
        if c is None:
            raise OptionError("can not set foreground color to None, please provide a valid color")
        try:
            draft.foreground = parse_color(c)
        except ValueError as e:
            raise OptionError(f"invalid foreground color: {e}") from e
    return option


def with_background_color(c) -> Option:
    def option(draft: IconDraft) -> None:
        if c is None:
            raise OptionError("can not set background to None color, please provide a valid color")
        try:
            draft.background = parse_color(c)
        except ValueError as e:
            raise OptionError(f"invalid background color: {e}") from e
    return option


def with_complementary_background() -> Option:
    """Use the complement of the foreground, as it stands when applied."""
    def option(draft: IconDraft) -> None:
        draft.background = complementary(draft.foreground)
    return option


def apply_options(draft: IconDraft, options: Iterable[Option]) -> List[OptionError]:
    errors = []
    for option in options:
        try:
            option(draft)
        except OptionError as e:
            errors.append(e)
    return errors
