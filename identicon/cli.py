"""Command line front end.

    identicon Simple
    identicon Custom --fg "#7a1015" --complementary --size 7 --pixels 300
    identicon --demo
"""
import argparse
import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .config import get_settings
from .errors import IdenticonError
from .icon import Icon, new
from .options import (
    Option,
    with_background_color,
    with_complementary_background,
    with_foreground_color,
    with_pixels,
    with_size,
)


def build_options(args: argparse.Namespace) -> List[Option]:
    # order matters: --complementary uses the foreground set before it
    options: List[Option] = []
    if args.size is not None:
        options.append(with_size(args.size))
    if args.pixels is not None:
        options.append(with_pixels(args.pixels))
    if args.fg is not None:
        options.append(with_foreground_color(args.fg))
    if args.bg is not None:
        options.append(with_background_color(args.bg))
    if args.complementary:
        options.append(with_complementary_background())
    return options


def _save(icon: Icon, fmt: str, out_dir: Optional[str]) -> None:
    path = icon.save(fmt, out_dir)
    print(f"✅ Saved {path}")


def run_demo(fmt: str, out_dir: Optional[str]) -> int:
    simple = new("Simple")
    _save(simple, fmt, out_dir)
    print(simple.pattern())

    print("\n--------------\n")
    custom = new(
        "Custom",
        with_foreground_color((122, 16, 21)),
        with_complementary_background(),
        with_size(7),
        with_pixels(300),
    )
    _save(custom, fmt, out_dir)
    print(custom)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="identicon", description="Generate a mirrored block identicon from a name")
    ap.add_argument("name", nargs="?", help="Seed string; also the output file name")
    ap.add_argument("--size", type=int, default=None, help="Blocks per row and column (5-20)")
    ap.add_argument("--pixels", type=int, default=None, help="Edge length in pixels (100-500)")
    ap.add_argument("--fg", default=None, help="Foreground color, e.g. '#7a1015' (default: from name hash)")
    ap.add_argument("--bg", default=None, help="Background color (default: white)")
    ap.add_argument("--complementary", action="store_true", help="Use the complement of the foreground as background")
    ap.add_argument("--format", default="png", choices=["png", "jpeg"])
    ap.add_argument("--out-dir", default=None, help="Directory for the image file")
    ap.add_argument("--pattern-only", action="store_true", help="Print the pattern and skip writing a file")
    ap.add_argument("--demo", action="store_true", help="Render the 'Simple' and 'Custom' sample icons")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"⚠ invalid settings: {e}")
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="[%(name)s] %(levelname)s: %(message)s",
    )

    try:
        if args.demo:
            return run_demo(args.format, args.out_dir)
        if args.name is None:
            ap.error("a name is required unless --demo is given")
        icon = new(args.name, *build_options(args))
        if args.pattern_only:
            print(icon.pattern())
            return 0
        _save(icon, args.format, args.out_dir)
        print(icon)
    except IdenticonError as e:
        print(f"⚠ error creating icon: {e}")
        return 1
    return 0
