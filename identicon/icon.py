"""Icon construction and output.

`new` hashes the name, applies the options, freezes the result into an
`IconSpec` and renders it once. The returned `Icon` never changes; build a
new one to get a different configuration.
"""
import logging
import os
from typing import Optional, Tuple

from PIL import Image
from pydantic import ValidationError

from .checksum import Grid, build_grid, create_checksum, pattern
from .codec import EXTENSIONS, Encoder, encode, normalize_format, save_file
from .color import WHITE, Color, to_hex
from .config import Settings, get_settings
from .errors import ConfigError, InvalidInputError, OptionError, SaveError
from .models import IconSpec
from .options import IconDraft, Option, apply_options
from .render import draw_pattern

logger = logging.getLogger(__name__)


class Icon:
    """A rendered, mirrored block icon."""

    def __init__(self, spec: IconSpec, checksum: bytes, settings: Optional[Settings] = None):
        self._spec = spec
        self._checksum = checksum
        self._settings = settings or get_settings()
        self._grid = build_grid(checksum, spec.size)
        self._image = draw_pattern(self._grid, spec.size, spec.pixels, spec.foreground, spec.background)

    @property
    def spec(self) -> IconSpec:
        return self._spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def size(self) -> int:
        return self._spec.size

    @property
    def pixels(self) -> int:
        return self._spec.pixels

    @property
    def foreground(self) -> Color:
        return self._spec.foreground

    @property
    def background(self) -> Color:
        return self._spec.background

    @property
    def checksum(self) -> bytes:
        return self._checksum

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def image(self) -> Image.Image:
        """A copy of the rendered image; the icon's own raster stays untouched."""
        return self._image.copy()

    def rows(self) -> Tuple[Tuple[bool, ...], ...]:
        n = self.size
        return tuple(self._grid[r * n:(r + 1) * n] for r in range(n))

    def pattern(self) -> str:
        return pattern(self._grid, self.size)

    def to_bytes(self, fmt: str = "png", encoder: Optional[Encoder] = None) -> bytes:
        if encoder is not None:
            return encoder(self._image, fmt)
        return encode(self._image, fmt, quality=self._settings.jpeg_quality)

    def filename(self, fmt: str) -> str:
        # the name is used verbatim, so it must stay a single path component
        seps = [s for s in (os.sep, os.altsep, "/") if s]
        if self.name in (".", "..") or any(s in self.name for s in seps):
            raise SaveError(f"icon name is not a valid file name: {self.name!r}")
        return self.name + EXTENSIONS[normalize_format(fmt)]

    def save(self, fmt: str, directory: Optional[str] = None, encoder: Optional[Encoder] = None) -> str:
        """Write the icon to ``<directory>/<name>.<ext>`` and return the path."""
        if directory is None:
            directory = self._settings.output_dir
        path = os.path.join(directory, self.filename(fmt))
        if encoder is None:
            def encoder(image, f):
                return encode(image, f, quality=self._settings.jpeg_quality)
        return save_file(self._image, path, fmt, encoder=encoder)

    def save_png(self, directory: Optional[str] = None, encoder: Optional[Encoder] = None) -> str:
        return self.save("png", directory, encoder)

    def save_jpeg(self, directory: Optional[str] = None, encoder: Optional[Encoder] = None) -> str:
        return self.save("jpeg", directory, encoder)

    def __str__(self) -> str:
        return (
            f"Icon:\n"
            f"file name: {self.name}\n"
            f"size in pixels {self.pixels} x {self.pixels}\n"
            f"size in blocks {self.size} x {self.size}\n"
            f"foreground {to_hex(self.foreground)}\n"
            f"background {to_hex(self.background)}\n"
            f"{self.pattern()}\n"
        )

    def __repr__(self) -> str:
        return f"Icon(name={self.name!r}, size={self.size}, pixels={self.pixels})"


def new(name: str, *options: Option, settings: Optional[Settings] = None) -> Icon:
    """Create an icon for ``name``.

    Args:
        name:     Seed for the pattern and default foreground; also the base of
                  the output file name. Must not be empty.
        options:  `with_*` options, applied in order.
        settings: Defaults to `get_settings()`.

    Raises:
        InvalidInputError: ``name`` is empty. Options are not evaluated.
        ConfigError:       One or more options failed; lists all of them.
    """
    if not isinstance(name, str) or len(name) == 0:
        raise InvalidInputError(f"invalid icon name entered: {name!r}")

    settings = settings or get_settings()
    checksum = create_checksum(name)

    draft = IconDraft(
        name=name,
        size=settings.default_size,
        pixels=settings.default_pixels,
        # first three checksum bytes seed the foreground
        foreground=(checksum[0], checksum[1], checksum[2]),
        background=WHITE,
    )

    errors = apply_options(draft, options)
    if errors:
        raise ConfigError(errors)

    try:
        spec = IconSpec(
            name=draft.name,
            size=draft.size,
            pixels=draft.pixels,
            foreground=draft.foreground,
            background=draft.background,
        )
    except ValidationError as e:
        raise ConfigError([OptionError(err["msg"]) for err in e.errors()]) from e

    logger.debug("creating icon %r: %dx%d blocks, %dpx", name, spec.size, spec.size, spec.pixels)
    return Icon(spec, checksum, settings=settings)
