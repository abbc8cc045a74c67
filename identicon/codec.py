"""PNG / JPEG encoding and file output.

Encoding is delegated to Pillow. Anything with the `Encoder` signature can be
passed instead, which keeps the file handling testable without a real codec.
"""
import io
import logging
import os
import tempfile
from typing import Callable, Optional

from PIL import Image

from .errors import EncodeError, SaveError

logger = logging.getLogger(__name__)

FORMATS = {
    "png": "PNG",
    "jpeg": "JPEG",
    "jpg": "JPEG",
}

EXTENSIONS = {
    "PNG": ".png",
    "JPEG": ".jpeg",
}

Encoder = Callable[[Image.Image, str], bytes]


def _default_mode() -> int:
    """Mode a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def normalize_format(fmt: str) -> str:
    try:
        return FORMATS[fmt.lower().lstrip(".")]
    except KeyError:
        raise EncodeError(f"unsupported image format: {fmt}") from None


def encode(image: Image.Image, fmt: str, quality: Optional[int] = None) -> bytes:
    """Encode ``image`` with Pillow and return the container bytes."""
    pil_format = normalize_format(fmt)
    params = {}
    if pil_format == "JPEG" and quality is not None:
        params["quality"] = quality
    buf = io.BytesIO()
    try:
        image.save(buf, format=pil_format, **params)
    except (OSError, ValueError) as e:
        raise EncodeError(f"issue saving {pil_format.lower()}: {e}") from e
    return buf.getvalue()


def save_file(image: Image.Image, path: str, fmt: str, encoder: Encoder = encode) -> str:
    """Encode ``image`` and write it to ``path``.

    The bytes are encoded up front and written to a temp file in the target
    directory, then moved into place, so a failure never leaves a
    half-written icon behind.
    """
    data = encoder(image, fmt)

    dirpath = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(dir=dirpath, suffix=".part")
    except OSError as e:
        raise SaveError(f"unable to create file {path}: {e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # mkstemp creates 0600; icons are public files
        os.chmod(tmp_path, _default_mode())
        os.replace(tmp_path, path)
    except OSError as e:
        raise SaveError(f"unable to write file {path}: {e}") from e
    finally:
        if os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                pass

    logger.debug("wrote %d bytes to %s", len(data), path)
    return path
