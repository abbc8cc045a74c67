"""Exception types raised while building and saving identicons."""
from typing import List


class IdenticonError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(IdenticonError, ValueError):
    """The icon name (seed) is unusable, e.g. empty."""


class OptionError(IdenticonError, ValueError):
    """A single configuration option was given an invalid value."""


class ConfigError(IdenticonError, ValueError):
    """One or more options failed; all failures are reported together."""

    def __init__(self, errors: List[OptionError]):
        self.errors = list(errors)
        msg = "\nOption errors:"
        for e in self.errors:
            msg = f"{msg}\n{e}"
        super().__init__(f"Config error: {msg}")


class EncodeError(IdenticonError):
    """The image codec rejected the raster or the requested format."""


class SaveError(IdenticonError, OSError):
    """The output file could not be created or written."""
