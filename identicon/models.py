from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .color import parse_color
from .config import DEFAULT_PIXELS, DEFAULT_SIZE, MAX_PIXELS, MAX_SIZE, MIN_PIXELS, MIN_SIZE
from .render import block_geometry


class IconSpec(BaseModel):
    """Finalised icon configuration. Frozen once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    size: int = Field(DEFAULT_SIZE, ge=MIN_SIZE, le=MAX_SIZE)
    pixels: int = Field(DEFAULT_PIXELS, ge=MIN_PIXELS, le=MAX_PIXELS)
    foreground: Tuple[int, int, int]
    background: Tuple[int, int, int] = (255, 255, 255)

    @field_validator("foreground", "background", mode="before")
    @classmethod
    def validate_color(cls, value):
        return parse_color(value)

    @model_validator(mode="after")
    def cross_validate(self) -> "IconSpec":
        # blocks would be smaller than a pixel
        if self.pixels <= self.size:
            raise ValueError(f"pixels ({self.pixels}) must be greater than size ({self.size})")
        return self

    @property
    def block_length(self) -> int:
        return block_geometry(self.pixels, self.size)[0]

    @property
    def offset(self) -> int:
        return block_geometry(self.pixels, self.size)[1]
