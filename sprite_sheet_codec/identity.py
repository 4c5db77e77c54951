"""Tile identity strings: NAME.INDEX.SRC_WIDTH.SRC_HEIGHT."""

import re
from dataclasses import dataclass

SEPARATOR = "."
FIELD_COUNT = 4
NUMBER_PATTERN = re.compile(r"[0-9]+")


class IdentityError(ValueError):
    """Raised when an identity string does not follow the tile grammar."""


@dataclass(frozen=True)
class SpriteIdentity:
    """Identity of one tile cut from a source image.

    Attributes:
        name: Base filename of the source image, without extension
        index: Row-major position of the tile within its source image
        source_width: Width of the un-sliced source image in pixels
        source_height: Height of the un-sliced source image in pixels
    """
    name: str
    index: int
    source_width: int
    source_height: int

    def __post_init__(self):
        if not self.name:
            raise IdentityError("Identity name must not be empty")
        if SEPARATOR in self.name:
            raise IdentityError(
                f"Identity name {self.name!r} must not contain {SEPARATOR!r}"
            )
        if self.index < 0:
            raise IdentityError(f"Tile index must be non-negative, got {self.index}")
        if self.source_width <= 0 or self.source_height <= 0:
            raise IdentityError(
                f"Source size must be positive, got "
                f"{self.source_width}x{self.source_height}"
            )

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return SEPARATOR.join(
            (self.name, str(self.index), str(self.source_width), str(self.source_height))
        )

    @classmethod
    def parse(cls, text: str) -> "SpriteIdentity":
        """Parse an identity string.

        Args:
            text: Decoded header text, e.g. ``"hero.3.64.64"``

        Returns:
            SpriteIdentity for the tile

        Raises:
            IdentityError: If the field count is not 4 or a numeric field is invalid
        """
        fields = text.split(SEPARATOR)
        if len(fields) != FIELD_COUNT:
            raise IdentityError(f"Mis-formatted sprite name: {text!r}")

        name, index, width, height = fields
        numbers = (index, width, height)
        if not all(NUMBER_PATTERN.fullmatch(field) for field in numbers):
            raise IdentityError(f"Non-numeric sprite info: {text!r}")

        return cls(name, *(int(field) for field in numbers))
