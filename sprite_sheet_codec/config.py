"""Configuration for sprite sheet building and parsing."""

import logging
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

# Tile settings
DEFAULT_TILE_SIZE = 30
HEADER_HEIGHT = 1  # One header row holds the packed identity

# Reserved background / terminator color (RGBA). Chosen to be unlikely in
# real artwork and in packed header text.
CONTROL_COLOR = (239, 11, 244, 255)

# File settings
SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg")
SHEET_FILENAME_TEMPLATE = "spritesheet_{tile_size}.png"
OUTPUT_FORMAT = "PNG"  # Lossless, never JPEG

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class SheetSettings:
    """Tile geometry and sentinel shared by a build and the matching parse."""
    tile_size: int = DEFAULT_TILE_SIZE
    header_height: int = HEADER_HEIGHT
    control_color: RGBA = CONTROL_COLOR

    def __post_init__(self):
        if self.tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {self.tile_size}")
        if self.header_height <= 0:
            raise ValueError(f"Header height must be positive, got {self.header_height}")

    @property
    def cell_height(self) -> int:
        return self.tile_size + self.header_height

    @property
    def header_capacity(self) -> int:
        """Number of identity characters one header row can hold."""
        return self.tile_size * 3

    @classmethod
    def for_tile_size(cls, tile_size: int, **kwargs) -> "SheetSettings":
        """Build settings, falling back to the default for non-positive sizes."""
        if tile_size <= 0:
            logger.warning(
                "Invalid tile size: %d. Defaulting to tile size: %d",
                tile_size, DEFAULT_TILE_SIZE
            )
            tile_size = DEFAULT_TILE_SIZE
        return cls(tile_size=tile_size, **kwargs)

    @property
    def sheet_filename(self) -> str:
        return SHEET_FILENAME_TEMPLATE.format(tile_size=self.tile_size)
