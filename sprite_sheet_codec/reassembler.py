"""Rebuild source images from decoded tiles."""

import logging
from typing import Dict, Iterable, Tuple

from PIL import Image

from sprite_sheet_codec.config import DEFAULT_TILE_SIZE
from sprite_sheet_codec.layout import tiles_across
from sprite_sheet_codec.sheet import DecodedTile

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


def tile_position(index: int, source_width: int, tile_size: int = DEFAULT_TILE_SIZE) -> Tuple[int, int]:
    """Map a tile index to its (column, row) in the source image.

    The column count comes from the source width recorded in the tile's
    identity, never from the sheet grid, so it matches the slicing order.
    """
    columns = tiles_across(source_width, tile_size)
    return index % columns, index // columns


def tile_count(source_width: int, source_height: int, tile_size: int = DEFAULT_TILE_SIZE) -> int:
    return tiles_across(source_width, tile_size) * tiles_across(source_height, tile_size)


def reassemble(
    tiles: Iterable[DecodedTile],
    tile_size: int = DEFAULT_TILE_SIZE
) -> Dict[str, Image.Image]:
    """Paste decoded tiles back into per-source images.

    Output images are allocated at the source size recorded in the first tile
    seen for each name and start fully transparent. Tiles with an index
    outside their source grid, or whose source size disagrees with the first
    tile of the same name, are logged and skipped.

    Args:
        tiles: Decoded, trimmed tiles in any order
        tile_size: Tile size the sheet was built with

    Returns:
        Mapping of source name to rebuilt RGBA image, in first-seen order
    """
    images = {}

    for tile in tiles:
        identity = tile.identity
        size = (identity.source_width, identity.source_height)

        if identity.index >= tile_count(*size, tile_size):
            logger.warning(
                "Tile index %d out of range for %s (%dx%d at tile size %d)",
                identity.index, identity.name, *size, tile_size
            )
            continue

        image = images.get(identity.name)
        if image is None:
            image = Image.new("RGBA", size, TRANSPARENT)
            images[identity.name] = image
        elif image.size != size:
            logger.warning(
                "Tile %s declares size %dx%d but %s is %dx%d; skipping",
                identity, *size, identity.name, *image.size
            )
            continue

        column, row = tile_position(identity.index, identity.source_width, tile_size)
        image.paste(tile.image, (column * tile_size, row * tile_size))

    return images
