"""Cut source images into fixed-size tiles with identity headers."""

import logging
from typing import Dict, Iterator, Optional, Tuple

from PIL import Image

from sprite_sheet_codec.config import CONTROL_COLOR, DEFAULT_TILE_SIZE, HEADER_HEIGHT, RGBA
from sprite_sheet_codec.header import HeaderCapacityError, stamp_header
from sprite_sheet_codec.identity import IdentityError, SpriteIdentity
from sprite_sheet_codec.layout import tiles_across

logger = logging.getLogger(__name__)

Box = Tuple[int, int, int, int]


def tile_boxes(
    width: int,
    height: int,
    tile_size: int = DEFAULT_TILE_SIZE
) -> Iterator[Tuple[int, Box]]:
    """Yield (index, crop box) for every tile of a width x height image.

    Tiles are visited row-major. Boxes on the right and bottom edges are
    clamped to the image, so they may be smaller than ``tile_size``.
    """
    total_rows = tiles_across(height, tile_size)
    total_columns = tiles_across(width, tile_size)

    index = 0
    for row in range(total_rows):
        for column in range(total_columns):
            left = column * tile_size
            top = row * tile_size
            right = min(width, left + tile_size)
            bottom = min(height, top + tile_size)
            yield index, (left, top, right, bottom)
            index += 1


def make_tile(
    image: Image.Image,
    box: Box,
    identity: SpriteIdentity,
    tile_size: int = DEFAULT_TILE_SIZE,
    header_height: int = HEADER_HEIGHT,
    control_color: RGBA = CONTROL_COLOR
) -> Image.Image:
    """Copy one region of ``image`` into a new tile and stamp its header.

    The tile starts filled with the control color, so short edge tiles keep
    control-color padding to the right of and below the copied pixels.

    Raises:
        HeaderCapacityError: If the identity does not fit in the header
    """
    tile = Image.new("RGBA", (tile_size, tile_size + header_height), tuple(control_color))
    tile.paste(image.crop(box), (0, header_height))
    return stamp_header(tile, identity.to_string(), control_color)


def slice_image(
    image: Image.Image,
    name: str,
    tile_size: int = DEFAULT_TILE_SIZE,
    header_height: int = HEADER_HEIGHT,
    control_color: RGBA = CONTROL_COLOR,
    tiles: Optional[Dict[str, Image.Image]] = None
) -> Dict[str, Image.Image]:
    """Split an image into headed tiles keyed by identity string.

    Tiles whose identity cannot be encoded, or whose identity is already in
    ``tiles``, are logged and dropped. Other tiles are still produced.

    Args:
        image: Source image (any mode, converted to RGBA)
        name: Base name of the source image, without extension
        tile_size: Tile width and content height in pixels
        header_height: Rows reserved above the content for the header
        control_color: Background / terminator color
        tiles: Ordered mapping to add to (a new one is created if None)

    Returns:
        The mapping of identity string to tile image, in insertion order
    """
    if tiles is None:
        tiles = {}

    image = image.convert("RGBA")
    width, height = image.size

    for index, box in tile_boxes(width, height, tile_size):
        try:
            identity = SpriteIdentity(name, index, width, height)
            key = identity.to_string()
            tile = make_tile(image, box, identity, tile_size, header_height, control_color)
        except (IdentityError, HeaderCapacityError) as e:
            logger.warning("Skipping tile %d of %s: %s", index, name, e)
            continue

        if key in tiles:
            logger.warning("Tile map already contains: %s", key)
            continue
        tiles[key] = tile

    logger.debug(
        "Sliced %s (%dx%d) into %dx%d tiles", name, width, height,
        tiles_across(width, tile_size), tiles_across(height, tile_size)
    )
    return tiles
