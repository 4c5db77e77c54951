"""Compose headed tiles into a sprite sheet and take them back out."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

import numpy as np
from PIL import Image

from sprite_sheet_codec.config import CONTROL_COLOR, DEFAULT_TILE_SIZE, HEADER_HEIGHT, RGBA
from sprite_sheet_codec.header import read_header
from sprite_sheet_codec.identity import IdentityError, SpriteIdentity
from sprite_sheet_codec.layout import GridLayout, plan_grid

logger = logging.getLogger(__name__)


class MalformedTileError(ValueError):
    """Raised when a tile has a header but no content outside the padding."""


@dataclass
class DecodedTile:
    """A tile recovered from a sheet, trimmed of its header and padding."""
    identity: SpriteIdentity
    image: Image.Image


def cell_origin(
    column: int,
    row: int,
    tile_size: int = DEFAULT_TILE_SIZE,
    header_height: int = HEADER_HEIGHT
) -> Tuple[int, int]:
    """Top-left pixel of a grid cell in the sheet."""
    return column * tile_size, row * (tile_size + header_height)


def compose_sheet(
    tiles: Iterable[Image.Image],
    tile_size: int = DEFAULT_TILE_SIZE,
    header_height: int = HEADER_HEIGHT,
    control_color: RGBA = CONTROL_COLOR
) -> Image.Image:
    """Lay tiles out left to right, top to bottom on a control-color sheet.

    Args:
        tiles: Headed tiles, each tile_size x (tile_size + header_height)
        tile_size: Tile width in pixels
        header_height: Header rows per tile
        control_color: Background color for unused cells

    Returns:
        RGBA sheet of (columns * tile_size) x (rows * (tile_size + header_height))

    Raises:
        ValueError: If there are no tiles
    """
    tiles = list(tiles)
    if not tiles:
        raise ValueError("No tiles to compose")

    layout = plan_grid(len(tiles))
    cell_height = tile_size + header_height
    sheet = Image.new(
        "RGBA",
        (layout.columns * tile_size, layout.rows * cell_height),
        tuple(control_color)
    )

    for i, tile in enumerate(tiles):
        row = i // layout.columns
        column = i % layout.columns
        sheet.paste(tile, cell_origin(column, row, tile_size, header_height))

    return sheet


def sheet_grid(
    sheet: Image.Image,
    tile_size: int = DEFAULT_TILE_SIZE,
    header_height: int = HEADER_HEIGHT
) -> GridLayout:
    """Grid of whole cells in a sheet; partial trailing cells are ignored."""
    width, height = sheet.size
    return GridLayout(
        columns=width // tile_size,
        rows=height // (tile_size + header_height)
    )


def iter_cells(
    sheet: Image.Image,
    tile_size: int = DEFAULT_TILE_SIZE,
    header_height: int = HEADER_HEIGHT
) -> Iterator[Tuple[int, int, Image.Image]]:
    """Yield (column, row, cell image) for every whole cell, row-major."""
    layout = sheet_grid(sheet, tile_size, header_height)
    for row in range(layout.rows):
        for column in range(layout.columns):
            left, top = cell_origin(column, row, tile_size, header_height)
            box = (left, top, left + tile_size, top + tile_size + header_height)
            yield column, row, sheet.crop(box)


def trim_tile(
    tile: Image.Image,
    header_height: int = HEADER_HEIGHT,
    control_color: RGBA = CONTROL_COLOR
) -> Image.Image:
    """Strip the header and trailing control-color padding from a tile.

    Width is measured along the first content row and height down the first
    content column, each up to the first control-color pixel.

    Raises:
        MalformedTileError: If the content trims to zero width or height
    """
    pixels = np.asarray(tile.convert("RGBA"))
    content = pixels[header_height:]
    if content.size == 0:
        raise MalformedTileError("Tile has no content rows")

    is_control = np.all(content == np.asarray(control_color, dtype=content.dtype), axis=-1)
    width = _leading_run(~is_control[0])
    height = _leading_run(~is_control[:, 0])

    if width == 0 or height == 0:
        raise MalformedTileError("Tile content is entirely control color")

    return tile.crop((0, header_height, width, header_height + height))


def _leading_run(mask: np.ndarray) -> int:
    """Length of the run of True values at the start of ``mask``."""
    stops = np.flatnonzero(~mask)
    return int(stops[0]) if stops.size else len(mask)


def decompose_sheet(
    sheet: Image.Image,
    tile_size: int = DEFAULT_TILE_SIZE,
    header_height: int = HEADER_HEIGHT,
    control_color: RGBA = CONTROL_COLOR
) -> List[DecodedTile]:
    """Decode and trim every tile in a sheet.

    Background cells (empty header) are skipped silently. Cells whose header
    does not parse, or whose content is all padding, are logged and skipped.

    Returns:
        Decoded tiles in row-major sheet order
    """
    sheet = sheet.convert("RGBA")
    decoded = []

    for column, row, cell in iter_cells(sheet, tile_size, header_height):
        text = read_header(cell, control_color)
        if not text:
            continue

        try:
            image = trim_tile(cell, header_height, control_color)
        except MalformedTileError:
            logger.warning("Error parsing malformed sprite: %r (cell %d,%d)", text, column, row)
            continue

        try:
            identity = SpriteIdentity.parse(text)
        except IdentityError as e:
            logger.warning("%s (cell %d,%d)", e, column, row)
            continue

        decoded.append(DecodedTile(identity=identity, image=image))

    logger.debug("Decoded %d tile(s) from %dx%d sheet", len(decoded), *sheet.size)
    return decoded
