"""In-band tile header: identity text packed into one row of pixels.

Three characters are stored per pixel in the R, G and B channels. Alpha is
always 255 because re-encoding can shift color values of translucent pixels.
Pixels after the packed text hold the control color, which terminates the
header on decode.
"""

import logging
import math
from typing import List

import numpy as np
from PIL import Image

from sprite_sheet_codec.config import CONTROL_COLOR, DEFAULT_TILE_SIZE, RGBA

logger = logging.getLogger(__name__)

CHARS_PER_PIXEL = 3
HEADER_ALPHA = 255
PAD_CHAR = "\x00"


class HeaderCapacityError(ValueError):
    """Raised when identity text cannot be stored in a tile header."""


def pixels_required(text: str) -> int:
    """Number of header pixels needed to pack ``text``."""
    return math.ceil(len(text) / CHARS_PER_PIXEL)


def pack_header(
    text: str,
    tile_size: int = DEFAULT_TILE_SIZE,
    control_color: RGBA = CONTROL_COLOR
) -> List[RGBA]:
    """Pack identity text into a header row.

    Args:
        text: Identity string to embed
        tile_size: Header row length in pixels
        control_color: Terminator / filler color

    Returns:
        List of ``tile_size`` RGBA tuples

    Raises:
        HeaderCapacityError: If the text needs more than ``tile_size`` pixels
            or holds a character that does not fit in one 8-bit channel
    """
    required = pixels_required(text)
    if required > tile_size:
        raise HeaderCapacityError(
            f"Error encoding: {text}, tile size limitation, "
            f"requires {required} pixels"
        )

    codes = [ord(char) for char in text]
    if any(code > 255 for code in codes):
        raise HeaderCapacityError(f"Error encoding: {text!r}, characters must be 8-bit")

    # Pad the final pixel with NUL channels
    codes += [0] * (required * CHARS_PER_PIXEL - len(codes))

    row = []
    for x in range(required):
        red, green, blue = codes[x * CHARS_PER_PIXEL:(x + 1) * CHARS_PER_PIXEL]
        pixel = (red, green, blue, HEADER_ALPHA)
        if pixel == tuple(control_color):
            logger.warning(
                "Header pixel %d of %r equals the control color; "
                "the tile will read back as empty or truncated", x, text
            )
        row.append(pixel)

    row.extend([tuple(control_color)] * (tile_size - required))
    return row


def stamp_header(
    tile: Image.Image,
    text: str,
    control_color: RGBA = CONTROL_COLOR
) -> Image.Image:
    """Write packed identity text into row 0 of ``tile`` in place."""
    row = pack_header(text, tile.width, control_color)
    for x, pixel in enumerate(row):
        tile.putpixel((x, 0), pixel)
    return tile


def unpack_header(row: np.ndarray, control_color: RGBA = CONTROL_COLOR) -> str:
    """Read identity text from a header row.

    Scanning stops at the first control-color pixel. An empty result means
    the row belongs to background filler rather than a tile.

    Args:
        row: Array of shape (width, 4) holding RGBA pixels

    Returns:
        Decoded identity text with NUL padding removed
    """
    control = np.asarray(control_color, dtype=row.dtype)
    chars = []
    for pixel in row:
        if np.array_equal(pixel, control):
            break
        chars.extend(chr(int(channel)) for channel in pixel[:CHARS_PER_PIXEL])

    return "".join(chars).rstrip(PAD_CHAR)


def read_header(tile: Image.Image, control_color: RGBA = CONTROL_COLOR) -> str:
    """Decode the identity text stamped in row 0 of ``tile``."""
    pixels = np.asarray(tile.convert("RGBA"))
    return unpack_header(pixels[0], control_color)
