"""Grid layout planning for sprite sheets."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GridLayout:
    """Layout of a sprite sheet in tile cells."""
    columns: int
    rows: int

    @property
    def capacity(self) -> int:
        return self.columns * self.rows


def plan_grid(count: int) -> GridLayout:
    """Choose a roughly square grid that holds ``count`` tiles.

    Perfect squares get a square grid. Otherwise the column count is the
    floor of the square root and rows grow to fit the remainder, so the
    sheet is at most one column narrower than it is tall.

    Args:
        count: Number of tiles to place (must be positive)

    Returns:
        GridLayout with columns * rows >= count

    Raises:
        ValueError: If count is not positive
    """
    if count <= 0:
        raise ValueError(f"Cannot plan a grid for {count} tiles")

    root = math.isqrt(count)
    if root * root == count:
        return GridLayout(columns=root, rows=root)

    columns = root
    rows = math.ceil(count / columns)
    return GridLayout(columns=columns, rows=rows)


def tiles_across(length: int, tile_size: int) -> int:
    """Number of tiles needed to cover ``length`` pixels."""
    return -(-length // tile_size)
