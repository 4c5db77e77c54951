"""Utilities for building spritesheets from directories and parsing them back."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from PIL import Image, UnidentifiedImageError

from sprite_sheet_codec.config import OUTPUT_FORMAT, SUPPORTED_EXTENSIONS, SheetSettings
from sprite_sheet_codec.reassembler import reassemble
from sprite_sheet_codec.sheet import compose_sheet, decompose_sheet
from sprite_sheet_codec.slicer import slice_image

logger = logging.getLogger(__name__)


def is_supported_image(path: Path) -> bool:
    """Check whether a file has a supported image extension (case-insensitive)."""
    return path.name.lower().endswith(SUPPORTED_EXTENSIONS)


def source_name(path: Path) -> str:
    """Base name of an image file: everything before the first dot."""
    return path.name.split(".", 1)[0]


def find_source_images(directory: Path) -> List[Path]:
    """List supported image files directly inside ``directory``.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        Image paths sorted by filename; empty if the directory is missing
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.error("Image directory does not exist: %s", directory)
        return []

    return sorted(
        (path for path in directory.iterdir() if path.is_file() and is_supported_image(path)),
        key=lambda path: path.name
    )


def load_image(path: Path) -> Optional[Image.Image]:
    """Load an image as RGBA, or log and return None if it cannot be read."""
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        logger.error("Error loading file: %s (%s)", path, e)
        return None


def ensure_directory(directory: Path) -> bool:
    """Create ``directory`` if needed, or log and return False if it cannot be used."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Unable to write to: %s (%s)", directory, e)
        return False
    return True


def save_image(image: Image.Image, output_path: Path) -> Optional[Path]:
    """Write ``image`` as PNG, or log and return None on failure."""
    try:
        image.save(output_path, OUTPUT_FORMAT)
    except (OSError, ValueError) as e:
        logger.error("Unable to write to: %s (%s)", output_path, e)
        return None
    return output_path


def build_spritesheet(
    source_dir: Path,
    output_dir: Path,
    settings: Optional[SheetSettings] = None
) -> Optional[Path]:
    """Build a spritesheet from every supported image in a directory.

    Images larger than one tile are split into several tiles, each carrying
    its own identity header.

    Args:
        source_dir: Directory containing source images
        output_dir: Directory to write spritesheet_<tile_size>.png into
        settings: Tile geometry and control color (defaults if None)

    Returns:
        Path to the written spritesheet, or None if nothing was written
    """
    settings = settings or SheetSettings()
    source_dir = Path(source_dir)
    output_dir = Path(output_dir)

    logger.info("Building from directory: %s", source_dir)

    tiles: Dict[str, Image.Image] = {}
    loaded = 0
    for path in find_source_images(source_dir):
        logger.info("Loading image: %s", path.name)
        image = load_image(path)
        if image is None:
            continue
        loaded += 1
        slice_image(
            image,
            source_name(path),
            tile_size=settings.tile_size,
            header_height=settings.header_height,
            control_color=settings.control_color,
            tiles=tiles
        )

    if not loaded:
        logger.warning("No supported image files found in: %s", source_dir)
        return None
    if not tiles:
        logger.warning(
            "No tiles could be encoded from %d image(s) at tile size %d",
            loaded, settings.tile_size
        )
        return None

    sheet = compose_sheet(
        tiles.values(),
        tile_size=settings.tile_size,
        header_height=settings.header_height,
        control_color=settings.control_color
    )

    if not ensure_directory(output_dir):
        return None
    output_path = save_image(sheet, output_dir / settings.sheet_filename)
    if output_path is not None:
        logger.info("Saved %d tile(s) to %s", len(tiles), output_path)
    return output_path


def parse_spritesheet(
    sheet_path: Path,
    output_dir: Optional[Path] = None,
    settings: Optional[SheetSettings] = None
) -> Dict[str, Image.Image]:
    """Parse a spritesheet back into its original images.

    Args:
        sheet_path: Path to a spritesheet built with the same tile size
        output_dir: Directory to write <name>.png files into, or None to
            skip writing
        settings: Tile geometry and control color (defaults if None)

    Returns:
        Mapping of source name to rebuilt image (empty if the sheet could
        not be loaded)
    """
    settings = settings or SheetSettings()
    sheet_path = Path(sheet_path)

    if not is_supported_image(sheet_path):
        logger.error(
            "Unable to load: %s. Files must be one of the following formats: %s",
            sheet_path, ", ".join(SUPPORTED_EXTENSIONS)
        )
        return {}

    logger.info("Parsing: %s", sheet_path)
    sheet = load_image(sheet_path)
    if sheet is None:
        return {}

    decoded = decompose_sheet(
        sheet,
        tile_size=settings.tile_size,
        header_height=settings.header_height,
        control_color=settings.control_color
    )
    images = reassemble(decoded, tile_size=settings.tile_size)

    if output_dir is not None:
        output_dir = Path(output_dir)
        logger.info("Output to directory: %s", output_dir)
        if not images:
            logger.warning("No images could be extracted from: %s", sheet_path)
        elif ensure_directory(output_dir):
            for name, image in images.items():
                if save_image(image, output_dir / f"{name}.png") is not None:
                    logger.info("Saved: %s.png", name)

    return images


class SpriteSheetManager:
    """Builds and parses spritesheets with one fixed tile geometry."""

    def __init__(self, tile_size: int, **kwargs):
        """Initialize manager.

        Args:
            tile_size: Tile width and height; non-positive values fall back
                to the default tile size
            **kwargs: Optional header_height / control_color overrides
        """
        self.settings = SheetSettings.for_tile_size(tile_size, **kwargs)

    def build(self, source_dir: Path, output_dir: Path) -> Optional[Path]:
        return build_spritesheet(source_dir, output_dir, self.settings)

    def parse(self, sheet_path: Path, output_dir: Optional[Path] = None) -> Dict[str, Image.Image]:
        return parse_spritesheet(sheet_path, output_dir, self.settings)
