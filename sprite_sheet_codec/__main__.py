"""Command-line interface for building and parsing sprite sheets."""

import argparse
import logging
from pathlib import Path

from .spritesheet_utils import SpriteSheetManager

TIPS = """\
tips:
  - Only .png, .jpg and .jpeg files are read; the source directory is not
    scanned recursively, so keep unwanted images out of it.
  - Sheets inside sheets are not supported.
  - The parser only reads sheets built by this tool, and TILE_SIZE must match
    the size used to build (the _N at the end of the sheet's file name).
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sprite-sheet-codec',
        description='Pack images into a self-describing sprite sheet and unpack them again',
        epilog=TIPS,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument('-b', '--build', nargs=3, metavar=('TILE_SIZE', 'SOURCE_DIR', 'DEST_DIR'),
                        help='Build spritesheet_TILE_SIZE.png in DEST_DIR from the images in SOURCE_DIR')
    action.add_argument('-p', '--parse', nargs='+', metavar='ARG',
                        help='TILE_SIZE SHEET_PATH [DEST_DIR]: parse a sheet back into its images, '
                             'writing them to DEST_DIR if given')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Show debug output')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only show warnings and errors')
    return parser


def parse_tile_size(parser: argparse.ArgumentParser, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        parser.error(f"Invalid non-numeric tile size: {value}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.parse is not None and len(args.parse) not in (2, 3):
        parser.error(f"-p requires TILE_SIZE SHEET_PATH [DEST_DIR], got {len(args.parse)} argument(s)")

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format='%(message)s')

    if args.build is not None:
        tile_size, source_dir, dest_dir = args.build
        manager = SpriteSheetManager(parse_tile_size(parser, tile_size))
        manager.build(Path(source_dir), Path(dest_dir))
    else:
        tile_size, sheet_path, *rest = args.parse
        manager = SpriteSheetManager(parse_tile_size(parser, tile_size))
        dest_dir = Path(rest[0]) if rest else None
        images = manager.parse(Path(sheet_path), dest_dir)
        if dest_dir is None:
            print(f"Recovered {len(images)} image(s) from {sheet_path}")
            for name, image in images.items():
                print(f"  {name}: {image.width}x{image.height}")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
