"""Create test images for sprite sheet tests."""

from pathlib import Path
from PIL import Image, ImageDraw


def create_test_image(width: int, height: int, seed: int = 0) -> Image.Image:
    """Create an RGBA image where every pixel is distinct and never the control color.

    Color encodes the pixel position so misplaced tiles are easy to spot.
    """
    img = Image.new('RGBA', (width, height))
    pixels = img.load()

    for y in range(height):
        for x in range(width):
            r = (x * 3 + seed) % 200
            g = (y * 3 + seed) % 200
            b = (x + y + seed) % 200
            pixels[x, y] = (r, g, b, 255)

    return img


def create_test_sprite(output_path: Path, size=(64, 64), seed: int = 0):
    """Create a test sprite file with a position gradient and a drawn marker."""
    img = create_test_image(size[0], size[1], seed)
    draw = ImageDraw.Draw(img)
    draw.rectangle([2, 2, min(10, size[0] - 1), min(10, size[1] - 1)], fill=(255, 255, 255, 255))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() in ('.jpg', '.jpeg'):
        img = img.convert('RGB')
    img.save(output_path)
    return output_path


def create_source_directory(directory: Path, sprites: dict):
    """Create a directory of test sprites.

    Args:
        directory: Directory to create
        sprites: Mapping of filename to (width, height)
    """
    paths = []
    for seed, (filename, size) in enumerate(sprites.items()):
        paths.append(create_test_sprite(directory / filename, size, seed=seed * 7))
    return paths


if __name__ == '__main__':
    fixtures_dir = Path(__file__).parent / 'sources'
    create_source_directory(fixtures_dir, {
        'hero.png': (64, 64),
        'tree.png': (45, 90),
        'coin.png': (12, 12),
    })
    print(f"Test sprites created in {fixtures_dir}")
