"""Loading the bitmap font: glyph widths and a 16-bit RGBA image."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

GLYPH_SIZE = 8
FONT_GRID = 128
GLYPH_COUNT = 256


class FontLoadError(OSError):
    """The font image could not be read."""


@dataclass
class Font:
    """Glyph advance widths plus the font image in RGBA5551."""

    widths: list[int]
    width: int = 0
    height: int = 0
    pixels: list[int] = field(default_factory=list)


def _rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


def font_widths_from_image(image: Image.Image) -> list[int]:
    """Advance width of each of the 256 glyphs in a 16x16 grid of 8x8 cells.

    A glyph extends while columns from the third onwards contain any pixel.
    """
    image = _rgba(image)
    if image.width < FONT_GRID or image.height < FONT_GRID:
        raise ValueError(f"font image must be at least {FONT_GRID}x{FONT_GRID}")
    pixels = image.load()
    widths = []
    for y in range(0, FONT_GRID, GLYPH_SIZE):
        for x in range(0, FONT_GRID, GLYPH_SIZE):
            length = 2
            found = True
            column = 2
            while column < GLYPH_SIZE and found:
                length += 1
                found = any(
                    any(pixels[x + column, y + row]) for row in range(GLYPH_SIZE)
                )
                column += 1
            widths.append(length)
    return widths


def to_rgba5551(image: Image.Image) -> list[int]:
    """Pixels in row order packed as 5 bits per colour and 1 bit of alpha."""
    result = []
    for r, g, b, a in _rgba(image).getdata():
        result.append(((r >> 3) << 11) | ((g >> 3) << 6) | ((b >> 3) << 1) | (a >> 7))
    return result


def load_font(path: str | Path) -> Font:
    """Read a font image from ``path``; raises FontLoadError when it cannot be decoded."""
    try:
        with Image.open(path) as raw:
            image = _rgba(raw)
            image.load()
    except (OSError, ValueError) as exc:
        raise FontLoadError(f"Failed to load font {path}") from exc
    return Font(
        widths=font_widths_from_image(image),
        width=image.width,
        height=image.height,
        pixels=to_rgba5551(image),
    )