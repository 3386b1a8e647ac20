import pytest
from PIL import Image

from craftus.fontloader import (
    GLYPH_COUNT,
    FontLoadError,
    font_widths_from_image,
    load_font,
    to_rgba5551,
)


def _blank():
    return Image.new("RGBA", (128, 128), (0, 0, 0, 0))


def _fill_columns(image, cell_x, cell_y, columns):
    for c in columns:
        for row in range(8):
            image.putpixel((cell_x * 8 + c, cell_y * 8 + row), (255, 255, 255, 255))


def test_empty_font_gives_minimum_width():
    widths = font_widths_from_image(_blank())
    assert len(widths) == GLYPH_COUNT
    assert set(widths) == {3}


def test_full_cell_gives_full_width():
    image = _blank()
    _fill_columns(image, 1, 0, range(8))
    widths = font_widths_from_image(image)
    assert widths[1] == 8
    assert widths[0] == widths[2]


def test_more_columns_never_shorter():
    previous = 0
    for count in range(2, 8):
        image = _blank()
        _fill_columns(image, 0, 0, range(2, count + 1))
        width = font_widths_from_image(image)[0]
        assert width >= previous
        previous = width


def test_cell_index_is_row_major():
    image = _blank()
    _fill_columns(image, 3, 2, range(8))
    widths = font_widths_from_image(image)
    assert widths.index(8) == 2 * 16 + 3


def test_small_image_rejected():
    with pytest.raises(ValueError):
        font_widths_from_image(Image.new("RGBA", (64, 64)))


def test_rgba5551_extremes():
    image = Image.new("RGBA", (2, 1))
    image.putpixel((0, 0), (255, 255, 255, 255))
    image.putpixel((1, 0), (0, 0, 0, 0))
    assert to_rgba5551(image) == [0xFFFF, 0]


def test_rgba5551_alpha_is_lowest_bit():
    image = Image.new("RGBA", (1, 1), (0, 0, 0, 255))
    assert to_rgba5551(image) == [1]


def test_load_font_round_trip(tmp_path):
    image = _blank()
    _fill_columns(image, 0, 0, range(8))
    path = tmp_path / "ascii.png"
    image.save(path)
    font = load_font(path)
    assert (font.width, font.height) == (128, 128)
    assert font.widths == font_widths_from_image(image)
    assert len(font.pixels) == 128 * 128


def test_load_missing_font_raises(tmp_path):
    with pytest.raises(FontLoadError):
        load_font(tmp_path / "missing.png")