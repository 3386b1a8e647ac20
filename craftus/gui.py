"""Row based immediate mode GUI: labels, buttons and touch cursor queries."""

from __future__ import annotations

from dataclasses import dataclass

from craftus.colors import COLOR_WHITE, shader_rgb
from craftus.controller import Buttons, InputData
from craftus.spritebatch import CHAR_HEIGHT, GuiTexture, SpriteBatch

BUTTON_HEIGHT = 20
BUTTON_TEXT_PADDING = (BUTTON_HEIGHT - CHAR_HEIGHT) // 2
SLICE_SIZE = 8
_NO_WRAP = 2**31 - 1


def _half(value: int) -> int:
    return int(value / 2)


@dataclass
class _Row:
    width: int = 0
    highest_element: int = 0
    unpadded_width: int = 0


class Gui:
    """Lays out widgets in rows and reports touch interaction with them."""

    def __init__(self, batch: SpriteBatch) -> None:
        self.batch = batch
        self.input = InputData()
        self.old_input = InputData()
        self.row = _Row()
        self.relative_x = 0
        self.relative_y = 0
        self.window_x = 0
        self.window_y = 0
        self.padding_x = 2
        self.padding_y = 3

    def _absolute_size(self, s: float) -> int:
        return int(self.row.unpadded_width * s)

    def input_data(self, data: InputData) -> None:
        self.old_input = self.input
        self.input = data

    def frame(self) -> None:
        self.relative_x = self.relative_y = 0
        self.window_x = self.window_y = 0

    def offset(self, x: int, y: int) -> None:
        self.window_x = x
        self.window_y = y

    def relative_width(self, x: float) -> int:
        return int(self.batch.width * x)

    def relative_height(self, y: float) -> int:
        return int(self.batch.height * y)

    def begin_row_center(self, width: int, count: int) -> None:
        self.window_x = _half(self.batch.width) - _half(width)
        self.begin_row(width, count)

    def begin_row(self, width: int, count: int) -> None:
        self.row = _Row(width, 0, width - self.padding_x * 2 - self.padding_x * count)
        self.relative_x = self.padding_x
        self.relative_y = 0

    def end_row(self) -> None:
        self.window_y += self.row.highest_element + self.padding_y

    def label(self, size: float, shadow: bool, color: int, center: bool, text: str) -> None:
        """Place text taking ``size`` of the row (0 or less: as wide as the text).

        The text is drawn plain white without shadow regardless of ``shadow`` and ``color``.
        """
        if size <= 0.0:
            wrap = self.row.width - self.relative_x - self.padding_x
        else:
            wrap = self._absolute_size(size)
        x_offset = 0
        if center:
            text_width = self.batch.calc_text_width(text)
            if text_width <= wrap:
                x_offset = _half(wrap) - _half(text_width)
        text_w, text_h = self.batch.push_text(
            self.window_x + self.relative_x + x_offset,
            self.window_y + self.relative_y,
            0, COLOR_WHITE, False, wrap, text,
        )
        self.relative_x += (text_w if size <= 0.0 else wrap) + self.padding_x
        self.row.highest_element = max(self.row.highest_element, text_h)

    def button(self, size: float, label: str) -> bool:
        """Draw a button; True when a touch inside it was released this frame."""
        batch = self.batch
        text_width = batch.calc_text_width(label)
        x = self.window_x + self.relative_x
        y = self.window_y + self.relative_y - BUTTON_TEXT_PADDING
        w = text_width + SLICE_SIZE if size <= 0.0 else self._absolute_size(size)

        pressed = self.is_cursor_inside(x, y, w, BUTTON_HEIGHT)
        tex_y = 46 + (BUTTON_HEIGHT * 2 if pressed else 0)
        middle = w - SLICE_SIZE * 2

        batch.bind_gui_texture(GuiTexture.WIDGETS)
        batch.push_quad(x, y, -3, SLICE_SIZE, 20, 0, tex_y, SLICE_SIZE, 20)
        batch.push_quad(x + SLICE_SIZE, y, -3, middle, 20, SLICE_SIZE, tex_y, middle, 20)
        batch.push_quad(x + SLICE_SIZE + middle, y, -3, SLICE_SIZE, 20, 192, tex_y, SLICE_SIZE, 20)
        batch.push_text(
            x + (_half(w) - _half(text_width)),
            y + (BUTTON_HEIGHT - CHAR_HEIGHT) // 2,
            -1, shader_rgb(31, 31, 31), True, _NO_WRAP, label,
        )

        self.relative_x += w + self.padding_x
        self.row.highest_element = max(self.row.highest_element, BUTTON_HEIGHT)

        return bool(self.input.keys_up & Buttons.TOUCH) and self.was_cursor_inside(
            x, y, w, BUTTON_HEIGHT
        )

    def space(self, space: float) -> None:
        self.relative_x += self._absolute_size(space) + self.padding_x

    def vertical_space(self, y: int) -> None:
        self.window_y += y

    def _scaled(self, data: InputData) -> tuple[int, int]:
        scale = self.batch.scale
        return data.touch_x // scale, data.touch_y // scale

    @staticmethod
    def _inside(px: int, py: int, x: int, y: int, w: int, h: int) -> bool:
        return px != 0 and py != 0 and x <= px < x + w and y <= py < y + h

    def is_cursor_inside(self, x: int, y: int, w: int, h: int) -> bool:
        return self._inside(*self._scaled(self.input), x, y, w, h)

    def was_cursor_inside(self, x: int, y: int, w: int, h: int) -> bool:
        return self._inside(*self._scaled(self.old_input), x, y, w, h)

    def entered_cursor_inside(self, x: int, y: int, w: int, h: int) -> bool:
        """True on the first frame of a touch that lands inside the rectangle."""
        return self._scaled(self.old_input) == (0, 0) and self.is_cursor_inside(x, y, w, h)

    def cursor_movement(self) -> tuple[int, int]:
        """Touch movement since last frame in GUI pixels, (0, 0) if not dragging."""
        new, old = self.input, self.old_input
        if (new.touch_x == 0 and new.touch_y == 0) or (old.touch_x == 0 and old.touch_y == 0):
            return 0, 0
        nx, ny = self._scaled(new)
        ox, oy = self._scaled(old)
        return nx - ox, ny - oy