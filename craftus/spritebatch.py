"""Collects textured GUI quads and text, then turns them into triangle batches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Hashable, Mapping, Sequence

from craftus.colors import COLOR_WHITE, shader_rgb

CHAR_HEIGHT = 8
CHAR_WIDTH = 8
TAB_SIZE = 4
INT16_MAX = 0x7FFF
DEFAULT_SCALE = 2

_SHADOW_COLOR = shader_rgb(10, 10, 10)


class GuiTexture(IntEnum):
    BLANK = 0
    FONT = 1
    ICONS = 2
    WIDGETS = 3
    MENU_BACKGROUND = 4


@dataclass(frozen=True)
class Sprite:
    """A quad in screen pixels: corners top left, top right, bottom left, bottom right."""

    depth: int
    texture: Hashable
    x0: int
    y0: int
    x1: int
    y1: int
    x2: int
    y2: int
    x3: int
    y3: int
    u0: int
    v0: int
    u1: int
    v1: int
    color: int


@dataclass(frozen=True)
class GuiVertex:
    xyz: tuple[int, int, int]
    uvc: tuple[int, int, int]


class SpriteBatch:
    """Immediate mode sprite collector for one frame of GUI drawing."""

    def __init__(self, font_widths: Sequence[int]) -> None:
        if len(font_widths) < 256:
            raise ValueError("font_widths must hold 256 entries")
        self.font_widths = list(font_widths)
        self.commands: list[Sprite] = []
        self.current_texture: Hashable | None = None
        self.scale = DEFAULT_SCALE
        self.screen_width = 0
        self.screen_height = 0
        self._texture_ranks: dict[Hashable, int] = {}

    @property
    def width(self) -> int:
        return self.screen_width // self.scale

    @property
    def height(self) -> int:
        return self.screen_height // self.scale

    def bind_gui_texture(self, texture: GuiTexture) -> None:
        self.current_texture = GuiTexture(texture)

    def bind_texture(self, texture: Hashable) -> None:
        self.current_texture = texture

    def push_single_color_quad(self, x: int, y: int, z: int, w: int, h: int, color: int) -> None:
        self.bind_gui_texture(GuiTexture.BLANK)
        self.push_quad_color(x, y, z, w, h, 0, 0, 4, 4, color)

    def push_quad(self, x: int, y: int, z: int, w: int, h: int, rx: int, ry: int, rw: int, rh: int) -> None:
        self.push_quad_color(x, y, z, w, h, rx, ry, rw, rh, COLOR_WHITE)

    def push_quad_color(
        self, x: int, y: int, z: int, w: int, h: int,
        rx: int, ry: int, rw: int, rh: int, color: int,
    ) -> None:
        """Queue a quad at (x, y) of size (w, h) showing texels (rx, ry, rw, rh)."""
        s = self.scale
        texture = self.current_texture
        self._texture_ranks.setdefault(texture, len(self._texture_ranks))
        self.commands.append(
            Sprite(
                z, texture,
                x * s, y * s, (x + w) * s, y * s,
                x * s, (y + h) * s, (x + w) * s, (y + h) * s,
                rx, ry, rx + rw, ry + rh, color,
            )
        )

    @staticmethod
    def _encode(text: str) -> bytes:
        return text.encode("latin-1", errors="replace")

    def push_text(
        self, x: int, y: int, z: int, color: int, shadow: bool, wrap: int, text: str
    ) -> tuple[int, int]:
        """Queue glyph quads for ``text``; returns its (width, height) in GUI pixels."""
        self.bind_gui_texture(GuiTexture.FONT)
        data = self._encode(text)
        offset_x = offset_y = max_width = 0
        i = 0
        while i < len(data):
            c = data[i]
            advance = self.font_widths[c]
            implicit_break = offset_x > 0 and offset_x + advance >= wrap
            if c == ord("\n") or implicit_break:
                offset_y += CHAR_HEIGHT
                max_width = max(max_width, offset_x)
                offset_x = 0
                if implicit_break:
                    continue
            elif c == ord("\t"):
                offset_x = ((offset_x // CHAR_WIDTH) // TAB_SIZE + 1) * TAB_SIZE * CHAR_WIDTH
            else:
                if c != ord(" "):
                    tex_x, tex_y = c % 16 * 8, c // 16 * 8
                    self.push_quad_color(x + offset_x, y + offset_y, z, 8, 8, tex_x, tex_y, 8, 8, color)
                    if shadow:
                        self.push_quad_color(
                            x + offset_x + 1, y + offset_y + 1, z - 1, 8, 8,
                            tex_x, tex_y, 8, 8, _SHADOW_COLOR,
                        )
                offset_x += advance
            i += 1
        max_width = max(max_width, offset_x)
        return max_width, offset_y + CHAR_HEIGHT

    def calc_text_width(self, text: str) -> int:
        """Width of the widest line of ``text``."""
        return max(
            sum(self.font_widths[c] for c in self._encode(line))
            for line in text.split("\n")
        )

    def start_frame(self, width: int, height: int) -> None:
        self.screen_width = width
        self.screen_height = height

    def build(
        self, texture_sizes: Mapping[Hashable, tuple[int, int]]
    ) -> list[tuple[Hashable, list[GuiVertex]]]:
        """Turn queued sprites into triangle lists, one per run of equal texture.

        Sprites are ordered by depth, lowest first. The queue is emptied, the bound
        texture cleared and the scale reset afterwards.
        """
        order = sorted(
            self.commands,
            key=lambda s: (s.depth, self._texture_ranks[s.texture]),
            reverse=True,
        )
        batches: list[tuple[Hashable, list[GuiVertex]]] = []
        while order:
            texture = order[-1].texture
            tex_w, tex_h = texture_sizes[texture]
            div_w = 1.0 / tex_w * INT16_MAX
            div_h = 1.0 / tex_h * INT16_MAX
            vertices: list[GuiVertex] = []
            while order and order[-1].texture == texture:
                s = order.pop()
                u0, v0 = int(s.u0 * div_w), int(s.v0 * div_h)
                u1, v1 = int(s.u1 * div_w), int(s.v1 * div_h)
                c = s.color
                vertices += [
                    GuiVertex((s.x3, s.y3, 0), (u1, v1, c)),
                    GuiVertex((s.x1, s.y1, 0), (u1, v0, c)),
                    GuiVertex((s.x0, s.y0, 0), (u0, v0, c)),
                    GuiVertex((s.x0, s.y0, 0), (u0, v0, c)),
                    GuiVertex((s.x2, s.y2, 0), (u0, v1, c)),
                    GuiVertex((s.x3, s.y3, 0), (u1, v1, c)),
                ]
            batches.append((texture, vertices))
        self.commands.clear()
        self.current_texture = None
        self.scale = DEFAULT_SCALE
        return batches