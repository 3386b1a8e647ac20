"""Inventory widgets: the quick select bar and the full inventory grid."""

from __future__ import annotations

from typing import Callable, Sequence

from craftus.colors import shader_rgb, shader_rgb_darken
from craftus.gui import Gui
from craftus.itemstack import ItemStack
from craftus.spritebatch import GuiTexture, SpriteBatch

QUICKSELECT_MAXSLOTS = 9
QUICKSELECT_HEIGHT = 22 + 1  # one extra row for the selector

_SELECTED_COLOR = shader_rgb(20, 5, 2)
_SEPARATOR_COLOR = shader_rgb(7, 7, 7)
_CELL_COLORS = (
    shader_rgb_darken(shader_rgb(20, 20, 21), 9),
    shader_rgb_darken(shader_rgb(20, 20, 21), 8),
)

IconPainter = Callable[[SpriteBatch, int, int, int, int, int], None]


def quick_select_slots(screen_width: int) -> int:
    """Number of quick select slots that fit on a screen of the given width."""
    return min(QUICKSELECT_MAXSLOTS, int((screen_width - 21 * 2) / 20) + 2)


def quick_select_width(slots: int) -> int:
    """Width in GUI pixels of a quick select bar with ``slots`` slots."""
    return 42 + (slots - 2) * 20


class InventoryView:
    """Draws item stacks and moves items between them by touch.

    Touching a stack proposes it, touching it again picks it as the source and
    touching another stack then transfers the source into it.
    ``icon_painter``, when set, is called as ``(batch, block, meta, x, y, z)``
    to draw the icon of each non-empty stack.
    """

    def __init__(self, gui: Gui, batch: SpriteBatch) -> None:
        self.gui = gui
        self.batch = batch
        self.source_stack: ItemStack | None = None
        self.proposed_source_stack: ItemStack | None = None
        self.icon_painter: IconPainter | None = None

    def click_at_stack(self, stack: ItemStack) -> None:
        if self.source_stack is None and stack is not self.proposed_source_stack:
            self.proposed_source_stack = stack
        elif self.proposed_source_stack is stack:
            self.source_stack = stack
            self.proposed_source_stack = None
        elif self.source_stack is not None:
            if self.source_stack is not stack:
                self.source_stack.transfer_to(stack)
            self.source_stack = None

    def _icon(self, stack: ItemStack, x: int, y: int, z: int) -> None:
        if stack.amount > 0 and self.icon_painter is not None:
            self.icon_painter(self.batch, stack.block, stack.meta, x, y, z)

    def draw_quick_select(
        self, x: int, y: int, stacks: Sequence[ItemStack], selected: int
    ) -> int:
        """Draw the quick select bar; returns the selected slot, changed by a touch."""
        batch = self.batch
        count = len(stacks)
        batch.bind_gui_texture(GuiTexture.WIDGETS)
        for i, stack in enumerate(stacks):
            batch.scale = 1
            rx = (i * 20 + x + 3) * 2
            ry = (y + 3) * 2
            self._icon(stack, rx, ry, 11)
            if self.gui.entered_cursor_inside(rx - 4, ry - 4, 18 * 2, 18 * 2):
                selected = i
                self.click_at_stack(stack)
            batch.scale = 2
            if self.source_stack is stack:
                batch.push_single_color_quad(rx // 2 - 2, ry // 2 - 2, 9, 18, 18, _SELECTED_COLOR)
                batch.bind_gui_texture(GuiTexture.WIDGETS)
            if i < count - 2:
                batch.push_quad(i * 20 + 21 + x, y, 10, 20, 22, 21, 0, 20, 22)
        batch.scale = 2

        batch.push_quad(x, y, 10, 21, 22, 0, 0, 21, 22)
        batch.push_quad(21 + 20 * (count - 2) + x, y, 10, 21, 22, 161, 0, 21, 22)
        batch.push_quad(x + selected * 20 - 1, y - 1, 14, 24, 24, 0, 22, 24, 24)
        return selected

    def draw(self, x: int, y: int, w: int, stacks: Sequence[ItemStack]) -> None:
        """Draw the stacks as a grid of 16 pixel cells, ``w`` pixels wide."""
        batch = self.batch
        batch.scale = 1
        head_x, head_y = x, y
        even = False
        for stack in stacks:
            self._icon(stack, head_x * 2, head_y * 2, 10)
            if self.gui.entered_cursor_inside(head_x * 2, head_y * 2, 16 * 2, 16 * 2):
                self.click_at_stack(stack)
            color = _SELECTED_COLOR if self.source_stack is stack else _CELL_COLORS[even]
            batch.push_single_color_quad(head_x * 2, head_y * 2, 9, 16 * 2, 16 * 2, color)
            even = not even
            head_x += 16
            if head_x >= w:
                head_x = x
                head_y += 17
                even = False
                batch.push_single_color_quad(x * 2, (head_y - 1) * 2, 10, w * 2, 2, _SEPARATOR_COLOR)
        batch.scale = 2