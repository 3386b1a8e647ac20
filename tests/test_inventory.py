from craftus.blocks import Block
from craftus.colors import shader_rgb
from craftus.controller import InputData
from craftus.gui import Gui
from craftus.inventory import InventoryView, quick_select_slots, quick_select_width
from craftus.itemstack import ItemStack
from craftus.spritebatch import GuiTexture, SpriteBatch


def _view():
    batch = SpriteBatch([8] * 256)
    gui = Gui(batch)
    return InventoryView(gui, batch), gui, batch


def test_quick_select_width_of_two_slots():
    assert quick_select_width(2) == 42


def test_quick_select_slots_capped():
    assert quick_select_slots(4000) == 9


def test_quick_select_fits_screen():
    for w in range(42, 220):
        slots = quick_select_slots(w)
        assert slots <= 9
        assert quick_select_width(slots) <= w


def test_click_sequence_transfers():
    view, _, _ = _view()
    a = ItemStack(Block.STONE, 0, 5)
    b = ItemStack(Block.AIR, 0, 0)
    view.click_at_stack(a)
    assert view.proposed_source_stack is a
    view.click_at_stack(a)
    assert view.source_stack is a
    view.click_at_stack(b)
    assert view.source_stack is None
    assert b.block == Block.STONE and b.amount == 5
    assert a.amount == 0


def test_click_other_stack_changes_proposal():
    view, _, _ = _view()
    a = ItemStack(Block.STONE, 0, 1)
    b = ItemStack(Block.DIRT, 0, 1)
    view.click_at_stack(a)
    view.click_at_stack(b)
    assert view.proposed_source_stack is b
    assert view.source_stack is None


def test_quick_select_touch_selects_slot():
    view, gui, batch = _view()
    stacks = [ItemStack(Block.STONE, 0, 1) for _ in range(9)]
    gui.input_data(InputData(touch_x=50, touch_y=10))
    selected = view.draw_quick_select(0, 0, stacks, 0)
    assert selected == 1
    assert view.proposed_source_stack is stacks[1]
    assert batch.scale == 2


def test_quick_select_quad_count():
    view, _, batch = _view()
    stacks = [ItemStack() for _ in range(9)]
    assert view.draw_quick_select(0, 0, stacks, 3) == 3
    assert len(batch.commands) == len(stacks) + 1
    assert all(s.texture == GuiTexture.WIDGETS for s in batch.commands)


def test_icon_painter_only_for_filled_stacks():
    view, _, _ = _view()
    calls = []
    view.icon_painter = lambda batch, block, meta, x, y, z: calls.append((block, meta))
    stacks = [ItemStack(Block.WOOL, 3, 1), ItemStack(), ItemStack(Block.SAND, 0, 2)]
    view.draw(0, 0, 64, stacks)
    assert calls == [(Block.WOOL, 3), (Block.SAND, 0)]


def test_draw_highlights_source_stack():
    view, _, batch = _view()
    stacks = [ItemStack(Block.STONE, 0, 1), ItemStack(Block.DIRT, 0, 1)]
    view.click_at_stack(stacks[1])
    view.click_at_stack(stacks[1])
    view.draw(0, 0, 64, stacks)
    cells = [s for s in batch.commands if s.depth == 9]
    assert len(cells) == 2
    assert cells[1].color == shader_rgb(20, 5, 2)
    assert cells[0].color != shader_rgb(20, 5, 2)


def test_draw_wraps_rows_with_separator():
    view, _, batch = _view()
    stacks = [ItemStack() for _ in range(4)]
    view.draw(0, 0, 32, stacks)
    separators = [s for s in batch.commands if s.depth == 10]
    assert len(separators) == 2
    assert all(s.color == shader_rgb(7, 7, 7) for s in separators)
    assert batch.scale == 2