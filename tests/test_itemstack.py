from craftus.blocks import Block
from craftus.itemstack import ITEMSTACK_MAX, ItemStack


def test_empty():
    assert ItemStack().is_empty()
    assert not ItemStack(Block.STONE, 0, 1).is_empty()


def test_merge_caps_at_maximum_and_preserves_total():
    src = ItemStack(Block.DIRT, 0, 10)
    dst = ItemStack(Block.DIRT, 0, 60)
    src.transfer_to(dst)
    assert dst.amount == ITEMSTACK_MAX
    assert src.amount + dst.amount == 70


def test_move_into_empty_takes_kind():
    src = ItemStack(Block.WOOL, 5, 3)
    dst = ItemStack()
    src.transfer_to(dst)
    assert dst == ItemStack(Block.WOOL, 5, 3)
    assert src.is_empty()


def test_different_kinds_swap():
    src = ItemStack(Block.STONE, 0, 4)
    dst = ItemStack(Block.SAND, 0, 7)
    src.transfer_to(dst)
    assert src == ItemStack(Block.SAND, 0, 7)
    assert dst == ItemStack(Block.STONE, 0, 4)


def test_different_meta_swaps():
    src = ItemStack(Block.WOOL, 1, 2)
    dst = ItemStack(Block.WOOL, 2, 5)
    src.transfer_to(dst)
    assert (src.meta, dst.meta) == (2, 1)