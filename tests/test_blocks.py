import pytest

from craftus.blocks import (
    BLOCKS_COUNT,
    TEXTURE_FILES,
    Block,
    block_color,
    block_name,
    block_opaque,
    block_texture_name,
)
from craftus.direction import Direction


def test_grass_faces():
    assert block_texture_name(Block.GRASS, Direction.TOP) == "grass_top.png"
    assert block_texture_name(Block.GRASS, Direction.BOTTOM) == "dirt.png"
    assert block_texture_name(Block.GRASS, Direction.NORTH) == "grass_side.png"


def test_crafting_table_bottom_is_planks():
    assert block_texture_name(Block.CRAFTING_TABLE, Direction.BOTTOM) == "planks_oak.png"


def test_air_has_no_texture():
    assert block_texture_name(Block.AIR, Direction.TOP) is None


@pytest.mark.parametrize("block", [b for b in Block if b is not Block.AIR])
@pytest.mark.parametrize("direction", list(Direction)[:6])
def test_every_texture_is_a_known_file(block, direction):
    assert block_texture_name(block, direction) in TEXTURE_FILES


def test_foliage_tint():
    assert block_color(Block.LEAVES, 0, Direction.WEST) == (140, 214, 123)
    assert block_color(Block.GRASS, 0, Direction.TOP) == (140, 214, 123)
    assert block_color(Block.GRASS, 0, Direction.WEST) == (255, 255, 255)


def test_wool_colors():
    assert block_color(Block.WOOL, 0, Direction.TOP) == (255, 255, 255)
    colors = {block_color(Block.WOOL, m, Direction.TOP) for m in range(16)}
    assert len(colors) == 16
    with pytest.raises(IndexError):
        block_color(Block.WOOL, 16, Direction.TOP)


def test_opacity():
    assert block_opaque(Block.STONE, 0)
    assert not block_opaque(Block.AIR, 0)
    assert not block_opaque(Block.GLASS, 0)
    assert not block_opaque(Block.DOOR_TOP, 0)


def test_names():
    assert block_name(Block.AIR) == "Air"
    assert block_name(Block.STONE) == "Stone"
    with pytest.raises(IndexError):
        block_name(BLOCKS_COUNT)