"""Block types and their static properties."""

from __future__ import annotations

from enum import IntEnum

from craftus.direction import Direction

TEXTURE_PATH_PREFIX = "romfs:/textures/blocks/"


class Block(IntEnum):
    AIR = 0
    STONE = 1
    DIRT = 2
    GRASS = 3
    COBBLESTONE = 4
    SAND = 5
    LOG = 6
    GRAVEL = 7
    LEAVES = 8
    GLASS = 9
    STONEBRICK = 10
    BRICK = 11
    PLANKS = 12
    WOOL = 13
    BEDROCK = 14
    COARSE = 15
    DOOR_TOP = 16
    DOOR_BOTTOM = 17
    SNOW_GRASS = 18
    SNOW = 19
    OBSIDIAN = 20
    NETHERRACK = 21
    SANDSTONE = 22
    SMOOTH_STONE = 23
    CRAFTING_TABLE = 24
    GRASS_PATH = 25


BLOCKS_COUNT = len(Block)

TEXTURE_FILES = (
    "stone.png",
    "dirt.png",
    "cobblestone.png",
    "grass_side.png",
    "grass_top.png",
    "stonebrick.png",
    "sand.png",
    "log_oak.png",
    "log_oak_top.png",
    "leaves_oak.png",
    "glass.png",
    "brick.png",
    "planks_oak.png",
    "wool.png",
    "bedrock.png",
    "gravel.png",
    "coarse_dirt.png",
    "door_top.png",
    "door_bottom.png",
    "snow_grass_side.png",
    "snow.png",
    "obsidian.png",
    "sandstone_side.png",
    "sandstone_top.png",
    "sandstone_bottom.png",
    "netherrack.png",
    "smooth_stone.png",
    "grass_path_side.png",
    "grass_path_top.png",
    "crafting_table_side.png",
    "crafting_table_top.png",
)

# Per block: (top, bottom, sides).
_TEXTURES: dict[Block, tuple[str, str, str]] = {
    Block.STONE: ("stone.png",) * 3,
    Block.DIRT: ("dirt.png",) * 3,
    Block.GRASS: ("grass_top.png", "dirt.png", "grass_side.png"),
    Block.COBBLESTONE: ("cobblestone.png",) * 3,
    Block.SAND: ("sand.png",) * 3,
    Block.LOG: ("log_oak_top.png", "log_oak_top.png", "log_oak.png"),
    Block.GRAVEL: ("gravel.png",) * 3,
    Block.LEAVES: ("leaves_oak.png",) * 3,
    Block.GLASS: ("glass.png",) * 3,
    Block.STONEBRICK: ("stonebrick.png",) * 3,
    Block.BRICK: ("brick.png",) * 3,
    Block.PLANKS: ("planks_oak.png",) * 3,
    Block.WOOL: ("wool.png",) * 3,
    Block.BEDROCK: ("bedrock.png",) * 3,
    Block.COARSE: ("coarse_dirt.png",) * 3,
    Block.DOOR_TOP: ("door_top.png",) * 3,
    Block.DOOR_BOTTOM: ("door_bottom.png",) * 3,
    Block.SNOW_GRASS: ("snow.png", "dirt.png", "snow_grass_side.png"),
    Block.SNOW: ("snow.png",) * 3,
    Block.OBSIDIAN: ("obsidian.png",) * 3,
    Block.NETHERRACK: ("netherrack.png",) * 3,
    Block.SANDSTONE: ("sandstone_top.png", "sandstone_bottom.png", "sandstone_side.png"),
    Block.SMOOTH_STONE: ("smooth_stone.png",) * 3,
    Block.CRAFTING_TABLE: ("crafting_table_top.png", "planks_oak.png", "crafting_table_side.png"),
    Block.GRASS_PATH: ("grass_path_top.png", "dirt.png", "grass_path_side.png"),
}

# white, orange, magenta, light blue, yellow, lime, pink, gray,
# silver, cyan, purple, blue, brown, green, red, black
_DYES = (
    16777215, 14188339, 11685080, 6724056, 15066419, 8375321, 15892389, 5000268,
    10066329, 5013401, 8339378, 3361970, 6704179, 6717235, 10040115, 1644825,
)

_FOLIAGE_COLOR = (140, 214, 123)
_WHITE = (255, 255, 255)

_BLOCK_NAMES = (
    "Air", "Stone", "Dirt", "Grass", "Cobblestone", "Sand", "Log",
    "Leaves", "Glass", "Stone Bricks", "Bricks", "Planks", "Wool", "Bedrock", "Gravel",
    "Water", "Coarse", "Door_Top", "Door_Bottom", "Snow_Grass", "Snow", "Obsidian",
    "Netherrack", "Sandstone", "Smooth_Stone", "Crafting_Table",
)


def block_texture_name(block: int, direction: int) -> str | None:
    """Texture file shown on the given face of a block, None for air or unknown blocks."""
    try:
        top, bottom, side = _TEXTURES[Block(block)]
    except (ValueError, KeyError):
        return None
    if direction == Direction.TOP:
        return top
    if direction == Direction.BOTTOM:
        return bottom
    return side


def block_color(block: int, metadata: int, direction: int) -> tuple[int, int, int]:
    """RGB tint for a block face."""
    if (block == Block.GRASS and direction == Direction.TOP) or block == Block.LEAVES:
        return _FOLIAGE_COLOR
    if block == Block.WOOL:
        dye = _DYES[metadata]
        return ((dye >> 16) & 0xFF, (dye >> 8) & 0xFF, dye & 0xFF)
    return _WHITE


def block_opaque(block: int, metadata: int = 0) -> bool:
    """Whether a block hides what lies behind it."""
    return block not in (Block.AIR, Block.GLASS, Block.DOOR_TOP, Block.DOOR_BOTTOM)


def block_name(block: int) -> str:
    """Display name of a block; raises IndexError for unknown ids."""
    if not 0 <= block < BLOCKS_COUNT:
        raise IndexError(f"no block with id {block}")
    return _BLOCK_NAMES[block]