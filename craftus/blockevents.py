"""Random block ticks: grass spreading and dying."""

from __future__ import annotations

from typing import Iterable

from craftus.blocks import Block, block_opaque
from craftus.chunk import CHUNK_HEIGHT, CHUNK_SIZE, CLUSTER_PER_CHUNK, Chunk

RANDOMTICKS_PER_CLUSTER = 3
RANDOMTICKS_PER_CHUNK = CLUSTER_PER_CHUNK * RANDOMTICKS_PER_CLUSTER

_DIE_WHEN_COVERED = (Block.GRASS, Block.SNOW_GRASS, Block.GRASS_PATH)


def _covered(chunk: Chunk, x: int, y: int, z: int) -> bool:
    above = y + 1
    if above >= CHUNK_HEIGHT:
        return False
    return block_opaque(chunk.get_block(x, above, z), chunk.get_metadata(x, above, z))


def random_tick(chunk: Chunk, positions: Iterable[tuple[int, int, int]]) -> None:
    """Apply random ticks to a chunk.

    ``positions`` holds RANDOMTICKS_PER_CHUNK local positions, RANDOMTICKS_PER_CLUSTER
    per cluster from bottom to top; each y is relative to its cluster.
    """
    positions = list(positions)
    if len(positions) != RANDOMTICKS_PER_CHUNK:
        raise ValueError(
            f"expected {RANDOMTICKS_PER_CHUNK} positions, got {len(positions)}"
        )
    for k, (x, y, z) in enumerate(positions):
        py = y + (k // RANDOMTICKS_PER_CLUSTER) * CHUNK_SIZE
        block = chunk.get_block(x, py, z)
        if block == Block.DIRT:
            if not _covered(chunk, x, py, z):
                chunk.set_block(x, py, z, Block.GRASS)
        elif block in _DIE_WHEN_COVERED:
            if _covered(chunk, x, py, z):
                chunk.set_block(x, py, z, Block.DIRT)