"""Chunks: columns of block clusters with metadata and revision tracking."""

from __future__ import annotations

from enum import IntEnum

from craftus.blocks import Block
from craftus.mathutil import Xorshift32

CHUNK_SIZE = 16
CHUNK_HEIGHT = 128
CLUSTER_PER_CHUNK = CHUNK_HEIGHT // CHUNK_SIZE

_CLUSTER_VOLUME = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE

uuid_generator = Xorshift32()


class ChunkGenProgress(IntEnum):
    EMPTY = 0
    TERRAIN = 1
    FINISHED = 2


class Cluster:
    """A 16x16x16 cube of blocks; metadata lives in the low nibble, light in the high."""

    def __init__(self, y: int) -> None:
        self.y = y
        self.blocks = bytearray(_CLUSTER_VOLUME)
        self.metadata_light = bytearray(_CLUSTER_VOLUME)
        self.revision = 0
        self.see_through = 0xFFFF
        self.empty = True
        self.empty_revision = 0
        self.vertices = 0
        self.transparent_vertices = 0
        self.vbo_revision = 0
        self.force_vbo_update = False


def _index(x: int, ly: int, z: int) -> int:
    return (x * CHUNK_SIZE + ly) * CHUNK_SIZE + z


class Chunk:
    """A vertical column of clusters at chunk coordinates (x, z)."""

    def __init__(self, x: int, z: int) -> None:
        self.x = x
        self.z = z
        self.tasks_running = 0
        self.graphical_tasks_running = 0
        self.gen_progress = ChunkGenProgress.EMPTY
        self.clusters = [Cluster(i) for i in range(CLUSTER_PER_CHUNK)]
        self.heightmap = [[0] * CHUNK_SIZE for _ in range(CHUNK_SIZE)]
        self.heightmap_revision = 0
        self.revision = 0
        self.display_revision = 0
        self.force_vbo_update = False
        self.references = 0
        self.uuid = uuid_generator.next()

    def _locate(self, x: int, y: int, z: int) -> tuple[Cluster, int]:
        if not (0 <= x < CHUNK_SIZE and 0 <= y < CHUNK_HEIGHT and 0 <= z < CHUNK_SIZE):
            raise IndexError(f"local position ({x}, {y}, {z}) outside chunk")
        cluster = self.clusters[y // CHUNK_SIZE]
        return cluster, _index(x, y % CHUNK_SIZE, z)

    def _touch(self, cluster: Cluster) -> None:
        cluster.revision += 1
        self.revision += 1

    def request_graphics_update(self, cluster: int) -> None:
        self.clusters[cluster].force_vbo_update = True
        self.force_vbo_update = True

    def get_metadata(self, x: int, y: int, z: int) -> int:
        cluster, i = self._locate(x, y, z)
        return cluster.metadata_light[i] & 0xF

    def set_metadata(self, x: int, y: int, z: int, metadata: int) -> None:
        cluster, i = self._locate(x, y, z)
        cluster.metadata_light[i] = (cluster.metadata_light[i] & 0xF0) | (metadata & 0xF)
        self._touch(cluster)

    def get_block(self, x: int, y: int, z: int) -> int:
        cluster, i = self._locate(x, y, z)
        return cluster.blocks[i]

    def set_block(self, x: int, y: int, z: int, block: int) -> None:
        """Place a block and reset its metadata."""
        cluster, i = self._locate(x, y, z)
        cluster.blocks[i] = block
        self.set_metadata(x, y, z, 0)

    def set_block_and_meta(self, x: int, y: int, z: int, block: int, metadata: int) -> None:
        cluster, i = self._locate(x, y, z)
        cluster.blocks[i] = block
        cluster.metadata_light[i] = (cluster.metadata_light[i] & 0xF0) | (metadata & 0xF)
        self._touch(cluster)

    def __repr__(self) -> str:
        return f"Chunk(x={self.x}, z={self.z}, uuid={self.uuid})"


__all__ = [
    "Block",
    "CHUNK_HEIGHT",
    "CHUNK_SIZE",
    "CLUSTER_PER_CHUNK",
    "Chunk",
    "ChunkGenProgress",
    "Cluster",
]