"""World-wide types: game states, generator settings, coordinates and the work queue."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Protocol, runtime_checkable

from craftus.chunk import CHUNK_SIZE, Chunk

CRAFTUS_VERSION_STR = "0.5.4"

CHUNKCACHE_SIZE = 9
UNDEADCHUNKS_COUNT = 2 * CHUNKCACHE_SIZE + CHUNKCACHE_SIZE * CHUNKCACHE_SIZE
CHUNKPOOL_SIZE = CHUNKCACHE_SIZE * CHUNKCACHE_SIZE + UNDEADCHUNKS_COUNT

WORLD_NAME_SIZE = 12


class GameState(IntEnum):
    SELECT_WORLD = 0
    PLAYING = 1


class WorldGenType(IntEnum):
    SMEA = 0
    SUPER_FLAT = 1
    TEST = 2


@dataclass
class GeneratorSettings:
    seed: int = 0
    type: WorldGenType = WorldGenType.SMEA


class WorkerItemType(IntEnum):
    LOAD = 0
    SAVE = 1
    BASE_GEN = 2
    DECORATE = 3
    POLY_GEN = 4


@dataclass
class WorkerItem:
    type: WorkerItemType
    chunk: Chunk
    uuid: int = 0


@runtime_checkable
class BlockAccess(Protocol):
    """Anything that reads and writes blocks by world coordinates."""

    def get_block(self, x: int, y: int, z: int) -> int: ...

    def set_block(self, x: int, y: int, z: int, block: int) -> None: ...

    def get_metadata(self, x: int, y: int, z: int) -> int: ...

    def set_metadata(self, x: int, y: int, z: int, metadata: int) -> None: ...

    def set_block_and_meta(self, x: int, y: int, z: int, block: int, metadata: int) -> None: ...


def world_to_chunk_coord(x: int) -> int:
    """Chunk coordinate containing world block coordinate ``x``."""
    return x // CHUNK_SIZE


def world_to_local_coord(x: int) -> int:
    """Position of world block coordinate ``x`` inside its chunk."""
    return x - world_to_chunk_coord(x) * CHUNK_SIZE


class WorkQueue:
    """Thread-safe list of pending chunk jobs with a sticky "item added" event."""

    def __init__(self) -> None:
        self.items: list[WorkerItem] = []
        self.lock = threading.Lock()
        self.item_added = threading.Event()

    def add_item(self, item: WorkerItem) -> None:
        """Queue a job, stamping it with its chunk's uuid and counting it on the chunk."""
        item.uuid = item.chunk.uuid
        item.chunk.tasks_running += 1
        if item.type == WorkerItemType.POLY_GEN:
            item.chunk.graphical_tasks_running += 1
        with self.lock:
            self.items.append(item)
        self.item_added.set()

    def __len__(self) -> int:
        with self.lock:
            return len(self.items)

    def __iter__(self) -> Iterator[WorkerItem]:
        with self.lock:
            snapshot = list(self.items)
        return iter(snapshot)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until an item has been added; False if ``timeout`` ran out first."""
        return self.item_added.wait(timeout)