"""Grid traversal along a ray to find the first solid block."""

from __future__ import annotations

import math
from dataclasses import dataclass

from craftus.blocks import Block
from craftus.chunk import CHUNK_SIZE
from craftus.direction import Direction
from craftus.mathutil import Float3, fast_floor
from craftus.world import CHUNKCACHE_SIZE, BlockAccess

MAX_STEPS = CHUNKCACHE_SIZE // 2 * CHUNK_SIZE


@dataclass(frozen=True)
class RaycastResult:
    """The block hit, its squared distance and the face the ray entered through."""

    x: int
    y: int
    z: int
    dist_sqr: float
    direction: Direction


def _delta(a: float, b: float, c: float) -> float:
    if a == 0.0:
        return math.inf
    return math.sqrt(1.0 + (b + c) / a)


def _side_dist(pos: float, cell: int, direction: float, delta: float) -> tuple[int, float]:
    if direction < 0:
        return -1, (pos - cell) * delta
    return 1, (cell + 1.0 - pos) * delta


def raycast(world: BlockAccess, origin: Float3, ray_dir: Float3) -> RaycastResult | None:
    """Cast a ray from ``origin``; None if no solid block is met within range."""
    map_x, map_y, map_z = fast_floor(origin.x), fast_floor(origin.y), fast_floor(origin.z)

    x_sqr = ray_dir.x * ray_dir.x
    y_sqr = ray_dir.y * ray_dir.y
    z_sqr = ray_dir.z * ray_dir.z

    delta_x = _delta(x_sqr, y_sqr, z_sqr)
    delta_y = _delta(y_sqr, x_sqr, z_sqr)
    delta_z = _delta(z_sqr, x_sqr, y_sqr)

    step_x, side_x = _side_dist(origin.x, map_x, ray_dir.x, delta_x)
    step_y, side_y = _side_dist(origin.y, map_y, ray_dir.y, delta_y)
    step_z, side_z = _side_dist(origin.z, map_z, ray_dir.z, delta_z)

    hit = False
    side = 0
    steps = 0
    while True:
        if side_x < side_y and side_x < side_z:
            side_x += delta_x
            map_x += step_x
            side = 0
        elif side_y < side_z:
            side_y += delta_y
            map_y += step_y
            side = 1
        else:
            side_z += delta_z
            map_z += step_z
            side = 2
        if world.get_block(map_x, map_y, map_z) != Block.AIR:
            hit = True
            break
        if steps > MAX_STEPS:
            break
        steps += 1

    if not hit:
        return None

    if side == 0:
        direction = Direction.WEST if ray_dir.x > 0.0 else Direction.EAST
    elif side == 1:
        direction = Direction.BOTTOM if ray_dir.y > 0.0 else Direction.TOP
    else:
        direction = Direction.NORTH if ray_dir.z > 0.0 else Direction.SOUTH

    dist = Float3(map_x, map_y, map_z) - origin
    return RaycastResult(map_x, map_y, map_z, dist.magnitude_sqr(), direction)