"""The player: movement physics, collision, block placing and breaking."""

from __future__ import annotations

import math

from craftus.blocks import Block
from craftus.collision import Box, box_intersect
from craftus.direction import Direction
from craftus.itemstack import ItemStack
from craftus.mathutil import Float3, aabb_overlap, fast_floor
from craftus.raycast import RaycastResult, raycast
from craftus.world import BlockAccess

PLAYER_EYEHEIGHT = 1.65
PLAYER_HEIGHT = 1.8
PLAYER_COLLISIONBOX_SIZE = 0.65
PLAYER_HALFEYEDIFF = 0.07
PLAYER_PLACE_REPLACE_TIMEOUT = 0.2

QUICKSELECT_MAXSLOTS = 9
INVENTORY_SIZE = 24 + 16

MAX_WALK_VELOCITY = 4.3
MAX_FALL_VELOCITY = -50.0
GRAVITY_PLUS_FRICTION = 10.0
SIM_STEP = 1.0 / 60.0
ACTION_RANGE_SQR = 5.0 * 5.0 * 5.0

_STARTING_BLOCKS_BEFORE_WOOL = (
    Block.STONE, Block.DIRT, Block.GRASS, Block.COBBLESTONE, Block.SAND, Block.LOG,
    Block.LEAVES, Block.GLASS, Block.STONEBRICK, Block.BRICK, Block.PLANKS,
)
_STARTING_BLOCKS_AFTER_WOOL = (
    Block.BEDROCK, Block.GRAVEL, Block.COARSE, Block.DOOR_TOP, Block.DOOR_BOTTOM,
    Block.SNOW_GRASS, Block.SNOW, Block.OBSIDIAN, Block.NETHERRACK, Block.SANDSTONE,
    Block.SMOOTH_STONE, Block.CRAFTING_TABLE, Block.GRASS_PATH,
)

# x, then z, then y
_AXIS_ORDER = (0, 2, 1)


def _starting_inventory() -> list[ItemStack]:
    stacks = [ItemStack(block, 0, 1) for block in _STARTING_BLOCKS_BEFORE_WOOL]
    stacks += [ItemStack(Block.WOOL, meta, 1) for meta in range(16)]
    stacks += [ItemStack(block, 0, 1) for block in _STARTING_BLOCKS_AFTER_WOOL]
    return stacks


def _player_box(pos: Float3) -> Box:
    half = PLAYER_COLLISIONBOX_SIZE / 2.0
    return Box.from_extent(
        pos.x - half, pos.y, pos.z - half,
        PLAYER_COLLISIONBOX_SIZE, PLAYER_HEIGHT, PLAYER_COLLISIONBOX_SIZE,
    )


class Player:
    """A player standing in a world."""

    def __init__(self, world: BlockAccess | None) -> None:
        self.world = world
        self.position = Float3(0.0, 0.0, 0.0)
        self.pitch = 0.0
        self.yaw = 0.0
        self.bobbing = 0.0
        self.fov_add = 0.0
        self.crouch_add = 0.0
        self.grounded = False
        self.jumped = False
        self.sprinting = False
        self.flying = False
        self.crouching = False
        self.view = Float3(0.0, 0.0, -1.0)
        self.auto_jump_enabled = True
        self.velocity = Float3(0.0, 0.0, 0.0)
        self.sim_step_accum = 0.0
        self.break_place_timeout = 0.0
        self.inventory = _starting_inventory()
        self.quick_select_bar_slots = QUICKSELECT_MAXSLOTS
        self.quick_select_bar_slot = 0
        self.quick_select_bar = [ItemStack(Block.AIR, 0, 0) for _ in range(QUICKSELECT_MAXSLOTS)]
        self.view_ray_cast: RaycastResult | None = None
        self.block_in_sight = False
        self.block_in_action_range = False

    def update(self) -> None:
        """Recompute the view direction and the block being looked at."""
        self.view = Float3(
            -math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch),
        )
        if self.world is None:
            self.view_ray_cast = None
        else:
            eye = Float3(self.position.x, self.position.y + PLAYER_EYEHEIGHT, self.position.z)
            self.view_ray_cast = raycast(self.world, eye, self.view)
        self.block_in_sight = self.view_ray_cast is not None
        self.block_in_action_range = (
            self.block_in_sight and self.view_ray_cast.dist_sqr < ACTION_RANGE_SQR
        )

    def _nearby_solid_blocks(self, x: float, y: float, z: float):
        bx, by, bz = fast_floor(x), fast_floor(y), fast_floor(z)
        for dx in (-1, 0, 1):
            for dy in (0, 1, 2):
                for dz in (-1, 0, 1):
                    px, py, pz = bx + dx, by + dy, bz + dz
                    if self.world.get_block(px, py, pz) != Block.AIR:
                        yield px, py, pz

    def can_move(self, x: float, y: float, z: float) -> bool:
        """Whether the player's box at (x, y, z) is free of solid blocks."""
        half = PLAYER_COLLISIONBOX_SIZE / 2.0
        return not any(
            aabb_overlap(
                x - half, y, z - half,
                PLAYER_COLLISIONBOX_SIZE, PLAYER_HEIGHT, PLAYER_COLLISIONBOX_SIZE,
                px, py, pz, 1.0, 1.0, 1.0,
            )
            for px, py, pz in self._nearby_solid_blocks(x, y, z)
        )

    def jump(self, accl: Float3) -> None:
        if self.grounded and not self.flying:
            self.velocity = Float3(accl.x * 1.1, 6.7, accl.z * 1.1)
            self.jumped = True
            self.crouching = False

    def _collides(self, pos: Float3) -> bool:
        box = _player_box(pos)
        return any(
            box_intersect(Box.from_extent(px, py, pz, 1, 1, 1), box) is not None
            for px, py, pz in self._nearby_solid_blocks(pos.x, pos.y, pos.z)
        )

    def move(self, dt: float, accl: Float3) -> None:
        """Advance the physics by ``dt`` seconds in fixed steps, pushed by ``accl``."""
        self.break_place_timeout -= dt
        self.sim_step_accum += dt
        while self.sim_step_accum >= SIM_STEP:
            self._step(accl)
            self.sim_step_accum -= SIM_STEP

    def _step(self, accl: Float3) -> None:
        vy = max(self.velocity.y - GRAVITY_PLUS_FRICTION * SIM_STEP * 2.0, MAX_FALL_VELOCITY)
        if self.flying:
            vy = 0.0
        self.velocity = self.velocity.with_axis(1, vy)

        speed_factor = 1.0
        if not self.grounded and not self.flying:
            speed_factor = 0.2 if self.jumped else 0.6
        elif self.flying:
            speed_factor = 2.0
        elif self.crouching:
            speed_factor = 0.5

        new_pos = self.position + (self.velocity * SIM_STEP + accl * (SIM_STEP * speed_factor))
        final_pos = self.position
        wall_collision = False
        was_grounded = self.grounded
        self.grounded = False

        for axis in _AXIS_ORDER:
            axis_step = final_pos.with_axis(axis, new_pos[axis])
            if not self._collides(axis_step):
                final_pos = final_pos.with_axis(axis, new_pos[axis])
            elif axis == 1:
                if self.velocity.y < 0.0 or accl.y < 0.0:
                    self.grounded = True
                self.jumped = False
                self.velocity = Float3(0.0, 0.0, 0.0)
            else:
                wall_collision = True
                self.velocity = self.velocity.with_axis(axis, 0.0)

        mov_diff = final_pos - self.position

        if self.grounded and self.flying:
            self.flying = False

        if wall_collision and self.auto_jump_enabled:
            diff = new_pos - self.position
            if diff.magnitude_sqr() > 0.0:
                nrm = diff.normalized()
                tx = fast_floor(final_pos.x + nrm.x)
                ty = fast_floor(final_pos.y + nrm.y)
                tz = fast_floor(final_pos.z + nrm.z)
                head = self.world.get_block(tx, ty + 2, tz)
                landing = self.world.get_block(tx, ty + 1, tz)
                if head == Block.AIR and landing != Block.AIR:
                    self.jump(accl)

        if self.crouching and self.crouch_add > -0.3:
            self.crouch_add -= SIM_STEP * 2.0
        if not self.crouching and self.crouch_add < 0.0:
            self.crouch_add += SIM_STEP * 2.0

        if (
            self.crouching
            and not self.grounded
            and was_grounded
            and final_pos.y < self.position.y
            and mov_diff.x != 0.0
            and mov_diff.z != 0.0
        ):
            final_pos = self.position
            self.grounded = True
            self.velocity = self.velocity.with_axis(1, 0.0)

        self.position = final_pos
        vx = self.velocity.x * 0.95
        vz = self.velocity.z * 0.95
        if abs(vx) < 0.1:
            vx = 0.0
        if abs(vz) < 0.1:
            vz = 0.0
        self.velocity = Float3(vx, self.velocity.y, vz)

    def place_block(self) -> None:
        """Place the selected quick-bar block against the face being looked at."""
        if self.world is not None and self.block_in_action_range and self.break_place_timeout < 0.0:
            hit = self.view_ray_cast
            ox, oy, oz = Direction(hit.direction).offset()
            tx, ty, tz = hit.x + ox, hit.y + oy, hit.z + oz
            half = PLAYER_COLLISIONBOX_SIZE / 2.0
            if aabb_overlap(
                self.position.x - half, self.position.y, self.position.z - half,
                PLAYER_COLLISIONBOX_SIZE, PLAYER_HEIGHT, PLAYER_COLLISIONBOX_SIZE,
                tx, ty, tz, 1.0, 1.0, 1.0,
            ):
                return
            stack = self.quick_select_bar[self.quick_select_bar_slot]
            self.world.set_block_and_meta(tx, ty, tz, stack.block, stack.meta)
        if self.break_place_timeout < 0.0:
            self.break_place_timeout = PLAYER_PLACE_REPLACE_TIMEOUT

    def break_block(self) -> None:
        """Remove the block being looked at."""
        if self.world is not None and self.block_in_action_range and self.break_place_timeout < 0.0:
            hit = self.view_ray_cast
            self.world.set_block(hit.x, hit.y, hit.z, Block.AIR)
        if self.break_place_timeout < 0.0:
            self.break_place_timeout = PLAYER_PLACE_REPLACE_TIMEOUT

    def teleport(self, x: float, y: float, z: float) -> None:
        self.position = Float3(x, y, z)
        self.velocity = Float3(0.0, 0.0, 0.0)
        self.update()