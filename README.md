# craftus

The core of a small block-building game as a Python library. It contains the block and chunk model, player physics, controller input handling and a GUI layer that works without any particular renderer.

## Modules

- `craftus.mathutil`: the immutable `Float3` vector, `fast_floor`, `lerp` / `bilerp` / `trilerp`, `aabb_overlap`, `clamp`, and the `Xorshift32` and `Xorshift64` generators.
- `craftus.collision`: the axis-aligned `Box`. `box_intersect(a, b, ignore_faces=0)` returns an `Intersection` (normal, depth, face), or `None` when the boxes do not meet.
- `craftus.direction`: the `Direction` and `Axis` enums. `Direction.offset()` returns the step towards a face, and the properties `opposite` and `axis` give that face's opposite and its axis.
- `craftus.blocks`: the `Block` enum, `block_opaque`, `block_color`, `block_texture_name` and `block_name`.
- `craftus.itemstack`: `ItemStack`, with `is_empty()` and `transfer_to(dst)`. A stack holds at most 64 items. If the two stacks are of different kinds, `transfer_to` swaps them.
- `craftus.chunk`: `Chunk`, a 16×128×16 column made of eight `Cluster`s. Each block has 4-bit metadata. Every write increases the revision counters. Coordinates outside the chunk raise `IndexError`.
- `craftus.world`: `GameState`, `WorldGenType`, `GeneratorSettings`, `world_to_chunk_coord` and `world_to_local_coord`. It also has the `BlockAccess` protocol and a thread-safe `WorkQueue` of `WorkerItem`s, which counts pending tasks on each chunk.
- `craftus.blockevents`: `random_tick(chunk, positions)`. Dirt with nothing opaque above it turns into grass. Grass, snowy grass and grass paths under an opaque block turn into dirt.
- `craftus.raycast`: `raycast(world, origin, ray_dir)` walks the block grid and returns a `RaycastResult`, or `None` if the ray hits nothing within range.
- `craftus.player`: `Player`. It has fixed-step movement with gravity, per-axis collision, auto-jump and sneaking at edges, plus `place_block`, `break_block`, `jump` and `teleport`.
- `craftus.controller`: the `Buttons` bits, `Key` slots, `InputData`, `ControlScheme` (`DEFAULT_SCHEME` and `NEW_3DS_SCHEME`), `convert_input` and `PlayerController`. `load_options` and `write_options` read and write key bindings as an INI file with a `[controls]` section.
- `craftus.commandline`: `execute_command(player, text, options, log)`. It handles `/tp x y z`, which puts the player one block above y, and `/d`, which toggles `Options.show_debug_info`.
- `craftus.colors`: helpers for packed 15-bit colours: `shader_rgb`, `shader_r` / `shader_g` / `shader_b`, `shader_rgb_mix` and `shader_rgb_darken`.
- `craftus.fontloader`: `load_font(path)` reads a 16×16 grid of 8×8 glyphs with Pillow. It returns a `Font` with per-glyph widths and RGBA5551 pixels, and raises `FontLoadError` if the image cannot be read.
- `craftus.spritebatch`: `SpriteBatch` collects quads and text in GUI pixels. `build(texture_sizes)` sorts them by depth and returns `(texture, [GuiVertex, ...])` triangle batches.
- `craftus.gui`: `Gui`, a row-based immediate-mode layout with labels, buttons and touch-cursor queries.
- `craftus.debugui`: `DebugUI`. Status lines last for one frame, and a scrolling log shows the newest line first.
- `craftus.inventory`: `InventoryView`, which draws the quick-select bar and inventory grid and moves stacks by touch. Also `quick_select_slots` and `quick_select_width`.
- `craftus.worldselect`: the world menu, `WorldSelect`. `scan_worlds` finds worlds in save folders whose `level.mp` msgpack file contains a `name`. The module also has `sanitize_world_path`, `unique_world_path` and `delete_folder`.

## Installation

```
pip install .
```

## Example

```python
from craftus.blocks import Block, block_opaque
from craftus.chunk import Chunk
from craftus.mathutil import Float3

chunk = Chunk(0, 0)
chunk.set_block_and_meta(1, 2, 3, Block.WOOL, 5)
assert chunk.get_block(1, 2, 3) == Block.WOOL
assert chunk.get_metadata(1, 2, 3) == 5
assert block_opaque(Block.WOOL, 0)

print(Float3(1.0, 2.0, 2.0).magnitude())  # 3.0
```

A `Player` reads and writes blocks through any object that follows `craftus.world.BlockAccess`:

```python
from craftus.blocks import Block
from craftus.mathutil import Float3
from craftus.player import Player


class FlatWorld:
    """Stone below y = 64, air above, with edits kept in a dict."""

    def __init__(self):
        self.edits = {}

    def get_block(self, x, y, z):
        return self.edits.get((x, y, z), (Block.STONE if y < 64 else Block.AIR, 0))[0]

    def get_metadata(self, x, y, z):
        return self.edits.get((x, y, z), (0, 0))[1]

    def set_block(self, x, y, z, block):
        self.edits[(x, y, z)] = (block, 0)

    def set_metadata(self, x, y, z, metadata):
        self.edits[(x, y, z)] = (self.get_block(x, y, z), metadata)

    def set_block_and_meta(self, x, y, z, block, metadata):
        self.edits[(x, y, z)] = (block, metadata)


player = Player(FlatWorld())
player.teleport(0.5, 70.0, 0.5)
player.move(2.0, Float3(0.0, 0.0, 0.0))  # falls and lands on the stone
print(player.position, player.grounded)
```

## What the package does not do

The package has no world container that manages a chunk cache and loads or unloads chunks. It has no terrain generators, no save-game storage and no renderer; `SpriteBatch.build` only produces vertex lists. It also has no game loop and no command to start a game. A caller supplies the world through `BlockAccess`, draws the batches and drives the frame loop.

## Tests

```
pip install .[test]
pytest
```