"""The world selection menu: listing, creating and deleting saved worlds."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterable

import msgpack

from craftus.colors import COLOR_WHITE, shader_rgb
from craftus.gui import BUTTON_TEXT_PADDING, Gui
from craftus.spritebatch import CHAR_HEIGHT, GuiTexture, SpriteBatch
from craftus.world import WORLD_NAME_SIZE, WorldGenType

LEVEL_FILE = "level.mp"
_FORBIDDEN = set('/\\?:|<>')
_WORLD_GEN_NAMES = ("Smea", "Superflat", "Test")
_NO_WRAP = 2**31 - 1
_FRAME_COLOR = shader_rgb(20, 20, 20)
_MAX_VELOCITY = 20.0


@dataclass
class WorldInfo:
    name: str
    path: str
    last_played: int = 0


class MenuState(IntEnum):
    SELECT_WORLD = 0
    CONFIRM_DELETION = 1
    WORLD_OPTIONS = 2


@dataclass(frozen=True)
class WorldSelectResult:
    """The world to play: its folder name, display name, generator and whether it is new."""

    path: str
    name: str
    world_type: WorldGenType | None
    new_world: bool


def sanitize_world_path(name: str) -> str:
    """Replace characters that are not allowed in folder names with underscores."""
    return "".join("_" if c in _FORBIDDEN else c for c in name)


def unique_world_path(name: str, existing: Iterable[str]) -> str:
    """Sanitized folder name, extended with underscores until it is not taken."""
    taken = set(existing)
    path = sanitize_world_path(name)
    while path in taken:
        path += "_"
    return path


def delete_folder(path: str | Path) -> None:
    """Remove a folder and everything in it, ignoring failures."""
    shutil.rmtree(path, ignore_errors=True)


def _read_world_name(level: Path) -> str | None:
    try:
        data = msgpack.unpackb(level.read_bytes(), raw=False)
    except (OSError, ValueError, TypeError, msgpack.exceptions.UnpackException):
        return None
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    if not isinstance(name, str) or "\0" in name:
        return None
    if len(name.encode("utf-8")) >= WORLD_NAME_SIZE:
        return None
    return name


def scan_worlds(saves_dir: str | Path) -> list[WorldInfo]:
    """Worlds found in ``saves_dir``: each folder holding a readable level file."""
    worlds = []
    with os.scandir(saves_dir) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            level = Path(entry.path) / LEVEL_FILE
            if not level.is_file():
                continue
            name = _read_world_name(level)
            if name is None:
                continue
            worlds.append(WorldInfo(name=name, path=entry.name))
    return worlds


class WorldSelect:
    """Menu state machine; ``prompt_name`` asks for a new world's name, None to cancel."""

    def __init__(
        self,
        saves_dir: str | Path,
        gui: Gui,
        batch: SpriteBatch,
        prompt_name: Callable[[], str | None],
    ) -> None:
        self.saves_dir = Path(saves_dir)
        self.gui = gui
        self.batch = batch
        self.prompt_name = prompt_name
        self.worlds: list[WorldInfo] = []
        self.scroll = 0
        self.velocity = 0.0
        self.selected_world: int | None = None
        self.clicked_play = False
        self.clicked_new_world = False
        self.clicked_delete_world = False
        self.confirmed_world_options = False
        self.canceled_world_options = False
        self.confirmed_deletion = False
        self.canceled_deletion = False
        self.world_gen_type = WorldGenType.SUPER_FLAT
        self.menu_state = MenuState.SELECT_WORLD
        self.scan_worlds()

    def scan_worlds(self) -> None:
        self.worlds = scan_worlds(self.saves_dir)

    def render(self) -> None:
        """Queue the menu for this frame and record which buttons were pressed."""
        batch, gui = self.batch, self.gui
        batch.scale = 2
        batch.bind_gui_texture(GuiTexture.MENU_BACKGROUND)
        for i in range(160 // 32 + 1):
            for j in range(120 // 32 + 1):
                overlay = j >= 2 and self.menu_state == MenuState.SELECT_WORLD
                batch.push_quad_color(
                    i * 32, j * 32, -4 if overlay else -10, 32, 32, 0, 0, 32, 32,
                    COLOR_WHITE if overlay else shader_rgb(12, 12, 12),
                )

        if self.menu_state == MenuState.SELECT_WORLD:
            self._render_world_list()
        elif self.menu_state == MenuState.CONFIRM_DELETION:
            gui.offset(0, 10)
            gui.begin_row(batch.width, 1)
            gui.label(0.0, True, COLOR_WHITE, True, "Are you sure?")
            gui.end_row()
            gui.vertical_space(gui.relative_height(0.4))
            gui.begin_row_center(gui.relative_width(0.8), 3)
            self.canceled_deletion = gui.button(0.4, "No")
            gui.space(0.2)
            self.confirmed_deletion = gui.button(0.4, "Yes")
            gui.end_row()
        elif self.menu_state == MenuState.WORLD_OPTIONS:
            gui.offset(0, 10)
            gui.begin_row_center(gui.relative_width(0.9), 3)
            gui.label(0.45, True, COLOR_WHITE, False, "World type:")
            gui.space(0.1)
            if gui.button(0.45, _WORLD_GEN_NAMES[self.world_gen_type]):
                self.world_gen_type = WorldGenType((self.world_gen_type + 1) % len(WorldGenType))
            gui.end_row()
            gui.vertical_space(gui.relative_height(0.4))
            gui.begin_row_center(gui.relative_width(0.9), 3)
            self.canceled_world_options = gui.button(0.45, "Cancel")
            gui.space(0.1)
            self.confirmed_world_options = gui.button(0.45, "Continue")

    def _render_world_list(self) -> None:
        batch, gui = self.batch, self.gui
        _, movement_y = gui.cursor_movement()
        if gui.is_cursor_inside(0, 0, 160, 2 * 32):
            self.velocity += movement_y / 2.0
            self.velocity = min(max(self.velocity, -_MAX_VELOCITY), _MAX_VELOCITY)
        self.scroll = int(self.scroll + self.velocity)
        self.velocity *= 0.75
        if abs(self.velocity) < 0.001:
            self.velocity = 0.0

        maximum = CHAR_HEIGHT * 2 * len(self.worlds)
        self.scroll = min(max(self.scroll, -maximum), 0)

        for i, info in enumerate(self.worlds):
            y = i * (CHAR_HEIGHT + CHAR_HEIGHT) + 10 + self.scroll
            if self.selected_world == i:
                batch.push_single_color_quad(10, y - 3, -7, 140, 1, _FRAME_COLOR)
                batch.push_single_color_quad(10, y + CHAR_HEIGHT + 2, -7, 140, 1, _FRAME_COLOR)
                batch.push_single_color_quad(10, y - 3, -7, 1, CHAR_HEIGHT + 6, _FRAME_COLOR)
                batch.push_single_color_quad(10 + 140, y - 3, -7, 1, CHAR_HEIGHT + 6, _FRAME_COLOR)
            if gui.entered_cursor_inside(10, y - 3, 140, CHAR_HEIGHT + 6) and y < 32 * 2:
                self.selected_world = i
            batch.push_text(20, y, -6, COLOR_WHITE, True, _NO_WRAP, info.name)

        gui.offset(0, 2 * 32 + 5 + BUTTON_TEXT_PADDING)
        gui.begin_row_center(gui.relative_width(0.95), 1)
        self.clicked_play = gui.button(1.0, "Play selected world")
        gui.end_row()
        gui.begin_row_center(gui.relative_width(0.95), 2)
        self.clicked_new_world = gui.button(0.5, "New World")
        self.clicked_delete_world = gui.button(0.5, "Delete World")
        gui.end_row()

    def update(self) -> WorldSelectResult | None:
        """Act on the recorded button presses; returns the world to play, if any."""
        if self.clicked_new_world:
            self.clicked_new_world = False
            self.menu_state = MenuState.WORLD_OPTIONS
        if self.confirmed_world_options:
            self.confirmed_world_options = False
            world_type = self.world_gen_type
            name = self.prompt_name()
            self.menu_state = MenuState.SELECT_WORLD
            if name is not None:
                name = name[: WORLD_NAME_SIZE - 1]
                path = unique_world_path(name, (w.path for w in self.worlds))
                return WorldSelectResult(path, name, world_type, True)
        if self.clicked_play and self.selected_world is not None:
            self.clicked_play = False
            info = self.worlds[self.selected_world]
            self.menu_state = MenuState.SELECT_WORLD
            return WorldSelectResult(info.path, info.name, None, False)
        if self.clicked_delete_world and self.selected_world is not None:
            self.clicked_delete_world = False
            self.menu_state = MenuState.CONFIRM_DELETION
        if self.confirmed_deletion:
            self.confirmed_deletion = False
            if self.selected_world is not None:
                delete_folder(self.saves_dir / self.worlds[self.selected_world].path)
            self.scan_worlds()
            if self.selected_world is not None and self.selected_world >= len(self.worlds):
                self.selected_world = None
            self.menu_state = MenuState.SELECT_WORLD
        if self.canceled_deletion:
            self.canceled_deletion = False
            self.menu_state = MenuState.SELECT_WORLD
        if self.canceled_world_options:
            self.canceled_world_options = False
            self.menu_state = MenuState.SELECT_WORLD
        return None