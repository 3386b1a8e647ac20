"""Turning controller input into player actions, with a configurable key scheme."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, fields, replace
from enum import IntEnum, IntFlag
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from craftus.mathutil import DEG_TO_RAD, Float3, clamp

if TYPE_CHECKING:
    from craftus.player import Player

DEFAULT_OPTIONS_PATH = "sdmc:/craftus_redesigned/options.ini"

_PAD_RANGE = 0x9C
_LOOK_SPEED = 160.0 * DEG_TO_RAD
_PITCH_LIMIT = DEG_TO_RAD * 89.9
_WALK_SPEED = 4.3
_FLY_DOUBLE_TAP = 0.25


class Buttons(IntFlag):
    """Hardware button bits as reported by the input system."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    DRIGHT = 1 << 4
    DLEFT = 1 << 5
    DUP = 1 << 6
    DDOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9
    X = 1 << 10
    Y = 1 << 11
    ZL = 1 << 14
    ZR = 1 << 15
    TOUCH = 1 << 20
    CSTICK_RIGHT = 1 << 24
    CSTICK_LEFT = 1 << 25
    CSTICK_UP = 1 << 26
    CSTICK_DOWN = 1 << 27
    CPAD_RIGHT = 1 << 28
    CPAD_LEFT = 1 << 29
    CPAD_UP = 1 << 30
    CPAD_DOWN = 1 << 31


class Key(IntEnum):
    """Platform-independent key slots that a control scheme refers to."""

    UNDEFINED = 0
    A = 1
    B = 2
    X = 3
    Y = 4
    L = 5
    R = 6
    START = 7
    SELECT = 8
    DUP = 9
    DDOWN = 10
    DLEFT = 11
    DRIGHT = 12
    CPAD_UP = 13
    CPAD_DOWN = 14
    CPAD_LEFT = 15
    CPAD_RIGHT = 16
    CSTICK_UP = 17
    CSTICK_DOWN = 18
    CSTICK_LEFT = 19
    CSTICK_RIGHT = 20
    ZL = 21
    ZR = 22


KEY_NAMES = (
    "Not Set", "A", "B", "X", "Y", "L",
    "R", "Start", "Select", "DUp", "DDown", "DLeft",
    "DRight", "CircUp", "CircDown", "CircLeft", "CircRight", "CStickUp",
    "CStickDown", "CStickLeft", "CStickRight", "ZL", "ZR",
)

_BINARY_KEYS = (
    (Key.A, Buttons.A),
    (Key.B, Buttons.B),
    (Key.X, Buttons.X),
    (Key.Y, Buttons.Y),
    (Key.L, Buttons.L),
    (Key.R, Buttons.R),
    (Key.START, Buttons.START),
    (Key.SELECT, Buttons.SELECT),
    (Key.DUP, Buttons.DUP),
    (Key.DDOWN, Buttons.DDOWN),
    (Key.DLEFT, Buttons.DLEFT),
    (Key.DRIGHT, Buttons.DRIGHT),
    (Key.ZL, Buttons.ZL),
    (Key.ZR, Buttons.ZR),
)


@dataclass
class InputData:
    """One frame of raw controller state."""

    keys_held: int = 0
    keys_down: int = 0
    keys_up: int = 0
    circle_pad_x: int = 0
    circle_pad_y: int = 0
    touch_x: int = 0
    touch_y: int = 0
    c_stick_x: int = 0
    c_stick_y: int = 0


@dataclass
class ControlScheme:
    forward: Key
    backward: Key
    strafe_left: Key
    strafe_right: Key
    look_left: Key
    look_right: Key
    look_up: Key
    look_down: Key
    place_block: Key
    break_block: Key
    jump: Key
    switch_block_left: Key
    switch_block_right: Key
    open_cmd: Key
    crouch: Key


# Field name and the name it carries in the options file.
_SCHEME_KEYS = (
    ("forward", "forward"),
    ("backward", "backward"),
    ("strafe_left", "strafeLeft"),
    ("strafe_right", "strafeRight"),
    ("look_left", "lookLeft"),
    ("look_right", "lookRight"),
    ("look_up", "lookUp"),
    ("look_down", "lookDown"),
    ("place_block", "placeBlock"),
    ("break_block", "breakBlock"),
    ("jump", "jump"),
    ("switch_block_left", "switchBlockLeft"),
    ("switch_block_right", "switchBlockRight"),
    ("open_cmd", "openCmd"),
    ("crouch", "crouch"),
)

DEFAULT_SCHEME = ControlScheme(
    forward=Key.CPAD_UP,
    backward=Key.CPAD_DOWN,
    strafe_left=Key.CPAD_LEFT,
    strafe_right=Key.CPAD_RIGHT,
    look_left=Key.Y,
    look_right=Key.A,
    look_up=Key.X,
    look_down=Key.B,
    place_block=Key.L,
    break_block=Key.R,
    jump=Key.DUP,
    switch_block_left=Key.DLEFT,
    switch_block_right=Key.DRIGHT,
    open_cmd=Key.SELECT,
    crouch=Key.DDOWN,
)

# The combined bindings of the new console collapse to the first key slot.
NEW_3DS_SCHEME = ControlScheme(
    forward=Key.CPAD_UP,
    backward=Key.CPAD_DOWN,
    strafe_left=Key.CPAD_LEFT,
    strafe_right=Key.CPAD_RIGHT,
    look_left=Key.CSTICK_LEFT,
    look_right=Key.CSTICK_RIGHT,
    look_up=Key.CSTICK_UP,
    look_down=Key.CSTICK_DOWN,
    place_block=Key.ZL,
    break_block=Key.ZR,
    jump=Key.A,
    switch_block_left=Key.A,
    switch_block_right=Key.A,
    open_cmd=Key.SELECT,
    crouch=Key.A,
)


def _slots(value):
    return lambda: [value] * len(Key)


@dataclass
class AgnosticInput:
    """Per key slot: how far it is pressed, and whether it went down or up this frame."""

    keys: list[float] = field(default_factory=_slots(0.0))
    keys_down: list[bool] = field(default_factory=_slots(False))
    keys_up: list[bool] = field(default_factory=_slots(False))

    def is_down(self, combo: int) -> float:
        return self.keys[combo]

    def was_released(self, combo: int) -> bool:
        return self.keys_up[combo]

    def was_pressed(self, combo: int) -> bool:
        return self.keys_down[combo]


def convert_input(data: InputData) -> AgnosticInput:
    """Map raw button bits and stick positions onto key slots."""
    result = AgnosticInput()
    active = data.keys_down | data.keys_held

    def register(key: Key, button: Buttons, scale: float) -> None:
        result.keys[key] = scale * float(bool(active & button))
        result.keys_down[key] = bool(data.keys_down & button)
        result.keys_up[key] = bool(data.keys_up & button)

    for key, button in _BINARY_KEYS:
        register(key, button, 1.0)

    circ_x = data.circle_pad_x / _PAD_RANGE
    circ_y = data.circle_pad_y / _PAD_RANGE
    stick_x = data.c_stick_x / _PAD_RANGE
    stick_y = data.c_stick_y / _PAD_RANGE
    for key, button, axis in (
        (Key.CPAD_UP, Buttons.CPAD_UP, circ_y),
        (Key.CPAD_DOWN, Buttons.CPAD_DOWN, circ_y),
        (Key.CPAD_LEFT, Buttons.CPAD_LEFT, circ_x),
        (Key.CPAD_RIGHT, Buttons.CPAD_RIGHT, circ_x),
        (Key.CSTICK_UP, Buttons.CSTICK_UP, stick_y),
        (Key.CSTICK_DOWN, Buttons.CSTICK_DOWN, stick_y),
        (Key.CSTICK_LEFT, Buttons.CSTICK_LEFT, stick_x),
        (Key.CSTICK_RIGHT, Buttons.CSTICK_RIGHT, stick_x),
    ):
        register(key, button, abs(axis))
    return result


def _read_ini(path: Path) -> dict[str, dict[str, str]]:
    sections: dict[str, dict[str, str]] = {}
    current = sections.setdefault("", {})
    for raw in path.read_text().splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("[") and "]" in line:
            current = sections.setdefault(line[1 : line.index("]")].strip().lower(), {})
        elif "=" in line:
            key, value = line.split("=", 1)
            current[key.strip().lower()] = value.strip()
    return sections


def load_options(
    path: str | Path, scheme: ControlScheme, auto_jump: bool
) -> tuple[ControlScheme, bool, bool]:
    """Read key bindings from an options file.

    Returns the updated scheme, the auto jump flag and whether any entry was missing.
    """
    path = Path(path)
    if not path.exists():
        return scheme, auto_jump, True
    controls = _read_ini(path).get("controls", {})
    missing = False
    changes = {}
    for name, ini_name in _SCHEME_KEYS:
        raw = controls.get(ini_name.lower())
        if raw is None:
            missing = True
            continue
        tokens = raw.split()
        if tokens and tokens[0] in KEY_NAMES:
            changes[name] = Key(KEY_NAMES.index(tokens[0]))
    raw = controls.get("auto_jumping")
    if raw is None:
        missing = True
    else:
        match = re.match(r"\s*([+-]?\d+)", raw)
        if match:
            auto_jump = int(match.group(1)) != 0
    return replace(scheme, **changes), auto_jump, missing


def write_options(path: str | Path, scheme: ControlScheme, auto_jump: bool) -> None:
    """Write the key bindings and auto jump setting to an options file."""
    parts = ["[controls]\n", "; The allowed key values are: \n; "]
    for count, name in enumerate(KEY_NAMES[:-1], 1):
        parts.append(f"{name}, ")
        if count % 5 == 0:
            parts.append("\n ; ")
    parts.append(f"{KEY_NAMES[-1]}\n\n")
    for name, ini_name in _SCHEME_KEYS:
        parts.append(f"{ini_name}={KEY_NAMES[getattr(scheme, name)]}\n")
    parts.append(
        "; 0 = disabled, 1 = enabled default: 1 for O3ds, 0 for N3ds\n"
        f"autojump={int(auto_jump)}\n"
    )
    Path(path).write_text("".join(parts))


class PlayerController:
    """Drives a player from controller input each frame."""

    def __init__(
        self,
        player: Player,
        is_new_3ds: bool = False,
        options_path: str | Path | None = None,
        open_command: Callable[[Player], None] | None = None,
    ) -> None:
        self.player = player
        self.break_place_timeout = 0.0
        self.open_command = open_command
        if is_new_3ds:
            self.control_scheme = replace(NEW_3DS_SCHEME)
            player.auto_jump_enabled = False
        else:
            self.control_scheme = replace(DEFAULT_SCHEME)
            player.auto_jump_enabled = True
        self.opened_cmd = False

        if options_path is not None:
            self.control_scheme, player.auto_jump_enabled, missing = load_options(
                options_path, self.control_scheme, player.auto_jump_enabled
            )
            if missing:
                write_options(options_path, self.control_scheme, player.auto_jump_enabled)

        self.fly_timer = -1.0

    def update(self, data: InputData, dt: float) -> None:
        """Apply one frame of input lasting ``dt`` seconds."""
        player = self.player
        scheme = self.control_scheme
        keys = convert_input(data)

        jump = keys.is_down(scheme.jump)
        crouch = keys.is_down(scheme.crouch)
        forward = keys.is_down(scheme.forward)
        backward = keys.is_down(scheme.backward)
        strafe_left = keys.is_down(scheme.strafe_left)
        strafe_right = keys.is_down(scheme.strafe_right)

        forward_vec = Float3(-math.sin(player.yaw), 0.0, -math.cos(player.yaw))
        right_vec = forward_vec.cross(Float3(0.0, 1.0, 0.0))

        movement = (
            forward_vec * forward
            - forward_vec * backward
            + right_vec * strafe_right
            - right_vec * strafe_left
        )
        if player.flying:
            movement = movement + Float3(0.0, jump, 0.0) - Float3(0.0, crouch, 0.0)
        if movement.magnitude_sqr() > 0.0:
            speed = _WALK_SPEED * Float3(
                strafe_right - strafe_left, jump - crouch, backward - forward
            ).magnitude()
            player.bobbing += speed * 1.5 * dt
            movement = movement.normalized() * speed

        look_left = keys.is_down(scheme.look_left)
        look_right = keys.is_down(scheme.look_right)
        look_up = keys.is_down(scheme.look_up)
        look_down = keys.is_down(scheme.look_down)

        player.yaw += (look_left - look_right) * _LOOK_SPEED * dt
        player.pitch += (look_up - look_down) * _LOOK_SPEED * dt
        player.pitch = clamp(player.pitch, -_PITCH_LIMIT, _PITCH_LIMIT)

        if keys.is_down(scheme.place_block) > 0.0:
            player.place_block()
        if keys.is_down(scheme.break_block) > 0.0:
            player.break_block()

        if jump > 0.0:
            player.jump(movement)

        released_jump = keys.was_released(scheme.jump)
        if self.fly_timer >= 0.0:
            if jump > 0.0:
                player.flying = not player.flying
            self.fly_timer += dt
            if self.fly_timer > _FLY_DOUBLE_TAP:
                self.fly_timer = -1.0
        elif released_jump:
            self.fly_timer = 0.0

        if not player.flying and keys.was_released(scheme.crouch):
            player.crouching = not player.crouching

        if keys.was_pressed(scheme.switch_block_left):
            player.quick_select_bar_slot -= 1
            if player.quick_select_bar_slot == -1:
                player.quick_select_bar_slot = player.quick_select_bar_slots - 1
        if keys.was_pressed(scheme.switch_block_right):
            player.quick_select_bar_slot += 1
            if player.quick_select_bar_slot == player.quick_select_bar_slots:
                player.quick_select_bar_slot = 0

        if self.opened_cmd:
            dt = 0.0
            self.opened_cmd = False

        if keys.was_pressed(scheme.open_cmd):
            if self.open_command is not None:
                self.open_command(player)
            self.opened_cmd = True

        player.move(dt, movement)
        player.update()


__all__ = [
    "AgnosticInput",
    "Buttons",
    "ControlScheme",
    "DEFAULT_SCHEME",
    "InputData",
    "KEY_NAMES",
    "Key",
    "NEW_3DS_SCHEME",
    "PlayerController",
    "convert_input",
    "fields",
    "load_options",
    "write_options",
]