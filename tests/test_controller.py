from dataclasses import replace

import pytest

from craftus.blocks import Block
from craftus.controller import (
    DEFAULT_SCHEME,
    KEY_NAMES,
    NEW_3DS_SCHEME,
    Buttons,
    InputData,
    Key,
    PlayerController,
    convert_input,
    load_options,
    write_options,
)
from craftus.mathutil import DEG_TO_RAD
from craftus.player import Player


class EmptyWorld:
    def get_block(self, x, y, z):
        return Block.AIR

    def set_block(self, x, y, z, block):
        pass

    def get_metadata(self, x, y, z):
        return 0

    def set_metadata(self, x, y, z, metadata):
        pass

    def set_block_and_meta(self, x, y, z, block, metadata):
        pass


@pytest.fixture
def player():
    return Player(EmptyWorld())


@pytest.fixture
def controller(player):
    return PlayerController(player)


def test_binary_key_held():
    keys = convert_input(InputData(keys_held=Buttons.A))
    assert keys.is_down(Key.A) == 1.0
    assert keys.was_pressed(Key.A) is False
    assert keys.is_down(Key.B) == 0.0


def test_binary_key_down_and_up():
    keys = convert_input(InputData(keys_down=Buttons.START, keys_up=Buttons.ZR))
    assert keys.is_down(Key.START) == 1.0
    assert keys.was_pressed(Key.START) is True
    assert keys.was_released(Key.ZR) is True
    assert keys.is_down(Key.ZR) == 0.0


def test_circle_pad_scaled():
    full = convert_input(InputData(keys_held=Buttons.CPAD_UP, circle_pad_y=0x9C))
    half = convert_input(InputData(keys_held=Buttons.CPAD_UP, circle_pad_y=0x9C // 2))
    assert full.is_down(Key.CPAD_UP) == pytest.approx(1.0)
    assert half.is_down(Key.CPAD_UP) == pytest.approx(full.is_down(Key.CPAD_UP) / 2)


def test_cstick_needs_button_bit():
    keys = convert_input(InputData(c_stick_x=-0x9C))
    assert keys.is_down(Key.CSTICK_LEFT) == 0.0
    keys = convert_input(InputData(keys_held=Buttons.CSTICK_LEFT, c_stick_x=-0x9C))
    assert keys.is_down(Key.CSTICK_LEFT) == pytest.approx(1.0)


def test_undefined_key_never_active():
    keys = convert_input(InputData(keys_held=0xFFFFFFFF, keys_down=0xFFFFFFFF, keys_up=0xFFFFFFFF))
    assert keys.is_down(Key.UNDEFINED) == 0.0
    assert keys.was_pressed(Key.UNDEFINED) is False


def test_write_then_load_round_trip(tmp_path):
    path = tmp_path / "options.ini"
    scheme = replace(DEFAULT_SCHEME, forward=Key.ZL, crouch=Key.CSTICK_DOWN)
    write_options(path, scheme, False)
    loaded, auto_jump, missing = load_options(path, DEFAULT_SCHEME, True)
    assert loaded == scheme
    # the written "autojump" entry is not the "auto_jumping" entry that is read
    assert auto_jump is True
    assert missing is True


def test_written_file_layout(tmp_path):
    path = tmp_path / "options.ini"
    write_options(path, DEFAULT_SCHEME, True)
    text = path.read_text()
    assert text.startswith("[controls]\n; The allowed key values are: \n; Not Set, A, B, X, Y, \n ; ")
    assert "forward=CircUp\n" in text
    assert "openCmd=Select\n" in text
    assert text.endswith("autojump=1\n")


def test_load_complete_file(tmp_path):
    path = tmp_path / "options.ini"
    write_options(path, NEW_3DS_SCHEME, True)
    with path.open("a") as f:
        f.write("auto_jumping=0\n")
    loaded, auto_jump, missing = load_options(path, DEFAULT_SCHEME, True)
    assert loaded == NEW_3DS_SCHEME
    assert auto_jump is False
    assert missing is False


def test_load_unknown_names_keep_binding(tmp_path):
    path = tmp_path / "options.ini"
    path.write_text("[controls]\nforward=Banana\njump=Not Set\nlookUp = ZR\n")
    loaded, _, missing = load_options(path, DEFAULT_SCHEME, True)
    assert loaded.forward == DEFAULT_SCHEME.forward
    assert loaded.jump == DEFAULT_SCHEME.jump
    assert loaded.look_up == Key.ZR
    assert missing is True


def test_load_missing_file(tmp_path):
    loaded, auto_jump, missing = load_options(tmp_path / "absent.ini", DEFAULT_SCHEME, False)
    assert loaded == DEFAULT_SCHEME
    assert auto_jump is False
    assert missing is True


def test_key_names_cover_keys(tmp_path):
    assert len(KEY_NAMES) == len(Key)
    assert KEY_NAMES[Key.CPAD_UP] == "CircUp"
    path = tmp_path / "options.ini"
    for key in Key:
        if key == Key.UNDEFINED:
            continue
        path.write_text(f"[controls]\nforward={KEY_NAMES[key]}\n")
        loaded, _, _ = load_options(path, DEFAULT_SCHEME, True)
        assert loaded.forward == key


def test_init_old_console_writes_options(tmp_path, player):
    path = tmp_path / "options.ini"
    ctrl = PlayerController(player, False, path)
    assert ctrl.control_scheme == DEFAULT_SCHEME
    assert player.auto_jump_enabled is True
    assert path.read_text().startswith("[controls]\n")


def test_init_new_console(tmp_path, player):
    ctrl = PlayerController(player, True, tmp_path / "options.ini")
    assert player.auto_jump_enabled is False
    assert ctrl.control_scheme.jump == Key.A
    assert ctrl.control_scheme.look_left == Key.CSTICK_LEFT


def test_init_with_complete_file_keeps_it(tmp_path, player):
    path = tmp_path / "options.ini"
    write_options(path, DEFAULT_SCHEME, True)
    with path.open("a") as f:
        f.write("auto_jumping=0\n")
    before = path.read_text()
    PlayerController(player, False, path)
    assert player.auto_jump_enabled is False
    assert path.read_text() == before


def test_switch_block_right_and_wrap_left(controller, player):
    controller.update(InputData(keys_down=Buttons.DRIGHT), 0.0)
    assert player.quick_select_bar_slot == 1
    controller.update(InputData(keys_down=Buttons.DLEFT), 0.0)
    controller.update(InputData(keys_down=Buttons.DLEFT), 0.0)
    assert player.quick_select_bar_slot == player.quick_select_bar_slots - 1


def test_look_left_turns_yaw(controller, player):
    controller.update(InputData(keys_held=Buttons.Y), 0.1)
    assert player.yaw == pytest.approx(160.0 * DEG_TO_RAD * 0.1)


def test_pitch_is_clamped(controller, player):
    controller.update(InputData(keys_held=Buttons.X), 2.0)
    assert player.pitch == pytest.approx(DEG_TO_RAD * 89.9)


def test_forward_moves_along_negative_z(controller, player):
    controller.update(InputData(keys_held=Buttons.CPAD_UP, circle_pad_y=0x9C), 0.1)
    assert player.position.z < 0.0
    assert player.position.x == pytest.approx(0.0, abs=1e-9)
    assert player.bobbing > 0.0


def test_crouch_toggles_on_release(controller, player):
    controller.update(InputData(keys_up=Buttons.DDOWN), 0.0)
    assert player.crouching is True
    controller.update(InputData(keys_up=Buttons.DDOWN), 0.0)
    assert player.crouching is False


def test_double_tap_jump_toggles_flying(controller, player):
    controller.update(InputData(keys_up=Buttons.DUP), 0.0)
    assert controller.fly_timer == 0.0
    controller.update(InputData(keys_held=Buttons.DUP), 0.05)
    assert player.flying is True


def test_slow_second_tap_does_not_fly(controller, player):
    controller.update(InputData(keys_up=Buttons.DUP), 0.0)
    controller.update(InputData(), 0.3)
    assert controller.fly_timer == -1.0
    controller.update(InputData(keys_held=Buttons.DUP), 0.05)
    assert player.flying is False


def test_open_command_calls_callback_and_freezes_next_frame(player):
    calls = []
    ctrl = PlayerController(player, open_command=calls.append)
    ctrl.update(InputData(keys_down=Buttons.SELECT), 0.1)
    assert calls == [player]
    timeout = player.break_place_timeout
    ctrl.update(InputData(), 0.5)
    assert player.break_place_timeout == timeout
    ctrl.update(InputData(), 0.5)
    assert player.break_place_timeout == pytest.approx(timeout - 0.5)