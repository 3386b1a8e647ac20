import pytest

from craftus.commandline import Options, execute_command
from craftus.mathutil import Float3
from craftus.player import Player


@pytest.fixture
def player():
    return Player(None)


def test_teleport_moves_player_one_block_up(player):
    assert execute_command(player, "/tp 1 2 3") is True
    assert player.position.x == pytest.approx(1.0)
    assert player.position.y == pytest.approx(3.0)
    assert player.position.z == pytest.approx(3.0)


def test_teleport_logs_message(player):
    messages = []
    execute_command(player, "/tp 1 2 3", Options(), messages.append)
    assert messages == ["teleported to 1.000000, 2.000000 3.000000"]


def test_teleport_with_fractions_and_negatives(player):
    execute_command(player, "/tp -4.5 10 7.25")
    assert player.position.x == pytest.approx(-4.5)
    assert player.position.z == pytest.approx(7.25)
    assert player.position.y - 10.0 == pytest.approx(1.0)


def test_teleport_without_space_after_tp(player):
    assert execute_command(player, "/tp1.5 2 3") is True
    assert player.position.x == pytest.approx(1.5)


def test_teleport_with_missing_coordinate_does_nothing(player):
    assert execute_command(player, "/tp 10 20") is False
    assert player.position == Float3(0.0, 0.0, 0.0)


def test_teleport_with_words_does_nothing(player):
    assert execute_command(player, "/tp a b c") is False
    assert player.position == Float3(0.0, 0.0, 0.0)


def test_text_without_slash_is_ignored(player):
    messages = []
    assert execute_command(player, "tp 1 2 3 4", Options(), messages.append) is False
    assert messages == []
    assert player.position == Float3(0.0, 0.0, 0.0)


def test_debug_toggle(player):
    options = Options()
    execute_command(player, "/d", options)
    assert options.show_debug_info is True
    execute_command(player, "/d", options)
    assert options.show_debug_info is False


def test_other_command_does_not_toggle(player):
    options = Options()
    assert execute_command(player, "/dd", options) is False
    assert options.show_debug_info is False