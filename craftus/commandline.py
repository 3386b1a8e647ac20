"""In-game chat commands typed by the player."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from craftus.mathutil import Float3

if TYPE_CHECKING:
    from craftus.player import Player

_FLOAT = r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|(?i:inf(?:inity)?|nan))"
_TELEPORT = re.compile(rf"tp\s*({_FLOAT})\s*({_FLOAT})\s*({_FLOAT})")


@dataclass
class Options:
    """Runtime options that commands may change."""

    show_debug_info: bool = False


def execute_command(
    player: Player,
    text: str,
    options: Options | None = None,
    log: Callable[[str], None] | None = None,
) -> bool:
    """Run a command such as ``/tp x y z`` or ``/d``; True if one was carried out."""
    if not text.startswith("/"):
        return False
    if len(text) >= 9:
        match = _TELEPORT.match(text, 1)
        if match:
            x, y, z = (float(value) for value in match.groups())
            player.position = Float3(x, y + 1, z)
            if log is not None:
                log("teleported to %f, %f %f" % (x, y, z))
            return True
    if text == "/d":
        if options is not None:
            options.show_debug_info = not options.show_debug_info
        return True
    return False