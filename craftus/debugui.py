"""On-screen debug overlay: per-frame status lines and a scrolling log."""

from __future__ import annotations

from craftus.colors import COLOR_WHITE
from craftus.spritebatch import SpriteBatch

STATUS_LINES = 240 // 8 // 2
LOG_LINES = 20
LINE_LENGTH = 128


def _clip(message: str) -> str:
    return message[: LINE_LENGTH - 1]


class DebugUI:
    """Status lines are shown for one frame; log lines scroll, newest first."""

    def __init__(self) -> None:
        self.status_lines = [""] * STATUS_LINES
        self.log_lines = [""] * LOG_LINES
        self.current_status_line = 0

    def text(self, message: str) -> None:
        """Add a status line for this frame; ignored once all lines are used."""
        if self.current_status_line >= STATUS_LINES:
            return
        self.status_lines[self.current_status_line] = _clip(message)
        self.current_status_line += 1

    def log(self, message: str) -> None:
        self.log_lines = [_clip(message)] + self.log_lines[:-1]

    def draw(self, batch: SpriteBatch) -> None:
        """Queue the overlay text and clear the status lines."""
        batch.scale = 1
        y = (240 // 3) * 2
        for line in self.log_lines:
            _, step = batch.push_text(0, y, 100, COLOR_WHITE, False, 320, line)
            y += step
            if y >= 240:
                break
        y = 0
        for i, line in enumerate(self.status_lines):
            _, step = batch.push_text(0, y, 100, COLOR_WHITE, False, 320, line)
            y += step
            self.status_lines[i] = ""
        self.current_status_line = 0