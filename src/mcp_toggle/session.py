"""In-memory state of an interactive toggle session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mcp_toggle.claude_json import ServerEntry

UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
TOGGLE_KEYS = ("space",)
ALL_ON_KEYS = ("a",)
ALL_OFF_KEYS = ("n",)
SAVE_KEYS = ("enter",)
CANCEL_KEYS = ("escape", "interrupt")


class Action(Enum):
    """What the UI loop should do after a key was handled."""

    REDRAW = "redraw"
    IGNORE = "ignore"
    SAVE = "save"
    CANCEL = "cancel"


@dataclass
class ToggleSession:
    """Cursor position plus the servers being edited."""

    servers: list[ServerEntry]
    cursor: int = 0

    @property
    def current(self) -> ServerEntry:
        return self.servers[self.cursor]

    @property
    def enabled_count(self) -> int:
        return sum(1 for server in self.servers if server.enabled)

    @property
    def disabled_count(self) -> int:
        return len(self.servers) - self.enabled_count

    def move(self, step: int) -> None:
        """Move the cursor by step, wrapping around either end."""
        self.cursor = (self.cursor + step) % len(self.servers)

    def toggle(self) -> None:
        self.current.enabled = not self.current.enabled

    def set_all(self, enabled: bool) -> None:
        for server in self.servers:
            server.enabled = enabled

    def handle_key(self, key: str) -> Action:
        """Apply a key to the session and report the follow-up action."""
        if key in CANCEL_KEYS:
            return Action.CANCEL
        if key in SAVE_KEYS:
            return Action.SAVE

        if key in UP_KEYS:
            self.move(-1)
        elif key in DOWN_KEYS:
            self.move(1)
        elif key in TOGGLE_KEYS:
            self.toggle()
        elif key in ALL_ON_KEYS:
            self.set_all(True)
        elif key in ALL_OFF_KEYS:
            self.set_all(False)
        else:
            return Action.IGNORE
        return Action.REDRAW
