from __future__ import annotations

import pytest

from mcp_toggle.claude_json import ServerEntry
from mcp_toggle.session import Action, ToggleSession


@pytest.fixture()
def session() -> ToggleSession:
    return ToggleSession(
        [
            ServerEntry(name="a", scope="global", enabled=True, config={}),
            ServerEntry(name="b", scope="global", enabled=False, config={}),
            ServerEntry(name="c", scope="local", enabled=True, config={}),
        ]
    )


def test_cursor_wraps_both_ways(session: ToggleSession) -> None:
    assert session.handle_key("up") is Action.REDRAW
    assert session.cursor == 2
    assert session.handle_key("down") is Action.REDRAW
    assert session.cursor == 0


def test_vi_keys_move_cursor(session: ToggleSession) -> None:
    session.handle_key("j")
    session.handle_key("j")
    assert session.cursor == 2
    session.handle_key("k")
    assert session.cursor == 1


def test_space_toggles_current(session: ToggleSession) -> None:
    session.handle_key("down")
    assert session.handle_key("space") is Action.REDRAW
    assert session.servers[1].enabled is True
    session.handle_key("space")
    assert session.servers[1].enabled is False


def test_all_on_and_all_off(session: ToggleSession) -> None:
    session.handle_key("a")
    assert [s.enabled for s in session.servers] == [True, True, True]
    assert session.disabled_count == 0
    session.handle_key("n")
    assert [s.enabled for s in session.servers] == [False, False, False]
    assert session.enabled_count == 0


def test_counts(session: ToggleSession) -> None:
    assert session.enabled_count == 2
    assert session.disabled_count == 1


@pytest.mark.parametrize("key", ["escape", "interrupt"])
def test_cancel_keys(session: ToggleSession, key: str) -> None:
    assert session.handle_key(key) is Action.CANCEL


def test_enter_saves(session: ToggleSession) -> None:
    assert session.handle_key("enter") is Action.SAVE


@pytest.mark.parametrize("key", ["x", "q", "\x1b[C", ""])
def test_unknown_keys_are_ignored(session: ToggleSession, key: str) -> None:
    before = [s.enabled for s in session.servers]
    assert session.handle_key(key) is Action.IGNORE
    assert session.cursor == 0
    assert [s.enabled for s in session.servers] == before
