"""Full-screen rendering and the interactive key loop."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape

from mcp_toggle.claude_json import ServerEntry
from mcp_toggle.session import Action, ToggleSession


def _line(console: Console, markup: str = "") -> None:
    console.print(markup, highlight=False, emoji=False, soft_wrap=True)


def render(console: Console, session: ToggleSession) -> None:
    """Redraw the whole selection screen."""
    console.clear()

    _line(console, "[bold cyan]  MCP Server Toggle[/]")
    _line(console, "[dim]  " + "─" * 37 + "[/]")
    _line(console, "[dim]  SPACE toggle  |  ENTER save  |  ESC cancel[/]")
    _line(console, "[dim]  a = all on    |  n = all off[/]")
    _line(console)

    for index, server in enumerate(session.servers):
        is_cursor = index == session.cursor
        prefix = "[cyan]  > [/]" if is_cursor else "    "
        icon = "[green]\\[ON] [/]" if server.enabled else "[red]\\[OFF][/]"
        label = f"[bold white]{escape(server.name)}[/]" if is_cursor else escape(server.name)
        tag = f" [dim]({server.scope})[/]" if server.scope != "global" else ""
        _line(console, f"{prefix}{icon} {label}{tag}")

    _line(console)
    _line(
        console,
        f"  [green]{session.enabled_count} enabled[/]  [red]{session.disabled_count} disabled[/]",
    )


def render_saved(console: Console, servers: list[ServerEntry], path: Path, written: bool = True) -> None:
    """Print the post-save summary."""
    console.clear()
    if written:
        _line(console, "[bold green]  Saved![/]")
    else:
        _line(console, f"[bold yellow]  Could not re-read {escape(str(path))}, nothing was written.[/]")
    _line(console)

    for server in servers:
        icon = "[green]ON [/]" if server.enabled else "[red]OFF[/]"
        _line(console, f"  {icon}  {escape(server.name)}")

    _line(console)
    if written:
        _line(console, f"[dim]  Written to: {escape(str(path))}[/]")
        _line(console, "[dim]  Restart Claude Code to apply changes.[/]")
    _line(console)


def render_cancelled(console: Console) -> None:
    console.clear()
    _line(console, "[dim]  Cancelled - no changes made.[/]")
    _line(console)


def run_session(
    session: ToggleSession,
    read_key: Callable[[], str],
    console: Console,
) -> bool:
    """Run the key loop until the user confirms or cancels.

    Returns True when the user asked to save. Ctrl-C counts as cancel,
    whether it lands while waiting for a key or while redrawing.
    """
    console.show_cursor(False)
    try:
        render(console, session)
        while True:
            action = session.handle_key(read_key())
            if action is Action.SAVE:
                return True
            if action is Action.CANCEL:
                return False
            if action is Action.REDRAW:
                render(console, session)
    except KeyboardInterrupt:
        return False
    finally:
        console.show_cursor(True)
