"""Main CLI entry point for mcp-toggle."""

import functools
import logging
import os
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mcp_toggle.claude_json import load_servers, save_servers
from mcp_toggle.config import Config
from mcp_toggle.exceptions import EmptyConfigurationError, McpToggleError
from mcp_toggle.session import ToggleSession
from mcp_toggle.terminal import RawTerminal
from mcp_toggle.ui import render_cancelled, render_saved, run_session

console = Console()
err_console = Console(stderr=True)


def handle_errors(func):
    """Decorator to handle McpToggleError exceptions gracefully."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except EmptyConfigurationError as e:
            console.print("[red]No MCP servers found.[/]")
            console.print(f"[dim]Checked: {escape(str(e.path))}[/]", highlight=False, emoji=False, soft_wrap=True)
            raise typer.Exit(1)
        except McpToggleError as e:
            err_console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False, emoji=False, soft_wrap=True)
            raise typer.Exit(1)

    return wrapper


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


app = typer.Typer(
    name="mcp-toggle",
    help="Toggle Claude Code MCP servers on and off",
    add_completion=False,
)


@app.command()
@handle_errors
def main():
    """Interactively enable or disable MCP servers.

    Servers come from ~/.claude.json: the top-level mcpServers and
    _disabledMcpServers, plus the project entry for the current directory.
    Disabled servers are moved to _disabledMcpServers so Claude Code
    ignores them until they are switched back on.

    Keys:
        up/down or k/j   move
        space            toggle
        a / n            all on / all off
        enter            save
        esc or ctrl-c    cancel
    """
    cfg = Config()
    _configure_logging(cfg.log_level)

    claude_json = cfg.claude_json_path
    cwd = os.getcwd()

    servers = load_servers(claude_json, cwd)
    logging.debug(f"Loaded {len(servers)} MCP servers from {claude_json}")

    session = ToggleSession(servers)
    with RawTerminal(sys.stdin) as terminal:
        save = run_session(session, terminal.read_key, console)
        # Still in key mode, so Ctrl-C can't cut the write short
        written = save and save_servers(claude_json, session.servers, cwd)

    if not save:
        render_cancelled(console)
        return

    render_saved(console, session.servers, claude_json, written=written)


if __name__ == "__main__":
    app()
