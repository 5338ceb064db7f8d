"""Read and rewrite the MCP server sections of the Claude JSON document."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from mcp_toggle.exceptions import ConfigUnreadableError, EmptyConfigurationError

ACTIVE_KEY = "mcpServers"
DISABLED_KEY = "_disabledMcpServers"
PROJECTS_KEY = "projects"

Scope = Literal["global", "local"]


@dataclass
class ServerEntry:
    """One MCP server that can be switched on or off."""

    name: str
    scope: Scope
    enabled: bool
    config: Any


def read_json(path: Path) -> dict | None:
    """Parse a JSON object from path, or return None if that isn't possible."""
    if not path.exists():
        logging.debug(f"{path} does not exist")
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logging.warning(f"Could not read {path}: {e}")
        return None
    except json.JSONDecodeError as e:
        logging.warning(f"Invalid JSON in {path}: {e}")
        return None
    if not isinstance(data, dict):
        logging.warning(f"Expected a JSON object in {path}")
        return None
    return data


def normalize_cwd(path: str | Path) -> str:
    """Return path with forward slashes, the way project keys are stored."""
    return str(path).replace("\\", "/")


def _mapping(container: dict | None, key: str) -> dict:
    if not isinstance(container, dict):
        return {}
    value = container.get(key)
    return value if isinstance(value, dict) else {}


def _project_entry(document: dict, cwd: str) -> dict | None:
    projects = document.get(PROJECTS_KEY)
    if not isinstance(projects, dict):
        return None
    entry = projects.get(normalize_cwd(cwd))
    return entry if isinstance(entry, dict) else None


def build_server_list(document: dict, cwd: str | Path) -> list[ServerEntry]:
    """Flatten the four server mappings into one ordered list.

    Sources are visited as global active, global disabled, local active,
    local disabled. The first time a name is seen wins; later occurrences
    (in any scope) are skipped.
    """
    project = _project_entry(document, normalize_cwd(cwd))
    sources: list[tuple[dict, Scope, bool]] = [
        (_mapping(document, ACTIVE_KEY), "global", True),
        (_mapping(document, DISABLED_KEY), "global", False),
        (_mapping(project, ACTIVE_KEY), "local", True),
        (_mapping(project, DISABLED_KEY), "local", False),
    ]

    servers = []
    seen = set()
    for mapping, scope, enabled in sources:
        for name, config in mapping.items():
            if name in seen:
                logging.debug(f"Skipping duplicate server {name!r} ({scope})")
                continue
            servers.append(ServerEntry(name=name, scope=scope, enabled=enabled, config=config))
            seen.add(name)
    return servers


def load_servers(path: Path, cwd: str | Path) -> list[ServerEntry]:
    """Load the server list for cwd from the document at path.

    Raises:
        ConfigUnreadableError: the document is missing or not a JSON object
        EmptyConfigurationError: no servers were found in any scope
    """
    document = read_json(path)
    if document is None:
        raise ConfigUnreadableError(path)

    servers = build_server_list(document, cwd)
    if not servers:
        raise EmptyConfigurationError(path)
    return servers


def _partition(servers: list[ServerEntry], scope: Scope) -> tuple[dict, dict]:
    active = {}
    disabled = {}
    for server in servers:
        if server.scope != scope:
            continue
        if server.enabled:
            active[server.name] = server.config
        else:
            disabled[server.name] = server.config
    return active, disabled


def _assign(container: dict, active: dict, disabled: dict) -> None:
    container[ACTIVE_KEY] = active
    if disabled:
        container[DISABLED_KEY] = disabled
    else:
        container.pop(DISABLED_KEY, None)


def apply_servers(document: dict, servers: list[ServerEntry], cwd: str | Path) -> dict:
    """Write the enabled state of servers back into document (in place).

    Local servers are only written when the document already has a project
    entry for cwd; without one they are dropped.
    """
    _assign(document, *_partition(servers, "global"))

    project = _project_entry(document, normalize_cwd(cwd))
    if project is not None:
        _assign(project, *_partition(servers, "local"))
    elif any(server.scope == "local" for server in servers):
        logging.debug(f"No project entry for {cwd}, discarding local server changes")

    return document


def save_servers(path: Path, servers: list[ServerEntry], cwd: str | Path) -> bool:
    """Re-read the document, apply servers and overwrite it.

    Returns False without writing if the document can no longer be read, or
    holds values (NaN, out-of-range numbers) that can't be written as JSON.
    """
    document = read_json(path)
    if document is None:
        logging.warning(f"Not saving: could not re-read {path}")
        return False

    apply_servers(document, servers, cwd)
    try:
        text = json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False) + "\n"
    except ValueError as e:
        logging.warning(f"Not saving: {path} holds a value that isn't valid JSON ({e})")
        return False

    _write_atomic(path, text)
    logging.info(f"Wrote {len(servers)} MCP servers to {path}")
    return True


def _write_atomic(path: Path, text: str) -> None:
    """Replace path with text so readers never see a partial file."""
    with tempfile.NamedTemporaryFile(
        "w", delete=False, dir=str(path.parent), encoding="utf-8", prefix=f".{path.name}."
    ) as tf:
        tf.write(text)
        tmp_name = tf.name
    try:
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise
