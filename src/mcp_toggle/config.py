"""User configuration management."""

import json
import logging
from pathlib import Path

DEFAULTS = {
    "claude_json": "~/.claude.json",
    "log_level": "WARNING",
}


class Config:
    """Manages global mcp-toggle configuration."""

    def __init__(self):
        self.config_dir = Path.home() / ".config" / "mcp-toggle"
        self.config_path = self.config_dir / "config.json"
        self._ensure_config_dir()

    def _ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        if not self.config_path.exists():
            self._write_default_config()

    def _write_default_config(self) -> None:
        """Write default configuration."""
        self.config_path.write_text(json.dumps(DEFAULTS, indent=2))

    def get_all(self) -> dict:
        """Get all configuration values, layered over the defaults."""
        config = dict(DEFAULTS)
        if not self.config_path.exists():
            return config
        try:
            stored = json.loads(self.config_path.read_text())
        except json.JSONDecodeError:
            logging.warning(f"Invalid JSON in {self.config_path}, using defaults")
            return config
        if isinstance(stored, dict):
            config.update(stored)
        return config

    def get(self, key: str, default=None):
        """Get a configuration value."""
        return self.get_all().get(key, default)

    def set(self, key: str, value) -> None:
        """Set a configuration value."""
        config = self.get_all()
        config[key] = value
        self.config_path.write_text(json.dumps(config, indent=2))

    @property
    def claude_json_path(self) -> Path:
        """Path of the Claude JSON document to edit."""
        return Path(self.get("claude_json", DEFAULTS["claude_json"])).expanduser()

    @property
    def log_level(self) -> str:
        level = self.get("log_level", DEFAULTS["log_level"])
        if not isinstance(level, str):
            return DEFAULTS["log_level"]
        # getLevelName maps known names to their numeric level
        if not isinstance(logging.getLevelName(level.upper()), int):
            return DEFAULTS["log_level"]
        return level.upper()
