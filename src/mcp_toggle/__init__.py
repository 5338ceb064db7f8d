"""Interactive toggle for MCP servers in the Claude JSON config."""

__version__ = "0.1.0"
