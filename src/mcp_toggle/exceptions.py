"""Custom exceptions for mcp-toggle."""


class McpToggleError(Exception):
    """Base exception for mcp-toggle."""

    pass


class ConfigUnreadableError(McpToggleError):
    """Raised when the Claude JSON document is missing or not valid JSON."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Could not read {path}")


class EmptyConfigurationError(McpToggleError):
    """Raised when no MCP servers were found in the document."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"No MCP servers found.\nChecked: {path}")


class UnsupportedTerminalError(McpToggleError):
    """Raised when stdin can't deliver single keystrokes."""

    def __init__(self):
        super().__init__("This tool requires an interactive terminal.")
