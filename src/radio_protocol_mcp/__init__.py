"""Protocol codec and MCP server for Bluetooth-controlled handheld radios."""

__version__ = "0.1.0"
