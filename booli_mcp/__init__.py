"""Booli MCP server: Swedish real estate search from Booli.se over MCP."""

__version__ = "1.0.0"
