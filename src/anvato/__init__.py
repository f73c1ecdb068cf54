"""Signed search client for the Anvato MCP video catalog API."""

__version__ = "0.1.0"
