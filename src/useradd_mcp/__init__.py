"""
useradd-mcp - Model Context Protocol server for local account management.

This package exposes the system's user accounts through MCP tools: listing
accounts and groups read with getent, and creating accounts with useradd.
"""

__version__ = "0.1.0"

from .server import UserAddMCPServer

__all__ = ["UserAddMCPServer"]
