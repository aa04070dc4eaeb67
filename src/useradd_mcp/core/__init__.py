"""Core functionality for useradd MCP."""

from .accounts import AccountCreator, build_useradd_args
from .commands import CommandRunner, ExternalToolError
from .directory import DirectoryReader, cross_reference
from .logging import setup_logging

__all__ = [
    "AccountCreator",
    "build_useradd_args",
    "CommandRunner",
    "ExternalToolError",
    "DirectoryReader",
    "cross_reference",
    "setup_logging",
]
