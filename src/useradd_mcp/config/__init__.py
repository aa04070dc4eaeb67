"""Configuration module for useradd MCP."""

from .loader import load_config, validate_config
from .models import (
    CommandsConfig,
    DirectoryConfig,
    TransportConfig,
    LoggingConfig,
    Config,
)

__all__ = [
    "load_config",
    "validate_config",
    "CommandsConfig",
    "DirectoryConfig",
    "TransportConfig",
    "LoggingConfig",
    "Config",
]
