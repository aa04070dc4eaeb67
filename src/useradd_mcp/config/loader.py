"""Configuration loader for useradd MCP."""

import json
import os
import shutil
import logging
from pathlib import Path
from typing import Optional

from .models import Config

logger = logging.getLogger("useradd-mcp.config")

CONFIG_ENV_VAR = "USERADD_MCP_CONFIG"


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to configuration file. If None, uses USERADD_MCP_CONFIG
                    environment variable, and built-in defaults when that is unset.

    Returns:
        Config: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
        json.JSONDecodeError: If config file is not valid JSON
    """
    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR)
        if not config_path:
            logger.debug("No configuration file specified, using defaults")
            return Config()

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from: {config_path}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        config = Config(**config_data)
        logger.info("Configuration loaded successfully")

        logger.debug(f"getent: {config.commands.getent}")
        logger.debug(f"useradd: {config.commands.useradd}")
        logger.debug(f"System GID threshold: {config.directory.system_gid_threshold}")
        logger.debug(f"HTTP address: {config.transport.http or 'stdio'}")

        return config

    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file: {e}")
        raise
    except Exception as e:
        logger.error(f"Error loading configuration: {e}")
        raise


def validate_config(config: Config) -> None:
    """
    Perform additional validation on configuration.

    Nothing here is fatal; problems that only show up at call time are
    reported as warnings.

    Args:
        config: Configuration to validate
    """
    for name in (config.commands.getent, config.commands.useradd):
        if shutil.which(name) is None:
            logger.warning(f"Command {name} was not found on PATH")

    if config.transport.use_http:
        host, port = config.transport.address()
        if host in ("0.0.0.0", "::"):
            logger.warning(f"HTTP transport listens on all interfaces (port {port})")

    logger.info("Configuration validation completed")
