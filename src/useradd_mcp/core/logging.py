"""Logging configuration for useradd MCP."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from ..config.models import LoggingConfig


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """
    Setup logging configuration.

    Console output goes to stderr since stdout carries the stdio transport.

    Args:
        config: Logging configuration

    Returns:
        Logger instance
    """
    logger = logging.getLogger("useradd-mcp")
    logger.setLevel(getattr(logging, config.level))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.level))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.file:
        try:
            log_file = Path(config.file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            # Create rotating file handler (10MB max, keep 5 files)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setLevel(getattr(logging, config.level))
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {config.file}")

        except OSError as e:
            logger.warning(f"Could not setup file logging: {e}")

    # Suppress some noisy loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.info(f"Logging initialized at level: {config.level}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(f"useradd-mcp.{name}")


def log_command(operation: str, target: str, success: bool, details: Optional[str] = None) -> None:
    """
    Log an account operation for audit purposes.

    Args:
        operation: Operation type (list_users, add_user, etc.)
        target: Username or database involved
        success: Whether operation was successful
        details: Additional details
    """
    logger = get_logger("audit")

    status = "SUCCESS" if success else "FAILED"
    message = f"{operation.upper()} {status}: {target}"

    if details:
        message += f" - {details}"

    if success:
        logger.info(message)
    else:
        logger.warning(message)
