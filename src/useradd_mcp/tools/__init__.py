"""Tools for local account operations."""

from .base import BaseTool
from .user import UserTools

__all__ = [
    "BaseTool",
    "UserTools",
]
