"""Base class for useradd MCP tools."""

import json
from typing import List, Dict, Any, NoReturn
from abc import ABC, abstractmethod

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import TextContent as Content

from ..core.commands import ExternalToolError
from ..core.logging import get_logger, log_command


class BaseTool(ABC):
    """Base class for all account tools."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def _format_response(self, data: Any, operation: str = "operation") -> List[Content]:
        """
        Format response data for MCP.

        Args:
            data: Data to format
            operation: Operation name for logging

        Returns:
            List of MCP content objects
        """
        try:
            if isinstance(data, (dict, list)):
                formatted_data = json.dumps(data, indent=2, ensure_ascii=False)
            else:
                formatted_data = str(data)

            return [Content(type="text", text=formatted_data)]

        except (TypeError, ValueError) as e:
            self.logger.error(f"Error formatting response for {operation}: {e}")
            error_response = {
                "error": f"Failed to format response: {str(e)}",
                "operation": operation
            }
            return [Content(type="text", text=json.dumps(error_response, indent=2))]

    def _raise_tool_error(self, e: Exception, operation: str, target: str = "") -> NoReturn:
        """
        Log a failed operation and raise it as an MCP tool error.

        Args:
            e: Exception that occurred
            operation: Operation that failed
            target: Username or database involved (if applicable)

        Raises:
            ToolError: Always
        """
        error_msg = str(e)

        if isinstance(e, ExternalToolError):
            self.logger.error(f"External tool error during {operation}: {error_msg}")
        else:
            self.logger.error(f"Unexpected error during {operation}: {error_msg}")

        log_command(operation, target or "-", False, error_msg)

        raise ToolError(error_msg) from e

    @abstractmethod
    def get_schema_info(self) -> Dict[str, Any]:
        """
        Get schema information for this tool's operations.

        Returns:
            Dictionary with schema information
        """
        pass
