"""User account tools."""

from typing import List, Dict, Any, Optional

from mcp.types import TextContent as Content

from .base import BaseTool
from ..core.accounts import AccountCreator
from ..core.commands import ExternalToolError
from ..core.directory import DirectoryReader
from ..core.logging import log_command
from ..core.records import AccountCreationRequest


class UserTools(BaseTool):
    """Tools for listing and creating local user accounts."""

    def __init__(self, directory: DirectoryReader, creator: AccountCreator):
        """
        Initialize user tools.

        Args:
            directory: Reader for the passwd and group databases
            creator: useradd wrapper
        """
        super().__init__()
        self.directory = directory
        self.creator = creator

    def list_users(self, username: Optional[str] = None) -> List[Content]:
        """
        List accounts with their supplementary groups.

        Args:
            username: Optional username to filter by

        Returns:
            List of MCP content objects with users (and groups when unfiltered)

        Raises:
            ToolError: If the directory could not be read or the username is invalid
        """
        target = username or "passwd"
        self.logger.info(f"Listing users{f' matching {username}' if username else ''}")

        try:
            result = self.directory.list_users(username or None)
        except (ExternalToolError, ValueError) as e:
            self._raise_tool_error(e, "list_users", target)

        details = f"Found {len(result.users)} users"
        if result.groups is not None:
            details += f" and {len(result.groups)} groups"
        log_command("list_users", target, True, details)

        return self._format_response(result.model_dump(exclude_none=True), "list_users")

    def add_user(self, request: AccountCreationRequest) -> List[Content]:
        """
        Create an account with useradd.

        Args:
            request: Account creation options

        Returns:
            List of MCP content objects with success and message

        Raises:
            ToolError: If useradd could not be launched
        """
        self.logger.info(f"Adding user: {request.username}")

        try:
            result = self.creator.create_account(request)
        except ExternalToolError as e:
            self._raise_tool_error(e, "add_user", request.username)

        log_command("add_user", request.username, result.success, result.message.strip() or None)

        return self._format_response(result.model_dump(), "add_user")

    def get_schema_info(self) -> Dict[str, Any]:
        """Get schema information for user operations."""
        return {
            "operations": ["ListUsers", "AddUser"],
            "user_attributes": [
                "username", "password", "uid", "gid", "comment", "home",
                "shell", "is_system_user", "groups"
            ],
            "group_attributes": ["name", "password", "gid", "members"],
            "add_user_options": [
                name for name in AccountCreationRequest.model_fields if name != "username"
            ],
            "required_permissions": [
                "Read passwd and group databases", "Run useradd (usually root)"
            ]
        }
