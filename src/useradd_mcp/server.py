"""
Main server implementation for useradd MCP.

This module implements the MCP server for local account management, providing:
- Configuration loading and validation
- Logging setup
- MCP tool registration and routing
- Transport selection (stdio by default, streamable HTTP with --http)
- Signal handling for graceful shutdown

The server exposes two account tools:
- ListUsers: accounts from the passwd database, cross-referenced with groups
- AddUser: account creation through useradd
"""

import argparse
import json
import shutil
import signal
import sys
from typing import Optional, List, Annotated

import anyio
from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent as Content
from pydantic import Field

from . import __version__
from .config.loader import load_config, validate_config
from .config.models import Config, TransportConfig
from .core.accounts import AccountCreator
from .core.commands import CommandRunner
from .core.directory import DirectoryReader
from .core.logging import setup_logging
from .core.records import ACCOUNT_NAME_PATTERN, AccountCreationRequest
from .tools.definitions import (
    LIST_USERS_DESC,
    ADD_USER_DESC,
    HEALTH_DESC,
    GET_SCHEMA_INFO_DESC,
)
from .tools.user import UserTools

SERVER_NAME = "useradd"


class UserAddMCPServer:
    """Main server class for useradd MCP, serving over stdio."""

    def __init__(self, config: Optional[Config] = None, runner: Optional[CommandRunner] = None):
        """
        Initialize the server.

        Args:
            config: Process configuration (defaults when omitted)
            runner: Command runner, replaced by a fake in tests
        """
        self.config = config if config is not None else Config()
        validate_config(self.config)

        self.logger = setup_logging(self.config.logging)

        self.runner = runner if runner is not None else CommandRunner(self.config.commands)
        self.directory = DirectoryReader(self.runner, self.config.directory)
        self.creator = AccountCreator(self.runner)
        self.user_tools = UserTools(self.directory, self.creator)

        self.mcp = self._create_mcp()
        self._setup_tools()

    def _create_mcp(self) -> FastMCP:
        return FastMCP(SERVER_NAME)

    def _setup_tools(self) -> None:
        """Register MCP tools with the server."""

        @self.mcp.tool(name="ListUsers", description=LIST_USERS_DESC)
        def list_users(
            username: Annotated[Optional[str], Field(description="the optional username to filter by")] = None
        ):
            return self.user_tools.list_users(username)

        @self.mcp.tool(name="AddUser", description=ADD_USER_DESC)
        def add_user(
            username: Annotated[str, Field(description="the username of the new account", pattern=ACCOUNT_NAME_PATTERN)],
            base_dir: Annotated[str, Field(description="the base directory for the home directory of the new account")] = "",
            comment: Annotated[str, Field(description="the GECOS field of the new account")] = "",
            home_dir: Annotated[str, Field(description="the home directory of the new account")] = "",
            expire_date: Annotated[str, Field(description="the expiration date of the new account")] = "",
            inactive: Annotated[int, Field(description="the password inactivity period of the new account")] = 0,
            gid: Annotated[str, Field(description="the name or ID of the primary group of the new account")] = "",
            groups: Annotated[Optional[List[str]], Field(description="the list of supplementary groups of the new account")] = None,
            skel_dir: Annotated[str, Field(description="the alternative skeleton directory")] = "",
            create_home: Annotated[bool, Field(description="create the user's home directory")] = False,
            no_create_home: Annotated[bool, Field(description="do not create the user's home directory")] = False,
            no_user_group: Annotated[bool, Field(description="do not create a group with the same name as the user")] = False,
            non_unique: Annotated[bool, Field(description="allow to create users with duplicate (non-unique) UID")] = False,
            password: Annotated[str, Field(description="the encrypted password of the new account")] = "",
            system: Annotated[bool, Field(description="create a system account")] = False,
            shell: Annotated[str, Field(description="the login shell of the new account")] = "",
            uid: Annotated[int, Field(description="the user ID of the new account")] = 0,
            user_group: Annotated[bool, Field(description="create a group with the same name as the user")] = False,
            selinux_user: Annotated[str, Field(description="the specific SEUSER for the SELinux user mapping")] = "",
            selinux_range: Annotated[str, Field(description="the specific MLS range for the SELinux user mapping")] = "",
        ):
            request = AccountCreationRequest(
                username=username, base_dir=base_dir, comment=comment, home_dir=home_dir,
                expire_date=expire_date, inactive=inactive, gid=gid, groups=groups or [],
                skel_dir=skel_dir, create_home=create_home, no_create_home=no_create_home,
                no_user_group=no_user_group, non_unique=non_unique, password=password,
                system=system, shell=shell, uid=uid, user_group=user_group,
                selinux_user=selinux_user, selinux_range=selinux_range,
            )
            return self.user_tools.add_user(request)

        @self.mcp.tool(description=HEALTH_DESC)
        def health():
            return [Content(type="text", text=json.dumps(self.health_info(), indent=2))]

        @self.mcp.tool(description=GET_SCHEMA_INFO_DESC)
        def get_schema_info():
            schema_info = {
                "server": SERVER_NAME,
                "version": __version__,
                "transport": self.transport_name,
                "tools": {
                    "user_tools": self.user_tools.get_schema_info()
                }
            }
            return [Content(type="text", text=json.dumps(schema_info, indent=2))]

    @property
    def transport_name(self) -> str:
        return "stdio"

    def health_info(self) -> dict:
        """Report whether the external utilities can be found."""
        commands = {
            "getent": self.config.commands.getent,
            "useradd": self.config.commands.useradd,
        }
        found = {name: shutil.which(path) is not None for name, path in commands.items()}
        return {
            "status": "ok" if all(found.values()) else "degraded",
            "server": SERVER_NAME,
            "transport": self.transport_name,
            "commands": found,
        }

    def _install_signal_handlers(self) -> None:
        def signal_handler(signum, frame):
            self.logger.info("Received signal to shutdown...")
            sys.exit(0)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    def start(self) -> None:
        """
        Start the MCP server on the stdio transport.

        The server runs until terminated by a signal or fatal error.
        """
        self._install_signal_handlers()

        try:
            self.logger.info("Starting useradd MCP server on stdio...")
            anyio.run(self.mcp.run_stdio_async)
        except Exception as e:
            self.logger.error(f"Server error: {e}")
            sys.exit(1)


def build_server(config: Config) -> UserAddMCPServer:
    """Create the server for the transport the configuration selects."""
    if config.transport.use_http:
        from .server_http import UserAddMCPHTTPServer
        return UserAddMCPHTTPServer(config)
    return UserAddMCPServer(config)


class UserAddMCPCommand:
    """Command runner for the useradd MCP server."""

    help = "useradd MCP server"

    def __init__(self):
        self.server = None

    def add_arguments(self, parser):
        """Add command line arguments."""
        parser.add_argument(
            '--http',
            type=str,
            default=None,
            help='address for http transport (host:port), defaults to stdio'
        )
        parser.add_argument(
            '--path',
            type=str,
            default=None,
            help='HTTP path (default: /mcp)'
        )
        parser.add_argument(
            '--config',
            type=str,
            help='Configuration file path'
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        config = load_config(options.get('config'))

        http = options.get('http')
        path = options.get('path')
        if http is not None or path is not None:
            transport = TransportConfig(
                http=http if http is not None else config.transport.http,
                path=path or config.transport.path,
            )
            config = config.model_copy(update={"transport": transport})

        self.server = build_server(config)
        self.server.start()


def main():
    """Main entry point for the server."""
    parser = argparse.ArgumentParser(description=UserAddMCPCommand.help)
    command = UserAddMCPCommand()
    command.add_arguments(parser)

    args = parser.parse_args()
    options = vars(args)

    try:
        command.handle(**options)
    except KeyboardInterrupt:
        print("\nShutting down gracefully...", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
