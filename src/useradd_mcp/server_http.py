"""
HTTP-based MCP server implementation for useradd MCP.

This module serves the same tools as the stdio server over the
streamable HTTP transport.
"""

import sys
from typing import Optional

import anyio
from mcp.server.fastmcp import FastMCP

from .config.models import Config
from .core.commands import CommandRunner
from .server import UserAddMCPServer, SERVER_NAME


class UserAddMCPHTTPServer(UserAddMCPServer):
    """
    HTTP-based MCP server for local account management.

    Binds to the host:port of the transport configuration.
    """

    def __init__(self, config: Config, runner: Optional[CommandRunner] = None):
        """
        Initialize the HTTP MCP server.

        Args:
            config: Process configuration; transport.http must be set
            runner: Command runner, replaced by a fake in tests
        """
        if not config.transport.use_http:
            raise ValueError("HTTP server requires transport.http to be set")

        self.host, self.port = config.transport.address()
        self.path = config.transport.path

        super().__init__(config, runner)

    def _create_mcp(self) -> FastMCP:
        return FastMCP(
            SERVER_NAME,
            host=self.host,
            port=self.port,
            streamable_http_path=self.path,
        )

    @property
    def transport_name(self) -> str:
        return "http"

    def health_info(self) -> dict:
        health_info = super().health_info()
        health_info["endpoint"] = f"http://{self.host}:{self.port}{self.path}"
        return health_info

    def start(self) -> None:
        """
        Start the HTTP MCP server.

        Runs the server with streamable HTTP transport on the configured
        host and port.
        """
        self._install_signal_handlers()

        try:
            self.logger.info(f"Server listening on {self.host}:{self.port}{self.path}")
            anyio.run(self.mcp.run_streamable_http_async)
        except Exception as e:
            self.logger.error(f"HTTP server error: {e}")
            sys.exit(1)
