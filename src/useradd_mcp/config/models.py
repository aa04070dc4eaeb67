"""Configuration models for useradd MCP."""

from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class CommandsConfig(BaseModel):
    """External utilities invoked by the server."""

    getent: str = Field(default="getent", description="Directory-service query utility")
    useradd: str = Field(default="useradd", description="Account-creation utility")

    @field_validator('getent', 'useradd')
    @classmethod
    def validate_command(cls, v):
        """Validate command is not blank."""
        if not v.strip():
            raise ValueError('Command must not be empty')
        return v


class DirectoryConfig(BaseModel):
    """Account listing configuration."""

    system_gid_threshold: int = Field(
        default=1000,
        description="Accounts whose primary GID is below this value are system accounts"
    )

    @field_validator('system_gid_threshold')
    @classmethod
    def validate_threshold(cls, v):
        if v < 0:
            raise ValueError('Threshold must not be negative')
        return v


class TransportConfig(BaseModel):
    """Transport selection. No HTTP address means stdio."""

    http: Optional[str] = Field(default=None, description="host:port to serve streamable HTTP on")
    path: str = Field(default="/mcp", description="HTTP path for MCP endpoint")

    @field_validator('http')
    @classmethod
    def validate_http(cls, v):
        """Validate host:port address."""
        if not v:
            return None
        host, sep, port = v.rpartition(':')
        if not sep or not port.isdigit() or not 0 < int(port) < 65536:
            raise ValueError('HTTP address must be in host:port form')
        return v

    @field_validator('path')
    @classmethod
    def validate_path(cls, v):
        if not v.startswith('/'):
            raise ValueError('Path must start with /')
        return v

    @property
    def use_http(self) -> bool:
        return self.http is not None

    def address(self) -> Tuple[str, int]:
        """
        Split the HTTP address into host and port.

        An empty host (":8080") binds every interface.
        """
        if self.http is None:
            raise ValueError("No HTTP address configured")
        host, _, port = self.http.rpartition(':')
        return host.strip('[]') or "0.0.0.0", int(port)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format"
    )
    file: Optional[str] = Field(default=None, description="Log file path")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Validate logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Level must be one of: {valid_levels}')
        return v.upper()


class Config(BaseModel):
    """Main configuration class."""

    model_config = {"frozen": True}

    commands: CommandsConfig = Field(default_factory=CommandsConfig)
    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
