"""Runner for the external account utilities."""

import subprocess
from typing import List, Optional, Tuple

from .logging import get_logger
from ..config.models import CommandsConfig

logger = get_logger("commands")

# getent exit status when one or more supplied keys could not be found
GETENT_KEY_NOT_FOUND = 2


class ExternalToolError(Exception):
    """An external utility could not be run or reported failure."""

    def __init__(self, command: List[str], returncode: Optional[int] = None, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        if returncode is None:
            message = f"Failed to run {command[0]}"
        else:
            message = f"{' '.join(command)} exited with status {returncode}"
        if output.strip():
            message += f": {output.strip()}"
        super().__init__(message)


class CommandRunner:
    """
    Invokes getent and useradd.

    Every call blocks until the process exits and its output has been read.
    Tests substitute a fake with the same two methods.
    """

    def __init__(self, commands_config: CommandsConfig):
        self.commands_config = commands_config

    def _run(self, command: List[str], merge_stderr: bool) -> subprocess.CompletedProcess:
        logger.debug(f"Running: {' '.join(command)}")
        try:
            return subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise ExternalToolError(command, output=str(e)) from e

    def enumerate(self, database: str, key: Optional[str] = None) -> List[str]:
        """
        Read entries of a getent database.

        Args:
            database: Database name (passwd, group)
            key: Optional key narrowing the lookup

        Returns:
            Output lines; empty when the key does not exist

        Raises:
            ExternalToolError: If getent cannot be run or fails
        """
        command = [self.commands_config.getent, database]
        if key:
            command.append(key)

        result = self._run(command, merge_stderr=False)

        if key and result.returncode == GETENT_KEY_NOT_FOUND:
            return []
        if result.returncode != 0:
            raise ExternalToolError(command, result.returncode, result.stderr or "")

        return result.stdout.splitlines()

    def useradd(self, args: List[str]) -> Tuple[int, str]:
        """
        Run useradd with the given arguments.

        Returns:
            Exit status and the combined stdout/stderr text

        Raises:
            ExternalToolError: If useradd cannot be launched
        """
        command = [self.commands_config.useradd] + list(args)
        result = self._run(command, merge_stderr=True)
        return result.returncode, result.stdout or ""
