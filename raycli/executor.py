import logging
import subprocess

from .errors import CommandExecutionError
from .ui import display_command

# Configure logging
logger = logging.getLogger(__name__)

# Exit status shells use when the program cannot be started.
LAUNCH_FAILURE_STATUS = 127


class CommandExecutor:
    """Runs a generated command through a shell."""

    def __init__(self, shell: str = "bash"):
        self.shell = shell

    def execute(self, command: str) -> int:
        """
        Announce and execute a single shell command.

        The child inherits this process's stdin, stdout and stderr, so its
        output appears live, interleaved with ours.

        Args:
            command: The shell command to execute

        Returns:
            The command's exit status (always 0; failures raise).

        Raises:
            CommandExecutionError: The command exited non-zero or could not start.
        """
        display_command(command)
        logger.info(f"Executing command: {command}")

        try:
            process = subprocess.run([self.shell, "-c", command])
        except OSError as e:
            logger.error(f"Could not start {self.shell}: {e}")
            raise CommandExecutionError(
                command, LAUNCH_FAILURE_STATUS, f"could not start {self.shell}: {e}"
            ) from e

        if process.returncode != 0:
            logger.info(f"Command failed with return code {process.returncode}: {command}")
            raise CommandExecutionError(command, process.returncode)

        logger.info(f"Command executed successfully: {command}")
        return process.returncode
