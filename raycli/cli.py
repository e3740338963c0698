import logging
import sys
from typing import List, Optional

from .api import CompletionClient
from .config import Config, load_environment
from .errors import CommandExecutionError, NoCommandError, RayError, ResponseFormatError
from .executor import CommandExecutor
from .logger import setup_logging
from .parser import extract_command
from .prompt import build_prompt, gather_system_context, instruction_from_argv
from .ui import display_error, display_usage

logger = logging.getLogger(__name__)

# Exit status for failures before the command runs.
EXIT_FAILURE = 1


def _exit_status(returncode: int) -> int:
    # Killed by a signal: report it the way shells do.
    return 128 - returncode if returncode < 0 else returncode


def run_cli(argv: Optional[List[str]] = None) -> int:
    """
    Turn the command-line words into a shell command and run it.

    Args:
        argv: Words of the instruction, without the program name.
            Defaults to sys.argv[1:].

    Returns:
        The process exit status: the command's own status once it has been
        run, 1 for any failure before that, 0 after printing usage.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        display_usage()
        return 0

    load_environment()
    try:
        config = Config()
        setup_logging(config)
        provider = config.provider()
    except RayError as e:
        display_error("Error", e)
        return EXIT_FAILURE

    instruction = instruction_from_argv(args)
    prompt = build_prompt(instruction, gather_system_context())
    logger.info(f"Instruction: {instruction}")

    try:
        body = CompletionClient(provider, timeout=config.timeout).complete(prompt)
    except RayError as e:
        display_error("Error", e)
        return EXIT_FAILURE

    try:
        command = extract_command(body)
    except (ResponseFormatError, NoCommandError) as e:
        display_error("Failed to extract command", e)
        return EXIT_FAILURE

    try:
        return CommandExecutor(shell=config.shell).execute(command)
    except CommandExecutionError as e:
        logger.error(f"Error executing command: {e}")
        return _exit_status(e.returncode)
