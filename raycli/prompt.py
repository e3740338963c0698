import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Current system information: {os_info}, current directory: {cwd}. "
    "Reply with bash code only: 1. Output only the code. 2. No explanation. "
    "Use bash commands to complete the following task: '{instruction}'"
)


@dataclass
class SystemContext:
    """Ambient facts about the machine the command will run on."""

    os_info: str = ""
    cwd: str = ""


def _uname() -> str:
    try:
        result = subprocess.run(["uname", "-a"], capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.debug(f"Could not read OS information, leaving it empty: {e}")
        return ""
    return result.stdout.strip()


def _getcwd() -> str:
    try:
        return os.getcwd()
    except OSError as e:
        logger.debug(f"Could not read working directory, leaving it empty: {e}")
        return ""


def gather_system_context() -> SystemContext:
    """
    Collect the OS identification string and working directory.

    Neither lookup is allowed to fail the run: whatever cannot be read is
    substituted with an empty string.
    """
    return SystemContext(os_info=_uname(), cwd=_getcwd())


def instruction_from_argv(args: Sequence[str]) -> str:
    """Join command-line words into the natural-language instruction."""
    return " ".join(args)


def build_prompt(instruction: str, context: SystemContext) -> str:
    """
    Build the prompt sent to the model.

    Args:
        instruction: The user's request, inserted verbatim.
        context: OS and directory information.

    Returns:
        The prompt, ending with the quoted instruction.
    """
    return PROMPT_TEMPLATE.format(
        os_info=context.os_info.strip(),
        cwd=context.cwd,
        instruction=instruction,
    )
