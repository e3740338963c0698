import logging

from pydantic import ValidationError

from .errors import NoCommandError, ResponseFormatError
from .models import CompletionResponse

logger = logging.getLogger(__name__)

CODE_FENCE = "```"


def parse_response(body: str) -> CompletionResponse:
    """Deserialize a completion body, mapping any shape mismatch to ResponseFormatError."""
    try:
        return CompletionResponse.model_validate_json(body)
    except ValidationError as e:
        raise ResponseFormatError(f"unexpected response format: {e}") from e


def first_command_line(content: str) -> str:
    """
    Return the first line of `content` that can be run as a command.

    Lines are stripped; blank lines and code-fence lines are skipped. Scanning
    stops at the first match, later lines are never looked at.
    """
    for line in content.split("\n"):
        line = line.strip()
        if line and not line.startswith(CODE_FENCE):
            return line
    raise NoCommandError("no valid command found in response")


def extract_command(body: str) -> str:
    """
    Extracts the shell command from a chat-completion response body.

    Args:
        body: Raw JSON text returned by the completion endpoint.

    Returns:
        The command line to execute.
    """
    response = parse_response(body)
    if not response.choices:
        raise ResponseFormatError("no choices found in response")

    message = response.choices[0].message
    if message is None or message.content is None:
        raise ResponseFormatError("failed to extract content from response")

    command = first_command_line(message.content)
    logger.info(f"Extracted command: {command}")
    return command
