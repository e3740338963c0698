class RayError(Exception):
    """Base error for failures in the request/extract/execute pipeline."""


class ConfigurationError(RayError):
    pass


class MissingCredentialError(RayError):
    """The selected provider has no API key configured."""

    def __init__(self, provider: str, env_var: str):
        super().__init__(
            f"API key for '{provider}' is missing. "
            f"Set {env_var} in your .env file or environment variables."
        )
        self.provider = provider
        self.env_var = env_var


class TransportError(RayError):
    """The HTTP request could not be issued or completed."""


class APIStatusError(RayError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"API returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ResponseFormatError(RayError):
    """Unexpected completion response shape / contract mismatch."""


class NoCommandError(RayError):
    pass


class CommandExecutionError(RayError):
    def __init__(self, command: str, returncode: int, message: str = ""):
        super().__init__(message or f"command exited with status {returncode}")
        self.command = command
        self.returncode = returncode
