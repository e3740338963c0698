import logging
from typing import Optional

import requests

from .config import ProviderConfig
from .errors import APIStatusError, MissingCredentialError, TransportError
from .models import CompletionRequest

# Configure logging
logger = logging.getLogger(__name__)


class CompletionClient:
    """A client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(self, provider: ProviderConfig, timeout: Optional[float] = None):
        """
        Initializes the CompletionClient.

        Args:
            provider: Endpoint, key and model to use.
            timeout: Seconds to wait for the server. None waits indefinitely.
        """
        self.provider = provider
        self.timeout = timeout

    def _headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.provider.api_key}",
        }

    def complete(self, prompt: str) -> str:
        """
        Send a single-message completion request.

        Args:
            prompt: The user message.

        Returns:
            The raw response body of a 200 response.

        Raises:
            MissingCredentialError: The provider has no API key; nothing is sent.
            TransportError: The request could not be issued or completed.
            APIStatusError: The server answered with anything but 200.
        """
        if not self.provider.api_key:
            raise MissingCredentialError(self.provider.name, self.provider.key_env or "the API key")

        payload = CompletionRequest.for_prompt(self.provider.model, prompt)
        logger.info(f"Calling {self.provider.name} API at {self.provider.url} with model {self.provider.model}")

        try:
            response = requests.post(
                self.provider.url,
                headers=self._headers(),
                json=payload.model_dump(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to {self.provider.url} failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"{self.provider.name} API returned status {response.status_code}")
            raise APIStatusError(response.status_code, response.text)

        return response.text
