# chat_client.py
# HTTP client for the mental-health chat endpoint.
# Request {"message": str}; response {"bot_message": str, "malicious": "true"|"false"}.

import logging

import requests

from ..config import ServiceConfig
from ..data_models import ChatReply
from ..errors import ChatServiceError

logger = logging.getLogger(__name__)


class ChatClient:
    """
    Sends one user message and decodes the assistant's reply.

    Args:
        url:     Chat endpoint (POST).
        timeout: Seconds to wait for a response.
    """

    def __init__(self, url: str, timeout: float = 5.0) -> None:
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "ChatClient":
        return cls(config.chat_url, timeout=config.http_timeout_s)

    def send(self, message: str) -> ChatReply:
        """
        Raises:
            ChatServiceError: transport failure or a body that is not a JSON object.
        """
        try:
            response = requests.post(self.url, json={"message": message}, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ChatServiceError(f"Chat request failed: {e}") from e

        logger.debug(f"Raw API response: {response.text}")
        try:
            payload = response.json()
        except ValueError as e:
            raise ChatServiceError(f"Failed to parse JSON: {e}") from e

        if not isinstance(payload, dict):
            raise ChatServiceError(f"Expected a JSON object, got {type(payload).__name__}")
        return ChatReply.from_json(payload)
