# detect_client.py
# Uploads transcription text to the detection endpoint.
# The endpoint's response carries no contract; it is only logged.

import logging

import requests

from ..config import ServiceConfig
from ..errors import TranscriptionUploadError

logger = logging.getLogger(__name__)


class TranscriptionClient:
    """
    POSTs {"transcription": text} to the detection endpoint.

    Args:
        url:     Detection endpoint.
        timeout: Seconds to wait for a response.
    """

    def __init__(self, url: str, timeout: float = 5.0) -> None:
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "TranscriptionClient":
        return cls(config.detect_url, timeout=config.http_timeout_s)

    def send(self, transcription: str) -> int:
        """
        Upload one transcription.

        Returns:
            HTTP status code of the response.

        Raises:
            TranscriptionUploadError: transport failure.
        """
        payload = {"transcription": transcription}
        logger.info(f"Sending payload: {payload}")
        try:
            response = requests.post(self.url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TranscriptionUploadError(f"Error sending transcription: {e}") from e

        logger.info(f"Detection endpoint replied {response.status_code}: {response.text}")
        return response.status_code
