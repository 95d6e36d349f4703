# history_store.py
# JSON persistence for the chat transcript.

import json
import logging
import os
from typing import List

from ..data_models import ChatMessage

logger = logging.getLogger(__name__)


class ChatHistoryStore:
    """Saves and loads the whole conversation as one JSON array."""

    def __init__(self, path: str) -> None:
        self.path = path

    def save(self, messages: List[ChatMessage]) -> bool:
        try:
            parent = os.path.dirname(os.path.abspath(self.path))
            os.makedirs(parent, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([m.to_dict() for m in messages], f, ensure_ascii=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Failed to save messages: {e}")
            return False

    def load(self) -> List[ChatMessage]:
        """Stored messages; an absent or unreadable file yields an empty history."""
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return [ChatMessage.from_dict(d) for d in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Failed to load messages: {e}")
            return []
