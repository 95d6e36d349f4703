# chat_session.py
# Conversation state for the mental-health assistant, including the
# safety-check escalation that records an alert.

import logging
from datetime import datetime
from typing import List, Optional

from ..data_models import Alert, ChatMessage
from ..emergency.alert_store import AlertStore
from ..errors import ChatServiceError
from .chat_client import ChatClient
from .history_store import ChatHistoryStore

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm here to chat about mental health. How are you feeling today?"
NEW_CHAT_GREETING = "Hello! I'm here to start a new chat about mental health. How are you feeling today?"
APOLOGY = "I'm sorry, I'm having trouble understanding the response. Please try again later."
SAFETY_NOTIFIED = "I've notified public safety. They will be contacting you shortly. Please stay safe."


class ChatSession:
    """
    Persisted chat conversation.

    Args:
        client:      ChatClient (or anything with send(message) -> ChatReply).
        history:     Store the transcript is loaded from and saved to.
        alert_store: Receives an Alert, plus a note quoting the flagged message,
                     when the user accepts a safety check.
    """

    def __init__(self, client: ChatClient, history: ChatHistoryStore,
                 alert_store: Optional[AlertStore] = None) -> None:
        self.client = client
        self.history = history
        self.alert_store = alert_store
        self.safety_check_pending = False
        self._flagged_text: Optional[str] = None

        self.messages: List[ChatMessage] = self.history.load()
        if not self.messages:
            self._add_bot_message(GREETING)

    def send(self, text: str) -> Optional[ChatMessage]:
        """
        Send a user message and append the assistant's reply.

        Returns:
            The bot message appended, or None when nothing was sent.
        """
        if not text:
            return None

        self._append(ChatMessage(content=text, is_user=True))

        try:
            reply = self.client.send(text)
        except ChatServiceError as e:
            logger.error(f"Chat error: {e}")
            return self._add_bot_message(APOLOGY)

        bot = self._add_bot_message(reply.bot_message) if reply.bot_message else None
        if reply.malicious:
            logger.warning("Message flagged as potentially concerning; safety check raised.")
            self.safety_check_pending = True
            self._flagged_text = text
        return bot

    def new_chat(self) -> None:
        self.messages = []
        self.safety_check_pending = False
        self._flagged_text = None
        self.history.save(self.messages)
        self._add_bot_message(NEW_CHAT_GREETING)

    def contact_public_safety(self, location: str = "User's location") -> ChatMessage:
        """Record an emergency alert and tell the user help is coming."""
        self.safety_check_pending = False
        if self.alert_store is not None:
            self.alert_store.append(Alert(timestamp=datetime.now(), is_emergency=True, location=location))
            if self._flagged_text:
                self.alert_store.append_message(f"Escalated from chat: {self._flagged_text}")
        self._flagged_text = None
        logger.info("Contacting public safety.")
        return self._add_bot_message(SAFETY_NOTIFIED)

    def dismiss_safety_check(self) -> None:
        self.safety_check_pending = False
        self._flagged_text = None

    def _add_bot_message(self, content: str) -> ChatMessage:
        message = ChatMessage(content=content, is_user=False)
        self._append(message)
        return message

    def _append(self, message: ChatMessage) -> None:
        self.messages.append(message)
        self.history.save(self.messages)
