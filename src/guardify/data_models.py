"""Shared data models for the emergency and chat modules.

These dataclasses define the records exchanged with the alert store, the
chat history file and the chat endpoint.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


# ==================== ALERTS ====================
@dataclass
class Alert:
    """An emergency or escalation event."""

    timestamp: datetime
    is_emergency: bool
    audio_recording_url: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "alert",
            "timestamp": self.timestamp.isoformat(),
            "is_emergency": self.is_emergency,
            "audio_recording_url": self.audio_recording_url,
            "location": self.location,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Alert":
        return Alert(
            timestamp=datetime.fromisoformat(d["timestamp"]),
            is_emergency=bool(d["is_emergency"]),
            audio_recording_url=d.get("audio_recording_url"),
            location=d.get("location"),
        )


@dataclass
class AlertMessage:
    """A free-text note attached to the alert log."""

    timestamp: datetime
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "message",
            "timestamp": self.timestamp.isoformat(),
            "message": self.message,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "AlertMessage":
        return AlertMessage(
            timestamp=datetime.fromisoformat(d["timestamp"]),
            message=d["message"],
        )


# ==================== CHAT ====================
@dataclass
class ChatMessage:
    """One chat bubble, from the user or the assistant."""

    content: str
    is_user: bool
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "content": self.content, "is_user": self.is_user}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ChatMessage":
        return ChatMessage(content=d["content"], is_user=bool(d["is_user"]), id=d["id"])


@dataclass
class ChatReply:
    """Decoded chat endpoint response."""

    bot_message: Optional[str]
    malicious: bool = False

    @staticmethod
    def from_json(payload: Dict[str, Any]) -> "ChatReply":
        bot_message = payload.get("bot_message")
        if not isinstance(bot_message, str):
            bot_message = None
        flag = payload.get("malicious")
        malicious = isinstance(flag, str) and flag.lower() == "true"
        return ChatReply(bot_message=bot_message, malicious=malicious)
