from .chat_client import ChatClient
from .chat_session import ChatSession
from .history_store import ChatHistoryStore

__all__ = ["ChatClient", "ChatHistoryStore", "ChatSession"]
