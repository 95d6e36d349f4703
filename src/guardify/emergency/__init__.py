from .alert_store import AlertStore
from .detect_client import TranscriptionClient
from .recorder import EmergencyRecorder

__all__ = ["AlertStore", "EmergencyRecorder", "TranscriptionClient"]
