"""Service configuration: endpoints, intervals and storage paths.

Values can be overridden through ``GUARDIFY_*`` environment variables or a
``.env`` file, e.g.::

    GUARDIFY_PEOPLE_URL=http://10.0.0.5:500/api/people
    GUARDIFY_CHAT_URL=http://10.0.0.6:8000/chat
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import load_dotenv


@dataclass
class ServiceConfig:
    # Endpoints
    people_url: str = "http://127.0.0.1:500/api/people"
    detect_url: str = "http://127.0.0.1:5000/detect"
    chat_url: str = "http://127.0.0.1:8000/chat"
    http_timeout_s: float = 5.0

    # People feed
    people_poll_interval_s: float = 1.0

    # Emergency recorder
    trigger_phrase: str = "1234"
    upload_interval_s: float = 10.0
    recording_window_s: float = 60.0

    # Storage
    chat_history_path: str = "chat_history.json"
    alert_store_path: str = "alerts.jsonl"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ServiceConfig":
        """Build a config from defaults overridden by GUARDIFY_<FIELD> variables."""
        load_dotenv(dotenv_path)
        overrides = {}
        for f in fields(cls):
            raw = os.getenv(f"GUARDIFY_{f.name.upper()}")
            if raw is None:
                continue
            overrides[f.name] = float(raw) if f.type in (float, "float") else raw
        return cls(**overrides)
