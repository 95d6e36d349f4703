# alert_store.py
# Append-only JSON-lines log of alerts and alert messages.

import json
import logging
import os
import threading
from datetime import datetime
from typing import List, Union

from ..data_models import Alert, AlertMessage

logger = logging.getLogger(__name__)

Record = Union[Alert, AlertMessage]


class AlertStore:
    """
    Persists alert records, one JSON object per line, in insertion order.

    Args:
        path: File to append to; parent directories are created on demand.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._lock = threading.Lock()
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)

    def append(self, record: Record) -> None:
        line = json.dumps(record.to_dict(), ensure_ascii=False)
        with self._lock:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        logger.info(f"Saved {type(record).__name__} to {self.path}")

    def append_message(self, message: str) -> AlertMessage:
        """Record a free-text note, stamped now."""
        record = AlertMessage(timestamp=datetime.now(), message=message)
        self.append(record)
        return record

    def load(self) -> List[Record]:
        """All records in file order. A missing file is an empty store."""
        if not os.path.exists(self.path):
            return []

        records: List[Record] = []
        with open(self.path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                    if data.get("kind") == "message":
                        records.append(AlertMessage.from_dict(data))
                    else:
                        records.append(Alert.from_dict(data))
                except (ValueError, KeyError) as e:
                    logger.error(f"Skipping corrupt alert record at {self.path}:{lineno}: {e}")
        return records

    def alerts(self) -> List[Alert]:
        return [r for r in self.load() if isinstance(r, Alert)]
