# announcer.py
# Speaks navigation instructions through pyttsx3 on a background worker,
# so location updates never wait for audio.

import logging
import queue
import threading
from typing import Callable, Optional

import pyttsx3

logger = logging.getLogger(__name__)

PREFERRED_VOICES = ["Samantha", "Victoria", "Ava", "Moira", "Karen", "Tessa", "Kathy"]


def init_tts(rate: int = 165):
    engine = pyttsx3.init()
    engine.setProperty("rate", rate)
    engine.setProperty("volume", 1.0)

    # Pick a clearer voice when one is installed
    for v in engine.getProperty("voices"):
        if any(p.lower() in (v.name or "").lower() for p in PREFERRED_VOICES):
            engine.setProperty("voice", v.id)
            break

    return engine


class Announcer:
    """
    Queue-backed text-to-speech.

    Args:
        engine_factory: Builds the speech engine inside the worker thread.
    """

    def __init__(self, engine_factory: Optional[Callable[[], object]] = None) -> None:
        self._engine_factory = engine_factory or init_tts
        self._queue: "queue.Queue[Optional[str]]" = queue.Queue()
        self._thread = threading.Thread(target=self._worker, name="announcer", daemon=True)
        self._thread.start()

    def speak(self, text: str) -> None:
        text = (text or "").strip()
        if text:
            self._queue.put(text)

    def close(self, timeout: float = 5.0) -> None:
        """Wait for queued speech to finish, then stop the worker."""
        self._queue.join()
        self._queue.put(None)
        self._thread.join(timeout=timeout)

    def _worker(self) -> None:
        engine = None
        while True:
            text = self._queue.get()
            try:
                if text is None:
                    break
                if engine is None:
                    engine = self._engine_factory()
                engine.say(text)
                engine.runAndWait()
            except Exception as e:
                logger.error(f"TTS error: {e}")
            finally:
                self._queue.task_done()
