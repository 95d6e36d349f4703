# recorder.py
# Voice-triggered emergency recorder.
# A speech feed pushes running transcriptions in; once the trigger phrase is
# heard, the text is uploaded periodically until the recording window ends.

import logging
import time
from datetime import datetime
from typing import Callable, Optional

from ..config import ServiceConfig
from ..data_models import Alert
from ..errors import ServiceError
from .alert_store import AlertStore
from .detect_client import TranscriptionClient

logger = logging.getLogger(__name__)


class EmergencyRecorder:
    """
    Listening / recording state machine driven by explicit calls.

    Usage:
        recorder = EmergencyRecorder(client, alert_store=store)
        recorder.start_listening()

        # speech callback:
        recorder.on_transcription(text)

        # timer loop:
        recorder.tick()

    Args:
        client:             Uploads transcriptions; anything with send(text).
        alert_store:        Optional store receiving an Alert when recording starts.
        trigger_phrase:     Lower-case text that starts a recording.
        upload_interval_s:  Seconds between uploads while recording.
        recording_window_s: Recording stops automatically after this long.
        clock:              Monotonic time source, injectable for tests.
        location_provider:  Optional callable describing the user's location.
    """

    def __init__(
        self,
        client: TranscriptionClient,
        alert_store: Optional[AlertStore] = None,
        trigger_phrase: str = "1234",
        upload_interval_s: float = 10.0,
        recording_window_s: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
        location_provider: Optional[Callable[[], Optional[str]]] = None,
    ) -> None:
        self.client = client
        self.alert_store = alert_store
        self.trigger_phrase = trigger_phrase.lower()
        self.upload_interval_s = upload_interval_s
        self.recording_window_s = recording_window_s
        self._clock = clock
        self._location_provider = location_provider

        self._listening = False
        self._recording = False
        self._transcription = ""
        self._recording_started_at: Optional[float] = None
        self._last_upload_at: Optional[float] = None

    @classmethod
    def from_config(cls, config: ServiceConfig, client: Optional[TranscriptionClient] = None,
                    alert_store: Optional[AlertStore] = None, **kwargs) -> "EmergencyRecorder":
        return cls(
            client or TranscriptionClient.from_config(config),
            alert_store=alert_store,
            trigger_phrase=config.trigger_phrase,
            upload_interval_s=config.upload_interval_s,
            recording_window_s=config.recording_window_s,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def is_listening(self) -> bool:
        return self._listening

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def transcription(self) -> str:
        return self._transcription

    # ------------------------------------------------------------------
    # Listening
    # ------------------------------------------------------------------

    def toggle_listening(self) -> bool:
        if self._listening:
            self.stop_listening()
        else:
            self.start_listening()
        return self._listening

    def start_listening(self) -> None:
        if self._listening:
            return
        self._listening = True
        logger.info("Safety track mode on.")

    def stop_listening(self, now: Optional[float] = None) -> None:
        self._listening = False
        if self._recording:
            self.stop_recording(now)
        logger.info("Safety track mode off.")

    def on_transcription(self, text: str, now: Optional[float] = None) -> None:
        """Receive the latest running transcription from the speech feed."""
        if not self._listening:
            logger.debug("Transcription ignored while not listening.")
            return

        self._transcription = text
        if not self._recording and self.trigger_phrase in text.lower():
            logger.info(f"Detected '{self.trigger_phrase}', starting recording")
            self.start_recording(now)

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def start_recording(self, now: Optional[float] = None) -> None:
        now = self._clock() if now is None else now
        self._recording = True
        self._transcription = ""
        self._recording_started_at = now
        self._last_upload_at = now

        if self.alert_store is not None:
            location = self._location_provider() if self._location_provider else None
            self.alert_store.append(Alert(timestamp=datetime.now(), is_emergency=True, location=location))

    def stop_recording(self, now: Optional[float] = None) -> None:
        if not self._recording:
            return
        now = self._clock() if now is None else now
        elapsed = now - self._recording_started_at
        self._recording = False
        self._recording_started_at = None
        self._last_upload_at = None
        logger.info(f"Recording stopped after {elapsed:.1f}s.")
        self.upload()

    def tick(self, now: Optional[float] = None) -> None:
        """Advance timers: stop after the window, otherwise upload on interval."""
        if not self._recording:
            return
        now = self._clock() if now is None else now

        if now - self._recording_started_at >= self.recording_window_s:
            self.stop_recording(now)
            return

        if now - self._last_upload_at >= self.upload_interval_s:
            self._last_upload_at = now
            self.upload()

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------

    def upload(self) -> bool:
        """
        Send the current transcription, then clear it.

        Returns:
            True if something was sent successfully.
        """
        if not self._transcription:
            logger.info("No transcription to send")
            return False

        text = self._transcription
        self._transcription = ""
        try:
            self.client.send(text)
        except ServiceError as e:
            logger.error(f"Transcription upload failed: {e}")
            return False
        return True
