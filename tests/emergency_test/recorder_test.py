import pytest

from guardify.config import ServiceConfig
from guardify.emergency.alert_store import AlertStore
from guardify.emergency.recorder import EmergencyRecorder
from guardify.errors import TranscriptionUploadError


class RecordingClient:
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    def send(self, transcription):
        if self.fail:
            raise TranscriptionUploadError("unreachable")
        self.sent.append(transcription)
        return 200


@pytest.fixture
def client():
    return RecordingClient()


@pytest.fixture
def recorder(client):
    return EmergencyRecorder(client, clock=lambda: 0.0)


def test_ignores_transcripts_while_not_listening(recorder):
    recorder.on_transcription("1234 help", now=0.0)
    assert not recorder.is_recording
    assert recorder.transcription == ""


def test_trigger_phrase_starts_recording(recorder):
    recorder.start_listening()
    recorder.on_transcription("hello there", now=0.0)
    assert not recorder.is_recording

    recorder.on_transcription("hello there 1234", now=1.0)
    assert recorder.is_recording
    assert recorder.transcription == ""


def test_trigger_is_case_insensitive(client):
    recorder = EmergencyRecorder(client, trigger_phrase="Help Me")
    recorder.start_listening()
    recorder.on_transcription("please HELP ME now", now=0.0)
    assert recorder.is_recording


def test_uploads_on_interval_then_stops_after_window(recorder, client):
    recorder.start_listening()
    recorder.on_transcription("1234", now=0.0)

    for t in range(1, 61):
        recorder.on_transcription(f"words at {t}", now=float(t))
        recorder.tick(now=float(t))

    assert not recorder.is_recording
    assert recorder.is_listening
    # five interval uploads plus the final one on stop
    assert client.sent == [f"words at {t}" for t in (10, 20, 30, 40, 50, 60)]


def test_empty_transcription_is_not_sent(recorder, client):
    recorder.start_listening()
    recorder.on_transcription("1234", now=0.0)
    recorder.tick(now=10.0)
    assert client.sent == []


def test_transcription_cleared_after_send(recorder, client):
    recorder.start_listening()
    recorder.on_transcription("1234", now=0.0)
    recorder.on_transcription("someone is following me", now=5.0)
    recorder.tick(now=10.0)
    recorder.tick(now=20.0)
    assert client.sent == ["someone is following me"]
    assert recorder.transcription == ""


def test_stop_listening_stops_recording_with_final_upload(recorder, client):
    recorder.start_listening()
    recorder.on_transcription("1234", now=0.0)
    recorder.on_transcription("final words", now=3.0)

    recorder.stop_listening(now=4.0)

    assert not recorder.is_listening
    assert not recorder.is_recording
    assert client.sent == ["final words"]


def test_stop_logs_recording_duration(recorder, caplog):
    recorder.start_listening()
    recorder.on_transcription("1234", now=2.0)

    with caplog.at_level("INFO", logger="guardify.emergency.recorder"):
        recorder.stop_recording(now=9.5)

    assert "Recording stopped after 7.5s." in caplog.text


def test_upload_failure_is_logged_not_raised():
    recorder = EmergencyRecorder(RecordingClient(fail=True))
    recorder.start_listening()
    recorder.on_transcription("1234", now=0.0)
    recorder.on_transcription("help", now=1.0)
    assert recorder.upload() is False
    assert recorder.transcription == ""


def test_recording_start_records_alert(tmp_path, client):
    store = AlertStore(str(tmp_path / "alerts.jsonl"))
    recorder = EmergencyRecorder(client, alert_store=store, location_provider=lambda: "40.03,-75.35")
    recorder.start_listening()
    recorder.on_transcription("1234", now=0.0)

    alerts = store.alerts()
    assert len(alerts) == 1
    assert alerts[0].is_emergency
    assert alerts[0].location == "40.03,-75.35"


def test_toggle_listening(recorder):
    assert recorder.toggle_listening() is True
    assert recorder.toggle_listening() is False


def test_from_config_uses_settings(client):
    config = ServiceConfig(trigger_phrase="SOS", upload_interval_s=5.0, recording_window_s=15.0)
    recorder = EmergencyRecorder.from_config(config, client=client)
    assert recorder.trigger_phrase == "sos"
    assert recorder.upload_interval_s == 5.0
    assert recorder.recording_window_s == 15.0
