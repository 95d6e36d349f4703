import pytest
import requests

from guardify.chat import chat_client
from guardify.chat.chat_client import ChatClient
from guardify.chat.chat_session import APOLOGY, GREETING, NEW_CHAT_GREETING, SAFETY_NOTIFIED, ChatSession
from guardify.chat.history_store import ChatHistoryStore
from guardify.data_models import AlertMessage, ChatReply
from guardify.emergency.alert_store import AlertStore
from guardify.errors import ChatServiceError


class StubChatClient:
    def __init__(self, replies):
        self.replies = list(replies)
        self.sent = []

    def send(self, message):
        self.sent.append(message)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def history(tmp_path):
    return ChatHistoryStore(str(tmp_path / "chat.json"))


@pytest.fixture
def alerts(tmp_path):
    return AlertStore(str(tmp_path / "alerts.jsonl"))


def test_greets_on_empty_history(history):
    session = ChatSession(StubChatClient([]), history)
    assert [m.content for m in session.messages] == [GREETING]
    assert not session.messages[0].is_user


def test_send_appends_user_and_bot_messages(history):
    client = StubChatClient([ChatReply(bot_message="That sounds hard.")])
    session = ChatSession(client, history)

    bot = session.send("I feel stressed")

    assert client.sent == ["I feel stressed"]
    assert bot.content == "That sounds hard."
    assert [(m.content, m.is_user) for m in session.messages[1:]] == [
        ("I feel stressed", True),
        ("That sounds hard.", False),
    ]
    assert not session.safety_check_pending


def test_empty_message_is_ignored(history):
    client = StubChatClient([])
    session = ChatSession(client, history)
    assert session.send("") is None
    assert client.sent == []
    assert len(session.messages) == 1


def test_history_survives_new_session(history):
    session = ChatSession(StubChatClient([ChatReply(bot_message="Hi")]), history)
    session.send("hello")

    reloaded = ChatSession(StubChatClient([]), history)
    assert reloaded.messages == session.messages


def test_service_error_yields_apology(history):
    session = ChatSession(StubChatClient([ChatServiceError("down")]), history)
    bot = session.send("anyone there?")
    assert bot.content == APOLOGY


def test_flagged_message_escalates_to_alert(history, alerts):
    client = StubChatClient([ChatReply(bot_message="I'm concerned.", malicious=True)])
    session = ChatSession(client, history, alert_store=alerts)

    session.send("something worrying")
    assert session.safety_check_pending

    notice = session.contact_public_safety()
    assert notice.content == SAFETY_NOTIFIED
    assert not session.safety_check_pending

    recorded = alerts.alerts()
    assert len(recorded) == 1
    assert recorded[0].is_emergency
    assert recorded[0].location == "User's location"


def test_dismiss_safety_check(history):
    session = ChatSession(StubChatClient([ChatReply(bot_message=None, malicious=True)]), history)
    assert session.send("hmm") is None
    assert session.safety_check_pending
    session.dismiss_safety_check()
    assert not session.safety_check_pending


def test_new_chat_resets_history(history):
    session = ChatSession(StubChatClient([ChatReply(bot_message="ok")]), history)
    session.send("first")
    session.new_chat()

    assert [m.content for m in session.messages] == [NEW_CHAT_GREETING]
    assert [m.content for m in history.load()] == [NEW_CHAT_GREETING]


def test_corrupt_history_loads_empty(tmp_path):
    path = tmp_path / "chat.json"
    path.write_text("{broken", encoding="utf-8")
    assert ChatHistoryStore(str(path)).load() == []


# ---------------------------------------------------------------------------
# ChatClient
# ---------------------------------------------------------------------------

class FakeResponse:
    def __init__(self, payload=None, bad_json=False, status_code=200):
        self._payload = payload
        self._bad_json = bad_json
        self.status_code = status_code
        self.text = str(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value")
        return self._payload


@pytest.mark.parametrize("flag,expected", [("true", True), ("True", True), ("false", False), (True, False)])
def test_client_parses_malicious_string(monkeypatch, flag, expected):
    calls = []

    def fake_post(url, json, timeout):
        calls.append(json)
        return FakeResponse({"bot_message": "hello", "malicious": flag})

    monkeypatch.setattr(chat_client.requests, "post", fake_post)
    reply = ChatClient("http://chat/chat").send("hi")

    assert calls == [{"message": "hi"}]
    assert reply.bot_message == "hello"
    assert reply.malicious is expected


@pytest.mark.parametrize("response", [
    FakeResponse(bad_json=True),
    FakeResponse(["not", "an", "object"]),
    FakeResponse({"bot_message": "x"}, status_code=500),
])
def test_client_wraps_bad_responses(monkeypatch, response):
    monkeypatch.setattr(chat_client.requests, "post", lambda url, json, timeout: response)
    with pytest.raises(ChatServiceError):
        ChatClient("http://chat/chat").send("hi")


def test_client_wraps_transport_errors(monkeypatch):
    def fake_post(url, json, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(chat_client.requests, "post", fake_post)
    with pytest.raises(ChatServiceError):
        ChatClient("http://chat/chat").send("hi")


def test_escalation_records_note_with_flagged_text(history, alerts):
    client = StubChatClient([ChatReply(bot_message="I'm concerned.", malicious=True)])
    session = ChatSession(client, history, alert_store=alerts)

    session.send("someone keeps following me")
    session.contact_public_safety()

    notes = [r for r in alerts.load() if isinstance(r, AlertMessage)]
    assert [n.message for n in notes] == ["Escalated from chat: someone keeps following me"]


def test_escalation_without_flag_writes_no_note(history, alerts):
    session = ChatSession(StubChatClient([]), history, alert_store=alerts)
    session.contact_public_safety()
    assert len(alerts.load()) == 1
    assert len(alerts.alerts()) == 1
