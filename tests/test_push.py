from unittest.mock import MagicMock

import pytest

from firebase_admin import exceptions as firebase_exceptions

from pressure_dashboard.services import firebase_service


def test_send_notification_forwards_to_firebase(client, monkeypatch):
    send = MagicMock(return_value="projects/demo/messages/1")
    monkeypatch.setattr(firebase_service, "send_push", send)

    resp = client.post("/api/v1/send-notification", json={
        "token": "device-token", "title": "Medicamento", "body": "Toma tu pastilla",
    })
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "response": "projects/demo/messages/1"}
    args, kwargs = send.call_args
    assert args == ("device-token", "Medicamento", "Toma tu pastilla")


def test_send_notification_requires_token(client):
    resp = client.post("/api/v1/send-notification", json={"title": "x"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Push token is required"


def test_send_notification_reports_firebase_errors(client, monkeypatch):
    def fail(*args, **kwargs):
        raise firebase_exceptions.InvalidArgumentError("bad token")

    monkeypatch.setattr(firebase_service, "send_push", fail)
    resp = client.post("/api/v1/send-notification", json={"token": "t"})
    assert resp.status_code == 500
    assert resp.get_json()["success"] is False


def test_send_push_builds_message(monkeypatch):
    monkeypatch.setattr(firebase_service, "init_firebase", lambda cred_path=None: None)
    send = MagicMock(return_value="msg-1")
    monkeypatch.setattr(firebase_service.messaging, "send", send)

    assert firebase_service.send_push("tok", "Hola", "Cuerpo") == "msg-1"
    message = send.call_args[0][0]
    assert message.token == "tok"
    assert message.notification.title == "Hola"
    assert message.notification.body == "Cuerpo"


def test_init_firebase_requires_credentials(tmp_path, monkeypatch):
    monkeypatch.setattr(firebase_service.firebase_admin, "_apps", {})
    with pytest.raises(RuntimeError, match="nope.json"):
        firebase_service.init_firebase(str(tmp_path / "nope.json"))
