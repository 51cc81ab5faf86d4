from datetime import timedelta

from flask_jwt_extended import create_access_token


def _post(client, user_id, **overrides):
    data = {
        "systolicPressure": "120",
        "diastolicPressure": "80",
        "heartRate": "70",
        "tags": ["En reposo"],
    }
    data.update(overrides)
    return client.post(f"/api/v1/users/{user_id}/measurements", json=data)


def test_create_measurement(client, patient):
    resp = _post(client, patient.id, tags=["En reposo", "Con estrés"])
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["systolicPressure"] == 120
    assert body["diastolicPressure"] == 80
    assert body["heartRate"] == 70
    assert sorted(body["tags"]) == ["Con estrés", "En reposo"]
    assert body["hypertensiveCrisis"] is False
    assert body["hypotensiveCrisis"] is False


def test_tags_are_reused(client, db, patient):
    from pressure_dashboard.models import Tag

    _post(client, patient.id)
    _post(client, patient.id)
    db.session.expire_all()
    assert Tag.query.filter_by(name="En reposo").count() == 1


def test_crisis_flags(client, patient):
    high = _post(client, patient.id, systolicPressure=185, diastolicPressure=95).get_json()
    assert high["hypertensiveCrisis"] is True
    low = _post(client, patient.id, systolicPressure=100, diastolicPressure=55).get_json()
    assert low["hypotensiveCrisis"] is True


def test_missing_values(client, patient):
    resp = _post(client, patient.id, heartRate=None)
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "All pressure and heart rate values are required"


def test_out_of_range(client, patient):
    resp = _post(client, patient.id, systolicPressure=400)
    assert resp.status_code == 400
    assert "Systolic" in resp.get_json()["message"]


def test_tags_required_and_validated(client, patient):
    assert _post(client, patient.id, tags=[]).status_code == 400
    resp = _post(client, patient.id, tags=["En reposo", "Bailando"])
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid tags: Bailando"


def test_unknown_patient(client):
    assert _post(client, "ghost").status_code == 404


def test_list_newest_first(client, patient):
    _post(client, patient.id, systolicPressure=110)
    _post(client, patient.id, systolicPressure=130)
    body = client.get(f"/api/v1/users/{patient.id}/measurements").get_json()
    assert [m["systolicPressure"] for m in body] == [130, 110]


def test_share_and_check(client, patient):
    _post(client, patient.id)
    share = client.post(f"/api/v1/users/{patient.id}/share-measurement").get_json()
    assert share["shareUrl"].startswith("http://dashboard.test/shared/")
    token = share["shareUrl"].rsplit("/", 1)[1]

    resp = client.post("/api/v1/check-shared-measurement", json={"token": token})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["user"] == {"name": "Ana", "email": "ana@example.com"}
    assert len(body["measurements"]) == 1
    assert body["measurements"][0]["tags"] == "En reposo"
    assert body["tokenInfo"]["userId"] == patient.id


def test_share_unknown_user(client):
    assert client.post("/api/v1/users/ghost/share-measurement").status_code == 404


def test_check_requires_token(client):
    assert client.post("/api/v1/check-shared-measurement", json={}).status_code == 400


def test_check_rejects_garbage_and_expired(app, client, patient):
    resp = client.post("/api/v1/check-shared-measurement", json={"token": "not-a-jwt"})
    assert resp.status_code == 401
    assert resp.get_json()["expired"] is True

    expired = create_access_token(
        identity=patient.id, additional_claims={"purpose": "share"}, expires_delta=timedelta(seconds=-5)
    )
    resp = client.post("/api/v1/check-shared-measurement", json={"token": expired})
    assert resp.status_code == 401


def test_check_rejects_non_share_token(client, patient):
    token = create_access_token(identity=patient.id)
    resp = client.post("/api/v1/check-shared-measurement", json={"token": token})
    assert resp.status_code == 401
