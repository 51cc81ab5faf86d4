import pytest
from datetime import datetime, timedelta, timezone

from pressure_dashboard import create_app
from pressure_dashboard.extensions import db as _db
from pressure_dashboard.models import Doctor, Medication, Patient, RelevantCondition

TEST_TAGS = ["En reposo", "Después de comer", "Con estrés"]


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
        "PUBLIC_APP_URL": "http://dashboard.test",
        "ADDITIONAL_TAGS": TEST_TAGS,
    })
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def doctor(db):
    doc = Doctor(name="Dra. Pérez", access_code="DOC12345")
    db.session.add(doc)
    db.session.commit()
    return doc


@pytest.fixture
def patient(db, doctor):
    p = Patient(name="Ana", email="ana@example.com", doctor_id=doctor.id)
    db.session.add(p)
    db.session.commit()
    return p


@pytest.fixture
def other_patient(db, doctor):
    p = Patient(name="Luis", email="luis@example.com", doctor_id=doctor.id)
    db.session.add(p)
    db.session.commit()
    return p


@pytest.fixture
def catalog(db):
    conditions = [RelevantCondition(name="Hipertensión"), RelevantCondition(name="Diabetes")]
    medications = [Medication(name="Losartán"), Medication(name="Enalapril")]
    db.session.add_all(conditions + medications)
    db.session.commit()
    return {"conditions": conditions, "medications": medications}


def future_iso(hours=1):
    """Naive-UTC ISO string ``hours`` from now, seconds precision."""
    value = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0) + timedelta(hours=hours)
    return value.isoformat()


@pytest.fixture
def reminder_payload():
    return {
        "title": "Take pill",
        "type": "MEDICAMENTO",
        "startDate": future_iso(),
        "repeatInterval": "4",
        "additionalNotes": "after meals",
        "pushToken": "device-token-1",
    }
