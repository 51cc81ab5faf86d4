# pressure_dashboard/controllers/user_controller.py
import datetime

from flask import current_app, jsonify, request
from sqlalchemy.exc import IntegrityError

from pressure_dashboard.extensions import db
from pressure_dashboard.helpers import api_error
from pressure_dashboard.models import (
    Doctor,
    Medication,
    Patient,
    PatientMedication,
    PatientRelevantCondition,
    RelevantCondition,
)


def _collect_ids(items):
    """Accept ``[{"id": ...}]`` or bare ids; drop blanks and duplicates."""
    seen = []
    for item in items or []:
        raw = item.get("id") if isinstance(item, dict) else item
        try:
            value = int(raw)
        except (TypeError, ValueError):
            continue
        if value not in seen:
            seen.append(value)
    return seen


def find_user_by_email():
    email = (request.args.get("userEmail") or "").lower().strip()
    if not email:
        return api_error("Email is required", 400)

    try:
        patient = Patient.query.filter_by(email=email).first()
        if not patient:
            return api_error("User not found", 404)
        return jsonify(patient.to_dict()), 200
    except Exception:
        current_app.logger.exception("[USERS_GET]")
        return api_error("Internal error", 500)


def register_user():
    data = request.get_json(silent=True) or {}
    email = (data.get("email") or "").lower().strip()
    name = (data.get("name") or "").strip()
    access_code = (data.get("doctorAccessCode") or "").strip()

    if not email:
        return api_error("Email is required", 400)
    if not name:
        return api_error("Name is required", 400)
    if not access_code:
        return api_error("Doctor access code is required", 400)

    try:
        if Patient.query.filter_by(email=email).first():
            return api_error("User already exists", 400)

        doctor = Doctor.query.filter_by(access_code=access_code).first()
        if not doctor:
            return api_error("Invalid doctor access code", 400)

        patient = Patient(doctor_id=doctor.id, email=email, name=name)
        db.session.add(patient)
        db.session.commit()
        current_app.logger.info("Patient registered: %s", patient.id)
        return jsonify(patient.to_dict()), 201
    except IntegrityError:
        db.session.rollback()
        return api_error("User already exists", 400)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("[USERS_POST]")
        return api_error("Internal error", 500)


def get_user(user_id):
    try:
        patient = db.session.get(Patient, user_id)
        if not patient:
            return api_error("User not found", 404)
        return jsonify(patient.to_dict(include_profile=True)), 200
    except Exception:
        current_app.logger.exception("[USER_GET]")
        return api_error("Internal error", 500)


def update_user(user_id):
    if not (user_id or "").strip():
        return api_error("User ID is required", 400)

    data = request.get_json(silent=True) or {}

    required = [
        ("name", "Name is required"),
        ("birthdate", "Birthdate is required"),
        ("gender", "Gender is required"),
        ("height", "Height is required"),
        ("weight", "Weight is required"),
    ]
    for field, message in required:
        if not data.get(field):
            return api_error(message, 400)

    try:
        birthdate = datetime.date.fromisoformat(str(data["birthdate"])[:10])
        height = int(data["height"])
        weight = float(data["weight"])
    except (TypeError, ValueError):
        return api_error("Birthdate, height or weight has an invalid format", 400)

    try:
        patient = db.session.get(Patient, user_id)
        if not patient:
            return api_error("User not found", 404)

        # Email is immutable from the profile form; anything sent is ignored.
        patient.name = str(data["name"]).strip()
        patient.birthdate = birthdate
        patient.gender = data["gender"]
        patient.height = height
        patient.weight = weight

        condition_ids = _collect_ids(data.get("relevantConditions"))
        medication_ids = _collect_ids(data.get("medications"))

        known_conditions = {
            c.id for c in RelevantCondition.query.filter(RelevantCondition.id.in_(condition_ids)).all()
        } if condition_ids else set()
        known_medications = {
            m.id for m in Medication.query.filter(Medication.id.in_(medication_ids)).all()
        } if medication_ids else set()

        PatientRelevantCondition.query.filter_by(patient_id=user_id).delete(synchronize_session=False)
        PatientMedication.query.filter_by(patient_id=user_id).delete(synchronize_session=False)
        db.session.add_all([
            PatientRelevantCondition(patient_id=user_id, relevant_condition_id=cid)
            for cid in condition_ids if cid in known_conditions
        ])
        db.session.add_all([
            PatientMedication(patient_id=user_id, medication_id=mid)
            for mid in medication_ids if mid in known_medications
        ])

        db.session.commit()
        db.session.refresh(patient)
        return jsonify(patient.to_dict(include_profile=True)), 200
    except Exception:
        db.session.rollback()
        current_app.logger.exception("[USER_PATCH]")
        return api_error("Internal error", 500)
