# pressure_dashboard/controllers/measurement_controller.py
import datetime

from flask import current_app, jsonify, request
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended import exceptions as jwt_exceptions
from jwt.exceptions import PyJWTError

from pressure_dashboard.extensions import db
from pressure_dashboard.helpers import api_error, iso
from pressure_dashboard.models import Measurement, MeasurementTag, Patient, Tag
from pressure_dashboard.utils.blood_pressure import is_hypertensive_crisis, is_hypotensive_crisis

SHARE_TOKEN_PURPOSE = "share"


def _to_int(value):
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _from_timestamp(value):
    return datetime.datetime.fromtimestamp(value, datetime.timezone.utc).replace(tzinfo=None)


def _crisis_flags(measurement):
    cfg = current_app.config
    return {
        "hypertensiveCrisis": is_hypertensive_crisis(
            measurement.systolic_pressure, measurement.diastolic_pressure,
            cfg["PSYS_HIGH"], cfg["PDYS_HIGH"],
        ),
        "hypotensiveCrisis": is_hypotensive_crisis(
            measurement.systolic_pressure, measurement.diastolic_pressure,
            cfg["PSYS_LOW"], cfg["PDYS_LOW"],
        ),
    }


def _bounds_error(systolic, diastolic, heart_rate):
    cfg = current_app.config
    if not cfg["PSYS_MIN"] <= systolic <= cfg["PSYS_MAX"]:
        return f"Systolic pressure must be between {cfg['PSYS_MIN']} and {cfg['PSYS_MAX']}"
    if not cfg["PDYS_MIN"] <= diastolic <= cfg["PDYS_MAX"]:
        return f"Diastolic pressure must be between {cfg['PDYS_MIN']} and {cfg['PDYS_MAX']}"
    if not cfg["PULSE_MIN"] <= heart_rate <= cfg["PULSE_MAX"]:
        return f"Heart rate must be between {cfg['PULSE_MIN']} and {cfg['PULSE_MAX']}"
    return None


def _patient_measurements(user_id):
    return (
        Measurement.query.filter_by(patient_id=user_id)
        .order_by(Measurement.created_at.desc(), Measurement.id.desc())
        .all()
    )


def create_measurement(user_id):
    data = request.get_json(silent=True) or {}

    systolic = _to_int(data.get("systolicPressure"))
    diastolic = _to_int(data.get("diastolicPressure"))
    heart_rate = _to_int(data.get("heartRate"))
    if not systolic or not diastolic or not heart_rate:
        return api_error("All pressure and heart rate values are required", 400)

    bounds = _bounds_error(systolic, diastolic, heart_rate)
    if bounds:
        return api_error(bounds, 400)

    tags = data.get("tags")
    if not tags or not isinstance(tags, list):
        return api_error("At least one tag is required", 400)

    allowed = current_app.config["ADDITIONAL_TAGS"]
    invalid = [t for t in tags if t not in allowed]
    if invalid:
        return api_error(f"Invalid tags: {', '.join(map(str, invalid))}", 400)

    try:
        if db.session.get(Patient, user_id) is None:
            return api_error("Patient not found", 404)

        measurement = Measurement(
            patient_id=user_id,
            systolic_pressure=systolic,
            diastolic_pressure=diastolic,
            heart_rate=heart_rate,
        )
        db.session.add(measurement)
        with db.session.no_autoflush:
            for name in dict.fromkeys(tags):
                tag = Tag.query.filter_by(name=name).first()
                if tag is None:
                    tag = Tag(name=name)
                    db.session.add(tag)
                measurement.tag_links.append(MeasurementTag(tag=tag))
        db.session.commit()

        payload = measurement.to_dict()
        payload.update(_crisis_flags(measurement))
        if payload["hypertensiveCrisis"] or payload["hypotensiveCrisis"]:
            current_app.logger.warning("Crisis reading for patient %s: %s/%s", user_id, systolic, diastolic)
        return jsonify(payload), 201
    except Exception:
        db.session.rollback()
        current_app.logger.exception("[MEASUREMENT_POST]")
        return api_error("Internal error", 500)


def list_measurements(user_id):
    try:
        return jsonify([m.to_dict() for m in _patient_measurements(user_id)]), 200
    except Exception:
        current_app.logger.exception("[MEASUREMENTS_GET]")
        return api_error("Internal error", 500)


def share_measurements(user_id):
    try:
        patient = db.session.get(Patient, user_id)
        if not patient:
            return api_error("User not found", 404)

        token = create_access_token(
            identity=user_id,
            additional_claims={"purpose": SHARE_TOKEN_PURPOSE},
            expires_delta=datetime.timedelta(hours=current_app.config["SHARE_TOKEN_TTL_HOURS"]),
        )
        share_url = f"{current_app.config['PUBLIC_APP_URL'].rstrip('/')}/shared/{token}"
        return jsonify({"shareUrl": share_url}), 200
    except Exception:
        current_app.logger.exception("[SHARE_MEASUREMENT_POST]")
        return api_error("Internal error", 500)


def check_shared_measurements():
    data = request.get_json(silent=True) or {}
    token = data.get("token")
    if not token:
        return api_error("Token is required", 400)

    try:
        payload = decode_token(token)
        if payload.get("purpose") != SHARE_TOKEN_PURPOSE:
            raise ValueError("Invalid token type")
    except (PyJWTError, jwt_exceptions.JWTExtendedException, ValueError):
        return jsonify({
            "success": False,
            "message": "The link has expired or is not valid",
            "expired": True,
        }), 401

    user_id = payload["sub"]
    try:
        patient = db.session.get(Patient, user_id)
        if not patient:
            return api_error("User not found", 404)

        measurements = [
            {
                "id": m.id,
                "heartRate": m.heart_rate,
                "systolicPressure": m.systolic_pressure,
                "diastolicPressure": m.diastolic_pressure,
                "tags": ", ".join(m.tag_names),
                "date": m.created_at.strftime("%d/%m/%Y %H:%M"),
                "createdAt": iso(m.created_at),
            }
            for m in _patient_measurements(user_id)
        ]

        return jsonify({
            "success": True,
            "user": {"name": patient.name, "email": patient.email},
            "measurements": measurements,
            "tokenInfo": {
                "userId": user_id,
                "issuedAt": iso(_from_timestamp(payload["iat"])),
                "expiresAt": iso(_from_timestamp(payload["exp"])),
            },
        }), 200
    except Exception:
        current_app.logger.exception("[CHECK_SHARED_MEASUREMENT_POST]")
        return api_error("Internal error", 500)
