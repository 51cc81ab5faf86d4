# pressure_dashboard/controllers/notification_controller.py
from flask import current_app, jsonify, request

from pressure_dashboard.extensions import db
from pressure_dashboard.helpers import api_error, parse_datetime, utcnow
from pressure_dashboard.models import Notification, Patient
from pressure_dashboard.models.notification import MEDICAL_VISIT, NOTIFICATION_TYPES
from pressure_dashboard.schemas.reminder import MAX_REPEAT_INTERVAL

REQUIRED_MESSAGES = {
    "title": "Title is required",
    "type": "Type is required",
    "startDate": "Start date is required",
    "additionalNotes": "Additional notes are required",
}


def _missing_ids(user_id, notification_id=None, check_notification=False):
    if not (user_id or "").strip():
        return api_error("User ID is required", 400)
    if check_notification and not (notification_id or "").strip():
        return api_error("Notification ID is required", 400)
    return None


def _find_owned(user_id, notification_id):
    # Compound lookup so a reminder is only visible to its own patient.
    return Notification.query.filter_by(id=notification_id, patient_id=user_id).first()


def _parse_repeat_interval(value):
    """Return a non-negative int that fits the column, or None when unusable."""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float) and value.is_integer():
        parsed = int(value)
    elif isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return parsed if 0 <= parsed <= MAX_REPEAT_INTERVAL else None


def _validate_reminder_fields(data):
    """Validate the five editable fields shared by create and update.

    Returns ``(fields, None)`` on success or ``(None, error_response)``.
    """
    if not isinstance(data, dict):
        return None, api_error("Request body must be a JSON object", 400)
    for field in ("title", "type", "startDate"):
        if not data.get(field):
            return None, api_error(REQUIRED_MESSAGES[field], 400)
    if data.get("additionalNotes") is None:
        return None, api_error(REQUIRED_MESSAGES["additionalNotes"], 400)

    title = str(data["title"]).strip()
    if not title:
        return None, api_error(REQUIRED_MESSAGES["title"], 400)
    if len(title) > 70:
        return None, api_error("Title must be at most 70 characters", 400)

    if data["type"] not in NOTIFICATION_TYPES:
        return None, api_error(f"Type must be one of: {', '.join(NOTIFICATION_TYPES)}", 400)

    start_date = parse_datetime(data["startDate"])
    if start_date is None:
        return None, api_error("Start date must be a valid ISO-8601 date", 400)

    notes = str(data["additionalNotes"])
    if len(notes) > 255:
        return None, api_error("Additional notes must be at most 255 characters", 400)

    repeat_interval = _parse_repeat_interval(data.get("repeatInterval", 0))
    if repeat_interval is None:
        return None, api_error("Repeat interval must be a non-negative integer", 400)
    if data["type"] == MEDICAL_VISIT:
        repeat_interval = 0

    return {
        "title": title,
        "type": data["type"],
        "start_date": start_date,
        "repeat_interval": repeat_interval,
        "additional_notes": notes,
    }, None


def list_notifications(user_id):
    missing = _missing_ids(user_id)
    if missing:
        return missing

    try:
        notifications = (
            Notification.query.filter_by(patient_id=user_id)
            .order_by(Notification.start_date.asc())
            .all()
        )
        return jsonify([n.to_dict() for n in notifications]), 200
    except Exception:
        current_app.logger.exception("[NOTIFICATIONS_GET]")
        return api_error("Internal error", 500)


def create_notification(user_id):
    missing = _missing_ids(user_id)
    if missing:
        return missing

    data = request.get_json(silent=True) or {}
    fields, error = _validate_reminder_fields(data)
    if error:
        return error

    if fields["start_date"] < utcnow():
        return api_error("Start date must be equal to or later than the current date", 400)

    try:
        if db.session.get(Patient, user_id) is None:
            return api_error("User not found", 404)

        notification = Notification(
            patient_id=user_id,
            push_token=data.get("pushToken") or None,
            **fields,
        )
        db.session.add(notification)
        db.session.commit()
        current_app.logger.info("Reminder %s created for patient %s", notification.id, user_id)
        return jsonify(notification.to_dict()), 201
    except Exception:
        db.session.rollback()
        current_app.logger.exception("[NOTIFICATIONS_POST]")
        return api_error("Internal error", 500)


def get_notification(user_id, notification_id):
    missing = _missing_ids(user_id, notification_id, check_notification=True)
    if missing:
        return missing

    try:
        notification = _find_owned(user_id, notification_id)
        if not notification:
            return api_error("Notification not found", 404)
        return jsonify(notification.to_dict()), 200
    except Exception:
        current_app.logger.exception("[NOTIFICATION_GET]")
        return api_error("Internal error", 500)


def update_notification(user_id, notification_id):
    missing = _missing_ids(user_id, notification_id, check_notification=True)
    if missing:
        return missing

    try:
        notification = _find_owned(user_id, notification_id)
        if not notification:
            return api_error("Notification not found", 404)

        data = request.get_json(silent=True) or {}
        fields, error = _validate_reminder_fields(data)
        if error:
            return error

        # Full replace of the editable fields; start date is not re-checked against now.
        for name, value in fields.items():
            setattr(notification, name, value)

        db.session.commit()
        return jsonify(notification.to_dict()), 200
    except Exception:
        db.session.rollback()
        current_app.logger.exception("[NOTIFICATION_PATCH]")
        return api_error("Internal error", 500)


def delete_notification(user_id, notification_id):
    missing = _missing_ids(user_id, notification_id, check_notification=True)
    if missing:
        return missing

    try:
        notification = _find_owned(user_id, notification_id)
        if not notification:
            return api_error("Notification not found", 404)

        payload = notification.to_dict()
        db.session.delete(notification)
        db.session.commit()
        current_app.logger.info("Reminder %s deleted for patient %s", notification_id, user_id)
        return jsonify(payload), 200
    except Exception:
        db.session.rollback()
        current_app.logger.exception("[NOTIFICATION_DELETE]")
        return api_error("Internal error", 500)
