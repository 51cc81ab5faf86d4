# pressure_dashboard/controllers/push_controller.py
from firebase_admin import exceptions as firebase_exceptions
from flask import current_app, jsonify, request

from pressure_dashboard.helpers import api_error
from pressure_dashboard.services import firebase_service


def send_notification():
    """Forward one push message to Firebase Cloud Messaging."""
    data = request.get_json(silent=True) or {}
    token = (data.get("token") or "").strip()
    if not token:
        return api_error("Push token is required", 400)

    title = data.get("title") or "Recordatorio"
    body = data.get("body") or ""

    try:
        message_id = firebase_service.send_push(
            token, title, body, cred_path=current_app.config["FIREBASE_CREDENTIALS_PATH"]
        )
        return jsonify({"success": True, "response": message_id}), 200
    except (firebase_exceptions.FirebaseError, ValueError, RuntimeError) as e:
        current_app.logger.error("Error sending push: %s", e)
        return api_error(str(e), 500)
