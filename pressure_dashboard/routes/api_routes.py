# pressure_dashboard/routes/api_routes.py
from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from pressure_dashboard.extensions import db
from pressure_dashboard.controllers import catalog_controller, measurement_controller, push_controller

api_bp = Blueprint("api", __name__, url_prefix="/api/v1")

api_bp.route("/medications", methods=["GET"])(catalog_controller.list_medications)
api_bp.route("/relevant-conditions", methods=["GET"])(catalog_controller.list_relevant_conditions)
api_bp.route("/check-shared-measurement", methods=["POST"])(measurement_controller.check_shared_measurements)
api_bp.route("/send-notification", methods=["POST"])(push_controller.send_notification)


@api_bp.route("/health", methods=["GET"])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        return jsonify({"success": True, "message": "Database connection successful", "data": {"status": "connected"}}), 200
    except Exception as e:
        current_app.logger.error("Health check failed: %s", e)
        return jsonify({"success": False, "message": "Database connection failed", "data": {"status": "disconnected"}}), 503
