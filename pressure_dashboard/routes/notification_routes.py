# pressure_dashboard/routes/notification_routes.py
from flask import Blueprint
from pressure_dashboard.controllers import notification_controller

notification_bp = Blueprint("notifications", __name__, url_prefix="/api/v1/users/<user_id>/notifications")

notification_bp.route("", methods=["GET"])(notification_controller.list_notifications)
notification_bp.route("", methods=["POST"])(notification_controller.create_notification)
notification_bp.route("/<notification_id>", methods=["GET"])(notification_controller.get_notification)
notification_bp.route("/<notification_id>", methods=["PATCH"])(notification_controller.update_notification)
notification_bp.route("/<notification_id>", methods=["DELETE"])(notification_controller.delete_notification)
