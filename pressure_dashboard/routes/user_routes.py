# pressure_dashboard/routes/user_routes.py
from flask import Blueprint
from pressure_dashboard.controllers import measurement_controller, user_controller

user_bp = Blueprint("users", __name__, url_prefix="/api/v1/users")

user_bp.route("", methods=["GET"])(user_controller.find_user_by_email)
user_bp.route("", methods=["POST"])(user_controller.register_user)
user_bp.route("/<user_id>", methods=["GET"])(user_controller.get_user)
user_bp.route("/<user_id>", methods=["PATCH"])(user_controller.update_user)

# Blood-pressure readings
user_bp.route("/<user_id>/measurements", methods=["GET"])(measurement_controller.list_measurements)
user_bp.route("/<user_id>/measurements", methods=["POST"])(measurement_controller.create_measurement)
user_bp.route("/<user_id>/share-measurement", methods=["POST"])(measurement_controller.share_measurements)
