# pressure_dashboard/controllers/catalog_controller.py
from flask import current_app, jsonify

from pressure_dashboard.helpers import api_error
from pressure_dashboard.models import Medication, RelevantCondition


def list_medications():
    try:
        medications = Medication.query.order_by(Medication.name.asc()).all()
        return jsonify([m.to_dict() for m in medications]), 200
    except Exception:
        current_app.logger.exception("[MEDICATIONS_GET]")
        return api_error("Internal error", 500)


def list_relevant_conditions():
    try:
        conditions = RelevantCondition.query.order_by(RelevantCondition.name.asc()).all()
        return jsonify([c.to_dict() for c in conditions]), 200
    except Exception:
        current_app.logger.exception("[RELEVANT_CONDITIONS_GET]")
        return api_error("Internal error", 500)
