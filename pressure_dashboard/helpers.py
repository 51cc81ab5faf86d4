# pressure_dashboard/helpers.py
from datetime import datetime, timezone

from flask import jsonify


def api_error(message, status_code):
    return jsonify({"success": False, "message": message}), status_code


def utcnow():
    """Naive UTC now, matching how timestamps are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_datetime(value):
    """Parse an ISO-8601 string (``Z`` suffix allowed) into naive UTC.

    Naive input is taken as UTC already. Returns None when the value
    cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def iso(value):
    if value is None:
        return None
    return value.isoformat() + "Z"
