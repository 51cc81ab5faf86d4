"""Reminder form schema.

``ReminderSchema`` captures "now" once, when it is built. Every payload it
validates is checked against that instant, so callers that want a fresh
reference point must build a new schema.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

NOTIFICATION_TYPE_OPTIONS = [
    {"label": "Cita médica", "value": "CITA_MEDICA"},
    {"label": "Medicamento", "value": "MEDICAMENTO"},
    {"label": "Toma de presión", "value": "TOMA_PRESION"},
]

REPEAT_INTERVAL_OPTIONS = [
    {"label": "Sin repetir", "value": "0"},
    {"label": "Cada hora", "value": "1"},
    {"label": "Cada 2 horas", "value": "2"},
    {"label": "Cada 4 horas", "value": "4"},
    {"label": "Cada 6 horas", "value": "6"},
    {"label": "Cada 8 horas", "value": "8"},
    {"label": "Cada 12 horas", "value": "12"},
    {"label": "Cada 24 horas", "value": "24"},
]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Upper bound of the INTEGER column that stores the interval.
MAX_REPEAT_INTERVAL = 2**31 - 1


class NotificationType(str, Enum):
    MEDICAL_VISIT = "CITA_MEDICA"
    MEDICATION = "MEDICAMENTO"
    PRESSURE_CHECK = "TOMA_PRESION"


def parse_interval(text: Any) -> Optional[int]:
    """Leading-integer parse: ``"4"`` and ``"4 horas"`` both give 4."""
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        value = text
    else:
        match = _LEADING_INT.match(str(text or ""))
        if not match:
            return None
        value = int(match.group(1))
    return value if value <= MAX_REPEAT_INTERVAL else None


class ReminderValues(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    title: str = Field(min_length=1, max_length=70)
    type: NotificationType
    start_date: datetime = Field(alias="startDate")
    repeat_interval: str = Field(alias="repeatInterval", default="0")
    additional_notes: str = Field(alias="additionalNotes", max_length=255)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("title_blank", "El título es obligatorio")
        return value

    @field_validator("start_date")
    @classmethod
    def _start_not_past(cls, value: datetime, info: ValidationInfo) -> datetime:
        now = (info.context or {}).get("now")
        if now is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=now.tzinfo)
        if value < now:
            raise PydanticCustomError("start_date_past", "La fecha debe ser igual o posterior a la actual")
        return value

    @field_validator("repeat_interval", mode="before")
    @classmethod
    def _interval_coercible(cls, value: Any) -> str:
        parsed = parse_interval(value)
        if parsed is None or parsed < 0:
            raise PydanticCustomError(
                "repeat_interval_invalid", "El intervalo debe ser un número entero de horas"
            )
        return str(value).strip()

    @property
    def repeat_hours(self) -> int:
        return parse_interval(self.repeat_interval) or 0


class ReminderSchema:
    def __init__(self, now: Optional[datetime] = None):
        now = now or datetime.now(timezone.utc)
        # Naive instants are taken as UTC so offset-aware dates compare cleanly.
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        self.now = now

    def validate(self, payload: Dict[str, Any]) -> Tuple[Optional[ReminderValues], Dict[str, str]]:
        """Return ``(values, {})`` or ``(None, {field: message})``."""
        try:
            values = ReminderValues.model_validate(payload, context={"now": self.now})
        except ValidationError as exc:
            return None, field_errors(exc)
        return values, {}


SPANISH_MESSAGES = {
    "missing": "Este campo es obligatorio",
    "string_type": "Debe ser un texto",
    "string_too_short": "Debe tener al menos {min_length} caracteres",
    "string_too_long": "Debe tener como máximo {max_length} caracteres",
    "enum": "Selecciona una opción válida",
    "datetime_type": "La fecha no es válida",
    "datetime_parsing": "La fecha no es válida",
    "datetime_from_date_parsing": "La fecha no es válida",
    "date_type": "La fecha no es válida",
    "date_parsing": "La fecha no es válida",
    "date_from_datetime_parsing": "La fecha no es válida",
    "int_type": "Debe ser un número entero",
    "int_parsing": "Debe ser un número entero",
    "int_from_float": "Debe ser un número entero",
    "float_type": "Debe ser un número",
    "float_parsing": "Debe ser un número",
    "greater_than_equal": "Debe ser mayor o igual a {ge}",
    "less_than_equal": "Debe ser menor o igual a {le}",
    "value_error": "El valor no es válido",
    "list_type": "Debe ser una lista",
    "model_type": "El valor no es válido",
}


def _message(err: Dict[str, Any]) -> str:
    template = SPANISH_MESSAGES.get(err["type"])
    if template is None:
        return err["msg"]
    return template.format(**(err.get("ctx") or {}))


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Field-keyed messages; built-in pydantic errors are translated to Spanish."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "__root__"
        errors.setdefault(field, _message(err))
    return errors
