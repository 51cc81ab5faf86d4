"""Reminder create/edit form.

The controller owns the form values, the delete-confirmation modal and a
three-state lifecycle (idle, submitting, deleting). Each network call is
made once; failures are reported through the toaster and never retried.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from pressure_dashboard.schemas.reminder import NotificationType, ReminderSchema, parse_interval

from .api import ApiError
from .datetime_picker import DateTimePicker
from .stores import PushTokenStore
from .ui import Navigator, Toaster

logger = logging.getLogger(__name__)

IDLE = "idle"
SUBMITTING = "submitting"
DELETING = "deleting"


def _parse_start(value: Any, tz) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        raw = str(value)
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        # Server timestamps are naive UTC.
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz)


class ReminderFormController:
    def __init__(
        self,
        api,
        user_id: str,
        initial_data: Optional[Dict[str, Any]] = None,
        push_tokens: Optional[PushTokenStore] = None,
        toaster: Optional[Toaster] = None,
        navigator: Optional[Navigator] = None,
        clock=None,
        tz=None,
    ):
        self.api = api
        self.user_id = user_id
        self.initial_data = initial_data
        self.push_tokens = push_tokens or PushTokenStore()
        self.toaster = toaster or Toaster()
        self.navigator = navigator or Navigator()
        self._clock = clock or (lambda: datetime.now().astimezone(tz))
        self.tz = tz or self._clock().tzinfo

        self.state = IDLE
        self.modal_open = False
        self.errors: Dict[str, str] = {}

        if initial_data:
            start = _parse_start(initial_data["startDate"], self.tz)
            self.values = {
                "title": initial_data.get("title", ""),
                "type": initial_data.get("type", ""),
                "repeatInterval": str(initial_data.get("repeatInterval", 0)),
                "additionalNotes": initial_data.get("additionalNotes") or "",
            }
        else:
            start = (self._clock() + timedelta(hours=1)).replace(second=0, microsecond=0)
            self.values = {
                "title": "",
                "type": "",
                "repeatInterval": "0",
                "additionalNotes": "",
            }
        self.picker = DateTimePicker(start)

    # -- labels ------------------------------------------------------------

    @property
    def is_edit(self) -> bool:
        return bool(self.initial_data and self.initial_data.get("id"))

    @property
    def title(self) -> str:
        return "Editar notificación" if self.is_edit else "Crear notificación"

    @property
    def action_label(self) -> str:
        return "Guardar cambios" if self.is_edit else "Crear"

    @property
    def success_message(self) -> str:
        return "Notificación actualizada." if self.is_edit else "Notificación creada."

    @property
    def list_path(self) -> str:
        return f"/{self.user_id}/notifications"

    @property
    def loading(self) -> bool:
        return self.state != IDLE

    # -- fields ------------------------------------------------------------

    @property
    def start_date(self) -> datetime:
        return self.picker.value

    @property
    def repeat_interval_visible(self) -> bool:
        return self.values.get("type") != NotificationType.MEDICAL_VISIT.value

    def set_value(self, name: str, value: Any) -> None:
        if name == "startDate":
            self.picker = DateTimePicker(value)
            return
        self.values[name] = value
        self.errors.pop(name, None)

    def form_data(self) -> Dict[str, Any]:
        data = {**self.values, "startDate": self.picker.value}
        if not self.repeat_interval_visible:
            # Hidden field: whatever was typed before switching type is ignored.
            data["repeatInterval"] = "0"
        return data

    def build_payload(self, values) -> Dict[str, Any]:
        if values.type == NotificationType.MEDICAL_VISIT.value:
            repeat_interval = 0
        else:
            repeat_interval = parse_interval(values.repeat_interval) or 0
        payload = {
            "title": values.title,
            "type": values.type,
            "startDate": values.start_date.isoformat(),
            "repeatInterval": repeat_interval,
            "additionalNotes": values.additional_notes,
        }
        if not self.is_edit:
            payload["pushToken"] = self.push_tokens.token
        return payload

    # -- actions -----------------------------------------------------------

    def submit(self) -> bool:
        if self.state != IDLE:
            return False

        # Built per submit so "now" is the moment the user presses save.
        values, errors = ReminderSchema(now=self._clock()).validate(self.form_data())
        self.errors = errors
        if values is None:
            return False

        payload = self.build_payload(values)
        self.state = SUBMITTING
        try:
            if self.is_edit:
                self.api.patch(f"/api/v1/users/{self.user_id}/notifications/{self.initial_data['id']}", payload)
            else:
                self.api.post(f"/api/v1/users/{self.user_id}/notifications", payload)
        except ApiError as e:
            logger.warning("Reminder save failed: %s", e.message)
            self.toaster.error(e.message)
            return False
        finally:
            self.state = IDLE

        self.navigator.refresh()
        self.navigator.push(self.list_path)
        self.toaster.success(self.success_message)
        return True

    def open_delete_modal(self) -> None:
        if self.is_edit and self.state == IDLE:
            self.modal_open = True

    def close_delete_modal(self) -> None:
        if self.state == IDLE:
            self.modal_open = False

    def confirm_delete(self) -> bool:
        if not self.modal_open or self.state != IDLE:
            return False

        self.state = DELETING
        try:
            self.api.delete(f"/api/v1/users/{self.user_id}/notifications/{self.initial_data['id']}")
        except ApiError as e:
            logger.warning("Reminder delete failed: %s", e.message)
            self.toaster.error(e.message)
            return False
        finally:
            self.state = IDLE
            self.modal_open = False

        self.navigator.refresh()
        self.navigator.push(self.list_path)
        self.toaster.success("Notificación eliminada.")
        return True
