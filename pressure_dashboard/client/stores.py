"""Global client stores shared by the form controllers.

Each store owns one persisted record; fields are written by a single owner
(e.g. the push registration flow for the token) and read by many.
"""
import logging

from .state_store import StateStore

logger = logging.getLogger(__name__)


class _PersistedStore:
    name = None
    defaults = {}

    def __init__(self, state_store=None):
        self._state_store = state_store or StateStore()
        saved = self._state_store.get_json(self.name) or {}
        self._data = {**self.defaults, **saved}

    def _set(self, **changes):
        self._data.update(changes)
        self._state_store.set_json(self.name, self._data)

    def snapshot(self):
        return dict(self._data)


class AuthStore(_PersistedStore):
    name = "auth-storage"
    defaults = {"status": "unauthenticated", "user": None}

    @property
    def status(self):
        return self._data["status"]

    @property
    def user(self):
        return self._data["user"]

    def login_user(self, user_id, email):
        self._set(status="authenticated", user={"id": user_id, "email": email})

    def logout_user(self):
        self._set(status="unauthenticated", user=None)


class AlertStore(_PersistedStore):
    name = "alert-storage"
    defaults = {"show_hypertension_alert": False, "show_hypotension_alert": True}

    @property
    def show_hypertension_alert(self):
        return self._data["show_hypertension_alert"]

    @property
    def show_hypotension_alert(self):
        return self._data["show_hypotension_alert"]

    def set_show_hypertension_alert(self, show):
        self._set(show_hypertension_alert=bool(show))

    def set_show_hypotension_alert(self, show):
        self._set(show_hypotension_alert=bool(show))


class PushTokenStore(_PersistedStore):
    """Device token for Firebase Cloud Messaging.

    Filled in by the push registration flow; may legitimately stay empty
    when permission was denied.
    """

    name = "push-token-storage"
    defaults = {"token": "", "permission": "default"}

    @property
    def token(self):
        return self._data["token"] or ""

    @property
    def permission(self):
        return self._data["permission"]

    def set_token(self, token, permission="granted"):
        logger.debug("Push token updated (permission=%s)", permission)
        self._set(token=token or "", permission=permission)

    def clear(self, permission="denied"):
        self._set(token="", permission=permission)
