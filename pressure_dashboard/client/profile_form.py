"""Patient profile form: validate, then PATCH the editable fields."""
import logging

from pressure_dashboard.schemas.profile import ProfileSchema

from .api import ApiError
from .ui import Toaster

logger = logging.getLogger(__name__)


class ProfileFormController:
    def __init__(self, api, user_id, initial_data=None, toaster=None):
        self.api = api
        self.user_id = user_id
        self.toaster = toaster or Toaster()
        self.loading = False
        self.errors = {}
        self.values = {
            "relevantConditions": [],
            "medications": [],
            "name": "",
            "email": "",
            "birthdate": None,
            "gender": "",
            "doctorAccessCode": "",
            "height": 0,
            "weight": 0,
        }
        if initial_data:
            self.values.update({k: v for k, v in initial_data.items() if k in self.values})

    def set_value(self, name, value):
        if name == "email":
            raise ValueError("email cannot be changed from the profile form")
        self.values[name] = value
        self.errors.pop(name, None)

    def submit(self):
        values, self.errors = ProfileSchema().validate(self.values)
        if values is None:
            return False

        self.loading = True
        try:
            self.api.patch(f"/api/v1/users/{self.user_id}", values.to_payload())
        except ApiError as e:
            logger.warning("Profile save failed: %s", e.message)
            self.toaster.error(e.message)
            return False
        finally:
            self.loading = False

        self.toaster.success("Perfil actualizado.")
        return True
