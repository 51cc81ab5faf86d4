from .api import ApiClient, ApiError
from .datetime_picker import AM, PM, DateTimePicker
from .profile_form import ProfileFormController
from .reminder_form import DELETING, IDLE, SUBMITTING, ReminderFormController
from .stores import AlertStore, AuthStore, PushTokenStore
from .ui import Navigator, Toaster
