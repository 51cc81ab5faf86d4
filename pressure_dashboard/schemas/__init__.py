from .reminder import (
    NOTIFICATION_TYPE_OPTIONS,
    REPEAT_INTERVAL_OPTIONS,
    NotificationType,
    ReminderSchema,
    ReminderValues,
    parse_interval,
)
from .profile import GENDERS, ProfileSchema, ProfileValues
