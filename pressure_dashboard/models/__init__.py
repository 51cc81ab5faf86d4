from .doctor import Doctor
from .patient import Patient
from .relevant_condition import RelevantCondition, PatientRelevantCondition
from .medication import Medication, PatientMedication
from .notification import Notification
from .measurement import Measurement, MeasurementTag, Tag
