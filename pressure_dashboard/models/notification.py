import uuid

from sqlalchemy.sql import func

from pressure_dashboard.extensions import db
from pressure_dashboard.helpers import iso

MEDICAL_VISIT = "CITA_MEDICA"
MEDICATION = "MEDICAMENTO"
PRESSURE_CHECK = "TOMA_PRESION"
NOTIFICATION_TYPES = (MEDICAL_VISIT, MEDICATION, PRESSURE_CHECK)


class Notification(db.Model):
    """A scheduled reminder owned by one patient.

    ``repeat_interval`` is the number of hours between recurrences, 0 means
    the reminder fires once.
    """

    __tablename__ = "notifications"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)

    title = db.Column(db.String(70), nullable=False)
    type = db.Column(db.String(20), nullable=False)
    start_date = db.Column(db.DateTime, nullable=False, index=True)
    repeat_interval = db.Column(db.Integer, nullable=False, default=0, server_default="0")
    additional_notes = db.Column(db.String(255), nullable=False, default="")
    push_token = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime, server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    patient = db.relationship("Patient", backref=db.backref("notifications", cascade="all,delete-orphan"))

    def to_dict(self):
        return {
            "id": self.id,
            "patientId": self.patient_id,
            "title": self.title,
            "type": self.type,
            "startDate": iso(self.start_date),
            "repeatInterval": self.repeat_interval,
            "additionalNotes": self.additional_notes,
            "pushToken": self.push_token,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
