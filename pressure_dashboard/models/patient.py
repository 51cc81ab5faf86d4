import uuid

from sqlalchemy.sql import func

from pressure_dashboard.extensions import db
from pressure_dashboard.utils.mask_value import mask_value


class Patient(db.Model):
    __tablename__ = "patients"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    doctor_id = db.Column(db.Integer, db.ForeignKey("doctors.id", ondelete="SET NULL"), nullable=True, index=True)

    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, index=True, nullable=False)
    birthdate = db.Column(db.Date, nullable=True)
    gender = db.Column(db.String(1), nullable=True)           # "M" / "F"
    height = db.Column(db.Integer, nullable=True)             # cm
    weight = db.Column(db.Float, nullable=True)               # kg

    created_at = db.Column(db.DateTime, server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    doctor = db.relationship("Doctor", backref=db.backref("patients", lazy="dynamic"))

    def to_dict(self, include_profile=False):
        data = {
            "id": self.id,
            "doctorId": self.doctor_id,
            "name": self.name,
            "email": self.email,
            "birthdate": self.birthdate.isoformat() if self.birthdate else None,
            "gender": self.gender,
            "height": self.height,
            "weight": self.weight,
        }
        if include_profile:
            data["relevantConditions"] = [
                {"id": link.condition.id, "name": link.condition.name}
                for link in self.relevant_condition_links
            ]
            data["medications"] = [
                {"id": link.medication.id, "name": link.medication.name}
                for link in self.medication_links
            ]
            data["doctorAccessCode"] = mask_value(self.doctor.access_code) if self.doctor else ""
        return data
