from sqlalchemy.sql import func

from pressure_dashboard.extensions import db
from pressure_dashboard.helpers import iso


class Tag(db.Model):
    __tablename__ = "tags"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(60), unique=True, nullable=False)


class Measurement(db.Model):
    __tablename__ = "measurements"

    id = db.Column(db.Integer, primary_key=True)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)

    systolic_pressure = db.Column(db.Integer, nullable=False)   # mmHg
    diastolic_pressure = db.Column(db.Integer, nullable=False)  # mmHg
    heart_rate = db.Column(db.Integer, nullable=False)          # bpm

    created_at = db.Column(db.DateTime, server_default=func.now(), nullable=False, index=True)

    patient = db.relationship("Patient", backref=db.backref("measurements", cascade="all,delete-orphan"))

    @property
    def tag_names(self):
        return [link.tag.name for link in self.tag_links]

    def to_dict(self):
        return {
            "id": self.id,
            "patientId": self.patient_id,
            "systolicPressure": self.systolic_pressure,
            "diastolicPressure": self.diastolic_pressure,
            "heartRate": self.heart_rate,
            "tags": self.tag_names,
            "createdAt": iso(self.created_at),
        }


class MeasurementTag(db.Model):
    __tablename__ = "measurement_tags"

    id = db.Column(db.Integer, primary_key=True)
    measurement_id = db.Column(db.Integer, db.ForeignKey("measurements.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_id = db.Column(db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True)

    __table_args__ = (db.UniqueConstraint("measurement_id", "tag_id", name="uq_measurement_tag"),)

    measurement = db.relationship("Measurement", backref=db.backref("tag_links", cascade="all,delete-orphan"))
    tag = db.relationship("Tag")
