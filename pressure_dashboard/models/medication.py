from pressure_dashboard.extensions import db


class Medication(db.Model):
    __tablename__ = "medications"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), unique=True, nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name}


class PatientMedication(db.Model):
    __tablename__ = "patient_medications"

    id = db.Column(db.Integer, primary_key=True)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    medication_id = db.Column(db.Integer, db.ForeignKey("medications.id", ondelete="CASCADE"), nullable=False, index=True)

    __table_args__ = (db.UniqueConstraint("patient_id", "medication_id", name="uq_patient_medication"),)

    patient = db.relationship("Patient", backref=db.backref("medication_links", cascade="all,delete-orphan"))
    medication = db.relationship("Medication")
