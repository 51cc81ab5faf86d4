from pressure_dashboard.extensions import db


class RelevantCondition(db.Model):
    __tablename__ = "relevant_conditions"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), unique=True, nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name}


class PatientRelevantCondition(db.Model):
    __tablename__ = "patient_relevant_conditions"

    id = db.Column(db.Integer, primary_key=True)
    patient_id = db.Column(db.String(36), db.ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    relevant_condition_id = db.Column(
        db.Integer, db.ForeignKey("relevant_conditions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    __table_args__ = (
        db.UniqueConstraint("patient_id", "relevant_condition_id", name="uq_patient_relevant_condition"),
    )

    patient = db.relationship(
        "Patient", backref=db.backref("relevant_condition_links", cascade="all,delete-orphan")
    )
    condition = db.relationship("RelevantCondition")
