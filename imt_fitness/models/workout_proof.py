from datetime import datetime
from imt_fitness.extensions import db


class WorkoutProof(db.Model):
    __tablename__ = "workout_proofs"

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url = db.Column(db.String(255), nullable=False)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.now, nullable=False, index=True)

    client = db.relationship("User", back_populates="workout_proofs")
