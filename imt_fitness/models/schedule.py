from datetime import datetime
from imt_fitness.extensions import db


class Schedule(db.Model):
    __tablename__ = "schedules"

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False)
    title = db.Column(db.String(150), nullable=False, default="Workout")
    completed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.now)

    client = db.relationship("User", back_populates="schedules")

    __table_args__ = (
        db.UniqueConstraint("client_id", "date", name="uq_schedule_client_date"),
    )
