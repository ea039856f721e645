from datetime import datetime
from imt_fitness.extensions import db


class IMTHistory(db.Model):
    """One BMI measurement. Rows are only ever appended."""
    __tablename__ = "imt_history"

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    weight = db.Column(db.Float, nullable=False)
    height = db.Column(db.Float, nullable=False)
    imt = db.Column(db.Float, nullable=False)
    category = db.Column(
        db.String(20),
        db.CheckConstraint("category IN ('underweight','normal','overweight','obese')"),
        nullable=False,
    )
    created_at = db.Column(db.DateTime, default=datetime.now, nullable=False, index=True)

    client = db.relationship("User", back_populates="imt_history")

    __table_args__ = (
        db.Index("idx_imt_history_client_created", "client_id", "created_at"),
    )
