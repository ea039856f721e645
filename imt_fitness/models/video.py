from datetime import datetime
from imt_fitness.extensions import db


class Video(db.Model):
    __tablename__ = "videos"

    id = db.Column(db.Integer, primary_key=True)
    coach_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    youtube_url = db.Column(db.String(255), nullable=False)
    category = db.Column(
        db.String(20),
        db.CheckConstraint("category IN ('underweight','normal','overweight','obese')"),
        nullable=False,
        default="normal",
        index=True,
    )
    created_at = db.Column(db.DateTime, default=datetime.now, index=True)

    coach = db.relationship("User", back_populates="videos")
