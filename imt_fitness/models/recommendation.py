from datetime import datetime
from imt_fitness.extensions import db

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


class Recommendation(db.Model):
    __tablename__ = "recommendations"

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    coach_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=True)
    exercises = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.now, index=True)

    client = db.relationship("User", foreign_keys=[client_id], back_populates="recommendations")
    coach = db.relationship("User", foreign_keys=[coach_id], back_populates="authored_recommendations")


class FoodRecommendation(db.Model):
    __tablename__ = "food_recommendations"

    id = db.Column(db.Integer, primary_key=True)
    client_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    coach_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=True)
    foods = db.Column(db.JSON, nullable=False, default=list)
    meal_type = db.Column(db.String(20), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.now, index=True)

    client = db.relationship("User", foreign_keys=[client_id], back_populates="food_recommendations")
    coach = db.relationship("User", foreign_keys=[coach_id], back_populates="authored_food_recommendations")
