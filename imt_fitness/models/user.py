import enum
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from imt_fitness.extensions import db

USERS_TABLE = "users"


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    COACH = "COACH"
    CLIENT = "CLIENT"


class User(db.Model):
    __tablename__ = USERS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    phone = db.Column(db.String(30), unique=True, nullable=False, index=True)
    email = db.Column(db.String(120), unique=True, nullable=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.String(20),
        db.CheckConstraint("role IN ('ADMIN','COACH','CLIENT')"),
        nullable=False,
        index=True,
    )

    # latest cached measurements, the ledger is authoritative
    weight = db.Column(db.Float, nullable=True)
    height = db.Column(db.Float, nullable=True)

    coach_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = db.Column(db.DateTime, default=datetime.now)

    # Coach <-> Client pairing
    coach = db.relationship("User", remote_side=[id], back_populates="clients")
    clients = db.relationship("User", back_populates="coach", order_by="User.name")

    # Client data
    imt_history = db.relationship("IMTHistory", back_populates="client", lazy="dynamic", cascade="all, delete-orphan")
    schedules = db.relationship("Schedule", back_populates="client", lazy="dynamic", cascade="all, delete-orphan")
    workout_proofs = db.relationship("WorkoutProof", back_populates="client", lazy="dynamic", cascade="all, delete-orphan")
    recommendations = db.relationship(
        "Recommendation", foreign_keys="[Recommendation.client_id]", back_populates="client",
        lazy="dynamic", cascade="all, delete-orphan"
    )
    food_recommendations = db.relationship(
        "FoodRecommendation", foreign_keys="[FoodRecommendation.client_id]", back_populates="client",
        lazy="dynamic", cascade="all, delete-orphan"
    )

    # Coach data
    videos = db.relationship("Video", back_populates="coach", lazy="dynamic", cascade="all, delete-orphan")
    authored_recommendations = db.relationship(
        "Recommendation", foreign_keys="[Recommendation.coach_id]", back_populates="coach",
        lazy="dynamic", cascade="all, delete-orphan"
    )
    authored_food_recommendations = db.relationship(
        "FoodRecommendation", foreign_keys="[FoodRecommendation.coach_id]", back_populates="coach",
        lazy="dynamic", cascade="all, delete-orphan"
    )

    # Messaging
    sent_messages = db.relationship("Message", foreign_keys="[Message.sender_id]", back_populates="sender", lazy="dynamic", cascade="all, delete-orphan")
    received_messages = db.relationship("Message", foreign_keys="[Message.receiver_id]", back_populates="receiver", lazy="dynamic", cascade="all, delete-orphan")

    # Helpers
    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    @property
    def is_coach(self):
        return self.role == Role.COACH

    @property
    def is_client(self):
        return self.role == Role.CLIENT

    def __repr__(self):
        return f"<User {self.id} {self.role} {self.phone}>"
