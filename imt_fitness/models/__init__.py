from .user import User, Role
from .imt_history import IMTHistory
from .schedule import Schedule
from .workout_proof import WorkoutProof
from .recommendation import Recommendation, FoodRecommendation, MEAL_TYPES
from .message import Message
from .video import Video

__all__ = [
    "User", "Role",
    "IMTHistory", "Schedule", "WorkoutProof",
    "Recommendation", "FoodRecommendation", "MEAL_TYPES",
    "Message", "Video",
]
