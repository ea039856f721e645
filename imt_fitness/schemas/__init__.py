from .user import (
    UserSchema, UserSummarySchema, CoachSchema, ClientSchema,
    LoginSchema, RegisterSchema, UserCreateSchema, UserUpdateSchema, AssignCoachSchema,
)
from .tracking import (
    IMTHistorySchema, ScheduleSchema, WorkoutProofSchema,
    ImtInputSchema, ScheduleCreateSchema, ScheduleBulkSchema, ScheduleCompleteSchema, WorkoutDoneSchema,
)
from .content import (
    RecommendationSchema, FoodRecommendationSchema, VideoSchema, VideoWithCoachSchema,
    RecommendationInputSchema, FoodRecommendationInputSchema, VideoInputSchema,
)
from .message import MessageSchema, MessageInputSchema, CoachMessageInputSchema
