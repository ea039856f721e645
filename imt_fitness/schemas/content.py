from marshmallow import fields, validate

from imt_fitness.extensions import ma
from imt_fitness.models import MEAL_TYPES, FoodRecommendation, Recommendation, Video
from imt_fitness.schemas.base import InputSchema
from imt_fitness.schemas.user import UserSummarySchema
from imt_fitness.services.bmi import CATEGORY_VALUES


class RecommendationSchema(ma.SQLAlchemyAutoSchema):
    exercises = fields.List(fields.String())

    class Meta:
        model = Recommendation
        include_fk = True


class FoodRecommendationSchema(ma.SQLAlchemyAutoSchema):
    foods = fields.List(fields.String())

    class Meta:
        model = FoodRecommendation
        include_fk = True


class VideoSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Video
        include_fk = True


class VideoWithCoachSchema(VideoSchema):
    coach = fields.Nested(UserSummarySchema, only=("id", "name", "phone"))


class RecommendationInputSchema(InputSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=150))
    description = fields.String(allow_none=True, load_default=None)
    exercises = fields.List(fields.String(), load_default=list)


class FoodRecommendationInputSchema(InputSchema):
    client_id = fields.Integer(required=True)
    title = fields.String(required=True, validate=validate.Length(min=1, max=150))
    description = fields.String(allow_none=True, load_default=None)
    foods = fields.List(fields.String(), load_default=list)
    meal_type = fields.String(allow_none=True, load_default=None, validate=validate.OneOf(MEAL_TYPES))


class VideoInputSchema(InputSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=200))
    description = fields.String(allow_none=True)
    youtube_url = fields.Url(required=True)
    category = fields.String(validate=validate.OneOf(CATEGORY_VALUES))
