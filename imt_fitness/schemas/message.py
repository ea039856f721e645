from marshmallow import fields, validate

from imt_fitness.extensions import ma
from imt_fitness.models import Message
from imt_fitness.schemas.base import InputSchema
from imt_fitness.schemas.user import UserSummarySchema


class MessageSchema(ma.SQLAlchemyAutoSchema):
    sender = fields.Nested(UserSummarySchema, only=("id", "name"))

    class Meta:
        model = Message
        include_fk = True


class MessageInputSchema(InputSchema):
    content = fields.String(required=True, validate=validate.Length(min=1))


class CoachMessageInputSchema(MessageInputSchema):
    receiver_id = fields.Integer(required=True)
