from marshmallow import fields, validate

from imt_fitness.extensions import ma
from imt_fitness.models import User
from imt_fitness.schemas.base import InputSchema


class UserSummarySchema(ma.Schema):
    id = fields.Integer()
    name = fields.String()
    phone = fields.String()
    role = fields.String()
    coach_id = fields.Integer(allow_none=True)


class UserSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = User
        include_fk = True
        exclude = ("password_hash",)


class CoachSchema(UserSchema):
    client_count = fields.Method("get_client_count")

    def get_client_count(self, obj):
        return len(obj.clients)


class ClientSchema(UserSchema):
    coach = fields.Nested(UserSummarySchema, only=("id", "name"), allow_none=True)


class LoginSchema(InputSchema):
    phone = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, validate=validate.Length(min=1))


class RegisterSchema(InputSchema):
    name = fields.String(required=True, validate=validate.Length(min=2, max=150))
    phone = fields.String(required=True, validate=validate.Length(min=6, max=30))
    password = fields.String(required=True, validate=validate.Length(min=6))
    email = fields.Email(allow_none=True, load_default=None)
    coach_id = fields.Integer(allow_none=True, load_default=None)


class UserCreateSchema(RegisterSchema):
    pass


class UserUpdateSchema(InputSchema):
    name = fields.String(validate=validate.Length(min=2, max=150))
    phone = fields.String(validate=validate.Length(min=6, max=30))
    password = fields.String(validate=validate.Length(min=6))
    email = fields.Email(allow_none=True)
    coach_id = fields.Integer(allow_none=True)


class AssignCoachSchema(InputSchema):
    coach_id = fields.Integer(allow_none=True, load_default=None)
