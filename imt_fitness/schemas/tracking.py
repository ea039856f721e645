from marshmallow import fields, validate

from imt_fitness.extensions import ma
from imt_fitness.models import IMTHistory, Schedule, WorkoutProof
from imt_fitness.schemas.base import InputSchema


class IMTHistorySchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = IMTHistory
        include_fk = True


class ScheduleSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Schedule
        include_fk = True


class WorkoutProofSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = WorkoutProof
        include_fk = True


class ImtInputSchema(InputSchema):
    weight = fields.Float(required=True, validate=validate.Range(min=0, max=500, min_inclusive=False))
    height = fields.Float(required=True, validate=validate.Range(min=0, max=300, min_inclusive=False))


class ScheduleCreateSchema(InputSchema):
    date = fields.Date(required=True)
    title = fields.String(allow_none=True, load_default=None, validate=validate.Length(max=150))


class ScheduleBulkSchema(InputSchema):
    dates = fields.List(fields.Date(), required=True, validate=validate.Length(min=1))
    title = fields.String(allow_none=True, load_default=None, validate=validate.Length(max=150))
    completed = fields.Boolean(load_default=False)


class ScheduleCompleteSchema(InputSchema):
    completed = fields.Boolean(required=True)


class WorkoutDoneSchema(InputSchema):
    notes = fields.String(allow_none=True, load_default=None)
