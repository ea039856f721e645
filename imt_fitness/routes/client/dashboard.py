from flask import jsonify

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import ScheduleSchema, UserSchema, UserSummarySchema
from imt_fitness.services import attendance
from imt_fitness.services.history import current_snapshot, imt_fields
from imt_fitness.utils.decorators import role_required

from . import client_bp

user_schema = UserSchema()
coach_schema = UserSummarySchema(only=("id", "name"))
schedules_schema = ScheduleSchema(many=True)


@client_bp.route("/dashboard", methods=["GET"])
@role_required(Role.CLIENT)
def dashboard(current_user):
    data = user_schema.dump(current_user)
    data.update(imt_fields(current_snapshot(db.session, current_user)))
    data.update({
        "coach": coach_schema.dump(current_user.coach) if current_user.coach else None,
        "schedules": schedules_schema.dump(attendance.list_schedules(db.session, current_user)),
        "has_today_workout": attendance.is_training_day_today(db.session, current_user),
        "workout_done": attendance.has_trained_today(db.session, current_user),
    })
    return jsonify(data)
