from flask import request, jsonify

from imt_fitness.extensions import db
from imt_fitness.errors import NotFoundError
from imt_fitness.models import Role, Schedule, User
from imt_fitness.schemas import (
    ScheduleBulkSchema, ScheduleCompleteSchema, ScheduleCreateSchema, ScheduleSchema,
)
from imt_fitness.services import attendance
from imt_fitness.services import users as user_service
from imt_fitness.utils.decorators import role_required

from . import coach_bp

schedule_schema = ScheduleSchema()
schedules_schema = ScheduleSchema(many=True)
create_schema = ScheduleCreateSchema()
bulk_schema = ScheduleBulkSchema()
complete_schema = ScheduleCompleteSchema()


def coach_schedule_or_404(coach, schedule_id):
    schedule = (
        db.session.query(Schedule)
        .join(User, User.id == Schedule.client_id)
        .filter(Schedule.id == schedule_id, User.coach_id == coach.id)
        .first()
    )
    if schedule is None:
        raise NotFoundError("Schedule not found")
    return schedule


@coach_bp.route("/schedule", methods=["GET"])
@role_required(Role.COACH)
def list_schedule(current_user):
    return jsonify([
        {
            "id": client.id,
            "name": client.name,
            "schedules": schedules_schema.dump(attendance.list_schedules(db.session, client))
        }
        for client in current_user.clients
    ])


@coach_bp.route("/schedule/<int:client_id>", methods=["POST"])
@role_required(Role.COACH)
def add_schedule(client_id, current_user):
    client = user_service.coach_client_or_404(db.session, current_user, client_id)
    data = create_schema.load(request.get_json(silent=True) or {})
    schedule = attendance.create_schedule(db.session, client, data["date"], data.get("title"))
    return jsonify(schedule_schema.dump(schedule)), 201


@coach_bp.route("/schedule/<int:client_id>/bulk", methods=["POST"])
@role_required(Role.COACH)
def add_schedule_bulk(client_id, current_user):
    client = user_service.coach_client_or_404(db.session, current_user, client_id)
    data = bulk_schema.load(request.get_json(silent=True) or {})
    created, skipped = attendance.schedule_dates(
        db.session, client, data["dates"], title=data.get("title"), completed=data["completed"]
    )
    return jsonify({
        "created": schedules_schema.dump(created),
        "skipped": [day.isoformat() for day in skipped]
    }), 201


@coach_bp.route("/schedule/<int:schedule_id>", methods=["DELETE"])
@role_required(Role.COACH)
def delete_schedule(schedule_id, current_user):
    schedule = coach_schedule_or_404(current_user, schedule_id)
    attendance.delete_schedule(db.session, schedule)
    return jsonify({"message": "Schedule deleted"})


@coach_bp.route("/schedule/<int:schedule_id>/complete", methods=["PUT"])
@role_required(Role.COACH)
def toggle_complete(schedule_id, current_user):
    schedule = coach_schedule_or_404(current_user, schedule_id)
    data = complete_schema.load(request.get_json(silent=True) or {})
    schedule = attendance.set_completed(db.session, schedule, data["completed"])
    return jsonify(schedule_schema.dump(schedule))
