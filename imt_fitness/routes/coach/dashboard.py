from flask import jsonify

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import (
    IMTHistorySchema, RecommendationSchema, ScheduleSchema, UserSchema, WorkoutProofSchema,
)
from imt_fitness.services import attendance
from imt_fitness.services import users as user_service
from imt_fitness.services.history import current_snapshot, history, imt_fields
from imt_fitness.services.recommendations import list_recommendations
from imt_fitness.utils.decorators import role_required

from . import coach_bp

user_schema = UserSchema()
history_schema = IMTHistorySchema(many=True)
proofs_schema = WorkoutProofSchema(many=True)
recommendations_schema = RecommendationSchema(many=True)
schedules_schema = ScheduleSchema(many=True)

DETAIL_HISTORY_LIMIT = 10
DETAIL_PROOF_LIMIT = 10
DETAIL_RECOMMENDATION_LIMIT = 5


def client_overview(client):
    data = user_schema.dump(client)
    data.update(imt_fields(current_snapshot(db.session, client)))
    return data


@coach_bp.route("/dashboard", methods=["GET"])
@role_required(Role.COACH)
def dashboard(current_user):
    clients = [client_overview(client) for client in current_user.clients]
    return jsonify({
        "total_clients": len(clients),
        "clients": clients
    })


@coach_bp.route("/clients", methods=["GET"])
@role_required(Role.COACH)
def list_clients(current_user):
    result = []
    for client in current_user.clients:
        data = client_overview(client)
        data["schedules"] = schedules_schema.dump(attendance.list_schedules(db.session, client))
        result.append(data)
    return jsonify(result)


@coach_bp.route("/clients/<int:client_id>", methods=["GET"])
@role_required(Role.COACH)
def client_detail(client_id, current_user):
    client = user_service.coach_client_or_404(db.session, current_user, client_id)

    data = client_overview(client)
    data.update({
        "imt_history": history_schema.dump(history(db.session, client, DETAIL_HISTORY_LIMIT)),
        "workout_proofs": proofs_schema.dump(attendance.list_proofs(db.session, client, DETAIL_PROOF_LIMIT)),
        "recommendations": recommendations_schema.dump(
            list_recommendations(db.session, client, DETAIL_RECOMMENDATION_LIMIT)
        ),
        "schedules": schedules_schema.dump(attendance.list_schedules(db.session, client)),
        "attendance": attendance.attendance_summary(db.session, client),
        "trained_today": attendance.has_trained_today(db.session, client),
    })
    return jsonify(data)
