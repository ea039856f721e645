from flask import request, jsonify

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import (
    AssignCoachSchema, ClientSchema, CoachSchema, UserCreateSchema, UserSchema, UserUpdateSchema,
)
from imt_fitness.services import users as user_service
from imt_fitness.utils.decorators import role_required

from . import admin_bp

user_schema = UserSchema()
users_schema = UserSchema(many=True)
coach_schema = CoachSchema()
coaches_schema = CoachSchema(many=True)
client_schema = ClientSchema()
clients_schema = ClientSchema(many=True)
create_schema = UserCreateSchema()
update_schema = UserUpdateSchema()
assign_schema = AssignCoachSchema()


# ==================== Users ====================

@admin_bp.route("/users", methods=["GET"])
@role_required(Role.ADMIN)
def list_users(current_user):
    role = request.args.get("role")
    if role and role.upper() in Role.__members__:
        users = user_service.list_users(db.session, role=role.upper())
    else:
        users = user_service.list_users(db.session)
    return jsonify(users_schema.dump(users))


@admin_bp.route("/users/<int:user_id>", methods=["GET"])
@role_required(Role.ADMIN)
def get_user(user_id, current_user):
    user = user_service.get_user_or_404(db.session, user_id)
    return jsonify(user_schema.dump(user))


# ==================== Coaches ====================

@admin_bp.route("/coaches", methods=["GET"])
@role_required(Role.ADMIN)
def list_coaches(current_user):
    coaches = user_service.list_users(db.session, role=Role.COACH)
    return jsonify(coaches_schema.dump(coaches))


@admin_bp.route("/coaches", methods=["POST"])
@role_required(Role.ADMIN)
def create_coach(current_user):
    data = create_schema.load(request.get_json(silent=True) or {})
    coach = user_service.create_user(db.session, role=Role.COACH, **data)
    return jsonify(coach_schema.dump(coach)), 201


@admin_bp.route("/coaches/<int:coach_id>", methods=["PUT"])
@role_required(Role.ADMIN)
def update_coach(coach_id, current_user):
    coach = user_service.get_user_or_404(db.session, coach_id, role=Role.COACH)
    data = update_schema.load(request.get_json(silent=True) or {})
    data.pop("coach_id", None)
    coach = user_service.update_user(db.session, coach, **data)
    return jsonify(coach_schema.dump(coach))


@admin_bp.route("/coaches/<int:coach_id>", methods=["DELETE"])
@role_required(Role.ADMIN)
def delete_coach(coach_id, current_user):
    coach = user_service.get_user_or_404(db.session, coach_id, role=Role.COACH)
    user_service.delete_user(db.session, coach)
    return jsonify({"message": "Coach deleted"})


# ==================== Clients ====================

@admin_bp.route("/clients", methods=["GET"])
@role_required(Role.ADMIN)
def list_clients(current_user):
    clients = user_service.list_users(db.session, role=Role.CLIENT)
    return jsonify(clients_schema.dump(clients))


@admin_bp.route("/clients", methods=["POST"])
@role_required(Role.ADMIN)
def create_client(current_user):
    data = create_schema.load(request.get_json(silent=True) or {})
    client = user_service.create_user(db.session, role=Role.CLIENT, **data)
    return jsonify(client_schema.dump(client)), 201


@admin_bp.route("/clients/<int:client_id>", methods=["PUT"])
@role_required(Role.ADMIN)
def update_client(client_id, current_user):
    client = user_service.get_user_or_404(db.session, client_id, role=Role.CLIENT)
    data = update_schema.load(request.get_json(silent=True) or {})
    client = user_service.update_user(db.session, client, **data)
    return jsonify(client_schema.dump(client))


@admin_bp.route("/clients/<int:client_id>/assign", methods=["PUT"])
@role_required(Role.ADMIN)
def assign_coach(client_id, current_user):
    client = user_service.get_user_or_404(db.session, client_id, role=Role.CLIENT)
    data = assign_schema.load(request.get_json(silent=True) or {})
    client = user_service.assign_coach(db.session, client, data["coach_id"])
    return jsonify(client_schema.dump(client))


@admin_bp.route("/clients/<int:client_id>", methods=["DELETE"])
@role_required(Role.ADMIN)
def delete_client(client_id, current_user):
    client = user_service.get_user_or_404(db.session, client_id, role=Role.CLIENT)
    user_service.delete_user(db.session, client)
    return jsonify({"message": "Client deleted"})
