from flask import Blueprint, request, jsonify, current_app

from imt_fitness.extensions import db, limiter
from imt_fitness.schemas import LoginSchema, RegisterSchema, UserSummarySchema
from imt_fitness.services import users as user_service
from imt_fitness.utils.decorators import role_required

auth_bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
register_schema = RegisterSchema()
user_summary_schema = UserSummarySchema()


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(lambda: current_app.config["LOGIN_RATE_LIMIT"])
def login():
    data = login_schema.load(request.get_json(silent=True) or {})
    user = user_service.authenticate(db.session, data["phone"], data["password"])
    token = user_service.issue_token(user)
    return jsonify({
        "token": token,
        "user": user_summary_schema.dump(user)
    }), 200


@auth_bp.route("/register", methods=["POST"])
def register():
    data = register_schema.load(request.get_json(silent=True) or {})
    user = user_service.register(
        db.session,
        name=data["name"].strip(),
        phone=data["phone"].strip(),
        password=data["password"],
        coach_id=data.get("coach_id"),
        email=data.get("email"),
    )
    return jsonify({
        "message": "Registered successfully",
        "user": user_summary_schema.dump(user)
    }), 201


@auth_bp.route("/me", methods=["GET"])
@role_required()
def me(current_user):
    return jsonify(user_summary_schema.dump(current_user)), 200
