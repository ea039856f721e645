from flask import request, jsonify

from imt_fitness.extensions import db
from imt_fitness.errors import ValidationError
from imt_fitness.models import Role
from imt_fitness.schemas import ScheduleSchema, WorkoutDoneSchema, WorkoutProofSchema
from imt_fitness.services import attendance
from imt_fitness.storage import store_photo
from imt_fitness.utils.decorators import role_required

from . import client_bp

schedules_schema = ScheduleSchema(many=True)
proof_schema = WorkoutProofSchema()
proofs_schema = WorkoutProofSchema(many=True)
workout_done_schema = WorkoutDoneSchema()


@client_bp.route("/schedule", methods=["GET"])
@role_required(Role.CLIENT)
def get_schedule(current_user):
    return jsonify({
        "schedules": schedules_schema.dump(attendance.list_schedules(db.session, current_user)),
        "proofs": proofs_schema.dump(attendance.list_proofs(db.session, current_user)),
        "attendance": attendance.attendance_summary(db.session, current_user),
    })


@client_bp.route("/workout-done", methods=["POST"])
@client_bp.route("/progress", methods=["POST"])
@role_required(Role.CLIENT)
def workout_done(current_user):
    """Multipart upload: ``photo`` (required) and optional ``notes``."""
    photo = request.files.get("photo")
    if photo is None or not photo.filename:
        raise ValidationError("A workout photo is required")

    data = workout_done_schema.load(request.form.to_dict())
    image_url = store_photo(photo)
    proof = attendance.mark_done(db.session, current_user, image_url, notes=data.get("notes"))
    return jsonify(proof_schema.dump(proof)), 201


@client_bp.route("/progress", methods=["GET"])
@role_required(Role.CLIENT)
def get_progress(current_user):
    return jsonify(proofs_schema.dump(attendance.list_proofs(db.session, current_user)))
