from flask import request, jsonify

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import VideoInputSchema, VideoSchema
from imt_fitness.services import videos as video_service
from imt_fitness.services.bmi import Category
from imt_fitness.utils.decorators import role_required

from . import coach_bp

video_schema = VideoSchema()
videos_schema = VideoSchema(many=True)
video_input_schema = VideoInputSchema()


@coach_bp.route("/videos", methods=["GET"])
@role_required(Role.COACH)
def list_videos(current_user):
    return jsonify(videos_schema.dump(video_service.list_coach_videos(db.session, current_user)))


@coach_bp.route("/videos", methods=["POST"])
@role_required(Role.COACH)
def add_video(current_user):
    data = video_input_schema.load(request.get_json(silent=True) or {})
    video = video_service.create_video(
        db.session,
        current_user,
        title=data["title"],
        youtube_url=data["youtube_url"],
        category=data.get("category", Category.NORMAL.value),
        description=data.get("description"),
    )
    return jsonify(video_schema.dump(video)), 201


@coach_bp.route("/videos/<int:video_id>", methods=["PUT"])
@role_required(Role.COACH)
def edit_video(video_id, current_user):
    data = video_input_schema.load(request.get_json(silent=True) or {}, partial=True)
    video = video_service.update_video(db.session, current_user, video_id, **data)
    return jsonify(video_schema.dump(video))


@coach_bp.route("/videos/<int:video_id>", methods=["DELETE"])
@role_required(Role.COACH)
def delete_video(video_id, current_user):
    video_service.delete_video(db.session, current_user, video_id)
    return jsonify({"message": "Video deleted"})
