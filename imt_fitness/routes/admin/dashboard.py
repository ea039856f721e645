# imt_fitness/routes/admin/dashboard.py
from flask import jsonify

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import VideoWithCoachSchema
from imt_fitness.services import users as user_service
from imt_fitness.services import videos as video_service
from imt_fitness.utils.decorators import role_required

from . import admin_bp

videos_schema = VideoWithCoachSchema(many=True)


@admin_bp.route("/stats", methods=["GET"])
@role_required(Role.ADMIN)
def stats(current_user):
    return jsonify(user_service.platform_stats(db.session))


@admin_bp.route("/admin/videos", methods=["GET"])
@role_required(Role.ADMIN)
def all_videos(current_user):
    return jsonify(videos_schema.dump(video_service.all_videos(db.session)))
