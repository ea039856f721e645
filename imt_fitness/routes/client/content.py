from flask import jsonify

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import FoodRecommendationSchema, RecommendationSchema, VideoSchema
from imt_fitness.services import recommendations as recommendation_service
from imt_fitness.services import videos as video_service
from imt_fitness.utils.decorators import role_required

from . import client_bp

recommendations_schema = RecommendationSchema(many=True)
foods_schema = FoodRecommendationSchema(many=True)
videos_schema = VideoSchema(many=True)


@client_bp.route("/recommendations", methods=["GET"])
@role_required(Role.CLIENT)
def get_recommendations(current_user):
    return jsonify(recommendations_schema.dump(
        recommendation_service.list_recommendations(db.session, current_user)
    ))


@client_bp.route("/food-recommendations", methods=["GET"])
@role_required(Role.CLIENT)
def get_food_recommendations(current_user):
    return jsonify(foods_schema.dump(
        recommendation_service.list_food_recommendations(db.session, current_user)
    ))


@client_bp.route("/videos", methods=["GET"])
@role_required(Role.CLIENT)
def get_videos(current_user):
    return jsonify(videos_schema.dump(video_service.videos_for_client(db.session, current_user)))
