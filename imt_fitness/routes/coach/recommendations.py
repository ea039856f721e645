from flask import request, jsonify

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import (
    FoodRecommendationInputSchema, FoodRecommendationSchema, RecommendationInputSchema, RecommendationSchema,
)
from imt_fitness.services import recommendations as recommendation_service
from imt_fitness.services import users as user_service
from imt_fitness.utils.decorators import role_required

from . import coach_bp

recommendation_schema = RecommendationSchema()
recommendation_input_schema = RecommendationInputSchema()
food_schema = FoodRecommendationSchema()
foods_schema = FoodRecommendationSchema(many=True)
food_input_schema = FoodRecommendationInputSchema()


@coach_bp.route("/clients/<int:client_id>/recommend", methods=["POST"])
@role_required(Role.COACH)
def add_recommendation(client_id, current_user):
    client = user_service.coach_client_or_404(db.session, current_user, client_id)
    data = recommendation_input_schema.load(request.get_json(silent=True) or {})
    recommendation = recommendation_service.add_recommendation(
        db.session, current_user, client,
        title=data["title"], description=data.get("description"), exercises=data["exercises"],
    )
    return jsonify(recommendation_schema.dump(recommendation)), 201


@coach_bp.route("/recommendations/<int:recommendation_id>", methods=["DELETE"])
@role_required(Role.COACH)
def delete_recommendation(recommendation_id, current_user):
    recommendation_service.delete_recommendation(db.session, current_user, recommendation_id)
    return jsonify({"message": "Recommendation deleted"})


@coach_bp.route("/food-recommendations/<int:client_id>", methods=["GET"])
@role_required(Role.COACH)
def list_food_recommendations(client_id, current_user):
    client = user_service.coach_client_or_404(db.session, current_user, client_id)
    return jsonify(foods_schema.dump(recommendation_service.list_food_recommendations(db.session, client)))


@coach_bp.route("/food-recommendations", methods=["POST"])
@role_required(Role.COACH)
def add_food_recommendation(current_user):
    data = food_input_schema.load(request.get_json(silent=True) or {})
    client = user_service.coach_client_or_404(db.session, current_user, data["client_id"])
    recommendation = recommendation_service.add_food_recommendation(
        db.session, current_user, client,
        title=data["title"],
        description=data.get("description"),
        foods=data["foods"],
        meal_type=data.get("meal_type"),
    )
    return jsonify(food_schema.dump(recommendation)), 201


@coach_bp.route("/food-recommendations/<int:recommendation_id>", methods=["DELETE"])
@role_required(Role.COACH)
def delete_food_recommendation(recommendation_id, current_user):
    recommendation_service.delete_food_recommendation(db.session, current_user, recommendation_id)
    return jsonify({"message": "Food recommendation deleted"})
