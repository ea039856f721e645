from sqlalchemy import desc

from imt_fitness.errors import NotFoundError
from imt_fitness.models import FoodRecommendation, Recommendation, User


def add_recommendation(session, coach: User, client: User, title, description=None, exercises=None) -> Recommendation:
    recommendation = Recommendation(
        coach_id=coach.id,
        client_id=client.id,
        title=title,
        description=description,
        exercises=list(exercises or []),
    )
    session.add(recommendation)
    session.commit()
    return recommendation


def list_recommendations(session, client: User, limit=None):
    query = (
        session.query(Recommendation)
        .filter(Recommendation.client_id == client.id)
        .order_by(desc(Recommendation.created_at), desc(Recommendation.id))
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def delete_recommendation(session, coach: User, recommendation_id: int):
    recommendation = session.query(Recommendation).filter_by(id=recommendation_id, coach_id=coach.id).first()
    if recommendation is None:
        raise NotFoundError("Recommendation not found")
    session.delete(recommendation)
    session.commit()


def add_food_recommendation(session, coach: User, client: User, title, description=None, foods=None, meal_type=None) -> FoodRecommendation:
    recommendation = FoodRecommendation(
        coach_id=coach.id,
        client_id=client.id,
        title=title,
        description=description,
        foods=list(foods or []),
        meal_type=meal_type,
    )
    session.add(recommendation)
    session.commit()
    return recommendation


def list_food_recommendations(session, client: User):
    return (
        session.query(FoodRecommendation)
        .filter(FoodRecommendation.client_id == client.id)
        .order_by(desc(FoodRecommendation.created_at), desc(FoodRecommendation.id))
        .all()
    )


def delete_food_recommendation(session, coach: User, recommendation_id: int):
    recommendation = session.query(FoodRecommendation).filter_by(id=recommendation_id, coach_id=coach.id).first()
    if recommendation is None:
        raise NotFoundError("Food recommendation not found")
    session.delete(recommendation)
    session.commit()
