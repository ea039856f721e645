from sqlalchemy import desc, or_

from imt_fitness.errors import NotFoundError
from imt_fitness.models import User, Video
from imt_fitness.services.bmi import Category
from imt_fitness.services.history import current_snapshot

VIDEO_FIELDS = ("title", "description", "youtube_url", "category")
CLEARABLE_VIDEO_FIELDS = ("description",)


def list_coach_videos(session, coach: User):
    return (
        session.query(Video)
        .filter(Video.coach_id == coach.id)
        .order_by(desc(Video.created_at), desc(Video.id))
        .all()
    )


def get_coach_video(session, coach: User, video_id: int) -> Video:
    video = session.query(Video).filter_by(id=video_id, coach_id=coach.id).first()
    if video is None:
        raise NotFoundError("Video not found")
    return video


def create_video(session, coach: User, title, youtube_url, category=Category.NORMAL.value, description=None) -> Video:
    video = Video(
        coach_id=coach.id,
        title=title,
        description=description,
        youtube_url=youtube_url,
        category=category,
    )
    session.add(video)
    session.commit()
    return video


def update_video(session, coach: User, video_id: int, **changes) -> Video:
    video = get_coach_video(session, coach, video_id)
    for field in VIDEO_FIELDS:
        if field not in changes:
            continue
        if changes[field] is None and field not in CLEARABLE_VIDEO_FIELDS:
            continue
        setattr(video, field, changes[field])
    session.commit()
    return video


def delete_video(session, coach: User, video_id: int):
    video = get_coach_video(session, coach, video_id)
    session.delete(video)
    session.commit()


def videos_for_client(session, client: User):
    """Videos from the client's coach plus any video tagged with the client's category."""
    snapshot = current_snapshot(session, client)
    category = snapshot.category.value if snapshot else Category.NORMAL.value

    condition = Video.category == category
    if client.coach_id:
        condition = or_(Video.coach_id == client.coach_id, condition)

    return (
        session.query(Video)
        .filter(condition)
        .order_by(desc(Video.created_at), desc(Video.id))
        .all()
    )


def all_videos(session):
    return session.query(Video).order_by(desc(Video.created_at), desc(Video.id)).all()
