"""Training calendar and photo-proof attendance.

A (client, date) pair is either unscheduled, scheduled and pending, or
scheduled and completed. At most one schedule row exists per pair.
"""
import logging
from datetime import date, datetime, time
from typing import Iterable, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from imt_fitness.errors import ConflictError, ValidationError
from imt_fitness.models import Schedule, User, WorkoutProof

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Workout"
DEFAULT_PROOF_NOTES = "Workout completed"


def start_of_day(now: datetime) -> datetime:
    return datetime.combine(now.date(), time.min)


def _schedule_for(session, client: User, day: date) -> Optional[Schedule]:
    return session.query(Schedule).filter_by(client_id=client.id, date=day).first()


def scheduled_days(session, client: User):
    return {
        row.date for row in session.query(Schedule.date).filter(Schedule.client_id == client.id)
    }


def create_schedule(session, client: User, day: date, title: Optional[str] = None) -> Schedule:
    """Schedule a training day. A second row for the same day is a conflict."""
    if _schedule_for(session, client, day) is not None:
        raise ConflictError(f"{day.isoformat()} is already scheduled")

    schedule = Schedule(client_id=client.id, date=day, title=title or DEFAULT_TITLE)
    session.add(schedule)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError(f"{day.isoformat()} is already scheduled")
    return schedule


def schedule_dates(session, client: User, days: Iterable[date], title: Optional[str] = None, completed: bool = False):
    """Bulk variant of create_schedule: existing days are skipped, not raised.

    Returns ``(created, skipped)`` where skipped is the list of dates that
    already had a row.
    """
    existing = scheduled_days(session, client)
    created, skipped = [], []
    for day in sorted(set(days)):
        if day in existing:
            skipped.append(day)
            continue
        schedule = Schedule(client_id=client.id, date=day, title=title or DEFAULT_TITLE, completed=completed)
        try:
            # a concurrent insert of the same day only loses that day
            with session.begin_nested():
                session.add(schedule)
        except IntegrityError:
            skipped.append(day)
            continue
        created.append(schedule)
        existing.add(day)
    session.commit()
    if skipped:
        logger.info(f"Skipped {len(skipped)} already scheduled dates for client {client.id}")
    return created, skipped


def set_completed(session, schedule: Schedule, completed: bool) -> Schedule:
    schedule.completed = bool(completed)
    session.commit()
    return schedule


def delete_schedule(session, schedule: Schedule):
    session.delete(schedule)
    session.commit()


def list_schedules(session, client: User):
    return (
        session.query(Schedule)
        .filter(Schedule.client_id == client.id)
        .order_by(Schedule.date.asc())
        .all()
    )


def list_proofs(session, client: User, limit: Optional[int] = None):
    query = (
        session.query(WorkoutProof)
        .filter(WorkoutProof.client_id == client.id)
        .order_by(desc(WorkoutProof.created_at), desc(WorkoutProof.id))
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def todays_schedule(session, client: User, now: Optional[datetime] = None) -> Optional[Schedule]:
    now = now or datetime.now()
    return _schedule_for(session, client, now.date())


def is_training_day_today(session, client: User, now: Optional[datetime] = None) -> bool:
    return todays_schedule(session, client, now) is not None


def has_trained_today(session, client: User, now: Optional[datetime] = None) -> bool:
    now = now or datetime.now()
    proof = (
        session.query(WorkoutProof.id)
        .filter(
            WorkoutProof.client_id == client.id,
            WorkoutProof.created_at >= start_of_day(now),
        )
        .first()
    )
    if proof is not None:
        return True
    schedule = todays_schedule(session, client, now)
    return bool(schedule and schedule.completed)


def mark_done(session, client: User, photo_ref: Optional[str], notes: Optional[str] = None, now: Optional[datetime] = None) -> WorkoutProof:
    """Record a workout proof and complete today's schedule row if there is one."""
    if not photo_ref:
        raise ValidationError("A workout photo is required")

    now = now or datetime.now()
    proof = WorkoutProof(
        client_id=client.id,
        image_url=photo_ref,
        notes=notes or DEFAULT_PROOF_NOTES,
        created_at=now,
    )
    session.add(proof)

    schedule = todays_schedule(session, client, now)
    if schedule is not None and not schedule.completed:
        schedule.completed = True

    session.commit()
    logger.info(f"Workout proof {proof.id} stored for client {client.id}")
    return proof


def attendance_summary(session, client: User, now: Optional[datetime] = None):
    now = now or datetime.now()
    today = now.date()
    schedules = list_schedules(session, client)

    past = [s for s in schedules if s.date <= today]
    completed = sum(1 for s in past if s.completed)
    upcoming = sum(1 for s in schedules if s.date > today)

    return {
        "scheduled": len(schedules),
        "completed": completed,
        "missed": sum(1 for s in past if s.date < today and not s.completed),
        "upcoming": upcoming,
        "completion_rate": round(completed / len(past) * 100, 1) if past else 0.0,
    }
