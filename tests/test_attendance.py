from datetime import date, datetime, timedelta

import pytest

from imt_fitness.errors import ConflictError, ValidationError
from imt_fitness.models import Schedule, WorkoutProof
from imt_fitness.services import attendance

NOW = datetime(2026, 4, 15, 10, 30)
TODAY = NOW.date()


def test_has_trained_today_flips_after_mark_done(session, client_user):
    assert not attendance.has_trained_today(session, client_user, now=NOW)

    attendance.mark_done(session, client_user, "/uploads/a.png", now=NOW)
    assert attendance.has_trained_today(session, client_user, now=NOW)

    attendance.mark_done(session, client_user, "/uploads/b.png", now=NOW + timedelta(hours=2))
    assert attendance.has_trained_today(session, client_user, now=NOW)
    assert session.query(WorkoutProof).count() == 2


def test_mark_done_requires_photo(session, client_user):
    with pytest.raises(ValidationError):
        attendance.mark_done(session, client_user, None, now=NOW)
    assert session.query(WorkoutProof).count() == 0
    assert not attendance.has_trained_today(session, client_user, now=NOW)


def test_mark_done_completes_todays_schedule(session, client_user):
    schedule = attendance.create_schedule(session, client_user, TODAY)
    assert not schedule.completed

    proof = attendance.mark_done(session, client_user, "/uploads/a.png", now=NOW)
    assert proof.notes == attendance.DEFAULT_PROOF_NOTES
    assert session.get(Schedule, schedule.id).completed


def test_mark_done_without_schedule_still_counts(session, client_user):
    attendance.mark_done(session, client_user, "/uploads/a.png", now=NOW)
    assert not attendance.is_training_day_today(session, client_user, now=NOW)
    assert attendance.has_trained_today(session, client_user, now=NOW)


def test_training_day_ignores_time_of_day(session, client_user):
    attendance.create_schedule(session, client_user, TODAY)
    assert attendance.is_training_day_today(session, client_user, now=datetime.combine(TODAY, datetime.min.time()))
    assert attendance.is_training_day_today(session, client_user, now=NOW.replace(hour=23, minute=59))
    assert not attendance.is_training_day_today(session, client_user, now=NOW + timedelta(days=1))


def test_completed_schedule_counts_without_proof(session, client_user):
    schedule = attendance.create_schedule(session, client_user, TODAY)
    attendance.set_completed(session, schedule, True)
    assert attendance.has_trained_today(session, client_user, now=NOW)


def test_yesterdays_proof_does_not_count(session, client_user):
    attendance.mark_done(session, client_user, "/uploads/a.png", now=NOW - timedelta(days=1))
    assert not attendance.has_trained_today(session, client_user, now=NOW)


def test_duplicate_schedule_is_a_conflict(session, client_user):
    attendance.create_schedule(session, client_user, TODAY, title="Legs")
    with pytest.raises(ConflictError):
        attendance.create_schedule(session, client_user, TODAY, title="Arms")
    assert session.query(Schedule).filter_by(client_id=client_user.id).count() == 1


def test_bulk_scheduling_skips_existing_days(session, client_user):
    attendance.create_schedule(session, client_user, TODAY)
    days = [TODAY, TODAY + timedelta(days=2), TODAY + timedelta(days=2), TODAY + timedelta(days=4)]

    created, skipped = attendance.schedule_dates(session, client_user, days)
    assert [s.date for s in created] == [TODAY + timedelta(days=2), TODAY + timedelta(days=4)]
    assert skipped == [TODAY]
    assert [s.date for s in attendance.list_schedules(session, client_user)] == [
        TODAY, TODAY + timedelta(days=2), TODAY + timedelta(days=4),
    ]


def test_attendance_summary(session, client_user):
    attendance.schedule_dates(session, client_user, [date(2026, 4, 13), date(2026, 4, 14)])
    done = attendance.create_schedule(session, client_user, TODAY)
    attendance.set_completed(session, done, True)
    attendance.create_schedule(session, client_user, TODAY + timedelta(days=1))

    summary = attendance.attendance_summary(session, client_user, now=NOW)
    assert summary == {
        "scheduled": 4,
        "completed": 1,
        "missed": 2,
        "upcoming": 1,
        "completion_rate": 33.3,
    }


def test_bulk_scheduling_skips_day_inserted_after_lookup(session, client_user, monkeypatch):
    attendance.create_schedule(session, client_user, TODAY, title="Legs")
    # the pre-read misses the row, as it would if another request inserted it meanwhile
    monkeypatch.setattr(attendance, "scheduled_days", lambda session, client: set())

    created, skipped = attendance.schedule_dates(session, client_user, [TODAY, TODAY + timedelta(days=1)])
    assert [s.date for s in created] == [TODAY + timedelta(days=1)]
    assert skipped == [TODAY]

    rows = attendance.list_schedules(session, client_user)
    assert [(s.date, s.title) for s in rows] == [(TODAY, "Legs"), (TODAY + timedelta(days=1), "Workout")]
