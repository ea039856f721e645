from datetime import datetime, timedelta

import pytest

from imt_fitness.models import IMTHistory
from imt_fitness.services import history
from imt_fitness.services.bmi import Category


def test_current_snapshot_is_latest_record(session, client_user):
    base = datetime(2026, 3, 1, 8, 0)
    history.record_snapshot(session, client_user, 70, 170, timestamp=base)
    history.record_snapshot(session, client_user, 68, 170, timestamp=base + timedelta(days=7))

    snapshot = history.current_snapshot(session, client_user)
    assert snapshot.persisted
    assert snapshot.weight == 68


def test_fallback_uses_cached_measurements_without_persisting(session, client_user):
    client_user.weight = 58
    client_user.height = 160
    session.commit()

    snapshot = history.current_snapshot(session, client_user)
    assert snapshot.imt == pytest.approx(22.66, abs=0.01)
    assert snapshot.category is Category.NORMAL
    assert not snapshot.persisted
    assert session.query(IMTHistory).count() == 0


def test_no_snapshot_without_measurements(session, client_user):
    assert history.current_snapshot(session, client_user) is None
    assert history.imt_fields(None) == {"imt": None, "category": None}


def test_same_day_submissions_are_separate_rows(session, client_user):
    morning = datetime(2026, 3, 2, 7, 0)
    history.record_snapshot(session, client_user, 70, 170, timestamp=morning)
    history.record_snapshot(session, client_user, 70.5, 170, timestamp=morning + timedelta(hours=10))

    rows = history.history(session, client_user)
    assert len(rows) == 2
    assert rows[0].weight == 70.5


def test_history_is_newest_first_and_limited(session, client_user):
    base = datetime(2026, 1, 1)
    for i in range(5):
        history.record_snapshot(session, client_user, 60 + i, 165, timestamp=base + timedelta(days=i))

    rows = history.history(session, client_user, limit=3)
    assert [r.weight for r in rows] == [64, 63, 62]


def test_submit_measurement_updates_cached_values(session, client_user):
    record = history.submit_measurement(session, client_user, 90, 172)

    assert client_user.weight == 90
    assert client_user.height == 172
    assert record.category == Category.OBESE.value
    assert history.imt_fields(history.current_snapshot(session, client_user)) == {
        "imt": 30.42, "category": "obese",
    }
