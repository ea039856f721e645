import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import desc

from imt_fitness.models import IMTHistory, User
from imt_fitness.services.bmi import Category, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BmiSnapshot:
    weight: float
    height: float
    imt: float
    category: Category
    recorded_at: Optional[datetime]
    persisted: bool
    id: Optional[int] = None

    @classmethod
    def from_record(cls, record: IMTHistory) -> "BmiSnapshot":
        return cls(
            weight=record.weight,
            height=record.height,
            imt=record.imt,
            category=Category(record.category),
            recorded_at=record.created_at,
            persisted=True,
            id=record.id,
        )

    @classmethod
    def from_measurements(cls, weight: float, height: float) -> "BmiSnapshot":
        imt, category = evaluate(weight, height)
        return cls(
            weight=weight,
            height=height,
            imt=imt,
            category=category,
            recorded_at=None,
            persisted=False,
        )


def record_snapshot(session, client: User, weight: float, height: float, timestamp: Optional[datetime] = None) -> IMTHistory:
    """Append a measurement to the client's ledger.

    Same-day submissions are kept as separate rows.
    """
    imt, category = evaluate(weight, height)
    record = IMTHistory(
        client_id=client.id,
        weight=weight,
        height=height,
        imt=imt,
        category=category.value,
        created_at=timestamp or datetime.now(),
    )
    session.add(record)
    session.commit()
    logger.info(f"IMT snapshot {record.id} for client {client.id}: {imt:.2f} ({category.value})")
    return record


def submit_measurement(session, client: User, weight: float, height: float, now: Optional[datetime] = None) -> IMTHistory:
    """Update the cached weight/height on the user, then append to the ledger.

    The two writes are committed separately; a failure between them leaves
    the cached values ahead of the ledger.
    """
    client.weight = weight
    client.height = height
    session.commit()
    return record_snapshot(session, client, weight, height, timestamp=now)


def latest_record(session, client: User) -> Optional[IMTHistory]:
    return (
        session.query(IMTHistory)
        .filter(IMTHistory.client_id == client.id)
        .order_by(desc(IMTHistory.created_at), desc(IMTHistory.id))
        .first()
    )


def current_snapshot(session, client: User) -> Optional[BmiSnapshot]:
    """Latest ledger entry, or one computed on the fly from the cached measurements.

    The fallback is never persisted. Returns None when the client has neither.
    """
    record = latest_record(session, client)
    if record is not None:
        return BmiSnapshot.from_record(record)
    if client.weight and client.height:
        return BmiSnapshot.from_measurements(client.weight, client.height)
    return None


def history(session, client: User, limit: int = 30):
    return (
        session.query(IMTHistory)
        .filter(IMTHistory.client_id == client.id)
        .order_by(desc(IMTHistory.created_at), desc(IMTHistory.id))
        .limit(limit)
        .all()
    )


def imt_fields(snapshot: Optional[BmiSnapshot], precision=2):
    """Flat ``imt``/``category`` pair for dashboards; both None without a snapshot."""
    if snapshot is None:
        return {"imt": None, "category": None}
    return {"imt": round(snapshot.imt, precision), "category": snapshot.category.value}
