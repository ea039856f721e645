import logging

from sqlalchemy import and_, or_, desc

from imt_fitness.errors import ValidationError
from imt_fitness.models import Message, User

logger = logging.getLogger(__name__)


def _between(a: User, b: User):
    return or_(
        and_(Message.sender_id == a.id, Message.receiver_id == b.id),
        and_(Message.sender_id == b.id, Message.receiver_id == a.id),
    )


def send_message(session, sender: User, receiver: User, content) -> Message:
    content = (content or "").strip()
    if not content:
        raise ValidationError("Message content is required")

    message = Message(sender_id=sender.id, receiver_id=receiver.id, content=content, is_read=False)
    session.add(message)
    session.commit()
    return message


def conversation(session, user: User, counterpart: User):
    """Both directions of the pair, oldest first."""
    return (
        session.query(Message)
        .filter(_between(user, counterpart))
        .order_by(Message.created_at.asc(), Message.id.asc())
        .all()
    )


def mark_thread_read(session, reader: User, counterpart: User) -> int:
    """Mark everything the counterpart sent to the reader as read.

    Returns the number of messages flipped; a repeated call returns 0.
    """
    marked = (
        session.query(Message)
        .filter(
            Message.sender_id == counterpart.id,
            Message.receiver_id == reader.id,
            Message.is_read.is_(False),
        )
        .update({Message.is_read: True}, synchronize_session="fetch")
    )
    if marked:
        session.commit()
        logger.debug(f"Marked {marked} messages from {counterpart.id} to {reader.id} as read")
    return marked


def open_thread(session, reader: User, counterpart: User):
    marked = mark_thread_read(session, reader, counterpart)
    return conversation(session, reader, counterpart), marked


def unread_count(session, reader: User, counterpart: User) -> int:
    return (
        session.query(Message)
        .filter(
            Message.sender_id == counterpart.id,
            Message.receiver_id == reader.id,
            Message.is_read.is_(False),
        )
        .count()
    )


def last_message(session, a: User, b: User):
    return (
        session.query(Message)
        .filter(_between(a, b))
        .order_by(desc(Message.created_at), desc(Message.id))
        .first()
    )


def chat_list(session, coach: User):
    """One entry per client of the coach with unread count and the latest message."""
    entries = []
    for client in coach.clients:
        entries.append({
            "client": client,
            "unread_count": unread_count(session, coach, client),
            "last_message": last_message(session, coach, client),
        })
    return entries
