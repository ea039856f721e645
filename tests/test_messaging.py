from datetime import datetime, timedelta

import pytest

from imt_fitness.errors import ValidationError
from imt_fitness.models import Message
from imt_fitness.services import messaging


def test_conversation_is_oldest_first(session, coach, client_user):
    first = messaging.send_message(session, client_user, coach, "Hi coach")
    second = messaging.send_message(session, coach, client_user, "Hello Siti")
    first.created_at = datetime.now() - timedelta(minutes=5)
    session.commit()

    thread = messaging.conversation(session, coach, client_user)
    assert [m.id for m in thread] == [first.id, second.id]


def test_open_thread_marks_only_incoming_messages(session, coach, client_user):
    messaging.send_message(session, client_user, coach, "one")
    messaging.send_message(session, client_user, coach, "two")
    outgoing = messaging.send_message(session, coach, client_user, "reply")

    messages, marked = messaging.open_thread(session, coach, client_user)
    assert marked == 2
    assert len(messages) == 3
    assert not session.get(Message, outgoing.id).is_read

    _, marked_again = messaging.open_thread(session, coach, client_user)
    assert marked_again == 0
    assert messaging.unread_count(session, coach, client_user) == 0


def test_empty_message_is_rejected(session, coach, client_user):
    with pytest.raises(ValidationError):
        messaging.send_message(session, coach, client_user, "   ")
    assert session.query(Message).count() == 0


def test_chat_list_reports_unread_and_last_message(session, make_user, coach, client_user):
    quiet = make_user(coach=coach, name="Quiet")
    messaging.send_message(session, client_user, coach, "first")
    latest = messaging.send_message(session, client_user, coach, "second")

    entries = {entry["client"].id: entry for entry in messaging.chat_list(session, coach)}
    assert entries[client_user.id]["unread_count"] == 2
    assert entries[client_user.id]["last_message"].id == latest.id
    assert entries[quiet.id]["unread_count"] == 0
    assert entries[quiet.id]["last_message"] is None
