import logging

from flask import request
from flask_jwt_extended import decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from flask_socketio import join_room
from jwt.exceptions import PyJWTError

from imt_fitness.extensions import socketio

logger = logging.getLogger(__name__)


def user_room(user_id):
    return f"user_{user_id}"


@socketio.on("connect")
def handle_connect(auth=None):
    """Sockets authenticate with the same bearer token as the REST API."""
    token = (auth or {}).get("token") or request.args.get("token")
    if not token:
        return False
    try:
        claims = decode_token(token)
    except (PyJWTError, JWTExtendedException):
        logger.info("Rejected socket connection with an invalid token")
        return False
    join_room(user_room(claims["sub"]))
    return True


def push_message(payload, receiver_id):
    socketio.emit("new_message", payload, to=user_room(receiver_id))
