from flask import request, jsonify, current_app

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import CoachMessageInputSchema, MessageSchema
from imt_fitness.services import messaging
from imt_fitness.services import users as user_service
from imt_fitness.sockets import push_message
from imt_fitness.utils.decorators import role_required

from . import coach_bp

message_schema = MessageSchema()
messages_schema = MessageSchema(many=True)
message_input_schema = CoachMessageInputSchema()


@coach_bp.route("/messages/<int:client_id>", methods=["GET"])
@role_required(Role.COACH)
def get_messages(client_id, current_user):
    """Conversation with one client; opening it marks the client's messages read."""
    client = user_service.coach_client_or_404(db.session, current_user, client_id)
    messages, marked = messaging.open_thread(db.session, current_user, client)
    if marked:
        current_app.logger.debug(f"Coach {current_user.id} read {marked} messages from client {client.id}")
    return jsonify(messages_schema.dump(messages))


@coach_bp.route("/messages", methods=["POST"])
@role_required(Role.COACH)
def send_message(current_user):
    data = message_input_schema.load(request.get_json(silent=True) or {})
    client = user_service.coach_client_or_404(db.session, current_user, data["receiver_id"])
    message = messaging.send_message(db.session, current_user, client, data["content"])

    payload = message_schema.dump(message)
    push_message(payload, client.id)
    return jsonify(payload), 201


@coach_bp.route("/chat-list", methods=["GET"])
@role_required(Role.COACH)
def chat_list(current_user):
    return jsonify([
        {
            "id": entry["client"].id,
            "name": entry["client"].name,
            "email": entry["client"].email,
            "unread_count": entry["unread_count"],
            "last_message": message_schema.dump(entry["last_message"]) if entry["last_message"] else None
        }
        for entry in messaging.chat_list(db.session, current_user)
    ])
