from flask import request, jsonify

from imt_fitness.extensions import db
from imt_fitness.errors import ValidationError
from imt_fitness.models import Role
from imt_fitness.schemas import MessageInputSchema, MessageSchema
from imt_fitness.services import messaging
from imt_fitness.sockets import push_message
from imt_fitness.utils.decorators import role_required

from . import client_bp

message_schema = MessageSchema()
messages_schema = MessageSchema(many=True)
message_input_schema = MessageInputSchema()


@client_bp.route("/messages", methods=["GET"])
@role_required(Role.CLIENT)
def get_messages(current_user):
    coach = current_user.coach
    if coach is None:
        return jsonify([])
    messages, _ = messaging.open_thread(db.session, current_user, coach)
    return jsonify(messages_schema.dump(messages))


@client_bp.route("/messages", methods=["POST"])
@role_required(Role.CLIENT)
def send_message(current_user):
    coach = current_user.coach
    if coach is None:
        raise ValidationError("You do not have a coach yet")

    data = message_input_schema.load(request.get_json(silent=True) or {})
    message = messaging.send_message(db.session, current_user, coach, data["content"])

    payload = message_schema.dump(message)
    push_message(payload, coach.id)
    return jsonify(payload), 201
