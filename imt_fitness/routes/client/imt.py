from flask import request, jsonify, current_app

from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.schemas import IMTHistorySchema, ImtInputSchema
from imt_fitness.services import history as history_service
from imt_fitness.utils.decorators import role_required

from . import client_bp

imt_input_schema = ImtInputSchema()
record_schema = IMTHistorySchema()
records_schema = IMTHistorySchema(many=True)


@client_bp.route("/imt", methods=["POST"])
@role_required(Role.CLIENT)
def submit_imt(current_user):
    data = imt_input_schema.load(request.get_json(silent=True) or {})
    record = history_service.submit_measurement(db.session, current_user, data["weight"], data["height"])
    return jsonify({
        "imt": round(record.imt, 2),
        "category": record.category,
        "history": record_schema.dump(record)
    }), 201


@client_bp.route("/imt-history", methods=["GET"])
@role_required(Role.CLIENT)
def imt_history(current_user):
    limit = current_app.config["IMT_HISTORY_LIMIT"]
    return jsonify(records_schema.dump(history_service.history(db.session, current_user, limit)))
