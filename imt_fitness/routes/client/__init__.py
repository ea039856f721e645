from flask import Blueprint

client_bp = Blueprint("client", __name__)

from . import dashboard, imt, schedule, content, communication  # noqa: E402,F401
