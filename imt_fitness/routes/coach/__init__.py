from flask import Blueprint

coach_bp = Blueprint('coach', __name__)

from . import dashboard, schedule, videos, communication, recommendations  # noqa: E402,F401
