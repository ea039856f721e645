from flask import Blueprint, current_app, jsonify, send_from_directory

home_bp = Blueprint("home", __name__)


@home_bp.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "OK", "message": "IMT Fitness API is running"})


@home_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
