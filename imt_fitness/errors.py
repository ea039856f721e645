from flask import jsonify, current_app
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from imt_fitness.extensions import db


class ApiError(Exception):
    status_code = 400

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self):
        return jsonify({"message": self.message}), self.status_code


class ValidationError(ApiError):
    status_code = 400


class AuthError(ApiError):
    status_code = 401


class ForbiddenError(ApiError):
    status_code = 403


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


def register_error_handlers(app):
    """Every error leaves the API as {"message": ...} with a matching status."""

    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        if exc.status_code >= 500:
            current_app.logger.error(f"API error: {exc.message}")
        else:
            current_app.logger.info(f"{exc.__class__.__name__}: {exc.message}")
        return exc.to_response()

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(exc):
        current_app.logger.info(f"Invalid input: {exc.messages}")
        return jsonify({"message": "Invalid input", "errors": exc.messages}), 400

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(exc):
        # bodies over MAX_CONTENT_LENGTH never reach the photo size check
        max_size = current_app.config["MAX_PHOTO_SIZE"]
        return jsonify({"message": f"Maximum file size is {max_size // (1024 * 1024)}MB"}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({"message": exc.description}), exc.code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(exc):
        db.session.rollback()
        current_app.logger.warning(f"Integrity error: {exc.orig}")
        return jsonify({"message": "Conflicting record"}), 409

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        db.session.rollback()
        current_app.logger.exception(f"Unhandled error: {exc!r}")
        return jsonify({"message": "An unexpected error occurred"}), 500
