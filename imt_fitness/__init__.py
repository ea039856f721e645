import os

from flask import Flask, jsonify
from flask_cors import CORS

from imt_fitness.config import config
from imt_fitness.errors import register_error_handlers
from imt_fitness.extensions import db, ma, jwt, migrate, socketio, limiter
from imt_fitness.models import User
from imt_fitness.utils.logger import configure_logging


def create_app(config_name=None):
    app = Flask(__name__)

    config_name = config_name or os.getenv('FLASK_CONFIG', 'default')
    app.config.from_object(config[config_name])

    configure_logging(app)

    # extensions
    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    CORS(app, resources={r"/api/*": {
        "origins": app.config['CORS_ORIGINS'],
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    }})
    from imt_fitness import sockets  # noqa: F401  registers socket handlers
    socketio.init_app(app, async_mode=app.config['SOCKETIO_ASYNC_MODE'])

    register_jwt_callbacks()
    register_error_handlers(app)

    from imt_fitness.routes.home import home_bp
    from imt_fitness.routes.auth import auth_bp
    from imt_fitness.routes.admin import admin_bp
    from imt_fitness.routes.coach import coach_bp
    from imt_fitness.routes.client import client_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(admin_bp, url_prefix="/api")
    app.register_blueprint(coach_bp, url_prefix="/api/coach")
    app.register_blueprint(client_bp, url_prefix="/api/client")

    app.logger.info(f"IMT Fitness API created with '{config_name}' config")
    return app


def register_jwt_callbacks():
    @jwt.user_lookup_loader
    def user_lookup_callback(_jwt_header, jwt_data):
        identity = jwt_data["sub"]
        return db.session.get(User, int(identity))

    @jwt.user_lookup_error_loader
    def user_lookup_error_callback(_jwt_header, jwt_data):
        return jsonify({"message": "User not found"}), 401

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return jsonify({"message": "Invalid token"}), 401

    @jwt.unauthorized_loader
    def unauthorized_callback(error):
        return jsonify({"message": "Token not found"}), 401
