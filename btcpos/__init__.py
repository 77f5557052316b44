from flask import Flask, jsonify
from .extensions import db, migrate, jwt, ma
from .config import Config
from btcpos.utils.error_handlers import register_error_handlers
from btcpos.routes import register_blueprints


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)

    register_blueprints(app)
    register_error_handlers(app)

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"error": "Token has expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return jsonify({"error": "Invalid token"}), 401

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        return jsonify({"error": "No token provided"}), 401

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app
