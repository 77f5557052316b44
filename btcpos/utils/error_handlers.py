from flask import jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException
from btcpos.extensions import db
from btcpos.exceptions import ServiceError


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        return jsonify({"error": str(error)}), error.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        return (
            jsonify({"error": "Database integrity error", "details": str(error.orig)}),
            400,
        )

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        db.session.rollback()
        app.logger.error(f"Database error: {error}")
        return jsonify({"error": str(error)}), 500

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_exception(error):
        db.session.rollback()
        app.logger.exception(f"Unhandled exception: {error}")
        return jsonify({"error": str(error)}), 500
