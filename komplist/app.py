import logging

from flask import Flask, json, jsonify
from flask.logging import default_handler
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from komplist.exceptions import KomplistError


def configure_logging(app):
    """Send every ``komplist.*`` logger through Flask's stderr handler."""
    level = app.config.get("LOG_LEVEL", "INFO")
    package_logger = logging.getLogger("komplist")
    package_logger.setLevel(level)
    package_logger.addHandler(default_handler)

    # app.logger is "komplist.app" and propagates to the package logger
    app.logger.removeHandler(default_handler)
    app.logger.setLevel(level)


def create_app(config_object="komplist.config.Config", task_service=None):
    """Build the Flask application.

    ``task_service`` replaces the database-backed service, which lets the
    route tests run against a mock.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)

    # Core extensions
    CORS(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    from komplist.utils.db import init_app as init_db

    init_db(app)

    if task_service is None:
        from komplist.repositories.task_repository import TaskRepository
        from komplist.services.task_service import TaskService

        task_service = TaskService(TaskRepository())

    # Register blueprints
    from komplist.routes.task_routes import SERVICE_KEY, tasks_bp

    app.extensions[SERVICE_KEY] = task_service
    app.register_blueprint(tasks_bp, url_prefix="/api")

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="Komplist API"), 200

    @app.errorhandler(KomplistError)
    def handle_komplist_error(exc):
        app.logger.warning("%s: %s", type(exc).__name__, exc.message)
        return jsonify(error=exc.message), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        # Keep werkzeug's headers (Allow on 405 etc.), swap the HTML body
        response = exc.get_response()
        response.set_data(json.dumps({"error": exc.name}))
        response.content_type = "application/json"
        return response

    @app.errorhandler(Exception)
    def server_error(exc):
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify(error="Internal Server Error"), 500

    return app
