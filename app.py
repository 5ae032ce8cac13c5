import os

import click
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, NotFound

from src.infrastructure.config import settings
from src.infrastructure.database import init_app as init_db, ensure_indexes, db
from src.infrastructure.repositories import MongoUserRepository
from src.domain.errors import BaseAppException
from src.services.author_service import ensure_author
from tm_utils.logger_utils import logger, set_log_level

# Import Blueprints
from src.api.routes_quiz import quiz_bp
from src.api.routes_answer import answer_bp


def create_app(config_overrides=None):
    """Application factory for Flask."""
    app = Flask(__name__)

    # --- Core Configuration ---
    app.config.from_mapping(settings.model_dump())
    if config_overrides:
        app.config.update(config_overrides)
    set_log_level(app.config['LOG_LEVEL'])

    # Indented, UTF-8, fields in declaration order
    app.json.compact = False
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})

    # --- Initialize Extensions ---
    init_db(app)

    # --- Blueprints Registration ---
    app.register_blueprint(quiz_bp, url_prefix='/api/quiz')
    app.register_blueprint(answer_bp, url_prefix='/api/answer')

    # --- Health Checks ---
    @app.route('/health')
    def health_check():
        return jsonify({"status": "healthy"}), 200

    @app.route('/health/detailed')
    def detailed_health_check():
        health_status = {"status": "healthy", "components": {}}
        try:
            db.command('ping')
            health_status["components"]["mongodb"] = {"status": "healthy"}
        except Exception as e:
            logger.error(f"MongoDB health check failed: {e}", exc_info=True)
            health_status["components"]["mongodb"] = {"status": "unhealthy", "error": str(e)}
            health_status["status"] = "unhealthy"
        return jsonify(health_status), 503 if health_status["status"] == "unhealthy" else 200

    # --- Error Handling ---
    @app.errorhandler(BaseAppException)
    def handle_app_exception(error):
        if error.status_code >= 500:
            logger.error(f"{type(error).__name__} for path {request.path}: {error.message}")
        else:
            logger.warning(f"{type(error).__name__} for path {request.path}: {error.message}")
        return jsonify({"Error": error.message}), error.status_code

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        logger.warning(f"Not Found error for path: {request.path}")
        return jsonify({"Error": "Not Found"}), 404

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({"Error": error.description}), error.code
        logger.error(f"Unhandled exception for path {request.path}: {error}", exc_info=True)
        return jsonify({"Error": "Internal Server Error"}), 500

    # --- CLI ---
    @app.cli.command('init-db')
    def init_db_command():
        """Create indexes and make sure the default author account exists."""
        ensure_indexes(db)
        author = ensure_author(app.config['DEFAULT_AUTHOR_NAME'], MongoUserRepository(db))
        click.echo(f"Database ready; default author '{author.user_name}' has id {author.id}")

    logger.info(f"Flask App created successfully in {app.config['FLASK_ENV']} mode.")
    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.environ.get("PORT", 5000)))
