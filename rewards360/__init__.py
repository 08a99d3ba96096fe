"""
Rewards360 Analytics
Flask application factory
"""
import os
import logging
from flask import Flask
from flask_cors import CORS

from .extensions import db
from .config import get_config
from .utils.logging_config import setup_logging
from .utils.exceptions import Rewards360Error, ValidationError
from .utils import errors

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """
    Application factory for creating Flask app instances.

    Args:
        config_name: Configuration environment (development, production, testing)

    Returns:
        Configured Flask application
    """
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    config = get_config(config_name)

    # Setup logging before anything else
    setup_logging(config.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(config)

    # Initialize extensions
    db.init_app(app)

    # Admin dashboard runs on a separate origin
    CORS(app, origins=app.config['CORS_ORIGINS'], allow_headers=['Content-Type', 'Authorization'])

    # Register blueprints
    register_blueprints(app)

    # Register CLI commands
    from .commands import init_app as init_commands
    init_commands(app)

    # Register error handlers
    register_error_handlers(app)

    # Health check endpoint
    @app.route('/health')
    def health_check():
        return {'status': 'healthy', 'service': 'rewards360-analytics'}

    logger.debug(f'App created with config {config_name}')
    return app


def register_blueprints(app: Flask) -> None:
    """Register all API blueprints."""
    from .api.analytics import analytics_bp

    app.register_blueprint(analytics_bp, url_prefix='/api/analytics')


def register_error_handlers(app: Flask) -> None:
    """Register error handlers."""

    @app.errorhandler(ValidationError)
    def validation_error(error):
        return errors.bad_request(error.message, error.code)

    @app.errorhandler(Rewards360Error)
    def rewards360_error(error):
        return errors.error_response(error.message, error.code, 500)

    @app.errorhandler(400)
    def bad_request(error):
        return errors.bad_request(str(error))

    @app.errorhandler(404)
    def not_found(error):
        return errors.not_found(str(error))

    @app.errorhandler(500)
    def internal_error(error):
        return errors.internal_error(details={'error': str(error)})
