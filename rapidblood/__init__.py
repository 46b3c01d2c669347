"""
RapidBlood - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from rapidblood.extensions import db, login_manager
from rapidblood.config import Config


def configure_logging(app):
    """Route package and Flask logs through one stream handler."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logger = logging.getLogger('rapidblood')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s [%(name)s] %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(level)
    app.logger.setLevel(level)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from rapidblood.auth import auth_bp
    from rapidblood.dashboard import dashboard_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)

    # Create database tables before the session slot is read
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        from rapidblood.models import StorageSlot  # noqa: F401
        db.create_all()

    # Session store (reads the durable slot once; needs login_manager installed)
    from rapidblood.session import session_provider
    session_provider.init_app(app)

    # Demo catalog and dashboard state
    from rapidblood.services import build_catalog
    from rapidblood.dashboard.services import DashboardState, CATALOG_KEY, STATE_KEY
    app.extensions[CATALOG_KEY] = build_catalog(app.config.get('MOCK_DATA_SEED'))
    app.extensions[STATE_KEY] = DashboardState()

    app.logger.info('RapidBlood ready (slot backend: %s)', app.config['SESSION_SLOT_BACKEND'])
    return app
