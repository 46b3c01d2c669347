"""
Flask Extensions

The session provider (see rapidblood.session) owns the single process-wide
session store; Flask-Login only mirrors it into `current_user`.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance (durable session slot)
db = SQLAlchemy()

# Exposes the active session as `current_user`
login_manager = LoginManager()
