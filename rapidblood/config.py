"""
Configuration settings for RapidBlood
"""
import os

from rapidblood.constants import LOCATIONS


def _env_int(name):
    value = os.environ.get(name)
    return int(value) if value not in (None, '') else None


class Config:
    """Flask application configuration"""

    # Flask secret key for flash messages and cookies
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-rb'

    # Database configuration (holds the durable session slot)
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'rapidblood.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session slot: 'database' persists across restarts, 'memory' does not
    SESSION_SLOT_BACKEND = os.environ.get('SESSION_SLOT_BACKEND') or 'database'
    SESSION_SLOT_KEY = os.environ.get('SESSION_SLOT_KEY') or 'rb_user'

    # Session defaults
    DEFAULT_LOCATION = LOCATIONS[0]
    DEFAULT_BLOOD_GROUP = 'O+'
    DEMO_EMAIL = 'demo@rapidblood.com'

    # None draws a fresh catalog on every start
    MOCK_DATA_SEED = _env_int('MOCK_DATA_SEED')

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    MOCK_DATA_SEED = 1234
    LOG_LEVEL = 'DEBUG'
