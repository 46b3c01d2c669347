"""
Session Provider

Flask extension that owns the application's session store. Views reach the
store through `current_store()` instead of importing a global.
"""

import logging

from flask import current_app, has_app_context

from rapidblood.errors import ConfigurationError
from rapidblood.session.store import SessionStore, DEFAULT_SLOT_KEY

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'rapidblood.session'


def _build_slot(backend):
    if backend == 'memory':
        from rapidblood.session.slots import MemorySlot
        return MemorySlot()
    if backend == 'database':
        from rapidblood.session.slots import DatabaseSlot
        return DatabaseSlot()
    raise ConfigurationError(f'Unknown SESSION_SLOT_BACKEND: {backend!r}')


def _load_session(request):
    return current_store().get_current_session()


class SessionProvider:
    """Installs a SessionStore on a Flask application.

    The store is initialized exactly once, when the provider is attached.
    Install Flask-Login first so the provider can register its request loader.
    """

    def __init__(self, app=None, slot=None):
        self.slot = slot
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        if EXTENSION_KEY in app.extensions:
            raise ConfigurationError('SessionProvider is already installed on this application')

        slot = self.slot if self.slot is not None else \
            _build_slot(app.config.get('SESSION_SLOT_BACKEND', 'database'))
        store = SessionStore(
            slot,
            key=app.config.get('SESSION_SLOT_KEY', DEFAULT_SLOT_KEY),
            default_location=app.config['DEFAULT_LOCATION'],
            default_blood_group=app.config['DEFAULT_BLOOD_GROUP'],
        )

        with app.app_context():
            store.initialize()

        app.extensions[EXTENSION_KEY] = store

        @app.context_processor
        def inject_current_session():
            """Inject `current_session` into templates."""
            return dict(current_session=store.get_current_session())

        # Flask-Login mirrors the store into current_user
        login_manager = getattr(app, 'login_manager', None)
        if login_manager is not None:
            login_manager.request_loader(_load_session)

        logger.debug('Session provider installed with %s', type(slot).__name__)
        return store


def current_store():
    """Return the session store of the active application.

    Raises:
        ConfigurationError: outside an application context, or when the
            application never installed a SessionProvider
    """
    if not has_app_context():
        raise ConfigurationError('Session store accessed outside an application context')
    store = current_app.extensions.get(EXTENSION_KEY)
    if store is None:
        raise ConfigurationError('Session store accessed in an application without SessionProvider')
    return store
