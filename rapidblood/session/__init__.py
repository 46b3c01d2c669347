"""
Session Package

Session store, its Flask provider and the route guard.
"""

from rapidblood.session.store import SessionStore
from rapidblood.session.provider import SessionProvider, current_store
from rapidblood.session.guard import ALLOW, Allow, RedirectTo, guard, protected

# Installed on the application in create_app
session_provider = SessionProvider()

__all__ = [
    'SessionStore',
    'SessionProvider',
    'current_store',
    'session_provider',
    'ALLOW',
    'Allow',
    'RedirectTo',
    'guard',
    'protected',
]
