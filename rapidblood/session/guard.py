"""
Route Guard

Decides whether a protected view may render for the current session.
Unauthenticated and unauthorized visitors are both redirected without a
message.
"""

from dataclasses import dataclass
from functools import wraps

from flask import redirect

from rapidblood.constants import LOGIN_PATH, HOME_PATH
from rapidblood.models.session import Role
from rapidblood.session.provider import current_store


class Allow:
    """Guard outcome letting the view render."""

    def __repr__(self):
        return 'Allow()'

    def __eq__(self, other):
        return isinstance(other, Allow)

    def __hash__(self):
        return hash(Allow)


ALLOW = Allow()


@dataclass(frozen=True)
class RedirectTo:
    """Guard outcome sending the visitor to `target`."""
    target: str


def evaluate(session, required_roles=None):
    """Guard decision for `session` against an optional role whitelist.

    The session check runs before the role check.
    """
    if session is None:
        return RedirectTo(LOGIN_PATH)
    if required_roles and session.role not in {Role.parse(r) for r in required_roles}:
        return RedirectTo(HOME_PATH)
    return ALLOW


def guard(required_roles=None, store=None):
    """Evaluate the guard against the store's session right now."""
    if store is None:
        store = current_store()
    return evaluate(store.get_current_session(), required_roles)


def protected(*roles):
    """Decorator restricting a view to signed-in sessions, optionally by role.

    Usage:
        @protected()                  # any session
        @protected(Role.BLOOD_BANK)   # blood bank sessions only
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            decision = guard(set(roles))
            if isinstance(decision, RedirectTo):
                return redirect(decision.target)
            return f(*args, **kwargs)
        return wrapper
    return decorator
