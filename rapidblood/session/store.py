"""
Session Store

Single source of truth for who is signed in. The in-memory session and the
durable slot always agree outside of a login or logout call.
"""

import logging
import uuid

from rapidblood.constants import LOCATIONS
from rapidblood.errors import MalformedSessionData
from rapidblood.models.session import Session, Role, display_name

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = 'rb_user'


def generate_session_id():
    """Generate an opaque session ID"""
    return uuid.uuid4().hex[:9]


class SessionStore:
    """Holds the current session and mirrors it into a durable slot.

    Args:
        slot: object with `read`, `write`, `remove` and `in` taking a key
        key: slot key the serialized session lives under
        default_location: location given to every new session
        default_blood_group: blood group given to every new session
    """

    def __init__(self, slot, key=DEFAULT_SLOT_KEY, default_location=LOCATIONS[0],
                 default_blood_group='O+'):
        self.slot = slot
        self.key = key
        self.default_location = default_location
        self.default_blood_group = default_blood_group
        self._current = None

    def initialize(self):
        """Restore the session persisted in the slot, if any.

        Malformed content is dropped from the slot and treated as no session.
        """
        raw = self.slot.read(self.key)
        if raw is None:
            self._current = None
            return None

        try:
            self._current = Session.loads(raw)
        except MalformedSessionData as exc:
            logger.warning('Discarding malformed session data under %r: %s', self.key, exc)
            self._current = None
            self.slot.remove(self.key)
            return None

        logger.debug('Restored %s session %s', self._current.role.value, self._current.id)
        return self._current

    def login(self, email, role):
        """Replace the current session with a fresh one for `email` and `role`."""
        if not email:
            raise ValueError('email must be a non-empty string')
        role = Role.parse(role)

        session = Session(
            id=generate_session_id(),
            name=display_name(email),
            email=email,
            role=role,
            location=self.default_location,
            blood_group=self.default_blood_group,
        )
        self._current = session
        self.slot.write(self.key, session.dumps())
        logger.info('Signed in %s session %s', role.value, session.id)
        return session

    def logout(self):
        """Clear the current session. Calling it without a session is a no-op."""
        previous = self._current
        self._current = None
        self.slot.remove(self.key)
        if previous is not None:
            logger.info('Signed out %s session %s', previous.role.value, previous.id)

    def get_current_session(self):
        """Current session, or None.

        A session whose slot entry was removed by another process is dropped.
        """
        if self._current is not None and self.key not in self.slot:
            logger.info('Session %s no longer in slot; signing out', self._current.id)
            self._current = None
        return self._current
