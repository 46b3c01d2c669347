"""
Session Model

The signed-in identity and its role. A session is never edited in place; it
is replaced on login and cleared on logout.
"""

import enum
import json
from dataclasses import dataclass
from typing import Optional

from flask_login import UserMixin

from rapidblood.errors import MalformedSessionData


class Role(str, enum.Enum):
    """Identity categories governing which views are reachable"""
    ADMIN = 'admin'
    BLOOD_BANK = 'bloodBank'
    SEEKER = 'seeker'
    DONOR = 'donor'
    GUEST = 'guest'

    @classmethod
    def parse(cls, value):
        """Return the Role for `value` (a Role or its string value).

        Raises:
            ValueError: if `value` names no role
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'Unknown role: {value!r}') from None


SERIALIZED_FIELDS = ('id', 'name', 'email', 'role', 'location', 'bloodGroup')


def display_name(email):
    """Local part of `email` with its first letter upper-cased."""
    local = email.split('@')[0]
    return local[:1].upper() + local[1:]


@dataclass(frozen=True)
class Session(UserMixin):
    """Currently signed-in identity"""
    id: str
    name: str
    email: str
    role: Role
    location: str
    blood_group: Optional[str] = None

    def to_dict(self):
        """Flat, wire-visible representation of the session."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role.value,
            'location': self.location,
            'bloodGroup': self.blood_group,
        }

    def dumps(self):
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data):
        """Build a session from its flat representation.

        Raises:
            MalformedSessionData: if fields are missing or mistyped
        """
        if not isinstance(data, dict):
            raise MalformedSessionData('session payload is not an object')

        missing = [f for f in SERIALIZED_FIELDS if f not in data and f != 'bloodGroup']
        if missing:
            raise MalformedSessionData(f'session payload missing fields: {", ".join(missing)}')

        for field in ('id', 'name', 'email', 'location'):
            if not isinstance(data[field], str):
                raise MalformedSessionData(f'session field {field!r} is not a string')

        blood_group = data.get('bloodGroup')
        if blood_group is not None and not isinstance(blood_group, str):
            raise MalformedSessionData("session field 'bloodGroup' is not a string")

        try:
            role = Role.parse(data['role'])
        except ValueError as exc:
            raise MalformedSessionData(str(exc)) from exc

        return cls(
            id=data['id'],
            name=data['name'],
            email=data['email'],
            role=role,
            location=data['location'],
            blood_group=blood_group,
        )

    @classmethod
    def loads(cls, raw):
        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as exc:
            raise MalformedSessionData(f'session payload is not JSON: {exc}') from exc
        return cls.from_dict(data)
