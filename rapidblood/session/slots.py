"""
Durable Slots

Key-value locations outside the session store. Only the store writes to them.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from rapidblood.extensions import db
from rapidblood.models.slot import StorageSlot

logger = logging.getLogger(__name__)


class MemorySlot:
    """Slot kept in a plain dict; lost when the process exits."""

    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def read(self, key):
        return self._data.get(key)

    def write(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)

    def __contains__(self, key):
        return key in self._data


class DatabaseSlot:
    """Slot backed by the `storage_slots` table.

    Every call needs an application context; writes commit immediately.
    """

    def read(self, key):
        row = db.session.get(StorageSlot, key)
        return row.value if row is not None else None

    def write(self, key, value):
        row = db.session.get(StorageSlot, key)
        if row is None:
            row = StorageSlot(key=key, value=value)
        else:
            row.value = value
        db.session.add(row)
        self._commit('write', key)

    def remove(self, key):
        row = db.session.get(StorageSlot, key)
        if row is None:
            return
        db.session.delete(row)
        self._commit('remove', key)

    def __contains__(self, key):
        return db.session.get(StorageSlot, key) is not None

    def _commit(self, action, key):
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Slot %s failed for key %s', action, key)
            raise
