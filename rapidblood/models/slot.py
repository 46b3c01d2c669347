"""
Storage Slot Model
"""

from datetime import datetime, timezone

from rapidblood.extensions import db


class StorageSlot(db.Model):
    """Named key-value slot persisted outside process memory"""
    __tablename__ = 'storage_slots'

    key = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc),
                           onupdate=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f'<StorageSlot {self.key}>'
