"""
Catalog Models

Blood banks, donors and blood requests shown by the directory and the
dashboards. These are generated at startup and never persisted.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class BloodBank:
    """Blood bank with per-group stock"""
    id: str
    name: str
    location: str
    contact: str
    inventory: Dict[str, int] = field(default_factory=dict)
    verified: bool = False

    def has_stock(self, blood_group):
        return self.inventory.get(blood_group, 0) > 0


@dataclass
class Donor:
    """Registered voluntary donor"""
    id: str
    name: str
    blood_group: str
    location: str
    contact: str
    is_available: bool = True
    last_donation_date: Optional[str] = None


@dataclass
class BloodRequest:
    """Request raised by a seeker"""
    id: str
    seeker_id: str
    blood_group: str
    units: int
    location: str
    hospital: str
    status: str = 'pending'
    urgency: str = 'normal'
    created_at: Optional[str] = None
