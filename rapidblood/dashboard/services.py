"""
Dashboard Services

Process-local dashboard state and the per-role view data.
"""

import logging

from flask import current_app

from rapidblood.constants import BLOOD_GROUPS, DEFAULT_INVENTORY
from rapidblood.models.session import Role

logger = logging.getLogger(__name__)

CATALOG_KEY = 'rapidblood.catalog'
STATE_KEY = 'rapidblood.dashboard'

ADMIN_STATS = [
    {'label': 'Total Banks', 'value': '250'},
    {'label': 'Active Donors', 'value': '12,402'},
    {'label': 'Pending Requests', 'value': '45'},
    {'label': 'Monthly Growth', 'value': '+12%'},
]

DONATION_HISTORY = [
    {'location': 'Tirupati Hospital', 'date': 'Oct 12, 2023', 'units': 1},
    {'location': 'Red Cross Guntur', 'date': 'June 05, 2023', 'units': 1},
]


class DashboardState:
    """Blood bank stock and donor availability for the running process"""

    def __init__(self, inventory=None, donor_available=True):
        self.inventory = dict(inventory if inventory is not None else DEFAULT_INVENTORY)
        self.donor_available = donor_available

    def adjust_stock(self, blood_group, delta):
        """Shift stock for `blood_group` by `delta`, never below zero.

        Raises:
            KeyError: unknown blood group
        """
        if blood_group not in self.inventory:
            raise KeyError(blood_group)
        self.inventory[blood_group] = max(0, self.inventory[blood_group] + delta)
        logger.debug('Stock %s -> %d', blood_group, self.inventory[blood_group])
        return self.inventory[blood_group]

    def toggle_availability(self):
        self.donor_available = not self.donor_available
        return self.donor_available


def get_catalog():
    return current_app.extensions[CATALOG_KEY]


def get_state():
    return current_app.extensions[STATE_KEY]


def build_dashboard_context(session):
    """Template variables for the dashboard of `session`'s role."""
    catalog = get_catalog()
    state = get_state()
    role = session.role

    if role == Role.ADMIN:
        return {
            'stats': ADMIN_STATS,
            'system_logs': ['New blood bank verified: Guntur Red Cross'] * 4,
            'alert': 'O- Negative units are critically low in the Visakhapatnam region.'
        }
    if role == Role.BLOOD_BANK:
        return {
            'blood_groups': BLOOD_GROUPS,
            'inventory': state.inventory,
            'donors': catalog.donors[:4],
            'requests': catalog.requests[:3]
        }
    if role == Role.SEEKER:
        return {
            'requests': catalog.requests[:2],
            'banks': [
                {'bank': bank, 'stock': list(bank.inventory.items())[:4]}
                for bank in catalog.blood_banks[:3]
            ]
        }
    if role == Role.DONOR:
        return {
            'blood_group': session.blood_group,
            'total_donations': 12,
            'available': state.donor_available,
            'history': DONATION_HISTORY
        }
    return {}
