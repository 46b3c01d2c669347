from datetime import datetime, timezone
import random

import pytest

from rapidblood.constants import BLOOD_GROUPS, LOCATIONS, DEFAULT_INVENTORY
from rapidblood.dashboard.services import DashboardState
from rapidblood.models.catalog import BloodBank
from rapidblood.services import build_catalog, filter_blood_banks
from rapidblood.services.mock_data import generate_requests


def test_catalog_shape():
    catalog = build_catalog(seed=7)

    assert len(catalog.blood_banks) == 20
    assert len(catalog.donors) == 20
    assert len(catalog.requests) == 10

    bank = catalog.blood_banks[4]
    assert bank.id == 'bb-4'
    assert bank.name == 'Kurnool Red Cross Society'
    assert bank.contact == '+91 9988776604'
    assert set(bank.inventory) == set(BLOOD_GROUPS)
    assert all(0 <= units < 50 for units in bank.inventory.values())
    assert [b.verified for b in catalog.blood_banks[:4]] == [False, True, True, False]

    donor = catalog.donors[9]
    assert donor.name == 'Donor 10'
    assert donor.blood_group == BLOOD_GROUPS[1]
    assert donor.location == LOCATIONS[0]
    assert donor.last_donation_date == '2023-10-12'


def test_catalog_is_reproducible_with_seed():
    first, second = build_catalog(seed=3), build_catalog(seed=3)
    assert first.blood_banks == second.blood_banks
    assert first.donors == second.donors
    assert [r.blood_group for r in first.requests] == [r.blood_group for r in second.requests]


def test_request_status_and_urgency():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    requests = generate_requests(random.Random(0), now=now)

    assert [r.status for r in requests[:5]] == ['fulfilled', 'pending', 'pending', 'pending', 'fulfilled']
    assert [r.urgency for r in requests[:4]] == ['critical', 'normal', 'normal', 'critical']
    assert all(1 <= r.units <= 5 for r in requests)
    assert all(r.hospital == 'City General Hospital' for r in requests)
    assert requests[0].created_at == now.isoformat()


def make_bank(location, **inventory):
    return BloodBank(id=location, name=location, location=location, contact='',
                     inventory={bg: inventory.get(bg, 0) for bg in BLOOD_GROUPS})


def test_filter_blood_banks():
    banks = [
        make_bank('Guntur', **{'O-': 3}),
        make_bank('Guntur'),
        make_bank('Kadapa', **{'O-': 1}),
    ]

    assert filter_blood_banks(banks) == banks
    assert filter_blood_banks(banks, location='Guntur') == banks[:2]
    assert filter_blood_banks(banks, blood_group='O-') == [banks[0], banks[2]]
    assert filter_blood_banks(banks, location='Guntur', blood_group='O-') == [banks[0]]
    assert filter_blood_banks(banks, location='Nowhere') == []


def test_stock_never_negative():
    state = DashboardState()
    assert state.inventory == DEFAULT_INVENTORY

    assert state.adjust_stock('B-', -1) == 1
    assert state.adjust_stock('B-', -1) == 0
    assert state.adjust_stock('B-', -1) == 0
    assert state.adjust_stock('B-', 1) == 1


def test_state_does_not_share_default_inventory():
    state = DashboardState()
    state.adjust_stock('O+', 1)
    assert DEFAULT_INVENTORY['O+'] == 25


def test_unknown_blood_group():
    with pytest.raises(KeyError):
        DashboardState().adjust_stock('C+', 1)


def test_toggle_availability():
    state = DashboardState()
    assert state.toggle_availability() is False
    assert state.toggle_availability() is True
