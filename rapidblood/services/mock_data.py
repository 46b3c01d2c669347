"""
Mock Catalog Service

Generates the demo blood banks, donors and requests shown across the site.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from rapidblood.constants import BLOOD_GROUPS, LOCATIONS
from rapidblood.models.catalog import BloodBank, Donor, BloodRequest

logger = logging.getLogger(__name__)

DEFAULT_HOSPITAL = 'City General Hospital'
LAST_DONATION_DATE = '2023-10-12'


@dataclass
class Catalog:
    """Everything the directory and dashboards render"""
    blood_banks: List[BloodBank] = field(default_factory=list)
    donors: List[Donor] = field(default_factory=list)
    requests: List[BloodRequest] = field(default_factory=list)


def generate_inventory(rng):
    """Random stock between 0 and 49 units for every blood group"""
    return {bg: rng.randrange(50) for bg in BLOOD_GROUPS}


def generate_blood_banks(rng, count=20):
    banks = []
    for i in range(count):
        location = LOCATIONS[i % len(LOCATIONS)]
        banks.append(BloodBank(
            id=f'bb-{i}',
            name=f'{location} Red Cross Society',
            location=location,
            contact=f'+91 99887766{i:02d}',
            inventory=generate_inventory(rng),
            verified=i % 3 != 0
        ))
    return banks


def generate_donors(rng, count=20):
    return [
        Donor(
            id=f'dn-{i}',
            name=f'Donor {i + 1}',
            blood_group=BLOOD_GROUPS[i % len(BLOOD_GROUPS)],
            location=LOCATIONS[i % len(LOCATIONS)],
            contact=f'+91 88776655{i:02d}',
            is_available=rng.random() > 0.3,
            last_donation_date=LAST_DONATION_DATE
        )
        for i in range(count)
    ]


def generate_requests(rng, count=10, now=None):
    created_at = (now or datetime.now(timezone.utc)).isoformat()
    return [
        BloodRequest(
            id=f'req-{i}',
            seeker_id=f'seeker-{i}',
            blood_group=rng.choice(BLOOD_GROUPS),
            units=rng.randint(1, 5),
            location=rng.choice(LOCATIONS),
            hospital=DEFAULT_HOSPITAL,
            status='fulfilled' if i % 4 == 0 else 'pending',
            urgency='critical' if i % 3 == 0 else 'normal',
            created_at=created_at
        )
        for i in range(count)
    ]


def build_catalog(seed=None):
    """
    Build the full demo catalog.

    Args:
        seed: seed for the random generator; None draws a fresh catalog

    Returns:
        Catalog with 20 blood banks, 20 donors and 10 requests
    """
    rng = random.Random(seed)
    catalog = Catalog(
        blood_banks=generate_blood_banks(rng),
        donors=generate_donors(rng),
        requests=generate_requests(rng)
    )
    logger.debug('Generated catalog: %d banks, %d donors, %d requests',
                 len(catalog.blood_banks), len(catalog.donors), len(catalog.requests))
    return catalog


def filter_blood_banks(banks, location=None, blood_group=None):
    """Banks at `location` (exact match) holding any stock of `blood_group`.

    Falsy filters are ignored.
    """
    return [
        bank for bank in banks
        if (not location or bank.location == location)
        and (not blood_group or bank.has_stock(blood_group))
    ]
