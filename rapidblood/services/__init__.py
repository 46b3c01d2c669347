"""
Services Package

Exports all services for easy importing.
"""

from rapidblood.services.mock_data import Catalog, build_catalog, filter_blood_banks

__all__ = [
    'Catalog',
    'build_catalog',
    'filter_blood_banks'
]
