"""
Models Package

Exports all models for easy importing.
"""

from rapidblood.models.session import Session, Role
from rapidblood.models.catalog import BloodBank, Donor, BloodRequest
from rapidblood.models.slot import StorageSlot

__all__ = ['Session', 'Role', 'BloodBank', 'Donor', 'BloodRequest', 'StorageSlot']
