"""
Auth Blueprint

Mock sign-in: the visitor picks a role, no credentials are checked.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from rapidblood.auth import routes  # noqa: E402, F401
