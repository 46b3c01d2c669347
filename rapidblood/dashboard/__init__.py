"""
Dashboard Blueprint

Public pages and the role-specific dashboards.
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from rapidblood.dashboard import routes  # noqa: E402, F401
