"""
Dashboard Routes

Home page, blood bank directory and the protected dashboards.
"""

from flask import render_template, request, redirect, url_for, flash

from rapidblood.constants import BLOOD_GROUPS, LOCATIONS
from rapidblood.dashboard import dashboard_bp
from rapidblood.dashboard.services import build_dashboard_context, get_catalog, get_state
from rapidblood.models.session import Role
from rapidblood.services import filter_blood_banks
from rapidblood.session import current_store, protected

FEATURES = [
    {'title': 'Live Inventory', 'desc': 'Real-time tracking of blood units across verified network banks.'},
    {'title': 'Emergency Alerts', 'desc': 'Instant push notifications for critical shortages in your area.'},
    {'title': 'Donor Network', 'desc': 'Verified database of volunteers ready to help during crises.'},
]


@dashboard_bp.route('/')
def index():
    """Public landing page"""
    return render_template('home.html', features=FEATURES)


@dashboard_bp.route('/blood-banks')
def blood_banks():
    """
    Blood bank directory.

    Query Parameters:
        location: exact location to filter by
        group: blood group the bank must have in stock
    """
    location = request.args.get('location', '').strip()
    group = request.args.get('group', '').strip()
    if group not in BLOOD_GROUPS:
        group = ''

    banks = filter_blood_banks(get_catalog().blood_banks, location=location, blood_group=group)
    return render_template('blood_banks.html',
                           banks=banks,
                           locations=LOCATIONS,
                           blood_groups=BLOOD_GROUPS,
                           filter_location=location,
                           filter_group=group)


@dashboard_bp.route('/dashboard')
@protected()
def dashboard():
    """Dashboard for the signed-in role"""
    session = current_store().get_current_session()
    return render_template('dashboard/dashboard.html',
                           Role=Role,
                           **build_dashboard_context(session))


@dashboard_bp.route('/dashboard/inventory', methods=['POST'])
@protected(Role.BLOOD_BANK)
def update_inventory():
    """Increment or decrement stock for one blood group"""
    group = request.form.get('group', '')
    delta = request.form.get('delta', type=int)

    if delta not in (1, -1):
        flash('Stock can only change one unit at a time.', 'danger')
        return redirect(url_for('dashboard.dashboard'))

    try:
        get_state().adjust_stock(group, delta)
    except KeyError:
        flash(f'Unknown blood group: {group}', 'danger')

    return redirect(url_for('dashboard.dashboard'))


@dashboard_bp.route('/dashboard/availability', methods=['POST'])
@protected(Role.DONOR)
def toggle_availability():
    """Flip the donor's availability status"""
    get_state().toggle_availability()
    return redirect(url_for('dashboard.dashboard'))


@dashboard_bp.route('/<path:unknown>')
def catch_all(unknown):
    """Unknown paths go back to the home page"""
    return redirect(url_for('dashboard.index'))
