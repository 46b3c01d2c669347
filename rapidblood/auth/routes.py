"""
Auth Routes

Role-based mock login backed by the session store.
"""

from flask import render_template, request, redirect, url_for, flash, current_app

from rapidblood.auth import auth_bp
from rapidblood.models.session import Role
from rapidblood.session import current_store

# Roles offered on the login form, in display order
LOGIN_ROLES = [
    ('Seeker', Role.SEEKER),
    ('Donor', Role.DONOR),
    ('Blood Bank', Role.BLOOD_BANK),
    ('Admin', Role.ADMIN),
]


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Mock login route"""
    selected = Role.SEEKER

    if request.method == 'POST':
        email = request.form.get('email', '').strip() or current_app.config['DEMO_EMAIL']
        try:
            selected = Role.parse(request.form.get('role', Role.SEEKER.value))
        except ValueError:
            flash('Please choose one of the listed roles.', 'danger')
            return render_template('auth/login.html', roles=LOGIN_ROLES, selected=Role.SEEKER), 400

        current_store().login(email, selected)
        return redirect(url_for('dashboard.dashboard'))

    return render_template('auth/login.html', roles=LOGIN_ROLES, selected=selected)


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Logout route"""
    current_store().logout()
    return redirect(url_for('dashboard.index'))
