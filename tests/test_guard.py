import itertools

import pytest

from rapidblood.models.session import Role, Session
from rapidblood.session import ALLOW, RedirectTo, SessionStore, guard
from rapidblood.session.guard import evaluate
from rapidblood.session.slots import MemorySlot


def make_session(role):
    return Session(id='s1', name='Nurse', email='nurse@x.com', role=role,
                   location='Tirupati', blood_group='O+')


ROLE_SETS = [set()] + [
    set(combo) for n in (1, 2) for combo in itertools.combinations(Role, n)
]


@pytest.mark.parametrize('required', ROLE_SETS)
def test_no_session_redirects_to_login(required):
    assert evaluate(None, required) == RedirectTo('/login')


@pytest.mark.parametrize('role', list(Role))
@pytest.mark.parametrize('required', ROLE_SETS)
def test_allow_iff_role_permitted(role, required):
    decision = evaluate(make_session(role), required)
    if not required or role in required:
        assert decision == ALLOW
    else:
        assert decision == RedirectTo('/')


def test_donor_scenario():
    store = SessionStore(MemorySlot())
    store.login('nurse@x.com', Role.DONOR)

    assert guard({Role.ADMIN}, store=store) == RedirectTo('/')
    assert guard(store=store) == ALLOW


def test_no_session_scenario():
    store = SessionStore(MemorySlot())
    assert guard({Role.DONOR}, store=store) == RedirectTo('/login')


def test_guard_reflects_session_changes_immediately():
    store = SessionStore(MemorySlot())
    assert guard(store=store) == RedirectTo('/login')

    store.login('bank@x.com', Role.BLOOD_BANK)
    assert guard({Role.BLOOD_BANK}, store=store) == ALLOW

    store.login('bank@x.com', Role.SEEKER)
    assert guard({Role.BLOOD_BANK}, store=store) == RedirectTo('/')

    store.logout()
    assert guard({Role.BLOOD_BANK}, store=store) == RedirectTo('/login')


def test_guard_accepts_role_values():
    assert evaluate(make_session(Role.ADMIN), {'admin'}) == ALLOW


def test_guard_uses_application_store(store):
    assert guard() == RedirectTo('/login')
    store.login('admin@x.com', Role.ADMIN)
    assert guard({Role.ADMIN}) == ALLOW
