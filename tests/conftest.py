import pytest

from rapidblood import create_app
from rapidblood.config import TestConfig
from rapidblood.session import current_store


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture(autouse=True)
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    with app.app_context():
        return current_store()


@pytest.fixture()
def login_as(client):
    def _login(role, email='nurse@x.com'):
        return client.post('/login', data={'email': email, 'role': role.value})
    return _login
