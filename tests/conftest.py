from datetime import datetime, timedelta, timezone

import pytest

from pizzeria import create_app
from pizzeria.auth.sessions import SessionStore
from pizzeria.config import TestConfig
from pizzeria.extensions import get_store

ADMIN_USERNAME = 'Owner'
ADMIN_PASSWORD = 'test-password'


class FakeClock:
    """Clock the tests can move forward."""

    def __init__(self):
        self.now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def session_store(clock):
    return SessionStore(lifetime=timedelta(hours=1), clock=clock)


@pytest.fixture()
def app(session_store):
    app = create_app(TestConfig, session_store=session_store)
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, username=ADMIN_USERNAME, password=ADMIN_PASSWORD):
    return client.post('/admin/login', json={'username': username, 'password': password})


@pytest.fixture()
def admin_client(app):
    c = app.test_client()
    r = login(c)
    assert r.status_code == 200
    return c


@pytest.fixture()
def store(app):
    return get_store()


def place_order(client, **overrides):
    payload = {
        'name': 'A',
        'phone': '1',
        'address': 'x',
        'items': [{'id': 1, 'qty': 2}],
        'total': 20,
        'paymentMethod': 'COD',
    }
    payload.update(overrides)
    return client.post('/api/orders', json=payload)
