import pytest

from pizzeria.auth.decorators import SESSION_TOKEN_KEY

PRIVILEGED_ROUTES = [
    ('post', '/api/pizzas'),
    ('delete', '/api/pizzas/1'),
    ('get', '/api/orders'),
    ('get', '/api/orders/1'),
    ('patch', '/api/orders/1'),
    ('delete', '/api/orders/1'),
    ('get', '/api/messages'),
    ('delete', '/api/messages/1'),
    ('get', '/admin/session'),
]

UNAUTHORIZED = {'success': False, 'error': 'unauthorized', 'message': 'Unauthorized.'}


def _with_token(client, token):
    with client.session_transaction() as sess:
        sess[SESSION_TOKEN_KEY] = token
    return client


@pytest.mark.parametrize('method, path', PRIVILEGED_ROUTES)
def test_privileged_routes_deny_without_cookie(client, method, path):
    r = getattr(client, method)(path, json={})
    assert r.status_code == 401
    assert r.get_json() == UNAUTHORIZED


@pytest.mark.parametrize('method, path', PRIVILEGED_ROUTES)
def test_privileged_routes_deny_unknown_session(client, method, path):
    _with_token(client, 'not-a-real-session')
    r = getattr(client, method)(path, json={})
    assert r.status_code == 401
    assert r.get_json() == UNAUTHORIZED


def test_guard_denies_expired_session(admin_client, clock):
    assert admin_client.get('/api/orders').status_code == 200

    clock.advance(minutes=59)
    assert admin_client.get('/api/orders').status_code == 200

    clock.advance(minutes=1)
    r = admin_client.get('/api/orders')
    assert r.status_code == 401
    assert r.get_json() == UNAUTHORIZED


def test_guard_denies_non_admin_session(client, session_store):
    record = session_store.create(admin=False)
    _with_token(client, record.session_id)
    r = client.get('/api/orders')
    assert r.status_code == 401
    assert r.get_json() == UNAUTHORIZED


def test_guard_allows_admin_session(client, session_store):
    record = session_store.create(admin=True)
    _with_token(client, record.session_id)
    assert client.get('/api/orders').status_code == 200


def test_public_routes_need_no_session(client):
    assert client.get('/api/pizzas').status_code == 200
    assert client.get('/health').status_code == 200
    r = client.post('/api/messages', json={'name': 'A', 'email': 'a@example.com', 'message': 'hi'})
    assert r.status_code == 200


def test_guard_fires_before_validation(client, admin_client):
    payload = {'name': 'Margherita', 'price': 9.5}

    r = client.post('/api/pizzas', json=payload)
    assert r.status_code == 401

    r = admin_client.post('/api/pizzas', json=payload)
    assert r.status_code == 400
    assert r.get_json()['error'] == 'validation_error'
