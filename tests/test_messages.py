import pytest


def test_message_round_trip(client, admin_client):
    r = client.post('/api/messages', json={'name': 'Ann', 'email': 'ann@example.com', 'message': 'Great crust!'})
    assert r.status_code == 200
    assert r.get_json() == {'success': True}

    messages = admin_client.get('/api/messages').get_json()
    assert len(messages) == 1
    assert messages[0]['name'] == 'Ann'
    assert messages[0]['email'] == 'ann@example.com'
    assert messages[0]['message'] == 'Great crust!'
    assert messages[0]['createdAt']


@pytest.mark.parametrize('payload', [
    {'email': 'a@example.com', 'message': 'hi'},
    {'name': 'A', 'message': 'hi'},
    {'name': 'A', 'email': 'a@example.com'},
    {'name': 'A', 'email': 'not-an-email', 'message': 'hi'},
])
def test_message_validation(client, payload):
    r = client.post('/api/messages', json=payload)
    assert r.status_code == 400


def test_delete_message(client, admin_client):
    client.post('/api/messages', json={'name': 'A', 'email': 'a@example.com', 'message': 'hi'})
    message_id = admin_client.get('/api/messages').get_json()[0]['id']

    assert admin_client.delete(f'/api/messages/{message_id}').status_code == 200
    assert admin_client.get('/api/messages').get_json() == []
    assert admin_client.delete(f'/api/messages/{message_id}').status_code == 404
