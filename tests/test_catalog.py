import pytest


def test_menu_is_public_and_ordered(client, admin_client):
    assert client.get('/api/pizzas').get_json() == []

    admin_client.post('/api/pizzas', json={'name': 'Margherita', 'price': 9.5, 'image': '/img/m.png'})
    admin_client.post('/api/pizzas', json={'name': 'Diavola', 'price': '11', 'image': '/img/d.png'})

    r = client.get('/api/pizzas')
    assert r.status_code == 200
    pizzas = r.get_json()
    assert [p['name'] for p in pizzas] == ['Margherita', 'Diavola']
    assert pizzas[0] == {'id': pizzas[0]['id'], 'name': 'Margherita', 'price': 9.5, 'image': '/img/m.png'}
    assert pizzas[1]['price'] == 11.0


def test_add_pizza_returns_id(admin_client):
    r = admin_client.post('/api/pizzas', json={'name': 'Funghi', 'price': 10, 'image': 'f.png'})
    assert r.status_code == 200
    body = r.get_json()
    assert body['success'] is True
    assert isinstance(body['id'], int)


@pytest.mark.parametrize('payload', [
    {'price': 9, 'image': 'x.png'},
    {'name': 'A', 'image': 'x.png'},
    {'name': 'A', 'price': 9},
    {'name': '  ', 'price': 9, 'image': 'x.png'},
    {'name': 'A', 'price': 'cheap', 'image': 'x.png'},
    {'name': 'A', 'price': -2, 'image': 'x.png'},
    {'name': 'A' * 101, 'price': 9, 'image': 'x.png'},
    {'name': 'A', 'price': '1e40', 'image': 'x.png'},
    {'name': 'A', 'price': 'NaN', 'image': 'x.png'},
])
def test_add_pizza_validation(admin_client, payload):
    r = admin_client.post('/api/pizzas', json=payload)
    assert r.status_code == 400
    assert r.get_json()['error'] == 'validation_error'


def test_delete_pizza(client, admin_client):
    pizza_id = admin_client.post('/api/pizzas', json={'name': 'A', 'price': 1, 'image': 'a'}).get_json()['id']

    r = admin_client.delete(f'/api/pizzas/{pizza_id}')
    assert r.status_code == 200
    assert r.get_json() == {'success': True}
    assert client.get('/api/pizzas').get_json() == []


def test_delete_missing_pizza(admin_client):
    r = admin_client.delete('/api/pizzas/77')
    assert r.status_code == 404
    assert r.get_json()['error'] == 'not_found'


def test_largest_price_that_fits_the_column(admin_client, client):
    r = admin_client.post('/api/pizzas', json={'name': 'Gold', 'price': '99999999.99', 'image': 'g.png'})
    assert r.status_code == 200
    assert client.get('/api/pizzas').get_json()[0]['price'] == 99999999.99
