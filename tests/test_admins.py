from employee_manager.app.models import Admin

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_routes_require_login(client):
    response = client.get('/get_tasks')
    assert response.status_code == 401
    assert response.get_json() == {'Status': False, 'Error': 'Unauthorized'}


def test_login_with_wrong_password(client):
    response = client.post('/adminLogin', json={'email': ADMIN_EMAIL, 'password': 'nope'})
    assert response.get_json() == {'loginStatus': False, 'Error': 'Wrong email or password'}

    response = client.post('/adminLogin', json={'email': 'ghost@example.com', 'password': ADMIN_PASSWORD})
    assert response.get_json()['loginStatus'] is False
    assert client.get('/get_departments').status_code == 401


def test_login_sets_session_cookie(client):
    response = client.post('/adminLogin', json={'email': ADMIN_EMAIL.upper(), 'password': ADMIN_PASSWORD})
    assert response.get_json() == {'loginStatus': True}
    assert 'Set-Cookie' in response.headers

    assert client.get('/get_departments').status_code == 200


def test_logout(admin_client):
    response = admin_client.post('/logout')
    assert response.get_json()['Status'] is True
    assert admin_client.get('/get_departments').status_code == 401


def test_add_admin(admin_client, app):
    response = admin_client.post('/add_admin', json={'email': 'second@example.com', 'password': 'pw'})
    assert response.get_json()['Result']['email'] == 'second@example.com'

    with app.app_context():
        admin = Admin.query.filter_by(email='second@example.com').first()
        assert admin.password != 'pw'
        assert admin.check_password('pw')

    response = admin_client.post('/add_admin', json={'email': 'second@example.com', 'password': 'pw'})
    assert response.status_code == 409
    assert response.get_json() == {'Status': False, 'Error': 'Admin already exists'}

    response = admin_client.post('/add_admin', json={'email': 'third@example.com'})
    assert response.status_code == 400


def test_list_admins_hides_passwords(admin_client):
    body = admin_client.get('/admins').get_json()
    assert body['Status'] is True
    assert body['Admins'] == [{'id': 1, 'email': ADMIN_EMAIL}]


def test_unknown_route_uses_envelope(admin_client):
    response = admin_client.get('/no_such_route')
    assert response.status_code == 404
    assert response.get_json()['Status'] is False
