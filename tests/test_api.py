import pytest
from django.http import Http404
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from cosbaii.exceptions import Conflict, api_exception_handler


@pytest.mark.django_db
@pytest.mark.parametrize('method, url', [
    ('get', '/api/user/credentials/'),
    ('post', '/api/user/credentials/'),
    ('put', '/api/user/credentials/reorder/'),
    ('get', '/api/admin/credentials/'),
    ('get', '/api/user/badges/'),
])
def test_unauthenticated_requests_are_rejected(api_client, method, url):
    response = getattr(api_client, method)(url)

    assert response.status_code == 401
    assert set(response.json()) == {'error'}


@pytest.mark.django_db
def test_login_returns_tokens_with_role(api_client, admin_user):
    response = api_client.post('/api/auth/login/', {
        'username': 'admin',
        'password': 'secret-pass-123',
    }, format='json')

    assert response.status_code == 200
    body = response.json()
    assert {'access', 'refresh'} <= set(body)
    assert body['role'] == 'ADMIN'
    assert body['user_id'] == admin_user.pk

    credentials = api_client.get('/api/user/credentials/', HTTP_AUTHORIZATION=f"Bearer {body['access']}")
    assert credentials.status_code == 200


def _context():
    return {'view': None, 'request': APIRequestFactory().get('/')}


def test_handler_flattens_validation_errors():
    exc = ValidationError({'cosplayTitle': ['Cosplay title is required']})

    response = api_exception_handler(exc, _context())

    assert response.status_code == 400
    assert response.data == {
        'error': 'Cosplay title is required',
        'details': {'cosplayTitle': ['Cosplay title is required']},
    }


def test_handler_wraps_non_field_errors():
    response = api_exception_handler(ValidationError(['Bad payload']), _context())

    assert response.data['error'] == 'Bad payload'
    assert response.data['details'] == {'non_field_errors': ['Bad payload']}


def test_handler_conflict():
    response = api_exception_handler(Conflict('Already there'), _context())

    assert response.status_code == 409
    assert response.data == {'error': 'Already there'}


def test_handler_hides_unexpected_errors(caplog):
    try:
        raise RuntimeError('database exploded')
    except RuntimeError as exc:
        response = api_exception_handler(exc, _context())

    assert response.status_code == 500
    assert response.data == {'error': 'Internal server error'}
    assert 'database exploded' in caplog.text


def test_handler_django_http404():
    response = api_exception_handler(Http404(), _context())

    assert response.status_code == 404
    assert set(response.data) == {'error'}


@pytest.mark.django_db
@pytest.mark.parametrize('url', [
    '/api/admin/credentials/999/',
    '/api/admin/competitions/999/',
])
def test_missing_admin_object_is_not_found(admin_client, url):
    response = admin_client.get(url)

    assert response.status_code == 404
    assert set(response.json()) == {'error'}


@pytest.mark.django_db
def test_api_roots_list_every_route(user_client, admin_client):
    user_root = user_client.get('/api/user/')
    assert user_root.status_code == 200
    assert {'credentials', 'notifications'} <= set(user_root.json())

    admin_root = admin_client.get('/api/admin/')
    assert admin_root.status_code == 200
    assert {'competitions', 'credentials'} <= set(admin_root.json())
