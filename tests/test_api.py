from pymongo.errors import ServerSelectionTimeoutError

import pytest

from memory_api import create_app
from memory_api.config import TestingConfig


def test_end_to_end_scenario(client):
    res = client.post('/api/users', json={'name': 'alice', 'email': 'a@x.com', 'password': 'secret1'})
    assert res.status_code == 201

    res = client.post('/api/auth', json={'email': 'a@x.com', 'password': 'secret1'})
    assert res.status_code == 200
    headers = {'x-auth-token': res.get_json()['token']}

    res = client.post('/api/highscore', json={'username': 'alice', 'moves': 10, 'level': '1'}, headers=headers)
    assert res.status_code == 201

    res = client.post('/api/highscore', json={'username': 'alice', 'moves': 5, 'level': '1'}, headers=headers)
    assert res.status_code == 200
    assert 'updated' in res.get_json()['message']

    res = client.post('/api/highscore', json={'username': 'alice', 'moves': 20, 'level': '1'}, headers=headers)
    assert res.status_code == 200
    assert 'not updated' in res.get_json()['message']

    res = client.get('/api/highscore/1', headers=headers)
    assert res.status_code == 200
    assert res.get_json()['moves'] == 5


def test_root_and_health(client):
    res = client.get('/')
    assert res.status_code == 200
    assert res.get_data(as_text=True) == 'API is running...'

    res = client.get('/api/health')
    assert res.status_code == 200
    data = res.get_json()
    assert data['highscore_key_policy'] == 'user_level'
    assert data['status'] in ('healthy', 'degraded')
    assert 'log_stats' not in data


def test_unknown_route_is_json_404(client):
    res = client.get('/api/nothing-here')
    assert res.status_code == 404
    assert res.get_json()['success'] is False


def test_wrong_method_is_json_405(client):
    res = client.patch('/api/history')
    assert res.status_code == 405
    assert res.get_json()['error'] == 'Method not allowed'


def test_unexpected_error_is_generic_500(client, services, auth_headers, monkeypatch):
    def explode(user_id):
        raise RuntimeError('secret internal detail')
    monkeypatch.setattr(services.history, 'list_for', explode)

    res = client.get('/api/history', headers=auth_headers)
    assert res.status_code == 500
    body = res.get_json()
    assert body['error'] == 'Something went wrong on the server'
    assert 'secret internal detail' not in res.get_data(as_text=True)


def test_database_error_is_500(client, services, auth_headers, monkeypatch):
    def unavailable(user_id):
        raise ServerSelectionTimeoutError('no servers')
    monkeypatch.setattr(services.history, 'clear_for', unavailable)

    res = client.delete('/api/history', headers=auth_headers)
    assert res.status_code == 500
    assert res.get_json()['code'] == 'INTERNAL_ERROR'


def test_cors_allows_configured_origin(client):
    res = client.get('/', headers={'Origin': 'http://localhost:3000'})
    assert res.headers.get('Access-Control-Allow-Origin') == 'http://localhost:3000'

    res = client.get('/', headers={'Origin': 'http://evil.example'})
    assert 'Access-Control-Allow-Origin' not in res.headers


def test_create_app_requires_configuration():
    class NoSecret(TestingConfig):
        JWT_SECRET = None

    class NoDatabase(TestingConfig):
        MONGO_URI = None

    with pytest.raises(RuntimeError):
        create_app(NoSecret)
    with pytest.raises(RuntimeError):
        create_app(NoDatabase)


def test_logger_masks_secrets():
    from memory_api.utils.api_logger import api_logger

    cleaned = api_logger.sanitize({'token': 'abc', 'nested': [{'password': 'pw', 'level': '1'}]})
    assert cleaned == {'token': '***', 'nested': [{'password': '***', 'level': '1'}]}
