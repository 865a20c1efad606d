import mongomock
import pytest

from memory_api import create_app
from memory_api.config import TestingConfig
from memory_api.services import EXTENSION_KEY


@pytest.fixture()
def make_app():
    def _make(**overrides):
        config_class = type('OverrideConfig', (TestingConfig,), overrides)
        database = mongomock.MongoClient().memory_game_test
        return create_app(config_class, database=database)
    return _make


@pytest.fixture()
def flask_app(make_app):
    return make_app()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def services(flask_app):
    return flask_app.extensions[EXTENSION_KEY]


@pytest.fixture()
def register(client):
    def _register(name='alice', email='a@x.com', password='secret1'):
        return client.post('/api/users', json={'name': name, 'email': email, 'password': password})
    return _register


@pytest.fixture()
def sign_in(client):
    def _sign_in(email='a@x.com', password='secret1'):
        return client.post('/api/auth', json={'email': email, 'password': password})
    return _sign_in


@pytest.fixture()
def auth_headers(register, sign_in):
    register()
    token = sign_in().get_json()['token']
    return {'x-auth-token': token}
