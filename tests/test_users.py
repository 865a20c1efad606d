import pytest

from memory_api.errors import ConflictError, NotFoundError, ValidationError


def test_register_stores_only_a_hash(services):
    user_id = services.users.register('alice', 'a@x.com', 'secret1')
    user = services.users.find_by_id(user_id)
    assert user.password != 'secret1'
    assert services.users.verify_password('secret1', user.password)
    assert not services.users.verify_password('secret2', user.password)


def test_register_same_email_twice_conflicts(services):
    services.users.register('alice', 'a@x.com', 'secret1')
    with pytest.raises(ConflictError):
        services.users.register('someone else', 'A@X.com ', 'another-password')


def test_find_by_email_and_unknown_ids(services):
    user_id = services.users.register('alice', 'a@x.com', 'secret1')
    assert services.users.find_by_email('A@x.com').id == user_id
    assert services.users.find_by_email('nobody@x.com') is None
    assert services.users.find_by_id('not-an-object-id') is None
    assert services.users.find_by_id('0123456789abcdef01234567') is None


def test_update_changes_only_given_fields(services):
    user_id = services.users.register('alice', 'a@x.com', 'secret1')
    original = services.users.find_by_id(user_id)

    updated = services.users.update(user_id, name='Alice B')
    assert updated.name == 'Alice B'
    assert updated.email == 'a@x.com'
    assert updated.password == original.password

    updated = services.users.update(user_id, password='newsecret')
    assert updated.password != original.password
    assert services.users.verify_credentials('a@x.com', 'newsecret') is not None
    assert services.users.verify_credentials('a@x.com', 'secret1') is None


def test_update_to_taken_email_conflicts(services):
    services.users.register('bob', 'b@x.com', 'secret1')
    user_id = services.users.register('alice', 'a@x.com', 'secret1')
    with pytest.raises(ConflictError):
        services.users.update(user_id, email='b@x.com')
    # Re-submitting your own email is fine
    assert services.users.update(user_id, email='a@x.com').email == 'a@x.com'


def test_update_and_remove_unknown_user(services):
    with pytest.raises(NotFoundError):
        services.users.update('0123456789abcdef01234567', name='x')
    with pytest.raises(NotFoundError):
        services.users.remove('0123456789abcdef01234567')
    with pytest.raises(NotFoundError):
        services.users.remove('garbage')


def test_remove_user(services):
    user_id = services.users.register('alice', 'a@x.com', 'secret1')
    services.users.remove(user_id)
    assert services.users.find_by_id(user_id) is None


def test_register_endpoint_returns_token(client, register):
    res = register()
    assert res.status_code == 201
    data = res.get_json()
    assert data['success'] is True
    assert data['user_id']
    assert data['token']


def test_register_alias_route(client):
    res = client.post('/api/auth/register', json={'name': 'bob', 'email': 'b@x.com', 'password': 'secret1'})
    assert res.status_code == 201


def test_register_validation_errors(client):
    res = client.post('/api/users', json={'name': '', 'email': 'not-an-email', 'password': '123'})
    assert res.status_code == 400
    data = res.get_json()
    assert data['code'] == 'VALIDATION_ERROR'
    fields = {error['field'] for error in data['errors']}
    assert fields == {'name', 'email', 'password'}


def test_register_without_body(client):
    res = client.post('/api/users', data='nope', content_type='text/plain')
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Request body is required'


def test_register_duplicate_email_endpoint(register):
    assert register().status_code == 201
    res = register(name='other')
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Email already exists'


def test_update_user_endpoint(client, register, sign_in):
    user_id = register().get_json()['user_id']
    headers = {'x-auth-token': sign_in().get_json()['token']}

    res = client.put(f'/api/users/{user_id}', json={'password': 'changed1'}, headers=headers)
    assert res.status_code == 200
    body = res.get_json()
    assert body['user']['email'] == 'a@x.com'
    assert 'password' not in body['user']

    assert sign_in(password='secret1').status_code == 400
    assert sign_in(password='changed1').status_code == 200


def test_update_user_requires_token_by_default(client, register):
    user_id = register().get_json()['user_id']
    res = client.put(f'/api/users/{user_id}', json={'name': 'x'})
    assert res.status_code == 401


def test_user_routes_open_when_unprotected(make_app):
    client = make_app(PROTECT_USER_ROUTES=False).test_client()
    user_id = client.post('/api/users', json={'name': 'a', 'email': 'a@x.com', 'password': 'secret1'}).get_json()['user_id']
    assert client.put(f'/api/users/{user_id}', json={'name': 'b'}).status_code == 200
    assert client.delete(f'/api/users/{user_id}').status_code == 200
    assert client.delete(f'/api/users/{user_id}').status_code == 404


def test_update_user_validation(client, register, sign_in):
    user_id = register(name='c', email='c@x.com').get_json()['user_id']
    headers = {'x-auth-token': sign_in(email='c@x.com').get_json()['token']}
    res = client.put(f'/api/users/{user_id}', json={'email': 'broken'}, headers=headers)
    assert res.status_code == 400
    assert res.get_json()['errors'][0]['field'] == 'email'


def test_delete_user_endpoint(client, register, sign_in):
    user_id = register().get_json()['user_id']
    headers = {'x-auth-token': sign_in().get_json()['token']}

    assert client.delete(f'/api/users/{user_id}', headers=headers).status_code == 200
    res = client.delete(f'/api/users/{user_id}', headers=headers)
    assert res.status_code == 404
    assert res.get_json()['error'] == 'User not found'


def test_passwords_past_bcrypt_limit_are_refused(services):
    services.users.register('alice', 'a@x.com', 'secret1')
    with pytest.raises(ValidationError):
        services.users.hash_password('p' * 100)
    assert services.users.verify_credentials('nobody@x.com', 'p' * 100) is None
    assert services.users.verify_credentials('a@x.com', 'p' * 100) is None


def test_password_whitespace_is_kept(client, services, register, sign_in):
    res = register(name='  alice  ', password=' secret1 ')
    assert res.status_code == 201
    assert services.users.find_by_id(res.get_json()['user_id']).name == 'alice'

    assert sign_in(password=' secret1 ').status_code == 200
    assert sign_in(password='secret1').status_code == 400


@pytest.mark.parametrize('password', ['p' * 100, 'é' * 40])
def test_register_rejects_passwords_over_72_bytes(register, password):
    res = register(password=password)
    assert res.status_code == 400
    data = res.get_json()
    assert data['code'] == 'VALIDATION_ERROR'
    assert {error['field'] for error in data['errors']} == {'password'}


def test_multibyte_password_within_limit(register, sign_in):
    password = 'é' * 30
    assert register(password=password).status_code == 201
    assert sign_in(password=password).status_code == 200


def test_long_password_sign_in_is_invalid_credentials(register, sign_in):
    register()
    for email in ('a@x.com', 'nobody@x.com'):
        res = sign_in(email=email, password='p' * 100)
        assert res.status_code == 400
        assert res.get_json()['error'] == 'Invalid credentials'


def test_update_rejects_long_password(client, register, sign_in):
    user_id = register().get_json()['user_id']
    headers = {'x-auth-token': sign_in().get_json()['token']}
    res = client.put(f'/api/users/{user_id}', json={'password': 'p' * 100}, headers=headers)
    assert res.status_code == 400
    assert sign_in().status_code == 200


def test_cannot_change_another_users_record(client, register, sign_in):
    alice_id = register().get_json()['user_id']
    register(name='mallory', email='m@x.com')
    headers = {'x-auth-token': sign_in(email='m@x.com').get_json()['token']}

    res = client.put(f'/api/users/{alice_id}', json={'password': 'hijacked'}, headers=headers)
    assert res.status_code == 404
    assert sign_in(password='secret1').status_code == 200
    assert sign_in(password='hijacked').status_code == 400

    assert client.delete(f'/api/users/{alice_id}', headers=headers).status_code == 404
    assert sign_in().status_code == 200
