import pytest
from werkzeug.security import check_password_hash

from conftest import BrokenUsersCollection
from registry import register_user


def test_registers_user_with_hashed_password(users):
    body, status = register_user(users, {'name': 'Kim', 'email': 'k@x.com', 'password': 'secret'})
    assert status == 200
    assert body == {'success': True, 'message': 'User registered!'}

    doc, = users.docs
    assert doc['name'] == 'Kim'
    assert doc['email'] == 'k@x.com'
    assert 'password' not in doc
    assert doc['password_hash'] != 'secret'
    assert check_password_hash(doc['password_hash'], 'secret')


@pytest.mark.parametrize('payload', [
    None,
    {},
    {'name': 'Kim', 'email': 'k@x.com'},
    {'name': '', 'email': 'k@x.com', 'password': 'secret'},
    {'name': 'Kim', 'password': 'secret'},
    ['Kim', 'k@x.com', 'secret'],
    'name=Kim',
    {'name': 'Kim', 'email': 'k@x.com', 'password': 123456},
    {'name': ['Kim'], 'email': 'k@x.com', 'password': 'secret'},
])
def test_missing_fields(users, payload):
    body, status = register_user(users, payload)
    assert status == 400
    assert body == {'success': False, 'message': 'Missing fields'}
    assert users.docs == []


def test_duplicate_email_rejected(users):
    register_user(users, {'name': 'Kim', 'email': 'k@x.com', 'password': 'secret'})
    body, status = register_user(users, {'name': 'Kim 2', 'email': 'k@x.com', 'password': 'other1'})
    assert status == 409
    assert body['success'] is False
    assert len(users.docs) == 1


def test_storage_failure_reports_db_error():
    body, status = register_user(BrokenUsersCollection(),
                                 {'name': 'Kim', 'email': 'k@x.com', 'password': 'secret'})
    assert status == 500
    assert body == {'success': False, 'message': 'DB error'}
