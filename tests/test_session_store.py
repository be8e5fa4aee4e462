import pytest

from session_store import LocalSessionStore, USER_KEY


def test_save_load_remove():
    store = LocalSessionStore()
    assert store.load('theme') is None
    store.save('theme', 'light')
    assert store.load('theme') == 'light'
    store.remove('theme')
    assert store.load('theme') is None


def test_remove_absent_key_is_noop():
    store = LocalSessionStore()
    store.remove('language')
    assert store.backend == {}


def test_values_must_be_text():
    with pytest.raises(TypeError):
        LocalSessionStore().save('points', 3)


def test_json_values_are_stored_as_text():
    backend = {}
    store = LocalSessionStore(backend)
    store.save_json(USER_KEY, {'name': 'Aysel', 'points': 3})
    assert isinstance(backend[USER_KEY], str)
    assert 'Aysel' in backend[USER_KEY]
    assert store.load_json(USER_KEY) == {'name': 'Aysel', 'points': 3}


def test_corrupt_json_reads_as_absent():
    store = LocalSessionStore({USER_KEY: '{oops'})
    assert store.load_json(USER_KEY) is None
