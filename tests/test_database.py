import json

import pytest

from prepper.core.errors import StorageError
from prepper.database import InMemoryStore, JsonFileStore, empty_document


def test_json_file_store_treats_missing_file_as_empty_document(tmp_path) -> None:
    store = JsonFileStore(tmp_path / 'db.json')

    assert store.load() == empty_document()


def test_json_file_store_persists_appended_rows(tmp_path) -> None:
    path = tmp_path / 'db.json'
    store = JsonFileStore(path)

    store.append('users', {'id': 'u1', 'email': 'a@example.com'})

    on_disk = json.loads(path.read_text(encoding='utf-8'))
    assert on_disk == {'users': [{'id': 'u1', 'email': 'a@example.com'}], 'attempts': [], 'questions': []}
    assert JsonFileStore(path).read('users') == [{'id': 'u1', 'email': 'a@example.com'}]


def test_json_file_store_defaults_missing_collections(tmp_path) -> None:
    path = tmp_path / 'db.json'
    path.write_text(json.dumps({'users': [{'id': 'u1'}]}), encoding='utf-8')

    document = JsonFileStore(path).load()

    assert document == {'users': [{'id': 'u1'}], 'attempts': [], 'questions': []}


def test_json_file_store_reloads_when_file_changes(tmp_path) -> None:
    path = tmp_path / 'db.json'
    first = JsonFileStore(path)
    second = JsonFileStore(path)
    assert first.read('attempts') == []

    second.append('attempts', {'id': 'a1'})

    assert first.read('attempts') == [{'id': 'a1'}]


def test_json_file_store_leaves_no_temp_files(tmp_path) -> None:
    store = JsonFileStore(tmp_path / 'db.json')

    store.write('questions', [{'id': 1}])
    store.append('attempts', {'id': 'a1'})

    assert sorted(p.name for p in tmp_path.iterdir()) == ['db.json']


def test_json_file_store_raises_storage_error_for_corrupt_file(tmp_path) -> None:
    path = tmp_path / 'db.json'
    path.write_text('{not json', encoding='utf-8')

    with pytest.raises(StorageError):
        JsonFileStore(path).load()


def test_json_file_store_rejects_non_array_collection(tmp_path) -> None:
    path = tmp_path / 'db.json'
    path.write_text(json.dumps({'users': {}}), encoding='utf-8')

    with pytest.raises(StorageError):
        JsonFileStore(path).read('users')


def test_json_file_store_raises_storage_error_when_unwritable(tmp_path) -> None:
    blocker = tmp_path / 'blocker'
    blocker.write_text('', encoding='utf-8')
    store = JsonFileStore(blocker / 'db.json')

    with pytest.raises(StorageError):
        store.append('users', {'id': 'u1'})


def test_read_returns_copy_that_does_not_mutate_store() -> None:
    store = InMemoryStore({'users': [{'id': 'u1'}], 'attempts': [], 'questions': []})

    rows = store.read('users')
    rows.append({'id': 'u2'})
    rows[0]['id'] = 'changed'

    assert store.read('users') == [{'id': 'u1'}]


def test_unknown_collection_raises_storage_error() -> None:
    with pytest.raises(StorageError):
        InMemoryStore().read('sessions')


def test_in_memory_store_reload_reads_persisted_snapshot() -> None:
    store = InMemoryStore()
    store.append('attempts', {'id': 'a1', 'result': {'careerPath': 'Data Science'}})

    document = store.reload()

    assert document['attempts'] == [{'id': 'a1', 'result': {'careerPath': 'Data Science'}}]


def test_append_unique_skips_rows_with_existing_key() -> None:
    store = InMemoryStore()

    assert store.append_unique('users', {'id': 'u1', 'email': 'a@example.com'}, key='email')
    assert not store.append_unique('users', {'id': 'u2', 'email': 'a@example.com'}, key='email')
    assert store.append_unique('users', {'id': 'u3', 'email': 'b@example.com'}, key='email')

    assert [row['id'] for row in store.reload()['users']] == ['u1', 'u3']
