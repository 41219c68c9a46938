import copy
import json
import os
import tempfile
from pathlib import Path
from threading import Lock

from prepper.core import config
from prepper.core.errors import StorageError


COLLECTIONS = ('users', 'attempts', 'questions')


def empty_document() -> dict:
    return {name: [] for name in COLLECTIONS}


def _normalize_document(document) -> dict:
    if not isinstance(document, dict):
        raise StorageError('Database document must be a JSON object.')

    normalized = empty_document()
    for name in COLLECTIONS:
        rows = document.get(name, [])
        if not isinstance(rows, list):
            raise StorageError(f'Collection "{name}" must be a JSON array.')
        normalized[name] = rows
    return normalized


class DocumentStore:
    """Whole-document store holding the users, attempts and questions collections.

    Subclasses provide ``_read_document`` and ``_write_document``; the
    in-memory snapshot is reloaded whenever ``_is_stale`` reports that the
    durable copy changed underneath it.
    """

    def __init__(self) -> None:
        self._data: dict | None = None
        self._lock = Lock()

    def _read_document(self) -> dict:
        raise NotImplementedError

    def _write_document(self, document: dict) -> None:
        raise NotImplementedError

    def _is_stale(self) -> bool:
        return False

    def load(self) -> dict:
        if self._data is None or self._is_stale():
            self._data = _normalize_document(self._read_document())
        return self._data

    def persist(self) -> None:
        if self._data is None:
            self._data = empty_document()
        self._write_document(self._data)

    def read(self, collection: str) -> list[dict]:
        _check_collection(collection)
        with self._lock:
            return copy.deepcopy(self.load()[collection])

    def write(self, collection: str, rows: list[dict]) -> None:
        _check_collection(collection)
        with self._lock:
            self.load()[collection] = copy.deepcopy(list(rows))
            self.persist()

    def append(self, collection: str, row: dict) -> None:
        _check_collection(collection)
        with self._lock:
            self.load()[collection].append(copy.deepcopy(row))
            self.persist()

    def append_unique(self, collection: str, row: dict, key: str) -> bool:
        """Append ``row`` unless a stored row already has the same ``key`` value.

        The scan and the write happen under one lock acquisition. Returns
        ``False`` without writing when a matching row exists.
        """
        _check_collection(collection)
        with self._lock:
            rows = self.load()[collection]
            if any(existing.get(key) == row.get(key) for existing in rows):
                return False
            rows.append(copy.deepcopy(row))
            self.persist()
            return True


def _check_collection(collection: str) -> None:
    if collection not in COLLECTIONS:
        raise StorageError(f'Unknown collection "{collection}".')


class JsonFileStore(DocumentStore):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self.path = Path(path)
        self._loaded_mtime: float | None = None

    def _current_mtime(self) -> float | None:
        try:
            return self.path.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f'Cannot stat database file {self.path}.') from exc

    def _is_stale(self) -> bool:
        return self._current_mtime() != self._loaded_mtime

    def _read_document(self) -> dict:
        mtime = self._current_mtime()
        if mtime is None:
            self._loaded_mtime = None
            return empty_document()

        try:
            with self.path.open('r', encoding='utf-8') as handle:
                document = json.load(handle)
        except (OSError, ValueError) as exc:
            raise StorageError(f'Cannot read database file {self.path}.') from exc

        self._loaded_mtime = mtime
        return document

    def _write_document(self, document: dict) -> None:
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f'.{self.path.name}.', suffix='.tmp', dir=directory)
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as handle:
                    json.dump(document, handle, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise StorageError(f'Cannot write database file {self.path}.') from exc

        self._loaded_mtime = self._current_mtime()


class InMemoryStore(DocumentStore):
    """Store that keeps its "durable" copy in memory; used by tests."""

    def __init__(self, document: dict | None = None) -> None:
        super().__init__()
        self._durable = copy.deepcopy(document) if document is not None else empty_document()

    def _read_document(self) -> dict:
        return copy.deepcopy(self._durable)

    def _write_document(self, document: dict) -> None:
        self._durable = copy.deepcopy(document)

    def reload(self) -> dict:
        """Drop the cached snapshot and read the durable copy again."""
        self._data = None
        return self.load()


_store: DocumentStore | None = None
_store_lock = Lock()


def get_store() -> DocumentStore:
    global _store

    if _store is None:
        with _store_lock:
            if _store is None:
                _store = JsonFileStore(config.DB_FILE)
    return _store
