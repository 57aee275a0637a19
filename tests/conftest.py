# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todostore.storage import FileStorage, TaskStorage
from todostore.store import TaskStore

from .fakes import RecordingStorage


@pytest.fixture()
def backend() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def store(backend: RecordingStorage) -> TaskStore:
    return TaskStore(TaskStorage(backend))


@pytest.fixture()
def storage_file(tmp_path: Path) -> Path:
    return tmp_path / "state" / "storage.json"


@pytest.fixture()
def file_store(storage_file: Path) -> TaskStore:
    return TaskStore(TaskStorage(FileStorage(storage_file)))
