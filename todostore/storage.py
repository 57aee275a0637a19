"""
TODO STORE - Persistence
========================
Key-value "local storage" backends and the adapter that keeps the task
collection in its single storage slot.

The slot holds the JSON text of the whole collection. Every save is a full
overwrite; loading never fails, anything unreadable counts as no data.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

from pydantic import ValidationError

from .schema import Task, TaskCollection

logger = logging.getLogger("todostore")

STORAGE_KEY = "tasks"
DEFAULT_STORAGE_FILE = ".todostore/storage.json"


class KeyValueStorage(Protocol):
    """Minimal string key-value store, modelled on a browser's localStorage"""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """In-process storage, nothing survives the process"""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class FileStorage:
    """
    Storage backed by a single JSON file.

    The file holds one JSON object mapping key names to string values.
    Writes go to a sibling temp file which then replaces the target.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_STORAGE_FILE):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:  # ValueError covers JSON and UTF-8 decode errors
            logger.warning(f"Unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} is not a JSON object, ignoring it")
            return {}
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        # Entries written by others are kept as-is, whatever their type
        items = self._read_all()
        items[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False, indent=2)
        tmp.replace(self.path)


class TaskStorage:
    """Reads and writes the task collection in one storage slot"""

    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> List[Task]:
        """Return the stored tasks, or an empty list if there are none or they are malformed"""
        raw = self.storage.get_item(self.key)
        if raw is None:
            logger.debug(f"No stored value under '{self.key}', starting empty")
            return []

        try:
            tasks = TaskCollection.validate_json(raw, strict=True)
        except ValidationError as e:
            logger.warning(f"Discarding malformed task data in '{self.key}': {e.error_count()} error(s)")
            return []

        ids = [task.id for task in tasks]
        if len(set(ids)) != len(ids):
            logger.warning(f"Discarding task data in '{self.key}': duplicate ids")
            return []

        logger.info(f"📂 Loaded {len(tasks)} task(s) from '{self.key}'")
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Overwrite the slot with the full collection"""
        payload = [task.model_dump(mode="json") for task in tasks]
        self.storage.set_item(self.key, json.dumps(payload))
        logger.debug(f"💾 Saved {len(payload)} task(s) to '{self.key}'")
