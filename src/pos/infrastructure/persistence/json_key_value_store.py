"""JSON-file-backed implementation of KeyValueStore.

All keys live in one JSON object; every ``set`` rewrites the file.
"""

from __future__ import annotations

from pathlib import Path

from pos.domain.exceptions import ServiceError
from pos.domain.gateway.key_value_store import KeyValueStore
from pos.infrastructure.persistence import json_file


class JsonKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        json_file.ensure_file(self._file_path, empty="{}")

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        json_file.persist(self._file_path, data)

    def _load(self) -> dict[str, str]:
        data = json_file.load(self._file_path)
        if not isinstance(data, dict):
            raise ServiceError(f"{self._file_path.name} must contain a JSON object")
        return data
