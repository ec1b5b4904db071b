"""Small helpers shared by the JSON-file-backed adapters."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pos.domain.exceptions import ServiceError


def ensure_file(file_path: Path, empty: str = "[]") -> None:
    if not file_path.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(empty, encoding="utf-8")


def load(file_path: Path) -> Any:
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ServiceError(f"Cannot read {file_path.name}: {exc}") from exc


def persist(file_path: Path, data: Any) -> None:
    try:
        file_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ServiceError(f"Cannot write {file_path.name}: {exc}") from exc
