"""Key-value store adapters: in-memory and single JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from goldwatch.domain.interfaces.repositories import KeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store, for tests and one-shot runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        """Stored keys, in insertion order."""
        return list(self._data)


class JsonFileKeyValueStore(KeyValueStore):
    """Store persisted as one JSON object in a file.

    The whole file is rewritten on every change through a temporary file and
    os.replace(), so a crash never leaves a half-written store behind. Not
    safe for concurrent writers.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self._path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: top level is not an object", self._path)
            return {}

        return {str(key): str(value) for key, value in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
