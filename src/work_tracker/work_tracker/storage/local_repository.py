from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Sequence

from ..core.constants import STORAGE_KEY
from ..core.exceptions import StorageError
from ..records.model import WorkRecord

logger = logging.getLogger(__name__)


class LocalRecordStorage:
    """Key-value JSON file; one key holds the whole serialized record array.

    The file looks like ``{"work-tracker-records": "[{...}, ...]"}`` so other
    keys can live next to the records, the way browser local storage works.
    """

    def __init__(self, path: str | os.PathLike, *, key: str = STORAGE_KEY):
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_store(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as f:
                store = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Local store is not valid JSON: {self._path}") from e
        if not isinstance(store, dict):
            raise StorageError(f"Local store must be a JSON object: {self._path}")
        return store

    def load(self) -> list[WorkRecord]:
        raw = self._read_store().get(self._key)
        if not raw:
            return []
        try:
            items = json.loads(raw)
            return [WorkRecord.from_dict(item) for item in items]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Stored records under {self._key!r} are malformed") from e

    def save(self, records: Sequence[WorkRecord]) -> None:
        store = self._read_store()
        store[self._key] = json.dumps([r.to_dict() for r in records], ensure_ascii=False)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".records-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(store, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write local store: {self._path}") from e

        logger.debug("Saved %d records to %s", len(records), self._path)
