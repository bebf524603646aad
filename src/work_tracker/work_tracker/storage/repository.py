from __future__ import annotations

from typing import Protocol, Sequence

from ..records.model import WorkRecord


class RecordStorage(Protocol):
    """Stores the full record list as a single unit (read all / write all)."""

    def load(self) -> list[WorkRecord]:
        raise NotImplementedError

    def save(self, records: Sequence[WorkRecord]) -> None:
        raise NotImplementedError
