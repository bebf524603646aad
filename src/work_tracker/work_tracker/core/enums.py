from __future__ import annotations

from enum import Enum


class StorageMode(str, Enum):
    """저장 방식: 로컬 전용 또는 GitHub 원격 저장 + 로컬 백업."""

    LOCAL = "local"
    REMOTE = "remote"
