from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .common.datetime_utils import now_local
from .records.service import WorkRecordService
from .storage.github_repository import GitHubConfig, GitHubRecordStorage
from .storage.local_repository import LocalRecordStorage
from .summaries.service import SummaryService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    local_storage: LocalRecordStorage
    remote_storage: Optional[GitHubRecordStorage]

    record_service: WorkRecordService
    summary_service: SummaryService

    clock: Callable[[], datetime] = now_local


def build_container(
    *,
    local_store_path: str | Path,
    github_config: Optional[dict] = None,
    remote_storage: Optional[GitHubRecordStorage] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Create storage and services once; the app holds them for its lifetime.

    `remote_storage` overrides the one built from `github_config` (tests).
    """
    local_storage = LocalRecordStorage(local_store_path)

    if remote_storage is None:
        config = GitHubConfig.from_settings(github_config or {})
        if config:
            remote_storage = GitHubRecordStorage(config)
        else:
            logger.warning("GitHub configuration not found. Using local storage instead.")

    record_service = WorkRecordService(local_storage, remote_storage, clock=clock)
    summary_service = SummaryService(record_service, clock=clock)

    return Container(
        local_storage=local_storage,
        remote_storage=remote_storage,
        record_service=record_service,
        summary_service=summary_service,
        clock=clock,
    )
