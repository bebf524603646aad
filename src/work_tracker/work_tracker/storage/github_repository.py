from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence

import httpx

from ..core.constants import DEFAULT_GITHUB_BRANCH, DEFAULT_GITHUB_PATH, GITHUB_API_URL, REMOTE_TIMEOUT_SECONDS
from ..core.exceptions import RemoteConflictError, RemoteStorageError, StorageError
from ..periods.retention import filter_retained
from ..records.model import WorkRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitHubConfig:
    owner: str
    repo: str
    token: str
    path: str = DEFAULT_GITHUB_PATH
    branch: str = DEFAULT_GITHUB_BRANCH

    @classmethod
    def from_settings(cls, settings: dict) -> Optional["GitHubConfig"]:
        """None when owner/repo/token are missing: that selects local-only mode."""
        owner = settings.get("owner")
        repo = settings.get("repo")
        token = settings.get("token")
        if not owner or not repo or not token:
            return None
        return cls(
            owner=str(owner),
            repo=str(repo),
            token=str(token),
            path=str(settings.get("path") or DEFAULT_GITHUB_PATH),
            branch=str(settings.get("branch") or DEFAULT_GITHUB_BRANCH),
        )


@dataclass(frozen=True)
class RemoteFile:
    records: list[WorkRecord]
    sha: Optional[str]


class GitHubRecordStorage:
    """Records kept as one JSON file in a GitHub repository (contents API).

    Writes use the file's blob sha as an optimistic-concurrency token; a stale
    sha is rejected by GitHub and surfaces as RemoteConflictError.
    """

    def __init__(
        self,
        config: GitHubConfig,
        *,
        client: Optional[httpx.Client] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._config = config
        self._client = client or httpx.Client(base_url=GITHUB_API_URL, timeout=REMOTE_TIMEOUT_SECONDS)
        self._clock = clock

    @property
    def config(self) -> GitHubConfig:
        return self._config

    def _url(self) -> str:
        c = self._config
        return f"/repos/{c.owner}/{c.repo}/contents/{c.path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"token {self._config.token}",
            "Accept": "application/vnd.github.v3+json",
        }

    def _request(self, method: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, self._url(), headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error("GitHub %s %s failed: %s", method, self._url(), e)
            raise RemoteStorageError(f"GitHub API request failed: {e}") from e

    def _get_file(self) -> Optional[dict[str, Any]]:
        resp = self._request("GET", params={"ref": self._config.branch})

        if resp.status_code == 404:
            return None
        if not resp.is_success:
            raise RemoteStorageError(f"GitHub API error: {resp.status_code}", status_code=resp.status_code)
        return resp.json()

    def fetch(self) -> RemoteFile:
        """Read the file and its sha. A missing file is an empty list."""
        data = self._get_file()
        if data is None:
            return RemoteFile(records=[], sha=None)

        try:
            content = base64.b64decode(data["content"]).decode("utf-8")
            items = json.loads(content)
            records = [WorkRecord.from_dict(item) for item in items]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError("Remote records file is malformed") from e

        return RemoteFile(records=records, sha=data.get("sha"))

    def load(self, *, now: Optional[datetime] = None) -> list[WorkRecord]:
        return filter_retained(self.fetch().records, now)

    def save(self, records: Sequence[WorkRecord]) -> None:
        current = self._get_file()
        sha = current.get("sha") if current else None

        payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2)
        body: dict[str, Any] = {
            "message": f"Update work records - {self._clock().isoformat()}",
            "content": base64.b64encode(payload.encode("utf-8")).decode("ascii"),
            "branch": self._config.branch,
        }
        if sha:
            body["sha"] = sha

        resp = self._request("PUT", json=body)

        if resp.status_code in (409, 422):
            raise RemoteConflictError(
                f"GitHub rejected the write (stale version): {resp.status_code} - {resp.text}",
                status_code=resp.status_code,
            )
        if not resp.is_success:
            raise RemoteStorageError(
                f"GitHub API error: {resp.status_code} - {resp.text}",
                status_code=resp.status_code,
            )

        logger.info("Records saved to GitHub (%d records)", len(records))
