"""Minimal GitHub REST client for commenting on and closing issues."""

from __future__ import annotations

import logging
from typing import Any

import requests

from exam_bot.config import BotConfig
from exam_bot.errors import NotificationError

API_VERSION = "2022-11-28"

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(
        self,
        token: str,
        repository: str,
        *,
        api_url: str,
        timeout: float,
        session: requests.Session | None = None,
    ) -> None:
        self.repository = repository
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
            }
        )

    @classmethod
    def from_config(cls, config: BotConfig) -> GitHubClient:
        return cls(
            config.token,
            config.repository,
            api_url=config.api_url,
            timeout=config.http_timeout,
        )

    def _issue_url(self, number: int) -> str:
        return f"{self.api_url}/repos/{self.repository}/issues/{number}"

    def _request(self, method: str, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NotificationError(f"{method} {url} failed: {exc}") from exc
        if not response.ok:
            raise NotificationError(
                f"{method} {url} returned {response.status_code}: {response.text[:500]}"
            )
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def create_comment(self, number: int, body: str) -> dict[str, Any]:
        logger.info("Commenting on issue #%d", number)
        return self._request("POST", f"{self._issue_url(number)}/comments", {"body": body})

    def close_issue(self, number: int) -> dict[str, Any]:
        logger.info("Closing issue #%d", number)
        return self._request("PATCH", self._issue_url(number), {"state": "closed"})
