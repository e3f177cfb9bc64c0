"""Runtime settings for the submission bot, read once from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from exam_bot.errors import ConfigError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_APPROVED_LABEL = "approved"
DEFAULT_GIT_USER = "bot"
DEFAULT_GIT_EMAIL = "bot@learn.github.com"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class BotConfig:
    token: str
    repository: str
    api_url: str = DEFAULT_API_URL
    collections_dir: Path = Path(".")
    approved_label: str = DEFAULT_APPROVED_LABEL
    git_user_name: str = DEFAULT_GIT_USER
    git_user_email: str = DEFAULT_GIT_EMAIL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BotConfig:
        """Build a config from *environ* (defaults to ``os.environ``).

        Every missing required variable is reported in a single error.
        """
        env = os.environ if environ is None else environ
        token = env.get("GITHUB_TOKEN", "").strip()
        repository = env.get("GITHUB_REPOSITORY", "").strip()

        missing = [
            name
            for name, value in (("GITHUB_TOKEN", token), ("GITHUB_REPOSITORY", repository))
            if not value
        ]
        if missing:
            raise ConfigError(
                "Missing required environment variable(s): "
                + ", ".join(missing)
                + ". Pass the workflow's GITHUB_TOKEN secret to the action."
            )
        if repository.count("/") != 1:
            raise ConfigError(f"GITHUB_REPOSITORY must look like owner/name, got {repository!r}")

        raw_timeout = env.get("EXAM_BOT_HTTP_TIMEOUT", "").strip()
        timeout = DEFAULT_HTTP_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigError(f"EXAM_BOT_HTTP_TIMEOUT must be a number, got {raw_timeout!r}") from exc
            if timeout <= 0:
                raise ConfigError("EXAM_BOT_HTTP_TIMEOUT must be positive")

        return cls(
            token=token,
            repository=repository,
            api_url=(env.get("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
            collections_dir=Path(env.get("EXAM_BOT_COLLECTIONS_DIR") or "."),
            approved_label=env.get("EXAM_BOT_APPROVED_LABEL") or DEFAULT_APPROVED_LABEL,
            git_user_name=env.get("EXAM_BOT_GIT_USER") or DEFAULT_GIT_USER,
            git_user_email=env.get("EXAM_BOT_GIT_EMAIL") or DEFAULT_GIT_EMAIL,
            http_timeout=timeout,
        )
