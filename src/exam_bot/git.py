"""Commit and push updated collection files from the action's checkout."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from exam_bot.errors import NotificationError

logger = logging.getLogger(__name__)


class GitRepository:
    def __init__(self, workdir: Path | None = None, git: str = "git") -> None:
        self.workdir = workdir
        self.git = git

    def _run(self, *args: str) -> str:
        cmd = [self.git, *args]
        try:
            result = subprocess.run(  # noqa: S603
                cmd,
                cwd=self.workdir,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise NotificationError(f"{' '.join(cmd)} exited {exc.returncode}: {detail}") from exc
        except OSError as exc:
            raise NotificationError(f"failed to run {' '.join(cmd)}: {exc}") from exc
        return result.stdout

    def configure(self, name: str, email: str) -> None:
        self._run("config", "user.name", name)
        self._run("config", "user.email", email)

    def commit_and_push(self, paths: Sequence[Path], message: str) -> None:
        self._run("add", "--", *(str(p) for p in paths))
        self._run("commit", "-m", message)
        self._run("push")
        logger.info("Pushed %d file(s): %s", len(paths), message)
