"""Drive one approved issue through parse, store, commit and close."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, NoReturn, Protocol

from exam_bot.config import BotConfig
from exam_bot.errors import ExamBotError, SubmissionFailed
from exam_bot.models import IssueEvent, Question
from exam_bot.parser import parse_body
from exam_bot.store import append_question

LABELED_ACTION = "labeled"

logger = logging.getLogger(__name__)


class IssueTracker(Protocol):
    def create_comment(self, number: int, body: str) -> Any: ...

    def close_issue(self, number: int) -> Any: ...


class VersionControl(Protocol):
    def configure(self, name: str, email: str) -> None: ...

    def commit_and_push(self, paths: Sequence[Path], message: str) -> None: ...


@dataclass(frozen=True)
class HandlerResult:
    status: Literal["ignored", "closed"]
    reason: str = ""
    path: Path | None = None
    question: Question | None = None


def commit_message(event: IssueEvent) -> str:
    return f"Update question from issue #{event.issue_id}"


class SubmissionHandler:
    """Apply an approved question submission.

    Each step runs only if the previous one succeeded. A failure is reported
    as a comment on the issue and raised as :class:`SubmissionFailed`. Steps
    that already completed are not undone.
    """

    def __init__(self, config: BotConfig, github: IssueTracker, git: VersionControl) -> None:
        self.config = config
        self.github = github
        self.git = git

    def should_handle(self, event: IssueEvent) -> tuple[bool, str]:
        if event.action != LABELED_ACTION:
            return False, f"ignoring issue action {event.action!r}"
        if event.label_name != self.config.approved_label:
            return False, f"ignoring label {event.label_name!r}"
        return True, ""

    def handle(self, event: IssueEvent) -> HandlerResult:
        accepted, reason = self.should_handle(event)
        if not accepted:
            logger.debug("Issue #%d: %s", event.issue_number, reason)
            return HandlerResult(status="ignored", reason=reason)

        step = "parse question body"
        try:
            question = parse_body(event.body)
            step = "update collection"
            path = append_question(question, self.config.collections_dir)
            step = "commit collection"
            self.git.configure(self.config.git_user_name, self.config.git_user_email)
            self.git.commit_and_push([path], commit_message(event))
            step = "close issue"
            self.github.close_issue(event.issue_number)
        except ExamBotError as exc:
            self._fail(event, f"Failed to {step}: {exc}", exc)

        logger.info("Issue #%d added to page %s", event.issue_number, question.page)
        return HandlerResult(status="closed", path=path, question=question)

    def _fail(self, event: IssueEvent, message: str, cause: ExamBotError) -> NoReturn:
        logger.error("Issue #%d: %s", event.issue_number, message)
        try:
            self.github.create_comment(event.issue_number, message)
        except ExamBotError as exc:
            logger.error("Issue #%d: could not report failure: %s", event.issue_number, exc)
        raise SubmissionFailed(event.issue_number, message) from cause
