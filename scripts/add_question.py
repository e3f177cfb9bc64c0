#!/usr/bin/env python3
"""Append the question from an approved issue to its exam collection.

Run from the ``issues`` workflow with the event payload exposed by Actions:
    python scripts/add_question.py

Or check a submission locally without touching any file:
    python scripts/add_question.py --dry-run --body-file issue.md
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from exam_bot.config import BotConfig
from exam_bot.errors import ExamBotError, SubmissionFailed
from exam_bot.git import GitRepository
from exam_bot.github import GitHubClient
from exam_bot.handler import SubmissionHandler
from exam_bot.models import IssueEvent
from exam_bot.parser import parse_body
from exam_bot.store import collection_path

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("exam_bot.add_question")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add an approved question to its exam page.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse --body-file and print the resulting entry without writing anything.",
    )
    parser.add_argument("--body-file", help="Issue body to parse in --dry-run mode.")
    parser.add_argument(
        "--collections-dir",
        default=os.environ.get("EXAM_BOT_COLLECTIONS_DIR", "."),
        help="Directory holding <page>.json collections (dry-run only).",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("EXAM_BOT_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO).",
    )
    return parser.parse_args(argv)


def _dry_run(args: argparse.Namespace) -> int:
    if not args.body_file:
        logger.error("--dry-run requires --body-file")
        return 2
    try:
        body = Path(args.body_file).read_text(encoding="utf-8")
        question = parse_body(body)
        path = collection_path(question.page, Path(args.collections_dir))
    except OSError as exc:
        logger.error("Failed reading %s: %s", args.body_file, exc)
        return 1
    except ExamBotError as exc:
        logger.error("%s", exc)
        return 1
    print(json.dumps({"path": str(path), "entry": question.to_entry()}, indent=2, ensure_ascii=False))
    return 0


def run(environ: dict[str, str] | None = None) -> int:
    env = dict(os.environ) if environ is None else environ
    if env.get("GITHUB_ACTIONS") != "true":
        logger.debug("Not running inside GitHub Actions, nothing to do.")
        return 0
    event_name = env.get("GITHUB_EVENT_NAME", "")
    if event_name != "issues":
        logger.debug("Not an issue event (%r), nothing to do.", event_name)
        return 0

    try:
        config = BotConfig.from_env(env)
        event = IssueEvent.from_path(Path(env.get("GITHUB_EVENT_PATH", "")))
    except ExamBotError as exc:
        logger.error("%s", exc)
        return 1

    handler = SubmissionHandler(config, GitHubClient.from_config(config), GitRepository())
    try:
        result = handler.handle(event)
    except SubmissionFailed:
        return 1
    if result.status == "ignored":
        logger.debug("%s", result.reason)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    if args.dry_run:
        return _dry_run(args)
    return run()


if __name__ == "__main__":
    sys.exit(main())
