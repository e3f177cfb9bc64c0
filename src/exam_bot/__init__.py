"""Turn approved question-submission issues into entries of exam collection files."""

from exam_bot.errors import (
    CollectionDecodeError,
    CollectionNotFoundError,
    CollectionWriteError,
    ConfigError,
    ExamBotError,
    InvalidRoutingKeyError,
    NotificationError,
    ParseError,
    StoreError,
    SubmissionFailed,
)
from exam_bot.models import IssueEvent, Question
from exam_bot.parser import parse_body
from exam_bot.store import append_question, collection_path, load_collection

__all__ = [
    "CollectionDecodeError",
    "CollectionNotFoundError",
    "CollectionWriteError",
    "ConfigError",
    "ExamBotError",
    "InvalidRoutingKeyError",
    "IssueEvent",
    "NotificationError",
    "ParseError",
    "Question",
    "StoreError",
    "SubmissionFailed",
    "append_question",
    "collection_path",
    "load_collection",
    "parse_body",
]
