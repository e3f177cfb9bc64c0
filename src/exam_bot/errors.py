"""Exception hierarchy shared by the parser, store and handler."""

from __future__ import annotations


class ExamBotError(Exception):
    """Base class for every failure that ends a submission run."""


class ParseError(ExamBotError):
    """Raised when an issue body cannot be turned into a question."""


class StoreError(ExamBotError):
    """Raised when a collection file cannot be read or rewritten."""


class InvalidRoutingKeyError(StoreError):
    """Raised when a page name does not map to a file in the collections dir."""


class CollectionNotFoundError(StoreError):
    pass


class CollectionDecodeError(StoreError):
    pass


class CollectionWriteError(StoreError):
    """Raised when the updated collection could not be written.

    The original file is left untouched when this is raised.
    """


class ConfigError(ExamBotError):
    """Raised when required settings are missing or malformed."""


class NotificationError(ExamBotError):
    """Raised when GitHub or git rejects a request."""


class SubmissionFailed(ExamBotError):
    """Raised by the handler once the failure has been reported on the issue."""

    def __init__(self, issue_number: int, message: str) -> None:
        super().__init__(message)
        self.issue_number = issue_number
        self.message = message
