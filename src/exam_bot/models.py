"""Typed shapes for parsed questions and the GitHub issue events that carry them."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from exam_bot.errors import ConfigError

ENTRY_KEYS = ("question", "options", "answer", "explain")


class Question(BaseModel):
    """One multiple-choice question parsed from an issue body.

    ``page`` names the collection the question is appended to. It is never
    written to the collection file.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(default="", alias="question")
    options: list[str] = Field(default_factory=list)
    answer: int | None = None
    explain: str = ""
    page: str = Field(default="", exclude=True)

    def to_entry(self) -> dict[str, Any]:
        # Collection files always carry an integer answer.
        return {
            "question": self.text,
            "options": list(self.options),
            "answer": self.answer if self.answer is not None else 0,
            "explain": self.explain,
        }

    @classmethod
    def from_entry(cls, entry: Mapping[str, Any]) -> Question:
        return cls.model_validate({key: entry[key] for key in ENTRY_KEYS if key in entry})


class LabelPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")
    name: str = ""


class IssuePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")
    number: int
    id: int
    body: str | None = None


class IssueEvent(BaseModel):
    """The part of an ``issues`` webhook payload the bot reads."""

    model_config = ConfigDict(extra="ignore")
    action: str
    issue: IssuePayload
    label: LabelPayload | None = None

    @property
    def label_name(self) -> str:
        return self.label.name if self.label is not None else ""

    @property
    def body(self) -> str:
        return self.issue.body or ""

    @property
    def issue_number(self) -> int:
        return self.issue.number

    @property
    def issue_id(self) -> int:
        return self.issue.id

    @classmethod
    def from_path(cls, path: Path) -> IssueEvent:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Failed reading event payload {path}: {exc}") from exc
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ConfigError(f"Event payload {path} is not an issue event: {exc}") from exc
