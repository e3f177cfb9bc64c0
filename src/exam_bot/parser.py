"""Parse a question-submission issue body into a :class:`Question`.

The body is a sequence of sections, each opened by a marker line::

    ### question
    What is the speed of light?
    ### option-1
    300,000 km/s
    ### option-2
    30 km/s
    ### answer
    1
    ### explain
    Rounded to three significant figures.
    ### page
    physics

Blank lines are ignored and consecutive content lines are joined with no
separator. Any text before the first marker is dropped.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Any

from exam_bot.errors import ParseError
from exam_bot.models import Question

MARKER_PREFIX = "### "
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


class Section(enum.Enum):
    NONE = "none"
    QUESTION = "question"
    OPTION = "option"
    ANSWER = "answer"
    EXPLAIN = "explain"
    PAGE = "page"


def _resolve_section(keyword: str) -> Section:
    if keyword == "question":
        return Section.QUESTION
    if keyword.startswith("option"):
        return Section.OPTION
    if keyword == "answer":
        return Section.ANSWER
    if keyword == "explain":
        return Section.EXPLAIN
    if keyword == "page":
        return Section.PAGE
    raise ParseError(f"unknown section {keyword!r}")


def _commit(fields: dict[str, Any], section: Section, value: str) -> None:
    if section is Section.QUESTION:
        fields["text"] = value
    elif section is Section.OPTION:
        fields.setdefault("options", []).append(value)
    elif section is Section.ANSWER:
        if not INTEGER_PATTERN.fullmatch(value):
            raise ParseError(f"answer must be an integer, got {value!r}")
        fields["answer"] = int(value)
    elif section is Section.EXPLAIN:
        fields["explain"] = value
    elif section is Section.PAGE:
        fields["page"] = value


def parse_body(body: str) -> Question:
    """Return the question described by *body*.

    Raises :class:`ParseError` on an unknown section marker, a non-integer
    answer, or when the question text or page is missing.
    """
    fields: dict[str, Any] = {}
    section = Section.NONE
    value = ""

    # Lines end at "\n" only.
    for raw_line in body.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(MARKER_PREFIX):
            _commit(fields, section, value)
            value = ""
            section = _resolve_section(line[len(MARKER_PREFIX) :])
            continue
        value += line
    _commit(fields, section, value)

    question = Question.model_validate(fields)
    if not question.text:
        raise ParseError("missing question text")
    if not question.page:
        raise ParseError("missing page")
    logger.debug(
        "Parsed question for page %s with %d option(s)", question.page, len(question.options)
    )
    return question
