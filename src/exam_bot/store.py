"""Read, validate and atomically extend exam collection files.

Each collection is a JSON array of question entries stored as
``<page>.json`` inside the collections directory. Files are created
out-of-band; this module only ever appends to an existing one.
"""

from __future__ import annotations

import json
import logging
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any

from jsonschema import ValidationError, validate

from exam_bot.errors import (
    CollectionDecodeError,
    CollectionNotFoundError,
    CollectionWriteError,
    InvalidRoutingKeyError,
)
from exam_bot.models import Question

COLLECTION_SUFFIX = ".json"
ROUTING_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")

COLLECTION_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["question", "options", "answer", "explain"],
        "properties": {
            "question": {"type": "string"},
            "options": {"type": "array", "items": {"type": "string"}},
            "answer": {"type": "integer"},
            "explain": {"type": "string"},
        },
    },
}

logger = logging.getLogger(__name__)


def collection_path(page: str, root: Path) -> Path:
    """Map a routing key to its collection file under *root*."""
    if not ROUTING_KEY_PATTERN.fullmatch(page):
        raise InvalidRoutingKeyError(f"invalid page name {page!r}")
    base = root.resolve()
    path = (base / f"{page}{COLLECTION_SUFFIX}").resolve()
    if path.parent != base:
        raise InvalidRoutingKeyError(f"page {page!r} resolves outside {base}")
    return path


def list_collections(root: Path) -> list[Path]:
    return sorted(p for p in root.glob(f"*{COLLECTION_SUFFIX}") if p.is_file())


def load_collection(path: Path) -> list[dict[str, Any]]:
    """Return the decoded entries of *path*.

    A missing, undecodable or schema-invalid file raises instead of being
    treated as an empty collection.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise CollectionNotFoundError(f"collection {path} does not exist") from exc
    except json.JSONDecodeError as exc:
        raise CollectionDecodeError(f"failed to decode {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CollectionDecodeError(f"failed to read {path}: {exc}") from exc
    try:
        validate(instance=data, schema=COLLECTION_SCHEMA)
    except ValidationError as exc:
        raise CollectionDecodeError(f"{path} is not a question collection: {exc.message}") from exc
    return data


def dump_collection(entries: list[dict[str, Any]]) -> str:
    return json.dumps(entries, indent=2, ensure_ascii=False) + "\n"


def _write_atomic(path: Path, payload: str) -> None:
    try:
        data = payload.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CollectionWriteError(f"cannot encode {path} as UTF-8: {exc}") from exc
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise CollectionWriteError(f"failed to create temp file next to {path}: {exc}") from exc
    tmp = Path(tmp_name)
    replaced = False
    try:
        with os.fdopen(fd, "wb") as out:
            out.write(data)
            out.flush()
            os.fsync(out.fileno())
        shutil.copymode(path, tmp)
        tmp.replace(path)
        replaced = True
    except (OSError, ValueError) as exc:
        raise CollectionWriteError(f"failed to write {path}: {exc}") from exc
    finally:
        if not replaced:
            tmp.unlink(missing_ok=True)


def append_question(question: Question, root: Path) -> Path:
    """Append *question* to the collection named by its page and return the path."""
    path = collection_path(question.page, root)
    entries = load_collection(path)
    entries.append(question.to_entry())
    _write_atomic(path, dump_collection(entries))
    logger.info("Appended question to %s (%d entries)", path, len(entries))
    return path
