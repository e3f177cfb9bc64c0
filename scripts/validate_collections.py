"""Validate exam collection files against the question collection schema."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from exam_bot.errors import StoreError
from exam_bot.models import Question
from exam_bot.store import list_collections, load_collection


def validate_paths(paths: list[Path]) -> list[str]:
    """Return one error line per invalid collection."""
    errors: list[str] = []
    for path in paths:
        try:
            questions = [Question.from_entry(entry) for entry in load_collection(path)]
        except StoreError as exc:
            errors.append(str(exc))
            continue
        print(f"✓ {path} ({len(questions)} questions)")
    return errors


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Collection files to check (default: every *.json in --collections-dir).",
    )
    parser.add_argument("--collections-dir", type=Path, default=Path("."))
    args = parser.parse_args(argv)

    paths = args.paths or list_collections(args.collections_dir)
    if not paths:
        print(f"✗ no collections found in {args.collections_dir}", file=sys.stderr)
        return 1
    errors = validate_paths(paths)
    for line in errors:
        print(f"✗ {line}", file=sys.stderr)
    return 1 if errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
