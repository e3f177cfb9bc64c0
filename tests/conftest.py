from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

SAMPLE_BODY = """\
### question
What is the unit of force?

### option-1
Newton
### option-2
Joule

### answer
1
### explain
Force is measured in newtons.
### page
physics
"""

EXISTING_ENTRIES = [
    {"question": "2 + 2?", "options": ["3", "4"], "answer": 2, "explain": ""},
    {"question": "Capital of France?", "options": ["Paris"], "answer": 1, "explain": "Geography."},
]


@pytest.fixture
def sample_body() -> str:
    return SAMPLE_BODY


@pytest.fixture
def collections_dir(tmp_path: Path) -> Path:
    root = tmp_path / "exams"
    root.mkdir()
    (root / "physics.json").write_text(json.dumps(EXISTING_ENTRIES, indent=2), encoding="utf-8")
    return root
