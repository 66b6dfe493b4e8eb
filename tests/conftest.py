"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import json
import pathlib
import sys
from typing import Any, Dict, List

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

FIXTURES = pathlib.Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def reference_patterns() -> List[Dict[str, Any]]:
    """Patterns the TypeScript frontend produced for known seeds."""

    path = FIXTURES / "reference_patterns.jsonl"
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


@pytest.fixture()
def isolated_cwd(tmp_path, monkeypatch) -> pathlib.Path:
    """Run inside *tmp_path* so default ``meta/output`` sinks stay contained."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PATTERNGEN_FAIL_FAST", raising=False)
    monkeypatch.delenv("PATTERNGEN_OUTPUT_DIR", raising=False)
    return tmp_path
