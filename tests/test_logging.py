"""Tests for JSONL logging helpers."""

from __future__ import annotations

import json

from patterngen.logging import log_jsonl, log_pattern_event


def test_log_jsonl_appends_sorted_records(tmp_path) -> None:
    path = tmp_path / "nested" / "log.jsonl"
    log_jsonl(str(path), {"b": 1, "a": 2})
    log_jsonl(str(path), {"c": 3})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == '{"a": 2, "b": 1}'
    assert json.loads(lines[1]) == {"c": 3}


def test_log_pattern_event_tags_event_and_timestamp(tmp_path) -> None:
    path = tmp_path / "events.jsonl"
    log_pattern_event("render", {"seed": "abc"}, path=str(path))

    record = json.loads(path.read_text(encoding="utf-8"))
    assert record["event"] == "render"
    assert record["seed"] == "abc"
    assert "timestamp" in record


def test_log_pattern_event_defaults_to_shared_stream(isolated_cwd) -> None:
    log_pattern_event("slug", {"title": "x"})
    path = isolated_cwd / "meta" / "output" / "patterngen" / "events.jsonl"
    assert json.loads(path.read_text(encoding="utf-8"))["event"] == "slug"
