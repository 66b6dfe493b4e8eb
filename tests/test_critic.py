"""Tests for the critic agent."""

from __future__ import annotations

import copy
import json
import logging

import pytest

from patterngen.agents.critic import CriticAgent, check_invariants, is_fail_fast_enabled
from patterngen.agents.generator import GeneratorAgent
from patterngen.generator.assembler import PatternAssembler
from patterngen.generator.themes import ColorTheme


@pytest.fixture()
def proposal(tmp_path):
    agent = GeneratorAgent(log_path=str(tmp_path / "generator.jsonl"))
    return agent.propose("budget-tracker-a1b2", ["web-app", "finance"])


@pytest.fixture()
def critic(tmp_path):
    return CriticAgent(log_path=str(tmp_path / "critic.jsonl"))


@pytest.mark.parametrize(
    "raw, expected",
    [(None, True), ("1", True), ("true", True), ("0", False), ("false", False), (" OFF ", False), ("no", False)],
)
def test_fail_fast_flag(monkeypatch, raw, expected) -> None:
    if raw is None:
        monkeypatch.delenv("PATTERNGEN_FAIL_FAST", raising=False)
    else:
        monkeypatch.setenv("PATTERNGEN_FAIL_FAST", raw)
    assert is_fail_fast_enabled() is expected


def test_generated_proposal_passes(proposal, critic, tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("PATTERNGEN_FAIL_FAST", raising=False)
    review = critic.review(proposal)

    assert review["ok"] is True
    assert review["validation_status"] == "passed"
    assert review["issues"] == []
    assert review["schema_errors"] == []
    assert review["mode"] == "strict"
    assert review["strict"] is True
    assert review["proposal_id"] == proposal["proposal_id"]
    assert review["trace_id"] == proposal["provenance"]["trace_id"]

    logged = json.loads((tmp_path / "critic.jsonl").read_text(encoding="utf-8"))
    assert logged["validation_status"] == "passed"


def test_generated_proposals_satisfy_invariants(tmp_path) -> None:
    agent = GeneratorAgent(log_path=str(tmp_path / "generator.jsonl"))
    for tags in (["game"], ["api"], ["health"], ["component"], ["ai-ml"], []):
        for index in range(10):
            assert check_invariants(agent.propose(f"check-{index}", tags)) == []


def test_schema_failure_always_fails(proposal, critic, monkeypatch, caplog) -> None:
    monkeypatch.setenv("PATTERNGEN_FAIL_FAST", "0")
    tampered = copy.deepcopy(proposal)
    tampered["pattern"]["shapes"][0]["x"] = 150

    with caplog.at_level(logging.ERROR, logger="CriticAgent"):
        review = critic.review(tampered)

    assert review["ok"] is False
    assert review["validation_status"] == "failed"
    assert review["schema_errors"]
    assert all(issue.startswith("schema:") for issue in review["issues"])
    assert any("failed schema validation" in message for message in caplog.messages)


def test_mood_mismatch_fails_in_strict_mode(proposal, critic, monkeypatch) -> None:
    monkeypatch.setenv("PATTERNGEN_FAIL_FAST", "1")
    tampered = copy.deepcopy(proposal)
    tampered["mood"] = "bold"

    review = critic.review(tampered)
    assert review["ok"] is False
    assert review["validation_status"] == "failed"
    assert any("does not match tags" in issue for issue in review["issues"])


def test_invariant_issues_are_warnings_in_relaxed_mode(proposal, critic, monkeypatch, caplog) -> None:
    monkeypatch.setenv("PATTERNGEN_FAIL_FAST", "0")
    tampered = copy.deepcopy(proposal)
    tampered["pattern"]["shapes"][0]["color"] = "#000000"

    with caplog.at_level(logging.WARNING, logger="CriticAgent"):
        review = critic.review(tampered)

    assert review["ok"] is True
    assert review["validation_status"] == "warned"
    assert review["mode"] == "relaxed"
    assert any("outside the theme palette" in issue for issue in review["issues"])
    assert any("reproduce" in issue for issue in review["issues"])
    assert any("Validation warning" in message for message in caplog.messages)


def test_range_violations_are_flagged(proposal) -> None:
    tampered = copy.deepcopy(proposal)
    tampered["pattern"]["shapes"][0]["opacity"] = 0.9
    tampered["pattern"]["shapes"][-1]["size"] = 60

    issues = check_invariants(tampered)
    assert any(issue.startswith("shape[0]: opacity=0.9") for issue in issues)
    assert any(issue.startswith("feature: size=60") for issue in issues)


def test_excluded_shape_type_is_flagged(tmp_path) -> None:
    proposal = GeneratorAgent(log_path=str(tmp_path / "generator.jsonl")).propose("tiny-landing", ["landing-page"])
    proposal["pattern"]["shapes"][0]["type"] = "triangle"

    issues = check_invariants(proposal)
    assert any("type triangle is excluded for mood minimal" in issue for issue in issues)


def test_dropped_shapes_break_count_range(proposal) -> None:
    tampered = copy.deepcopy(proposal)
    tampered["pattern"]["shapes"] = tampered["pattern"]["shapes"][-2:]

    issues = check_invariants(tampered)
    assert any(issue.startswith("regular shape count 1") for issue in issues)


def test_other_pattern_versions_skip_reproduction(proposal) -> None:
    legacy = copy.deepcopy(proposal)
    legacy["pattern_version"] = "0"
    legacy["pattern"]["shapes"][0]["x"] = 50.0
    assert check_invariants(legacy) == []


def test_validator_exception_fails_review(proposal, tmp_path) -> None:
    def explode(_candidate):
        raise RuntimeError("boom")

    critic = CriticAgent(validator=explode, log_path=str(tmp_path / "critic.jsonl"))
    review = critic.review(proposal)
    assert review["ok"] is False
    assert review["validation_status"] == "failed"
    assert review["issues"] == ["schema validation error: boom"]


def test_non_dict_proposal_raises(critic) -> None:
    with pytest.raises(ValueError):
        critic.review(["not", "a", "proposal"])  # type: ignore[arg-type]


def test_missing_trace_id_gets_generated(proposal, critic) -> None:
    stripped = copy.deepcopy(proposal)
    del stripped["provenance"]
    review = critic.review(stripped)
    assert review["trace_id"]
    assert review["trace_id"] != proposal["provenance"]["trace_id"]


def _mono_assembler() -> PatternAssembler:
    mono = ColorTheme(("#000000", "#111111"), ("#222222", "#333333", "#444444", "#555555"))
    return PatternAssembler(themes=[mono])


def test_custom_theme_proposals_pass_with_matching_assembler(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PATTERNGEN_FAIL_FAST", "1")
    assembler = _mono_assembler()
    proposal = GeneratorAgent(log_path=str(tmp_path / "generator.jsonl"), assembler=assembler).propose(
        "retro-arcade", ["game"]
    )

    review = CriticAgent(assembler=assembler, log_path=str(tmp_path / "critic.jsonl")).review(proposal)
    assert review["validation_status"] == "passed"
    assert review["issues"] == []


def test_custom_theme_proposals_fail_against_builtin_tables(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PATTERNGEN_FAIL_FAST", "1")
    proposal = GeneratorAgent(log_path=str(tmp_path / "generator.jsonl"), assembler=_mono_assembler()).propose(
        "retro-arcade", ["game"]
    )

    issues = check_invariants(proposal)
    assert any("matches no theme" in issue for issue in issues)
    assert "pattern does not reproduce from its seed and tags" in issues


def test_feature_rotation_is_checked(proposal) -> None:
    tampered = copy.deepcopy(proposal)
    tampered["pattern"]["shapes"][-1]["rotation"] = 270.0

    issues = check_invariants(tampered)
    assert "feature: rotation=270.0 outside [0, 180)" in issues
