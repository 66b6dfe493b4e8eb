"""Critic agent that reviews pattern proposals."""

from __future__ import annotations

import datetime as _dt
import logging
import os
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional

from patterngen.generator.assembler import PatternAssembler, PatternData
from patterngen.generator.mood import MoodProfile, classify_mood
from patterngen.generator.shapes import (
    FEATURE_TYPES,
    GRID_STEP,
    SNAPPED_ROTATIONS,
    Shape,
)
from patterngen.logging import log_jsonl
from patterngen.validate import validate_proposal

_DEFAULT_LOG_PATH = "meta/output/patterngen/critic.jsonl"
_FAIL_FAST_ENV = "PATTERNGEN_FAIL_FAST"

ValidatorType = Callable[[Mapping[str, Any]], Dict[str, Any]]


def is_fail_fast_enabled() -> bool:
    """Return True unless PATTERNGEN_FAIL_FAST explicitly disables strict mode."""

    raw = os.getenv(_FAIL_FAST_ENV)
    if raw is None:
        return True

    return raw.strip().lower() not in {"0", "false", "no", "off"}


def _within(value: float, bounds) -> bool:
    low, high = bounds
    return low <= value <= high


def _on_grid(value: float) -> bool:
    return 0 <= value <= 100 and (value / GRID_STEP).is_integer()


def _check_regular(index: int, shape: Shape, profile: MoodProfile) -> List[str]:
    issues: List[str] = []
    label = f"shape[{index}]"

    if shape.type in profile.excluded_types():
        issues.append(f"{label}: type {shape.type.value} is excluded for mood {profile.mood.value}")

    for axis, value in (("x", shape.x), ("y", shape.y)):
        if profile.snap_to_grid:
            if not _on_grid(value):
                issues.append(f"{label}: {axis}={value} is not on the {GRID_STEP} grid")
        elif not _within(value, (5, 95)):
            issues.append(f"{label}: {axis}={value} outside [5, 95]")

    if not _within(shape.size, profile.size_range):
        issues.append(f"{label}: size={shape.size} outside {list(profile.size_range)}")

    if profile.snap_to_grid:
        if shape.rotation not in SNAPPED_ROTATIONS:
            issues.append(f"{label}: rotation={shape.rotation} is not a snapped angle")
    elif not (0 <= shape.rotation < 360):
        issues.append(f"{label}: rotation={shape.rotation} outside [0, 360)")

    if not _within(shape.opacity, (0.08, profile.opacity_cap)):
        issues.append(f"{label}: opacity={shape.opacity} outside [0.08, {profile.opacity_cap}]")

    if not _within(shape.stroke_width, (1, 3)):
        issues.append(f"{label}: stroke_width={shape.stroke_width} outside [1, 3]")

    return issues


def _check_feature(shape: Shape) -> List[str]:
    issues: List[str] = []
    if shape.type not in FEATURE_TYPES:
        issues.append(f"feature: type {shape.type.value} is not a feature type")
    for axis, value in (("x", shape.x), ("y", shape.y)):
        if not _within(value, (25, 75)):
            issues.append(f"feature: {axis}={value} outside [25, 75]")
    if not _within(shape.size, (20, 40)):
        issues.append(f"feature: size={shape.size} outside [20, 40]")
    if not 0 <= shape.rotation < 180:
        issues.append(f"feature: rotation={shape.rotation} outside [0, 180)")
    if not _within(shape.opacity, (0.08, 0.2)):
        issues.append(f"feature: opacity={shape.opacity} outside [0.08, 0.2]")
    if not _within(shape.stroke_width, (2, 4)):
        issues.append(f"feature: stroke_width={shape.stroke_width} outside [2, 4]")
    return issues


def check_invariants(proposal: Mapping[str, Any], assembler: Optional[PatternAssembler] = None) -> List[str]:
    """Return the engine invariants *proposal* violates.

    *proposal* must already satisfy the proposal schema. Theme, profile and
    reproduction checks use *assembler*'s tables, the built-in ones by default.
    """

    assembler = assembler or PatternAssembler()

    issues: List[str] = []
    tags = list(proposal.get("tags") or [])
    pattern = PatternData.from_dict(proposal["pattern"])

    expected_mood = classify_mood(tags)
    if proposal.get("mood") != expected_mood.value:
        issues.append(f"mood {proposal.get('mood')} does not match tags (expected {expected_mood.value})")
    profile = assembler.profiles[expected_mood]

    regular = pattern.regular_shapes
    low, high = profile.count_range
    if not low <= len(regular) <= high:
        issues.append(f"regular shape count {len(regular)} outside [{low}, {high}] for mood {expected_mood.value}")

    for index, shape in enumerate(regular):
        issues.extend(_check_regular(index, shape, profile))
    issues.extend(_check_feature(pattern.feature_shape))

    palettes = [theme.palette for theme in assembler.themes if theme.background == pattern.background_gradient]
    if not palettes:
        issues.append(f"background gradient {list(pattern.background_gradient)} matches no theme")
    else:
        allowed = {color for palette in palettes for color in palette}
        stray = sorted({shape.color for shape in pattern.shapes} - allowed)
        if stray:
            issues.append(f"shape colors {stray} are outside the theme palette")

    if proposal.get("pattern_version") == assembler.version:
        expected = assembler.generate(proposal["seed"], tags)
        if expected != pattern:
            issues.append("pattern does not reproduce from its seed and tags")

    return issues


class CriticAgent:
    """Review proposals against the proposal schema and the engine invariants."""

    def __init__(
        self,
        validator: Optional[ValidatorType] = None,
        *,
        assembler: Optional[PatternAssembler] = None,
        log_path: str = _DEFAULT_LOG_PATH,
    ) -> None:
        self._validator = validator or validate_proposal
        self._assembler = assembler or PatternAssembler()
        self.log_path = log_path
        self._logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def _resolve_trace_id(proposal: Mapping[str, Any]) -> str:
        provenance = proposal.get("provenance")
        if isinstance(provenance, dict) and provenance.get("trace_id"):
            return str(provenance["trace_id"])
        return str(uuid.uuid4())

    def review(self, proposal: Dict[str, Any]) -> Dict[str, Any]:
        """Inspect *proposal* and return a review payload.

        Schema failures always fail the review. Invariant violations fail it
        when ``PATTERNGEN_FAIL_FAST`` is enabled (default) and are downgraded
        to warnings otherwise.
        """

        if not isinstance(proposal, dict):
            raise ValueError("proposal must be a dictionary")

        fail_fast = is_fail_fast_enabled()
        issues: List[str] = []
        schema_errors: List[Dict[str, Any]] = []
        validation_status = "pending"

        try:
            result = self._validator(proposal)
        except Exception as exc:
            message = f"schema validation error: {exc}"
            self._logger.error(message)
            issues.append(message)
            validation_status = "failed"
        else:
            if not result.get("ok", False):
                schema_errors = list(result.get("errors") or [])
                issues.extend(f"schema: {error.get('message')}" for error in schema_errors)
                issues = issues or ["schema: validation failed"]
                validation_status = "failed"
                self._logger.error("Proposal %s failed schema validation", proposal.get("proposal_id"))

        if validation_status == "pending":
            invariant_issues = check_invariants(proposal, self._assembler)
            issues.extend(invariant_issues)
            if not invariant_issues:
                validation_status = "passed"
            elif fail_fast:
                validation_status = "failed"
                self._logger.error(
                    "Proposal %s violates %d invariant(s)",
                    proposal.get("proposal_id"),
                    len(invariant_issues),
                )
            else:
                validation_status = "warned"
                self._logger.warning(
                    "Validation warning: proposal %s violates %d invariant(s)",
                    proposal.get("proposal_id"),
                    len(invariant_issues),
                )

        review = {
            "proposal_id": proposal.get("proposal_id"),
            "issues": issues,
            "ok": validation_status in {"passed", "warned"},
            "validation_status": validation_status,
            "schema_errors": schema_errors,
            "reviewed_at": _dt.datetime.now(tz=_dt.timezone.utc).isoformat(),
            "strict": fail_fast,
            "mode": "strict" if fail_fast else "relaxed",
            "trace_id": self._resolve_trace_id(proposal),
        }

        self._logger.info("Completed review for proposal %s", proposal.get("proposal_id"))
        log_jsonl(self.log_path, review)
        return review


__all__ = ["CriticAgent", "check_invariants", "is_fail_fast_enabled"]
