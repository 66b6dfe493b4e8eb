"""Mood classification and per-mood tuning tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple


class Mood(str, Enum):
    PLAYFUL = "playful"
    STRUCTURED = "structured"
    ORGANIC = "organic"
    MINIMAL = "minimal"
    BOLD = "bold"


class ShapeType(str, Enum):
    CIRCLE = "circle"
    RECT = "rect"
    TRIANGLE = "triangle"
    LINE = "line"
    RING = "ring"
    ARC = "arc"
    DOT_GRID = "dot-grid"


WeightTable = Tuple[Tuple[ShapeType, int], ...]


@dataclass(frozen=True)
class MoodProfile:
    """Tuning data owned by a single mood."""

    mood: Mood
    weights: WeightTable
    count_range: Tuple[int, int]
    size_range: Tuple[float, float]
    opacity_cap: float
    snap_to_grid: bool = False

    def excluded_types(self) -> Tuple[ShapeType, ...]:
        """Shape types carrying zero weight, i.e. never drawn for this mood."""

        return tuple(shape_type for shape_type, weight in self.weights if weight == 0)


# Checked in order; the first rule whose tags intersect the input wins.
_MOOD_RULES: Tuple[Tuple[Mood, frozenset], ...] = (
    (Mood.PLAYFUL, frozenset({"game", "entertainment"})),
    (Mood.STRUCTURED, frozenset({"developer-tools", "cli-tool", "api"})),
    (Mood.ORGANIC, frozenset({"creative", "health"})),
    (Mood.MINIMAL, frozenset({"landing-page", "component"})),
    (Mood.BOLD, frozenset({"ai-ml", "automation"})),
)

DEFAULT_MOOD = Mood.ORGANIC

_S = ShapeType

MOOD_PROFILES: Mapping[Mood, MoodProfile] = MappingProxyType({
    Mood.PLAYFUL: MoodProfile(
        mood=Mood.PLAYFUL,
        weights=(
            (_S.CIRCLE, 30), (_S.TRIANGLE, 20), (_S.RING, 15), (_S.DOT_GRID, 15),
            (_S.RECT, 10), (_S.ARC, 10), (_S.LINE, 0),
        ),
        count_range=(10, 18),
        size_range=(5, 28),
        opacity_cap=0.4,
    ),
    Mood.STRUCTURED: MoodProfile(
        mood=Mood.STRUCTURED,
        weights=(
            (_S.RECT, 30), (_S.LINE, 25), (_S.DOT_GRID, 20), (_S.CIRCLE, 10),
            (_S.RING, 10), (_S.TRIANGLE, 5), (_S.ARC, 0),
        ),
        count_range=(8, 14),
        size_range=(4, 22),
        opacity_cap=0.4,
        snap_to_grid=True,
    ),
    Mood.ORGANIC: MoodProfile(
        mood=Mood.ORGANIC,
        weights=(
            (_S.CIRCLE, 25), (_S.ARC, 20), (_S.RING, 20), (_S.TRIANGLE, 10),
            (_S.LINE, 10), (_S.RECT, 10), (_S.DOT_GRID, 5),
        ),
        count_range=(8, 16),
        size_range=(4, 25),
        opacity_cap=0.4,
    ),
    Mood.MINIMAL: MoodProfile(
        mood=Mood.MINIMAL,
        weights=(
            (_S.CIRCLE, 30), (_S.LINE, 25), (_S.RING, 20), (_S.RECT, 15),
            (_S.ARC, 10), (_S.TRIANGLE, 0), (_S.DOT_GRID, 0),
        ),
        count_range=(6, 10),
        size_range=(3, 15),
        opacity_cap=0.25,
    ),
    Mood.BOLD: MoodProfile(
        mood=Mood.BOLD,
        weights=(
            (_S.RING, 25), (_S.CIRCLE, 20), (_S.RECT, 20), (_S.TRIANGLE, 15),
            (_S.ARC, 10), (_S.LINE, 10), (_S.DOT_GRID, 0),
        ),
        count_range=(10, 16),
        size_range=(8, 35),
        opacity_cap=0.5,
    ),
})


def classify_mood(tags: Iterable[str]) -> Mood:
    """Map category *tags* to a mood using the fixed priority list.

    Membership is tested against the whole tag set, so a project tagged both
    ``game`` and ``developer-tools`` is playful regardless of tag order.
    """

    tag_set = set(tags)
    for mood, triggers in _MOOD_RULES:
        if tag_set & triggers:
            return mood
    return DEFAULT_MOOD


__all__ = [
    "DEFAULT_MOOD",
    "MOOD_PROFILES",
    "Mood",
    "MoodProfile",
    "ShapeType",
    "WeightTable",
    "classify_mood",
]
