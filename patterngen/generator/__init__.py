"""Deterministic generative-pattern engine."""

from __future__ import annotations

from .assembler import PATTERN_VERSION, PatternAssembler, PatternData, generate_pattern
from .badges import get_gradient, get_icon
from .mood import MOOD_PROFILES, Mood, MoodProfile, ShapeType, classify_mood
from .rng import SeededRng, hash_seed
from .shapes import Shape, weighted_pick
from .themes import THEMES, ColorTheme, pick_theme

__all__ = [
    "ColorTheme",
    "MOOD_PROFILES",
    "Mood",
    "MoodProfile",
    "PATTERN_VERSION",
    "PatternAssembler",
    "PatternData",
    "SeededRng",
    "Shape",
    "ShapeType",
    "THEMES",
    "classify_mood",
    "generate_pattern",
    "get_gradient",
    "get_icon",
    "hash_seed",
    "pick_theme",
    "weighted_pick",
]
