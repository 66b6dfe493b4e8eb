"""Deterministic placeholder patterns for the project showcase."""

from .generator.assembler import PATTERN_VERSION, PatternData, generate_pattern
from .agents.generator import GeneratorAgent
from .agents.critic import CriticAgent

__all__ = ["PATTERN_VERSION", "PatternData", "generate_pattern", "GeneratorAgent", "CriticAgent"]
