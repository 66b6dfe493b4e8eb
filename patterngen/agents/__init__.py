"""Agent implementations for pattern generation and review."""

from .generator import GeneratorAgent
from .critic import CriticAgent, check_invariants, is_fail_fast_enabled

__all__ = ["GeneratorAgent", "CriticAgent", "check_invariants", "is_fail_fast_enabled"]
