"""Lifecycle orchestration helpers for pattern generation."""
from __future__ import annotations

from .pipeline import DEFAULT_PIPELINE_LOG, run_batch, run_pipeline

__all__ = ["run_pipeline", "run_batch", "DEFAULT_PIPELINE_LOG"]
