"""Generator → critic → renderer orchestration."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from patterngen.agents import CriticAgent, GeneratorAgent
from patterngen.core import generate_slug, require_seed
from patterngen.generator.assembler import PatternData
from patterngen.logging import log_jsonl
from patterngen.render.svg import write_svg

PipelineResult = Dict[str, Any]

DEFAULT_PIPELINE_LOG = Path("meta/output/patterngen/pipeline.jsonl")

_LOGGER = logging.getLogger(__name__)


def _summary(result: PipelineResult) -> Dict[str, Any]:
    proposal = result["proposal"]
    review = result["review"]
    return {
        "proposal_id": proposal["proposal_id"],
        "seed": proposal["seed"],
        "mood": proposal["mood"],
        "shape_count": len(proposal["pattern"]["shapes"]),
        "validation_status": review["validation_status"],
        "issues": len(review["issues"]),
        "render_path": result.get("render_path"),
    }


def run_pipeline(
    seed: str,
    tags: Optional[Sequence[str]] = None,
    *,
    generator: Optional[GeneratorAgent] = None,
    critic: Optional[CriticAgent] = None,
    render_dir: Optional[str] = None,
    log_path: Path | str = DEFAULT_PIPELINE_LOG,
) -> PipelineResult:
    """Propose a pattern for *seed*, review it and optionally render it.

    Parameters
    ----------
    seed:
        Project identifier the pattern is derived from.
    tags:
        Category tags steering the pattern's mood.
    generator, critic:
        Pre-configured agents. Default instances are created when omitted.
    render_dir:
        When given, proposals that pass review are written there as
        ``<slug>.svg``. Failed proposals are never rendered.
    log_path:
        JSONL file receiving the combined ``pipeline.run`` record.
    """

    generator_agent = generator or GeneratorAgent()
    critic_agent = critic or CriticAgent(assembler=generator_agent.assembler)

    proposal = generator_agent.propose(seed, tags)
    review = critic_agent.review(proposal)

    result: PipelineResult = {"proposal": proposal, "review": review, "render_path": None}

    if render_dir is not None:
        if review["ok"]:
            os.makedirs(render_dir, exist_ok=True)
            target = os.path.join(render_dir, f"{generate_slug(seed) or 'pattern'}.svg")
            result["render_path"] = write_svg(PatternData.from_dict(proposal["pattern"]), target, seed=seed)
        else:
            _LOGGER.warning("Skipping render for %s: review %s", seed, review["validation_status"])

    log_jsonl(log_path, {"event": "pipeline.run", "summary": _summary(result), "result": result})
    return result


def run_batch(
    entries: Iterable[Tuple[str, Sequence[str]]],
    *,
    generator: Optional[GeneratorAgent] = None,
    critic: Optional[CriticAgent] = None,
    render_dir: Optional[str] = None,
    log_path: Path | str = DEFAULT_PIPELINE_LOG,
) -> List[PipelineResult]:
    """Run :func:`run_pipeline` for each ``(seed, tags)`` pair in *entries*.

    The agents are shared across the batch. Every seed is checked before the
    first proposal, so an invalid entry leaves no partial renders behind.
    """

    batch = [(require_seed(seed), list(tags or ())) for seed, tags in entries]

    generator_agent = generator or GeneratorAgent()
    critic_agent = critic or CriticAgent(assembler=generator_agent.assembler)

    results = [
        run_pipeline(
            seed,
            tags,
            generator=generator_agent,
            critic=critic_agent,
            render_dir=render_dir,
            log_path=log_path,
        )
        for seed, tags in batch
    ]

    failed = sum(1 for result in results if not result["review"]["ok"])
    _LOGGER.info("Batch complete: %d pattern(s), %d failed review", len(results), failed)
    return results


__all__ = ["DEFAULT_PIPELINE_LOG", "run_batch", "run_pipeline"]
