"""Generator agent responsible for proposing placeholder patterns."""

from __future__ import annotations

import datetime as _dt
import hashlib
import json
import logging
import uuid
from typing import Any, Dict, Optional, Sequence

from patterngen.core import require_seed
from patterngen.generator.assembler import PatternAssembler
from patterngen.generator.mood import classify_mood
from patterngen.logging import log_jsonl

_DEFAULT_LOG_PATH = "meta/output/patterngen/generator.jsonl"


def proposal_id_for(seed: str, tags: Sequence[str], version: str) -> str:
    """Return a reproducible UUID for a seed, tag list and pattern version."""

    payload = json.dumps([seed, list(tags), version], ensure_ascii=False)
    digest = hashlib.sha1(payload.encode("utf-8")).hexdigest()
    return str(uuid.UUID(hex=digest[:32]))


class GeneratorAgent:
    """Generate pattern proposals for a project seed and its tags.

    Parameters
    ----------
    log_path:
        Location of the JSONL log sink. The default targets the shared
        output directory under ``meta/output``.
    """

    def __init__(
        self,
        log_path: str = _DEFAULT_LOG_PATH,
        *,
        assembler: Optional[PatternAssembler] = None,
    ) -> None:
        self.log_path = log_path
        self._logger = logging.getLogger(self.__class__.__name__)
        self._assembler = assembler or PatternAssembler()

    @property
    def assembler(self) -> PatternAssembler:
        return self._assembler

    @property
    def version(self) -> str:
        return self._assembler.version

    def propose(self, seed: str, tags: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        """Return a proposal wrapping the pattern for *seed* and *tags*.

        Everything except ``generated_at`` and the provenance trace id is a
        pure function of the inputs, so two proposals for the same project
        carry identical patterns and the same ``proposal_id``.
        """

        require_seed(seed)
        tag_list = [str(tag) for tag in (tags or ())]

        pattern = self._assembler.generate(seed, tag_list)
        mood = classify_mood(tag_list)
        proposal_id = proposal_id_for(seed, tag_list, self.version)
        generated_at = _dt.datetime.now(tz=_dt.timezone.utc).isoformat()
        trace_id = str(uuid.uuid4())

        proposal: Dict[str, Any] = {
            "proposal_id": proposal_id,
            "seed": seed,
            "tags": tag_list,
            "mood": mood.value,
            "pattern_version": self.version,
            "generated_at": generated_at,
            "pattern": pattern.to_dict(),
            "provenance": {
                "agent": self.__class__.__name__,
                "assembler": self._assembler.__class__.__name__,
                "version": self.version,
                "trace_id": trace_id,
                "mode": "local",
            },
        }

        self._logger.info(
            "Generated pattern %s (mood=%s, shapes=%d)",
            proposal_id,
            mood.value,
            len(pattern.shapes),
        )

        log_entry = dict(proposal)
        log_entry["trace_id"] = trace_id
        log_jsonl(self.log_path, log_entry)
        return proposal


__all__ = ["GeneratorAgent", "proposal_id_for"]
