"""JSON Schema validation for pattern proposals."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterable, Mapping

from jsonschema import Draft202012Validator, ValidationError

SCHEMA_NAME = "pattern-proposal.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> Dict[str, Any]:
    """Return the bundled proposal schema."""

    text = resources.files("patterngen.schemas").joinpath(SCHEMA_NAME).read_text(encoding="utf-8")
    return json.loads(text)


def validate_proposal(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a pattern proposal against the bundled schema."""

    if not isinstance(candidate, Mapping):
        raise TypeError("candidate proposal must be a mapping")

    validator = Draft202012Validator(load_schema())
    errors = list(_collect_errors(validator.iter_errors(dict(candidate))))
    if errors:
        return {"ok": False, "reason": "validation_failed", "errors": errors}
    return {"ok": True, "reason": "validation_passed", "errors": []}


def _collect_errors(raw_errors: Iterable[ValidationError]):
    for error in sorted(raw_errors, key=lambda item: list(map(str, item.absolute_path))):
        yield {
            "message": error.message,
            "path": list(error.absolute_path),
        }


__all__ = ["SCHEMA_NAME", "load_schema", "validate_proposal"]
