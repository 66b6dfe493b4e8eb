"""JSONL sinks for proposals, reviews and CLI events."""

from __future__ import annotations

import datetime as _dt
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

PathLike = Union[str, Path]

_EVENT_LOG_PATH = Path("meta/output/patterngen/events.jsonl")


def log_jsonl(path: PathLike, record: Dict[str, Any]) -> None:
    """Append *record* to *path* as one sorted-key JSON object per line.

    Parent directories are created as needed.
    """

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    line = json.dumps(record, sort_keys=True)
    with target.open("a", encoding="utf-8") as handle:
        handle.write(f"{line}\n")


def log_pattern_event(event: str, record: Dict[str, Any], *, path: Optional[PathLike] = None) -> None:
    """Append *record* to the shared event stream, tagged with *event*."""

    payload = {"event": event, **record}
    payload.setdefault("timestamp", _dt.datetime.now(tz=_dt.timezone.utc).isoformat())
    log_jsonl(path or _EVENT_LOG_PATH, payload)


__all__ = ["log_jsonl", "log_pattern_event"]
