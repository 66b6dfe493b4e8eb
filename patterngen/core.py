"""Core utilities for seeds, slugs and output path handling."""

from __future__ import annotations

import random
import re
import string
from pathlib import Path

_SLUG_INVALID = re.compile(r"[^a-z0-9]+")
_SLUG_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


class InvalidSeedError(ValueError):
    """Raised when a pattern seed is missing or empty."""


class PathTraversalError(ValueError):
    """Raised when a path attempts to traverse outside the allowed scope."""


def require_seed(seed: object) -> str:
    """Return *seed* unchanged, rejecting anything but a non-empty string.

    A pattern's identity is its seed, so substituting a default here would
    silently hand every caller the same image.
    """

    if not isinstance(seed, str) or not seed:
        raise InvalidSeedError("seed must be a non-empty string")
    return seed


def generate_slug(title: str) -> str:
    """Derive a URL-safe slug from a project *title*."""

    return _SLUG_INVALID.sub("-", title.lower()).strip("-")


def generate_unique_slug(title: str) -> str:
    """Return :func:`generate_slug` with a short random base-36 suffix."""

    suffix = "".join(random.choices(_SLUG_SUFFIX_ALPHABET, k=4))
    return f"{generate_slug(title)}-{suffix}"


def normalize_output_path(value: str) -> str:
    """Normalize *value* to an absolute path and reject traversal components."""

    if not value:
        raise ValueError("path must be a non-empty string")

    candidate = Path(value).expanduser()
    if any(part == ".." for part in candidate.parts):
        raise PathTraversalError("path may not contain '..' segments")

    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate

    return str(candidate.resolve(strict=False))


__all__ = [
    "InvalidSeedError",
    "PathTraversalError",
    "generate_slug",
    "generate_unique_slug",
    "normalize_output_path",
    "require_seed",
]
