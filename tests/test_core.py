"""Tests for seed, slug and path helpers."""

from __future__ import annotations

import os
import re

import pytest

from patterngen.core import (
    InvalidSeedError,
    PathTraversalError,
    generate_slug,
    generate_unique_slug,
    normalize_output_path,
    require_seed,
)


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Budget Tracker!", "budget-tracker"),
        ("  --Hello, World--  ", "hello-world"),
        ("Café Ünï 2.0", "caf-n-2-0"),
        ("!!!", ""),
    ],
)
def test_generate_slug(title, expected) -> None:
    assert generate_slug(title) == expected


def test_generate_unique_slug_appends_base36_suffix() -> None:
    slug = generate_unique_slug("Budget Tracker")
    assert re.fullmatch(r"budget-tracker-[0-9a-z]{4}", slug)


def test_require_seed() -> None:
    assert require_seed("abc") == "abc"
    for bad in ("", None, 42):
        with pytest.raises(InvalidSeedError):
            require_seed(bad)


def test_invalid_seed_error_is_value_error() -> None:
    assert issubclass(InvalidSeedError, ValueError)
    assert issubclass(PathTraversalError, ValueError)


def test_normalize_output_path_resolves_relative(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = normalize_output_path("renders/out.svg")
    assert os.path.isabs(result)
    assert result == str((tmp_path / "renders" / "out.svg").resolve())


def test_normalize_output_path_rejects_traversal() -> None:
    with pytest.raises(PathTraversalError):
        normalize_output_path("../escape.svg")


def test_normalize_output_path_rejects_empty() -> None:
    with pytest.raises(ValueError):
        normalize_output_path("")
