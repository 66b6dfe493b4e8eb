"""Card fallback badge tests."""

from __future__ import annotations

import pytest

from patterngen.generator.badges import DEFAULT_ICON, GRADIENTS, get_gradient, get_icon


@pytest.mark.parametrize(
    "seed, expected",
    [
        ("budget-tracker-a1b2", "from-teal-400 to-blue-500"),
        ("retro-arcade", "from-yellow-400 to-rose-500"),
        ("a", "from-yellow-400 to-rose-500"),
    ],
)
def test_gradient_matches_frontend(seed, expected) -> None:
    assert get_gradient(seed) == expected


def test_gradient_is_stable_and_from_table() -> None:
    for index in range(50):
        seed = f"project-{index}"
        assert get_gradient(seed) == get_gradient(seed)
        assert get_gradient(seed) in GRADIENTS


def test_empty_seed_uses_first_gradient() -> None:
    assert get_gradient("") == GRADIENTS[0]


def test_icon_uses_first_known_tag() -> None:
    assert get_icon(["unknown", "api", "game"]) == "{}"
    assert get_icon(["ai-ml"]) == "AI"
    assert get_icon(["developer-tools"]) == ">_"


def test_icon_falls_back_to_default() -> None:
    assert get_icon([]) == DEFAULT_ICON
    assert get_icon(["nonsense"]) == DEFAULT_ICON
