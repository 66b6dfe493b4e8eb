"""Lightweight card fallbacks: a gradient class pair and a tag monogram."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

GRADIENTS: Tuple[str, ...] = (
    "from-rose-400 to-purple-500",
    "from-yellow-400 to-rose-500",
    "from-purple-400 to-indigo-600",
    "from-emerald-400 to-cyan-500",
    "from-pink-400 to-orange-400",
    "from-sky-400 to-purple-500",
    "from-yellow-400 to-red-500",
    "from-teal-400 to-blue-500",
)

TAG_ICONS: Dict[str, str] = {
    "game": "G",
    "finance": "$",
    "productivity": "P",
    "developer-tools": ">_",
    "cli-tool": ">_",
    "creative": "C",
    "web-app": "W",
    "education": "E",
    "health": "+",
    "social": "S",
    "entertainment": "E",
    "landing-page": "L",
    "chrome-extension": "X",
    "api": "{}",
    "automation": "A",
    "ai-ml": "AI",
    "ecommerce": "EC",
    "component": "UI",
    "mobile-app": "M",
}

DEFAULT_ICON = "V"


def _code_unit_sum(value: str) -> int:
    encoded = value.encode("utf-16-le", "surrogatepass")
    return sum(encoded[i] | (encoded[i + 1] << 8) for i in range(0, len(encoded), 2))


def get_gradient(seed: str) -> str:
    return GRADIENTS[_code_unit_sum(seed) % len(GRADIENTS)]


def get_icon(tags: Iterable[str]) -> str:
    """Return the monogram of the first tag with a known icon."""

    for tag in tags:
        icon = TAG_ICONS.get(tag)
        if icon:
            return icon
    return DEFAULT_ICON


__all__ = ["DEFAULT_ICON", "GRADIENTS", "TAG_ICONS", "get_gradient", "get_icon"]
