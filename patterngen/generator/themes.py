"""Static color theme table for generated patterns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .rng import SeededRng


@dataclass(frozen=True)
class ColorTheme:
    """Background gradient endpoints plus a four-color shape palette."""

    background: Tuple[str, str]
    palette: Tuple[str, str, str, str]


THEMES: Tuple[ColorTheme, ...] = (
    # Coral
    ColorTheme(("#FF6B6B", "#FF8E53"), ("#FFD93D", "#FF6B6B", "#FFFFFF", "#FFF5E4")),
    ColorTheme(("#FF6B6B", "#845EF7"), ("#FF6B6B", "#C084FC", "#FFFFFF", "#FFE4E6")),
    ColorTheme(("#FF6B6B", "#F472B6"), ("#FCA5A5", "#FBBF24", "#FFFFFF", "#FFF1F2")),
    ColorTheme(("#E11D48", "#FB923C"), ("#FECDD3", "#FB923C", "#FFFFFF", "#FEF3C7")),
    # Violet
    ColorTheme(("#845EF7", "#6366F1"), ("#A78BFA", "#845EF7", "#FFFFFF", "#EDE9FE")),
    ColorTheme(("#845EF7", "#06B6D4"), ("#845EF7", "#22D3EE", "#FFFFFF", "#F0F9FF")),
    ColorTheme(("#7C3AED", "#EC4899"), ("#C084FC", "#F9A8D4", "#FFFFFF", "#FDF4FF")),
    ColorTheme(("#6366F1", "#8B5CF6"), ("#818CF8", "#A78BFA", "#FFFFFF", "#EEF2FF")),
    # Amber
    ColorTheme(("#FFB347", "#FF6B6B"), ("#FFB347", "#FBBF24", "#FFFFFF", "#FFF7ED")),
    ColorTheme(("#FFB347", "#F472B6"), ("#FFB347", "#F472B6", "#FFFFFF", "#FFF1F2")),
    ColorTheme(("#F59E0B", "#EF4444"), ("#FCD34D", "#FCA5A5", "#FFFFFF", "#FFFBEB")),
    ColorTheme(("#FB923C", "#A855F7"), ("#FDBA74", "#C084FC", "#FFFFFF", "#FFF7ED")),
    # Nature
    ColorTheme(("#10B981", "#06B6D4"), ("#34D399", "#22D3EE", "#FFFFFF", "#ECFDF5")),
    ColorTheme(("#10B981", "#845EF7"), ("#34D399", "#A78BFA", "#FFFFFF", "#F5F3FF")),
    ColorTheme(("#14B8A6", "#3B82F6"), ("#5EEAD4", "#93C5FD", "#FFFFFF", "#F0FDFA")),
    ColorTheme(("#059669", "#0891B2"), ("#6EE7B7", "#67E8F9", "#FFFFFF", "#ECFDF5")),
    # Blue
    ColorTheme(("#3B82F6", "#8B5CF6"), ("#93C5FD", "#C084FC", "#FFFFFF", "#EFF6FF")),
    ColorTheme(("#0EA5E9", "#6366F1"), ("#7DD3FC", "#818CF8", "#FFFFFF", "#F0F9FF")),
    ColorTheme(("#2563EB", "#EC4899"), ("#93C5FD", "#F9A8D4", "#FFFFFF", "#EFF6FF")),
    ColorTheme(("#0284C7", "#10B981"), ("#7DD3FC", "#6EE7B7", "#FFFFFF", "#F0F9FF")),
    # Pink
    ColorTheme(("#EC4899", "#F97316"), ("#F9A8D4", "#FDBA74", "#FFFFFF", "#FDF2F8")),
    ColorTheme(("#DB2777", "#7C3AED"), ("#F472B6", "#A78BFA", "#FFFFFF", "#FDF4FF")),
    # Dark
    ColorTheme(("#4F46E5", "#1E1B4B"), ("#818CF8", "#6366F1", "#FFFFFF", "#C7D2FE")),
    ColorTheme(("#7E22CE", "#1E1B4B"), ("#A855F7", "#C084FC", "#FFFFFF", "#E9D5FF")),
)


def pick_theme(rng: SeededRng, themes: Tuple[ColorTheme, ...] = THEMES) -> ColorTheme:
    """Draw one theme from *themes*; this is the first draw of every pattern."""

    return rng.choice(themes)


__all__ = ["ColorTheme", "THEMES", "pick_theme"]
