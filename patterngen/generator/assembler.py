"""Pattern assembler combining theme, mood and shapes into a scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .mood import MOOD_PROFILES, Mood, MoodProfile, classify_mood
from .rng import SeededRng
from .shapes import Shape, generate_shapes
from .themes import THEMES, ColorTheme, pick_theme

# Bump whenever the order or number of RNG draws changes; cached images keyed
# on the old version must be regenerated.
PATTERN_VERSION = "1"

GRADIENT_ANGLE_RANGE = (120.0, 200.0)


@dataclass(frozen=True)
class PatternData:
    """Renderer-ready scene: background gradient plus shapes in paint order."""

    shapes: Tuple[Shape, ...]
    background_gradient: Tuple[str, str]
    gradient_angle: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "shapes": [shape.to_dict() for shape in self.shapes],
            "background_gradient": list(self.background_gradient),
            "gradient_angle": self.gradient_angle,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PatternData":
        start, end = payload["background_gradient"]
        return cls(
            shapes=tuple(Shape.from_dict(entry) for entry in payload["shapes"]),
            background_gradient=(str(start), str(end)),
            gradient_angle=float(payload["gradient_angle"]),
        )

    @property
    def feature_shape(self) -> Shape:
        return self.shapes[-1]

    @property
    def regular_shapes(self) -> Tuple[Shape, ...]:
        return self.shapes[:-1]


class PatternAssembler:
    """Compose the theme table and mood profiles into patterns."""

    def __init__(
        self,
        *,
        themes: Sequence[ColorTheme] = THEMES,
        profiles: Mapping[Mood, MoodProfile] = MOOD_PROFILES,
        version: str = PATTERN_VERSION,
    ) -> None:
        if not themes:
            raise ValueError("themes must contain at least one entry")
        self.themes = tuple(themes)
        self.profiles = profiles
        self.version = version

    def generate(self, seed: str, tags: Optional[Sequence[str]] = None) -> PatternData:
        """Return the pattern for *seed* and *tags*.

        The theme draw comes first and the gradient angle draw comes last;
        everything between belongs to shape synthesis.
        """

        rng = SeededRng(seed)
        theme = pick_theme(rng, self.themes)
        profile = self.profiles[classify_mood(tags or ())]
        shapes = generate_shapes(rng, theme, profile)
        gradient_angle = rng.uniform(*GRADIENT_ANGLE_RANGE)

        return PatternData(
            shapes=tuple(shapes),
            background_gradient=theme.background,
            gradient_angle=gradient_angle,
        )

    def theme_for(self, seed: str) -> ColorTheme:
        """Return the theme *seed* resolves to without drawing any shapes."""

        return pick_theme(SeededRng(seed), self.themes)


def generate_pattern(seed: str, tags: Optional[Sequence[str]] = None) -> PatternData:
    """Public entry point: deterministic pattern for *seed* and *tags*."""

    return PatternAssembler().generate(seed, tags)


__all__ = ["GRADIENT_ANGLE_RANGE", "PATTERN_VERSION", "PatternAssembler", "PatternData", "generate_pattern"]
