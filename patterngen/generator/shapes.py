"""Shape synthesis for generated patterns."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Tuple

from .mood import MoodProfile, ShapeType, WeightTable
from .rng import SeededRng
from .themes import ColorTheme

GRID_STEP = 12.5
POSITION_RANGE = (5.0, 95.0)
MIN_OPACITY = 0.08
STROKE_WIDTH_RANGE = (1.0, 3.0)
SNAPPED_ROTATIONS: Tuple[float, ...] = (0.0, 45.0, 90.0, 135.0)
STROKE_ONLY_PROBABILITY = 0.4

FEATURE_TYPES: Tuple[ShapeType, ...] = (ShapeType.CIRCLE, ShapeType.RING, ShapeType.RECT)
FEATURE_POSITION_RANGE = (25.0, 75.0)
FEATURE_SIZE_RANGE = (20.0, 40.0)
FEATURE_ROTATION_RANGE = (0.0, 180.0)
FEATURE_OPACITY_RANGE = (0.08, 0.2)
FEATURE_STROKE_WIDTH_RANGE = (2.0, 4.0)
FEATURE_STROKE_ONLY_PROBABILITY = 0.6


@dataclass(frozen=True)
class Shape:
    """A single positioned primitive; coordinates are canvas percentages."""

    type: ShapeType
    x: float
    y: float
    size: float
    rotation: float
    opacity: float
    color: str
    stroke_only: bool
    stroke_width: float

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload["type"] = self.type.value
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Shape":
        return cls(
            type=ShapeType(payload["type"]),
            x=float(payload["x"]),
            y=float(payload["y"]),
            size=float(payload["size"]),
            rotation=float(payload["rotation"]),
            opacity=float(payload["opacity"]),
            color=str(payload["color"]),
            stroke_only=bool(payload["stroke_only"]),
            stroke_width=float(payload["stroke_width"]),
        )


def _round_half_up(value: float) -> float:
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def snap_to_grid(value: float, step: float = GRID_STEP) -> float:
    return _round_half_up(value / step) * step


def weighted_pick(rng: SeededRng, weights: WeightTable) -> ShapeType:
    """Pick a shape type from *weights*, walking the table in order.

    Exactly one draw is consumed. Zero-weight entries can never be selected
    because the remainder only reaches zero inside a positive-weight slot.
    """

    total = sum(weight for _, weight in weights)
    remainder = rng.uniform(0, total)
    for shape_type, weight in weights:
        remainder -= weight
        if remainder <= 0:
            return shape_type
    return weights[0][0]


def generate_shape(rng: SeededRng, theme: ColorTheme, profile: MoodProfile) -> Shape:
    """Draw one regular shape for *profile*.

    Draw order: type, x, y, size, rotation, opacity, color, stroke flag,
    stroke width. Reordering these changes every pattern ever generated.
    """

    shape_type = weighted_pick(rng, profile.weights)

    x = rng.uniform(*POSITION_RANGE)
    y = rng.uniform(*POSITION_RANGE)
    if profile.snap_to_grid:
        x = snap_to_grid(x)
        y = snap_to_grid(y)

    size = rng.uniform(*profile.size_range)

    if profile.snap_to_grid:
        rotation = rng.choice(SNAPPED_ROTATIONS)
    else:
        rotation = rng.uniform(0, 360)

    opacity = rng.uniform(MIN_OPACITY, profile.opacity_cap)
    color = rng.choice(theme.palette)
    stroke_only = rng.chance(STROKE_ONLY_PROBABILITY)
    stroke_width = rng.uniform(*STROKE_WIDTH_RANGE)

    return Shape(
        type=shape_type,
        x=x,
        y=y,
        size=size,
        rotation=rotation,
        opacity=opacity,
        color=color,
        stroke_only=stroke_only,
        stroke_width=stroke_width,
    )


def generate_feature_shape(rng: SeededRng, theme: ColorTheme) -> Shape:
    """Draw the large, centred focal shape appended to every pattern."""

    return Shape(
        type=rng.choice(FEATURE_TYPES),
        x=rng.uniform(*FEATURE_POSITION_RANGE),
        y=rng.uniform(*FEATURE_POSITION_RANGE),
        size=rng.uniform(*FEATURE_SIZE_RANGE),
        rotation=rng.uniform(*FEATURE_ROTATION_RANGE),
        opacity=rng.uniform(*FEATURE_OPACITY_RANGE),
        color=rng.choice(theme.palette),
        stroke_only=rng.chance(FEATURE_STROKE_ONLY_PROBABILITY),
        stroke_width=rng.uniform(*FEATURE_STROKE_WIDTH_RANGE),
    )


def generate_shapes(rng: SeededRng, theme: ColorTheme, profile: MoodProfile) -> List[Shape]:
    """Draw the shape count, then that many regular shapes, then the feature."""

    count = rng.randint(*profile.count_range)
    shapes = [generate_shape(rng, theme, profile) for _ in range(count)]
    shapes.append(generate_feature_shape(rng, theme))
    return shapes


__all__ = [
    "FEATURE_TYPES",
    "GRID_STEP",
    "Shape",
    "generate_feature_shape",
    "generate_shape",
    "generate_shapes",
    "snap_to_grid",
    "weighted_pick",
]
