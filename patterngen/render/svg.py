"""SVG rendering for generated patterns."""

from __future__ import annotations

import logging
import re
from typing import Optional

import svgwrite
from svgwrite.base import BaseElement

from patterngen.generator.assembler import PatternData
from patterngen.generator.mood import ShapeType
from patterngen.generator.rng import hash_seed
from patterngen.generator.shapes import Shape

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 225
DOT_GRID_SIZE = 3
DEFAULT_STROKE_WIDTH = 2.0

_ID_UNSAFE = re.compile(r"[^A-Za-z0-9_-]+")

_LOGGER = logging.getLogger(__name__)


def gradient_id_for(seed: Optional[str]) -> str:
    """Return the gradient id for *seed*.

    The hash suffix keeps seeds that sanitize alike, such as ``a b`` and
    ``a-b``, apart when several SVGs are inlined on one page.
    """

    if not seed:
        return "gp-pattern"
    return f"gp-{_ID_UNSAFE.sub('-', seed)}-{hash_seed(seed):08x}"


class SvgRenderer:
    """Draw :class:`PatternData` onto an ``svgwrite`` drawing.

    Positions are percentages of the canvas and sizes percentages of its
    minor dimension, so the same pattern renders at any aspect ratio.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height

    def build(self, pattern: PatternData, *, gradient_id: str = "gp-pattern") -> svgwrite.Drawing:
        drawing = svgwrite.Drawing(size=("100%", "100%"), debug=False)
        drawing.viewbox(0, 0, self.width, self.height)
        drawing.fit(horiz="center", vert="middle", scale="slice")

        start, end = pattern.background_gradient
        gradient = drawing.linearGradient(id=gradient_id)
        gradient.rotate(pattern.gradient_angle)
        gradient.add_stop_color(offset="0%", color=start)
        gradient.add_stop_color(offset="100%", color=end)
        drawing.defs.add(gradient)

        drawing.add(
            drawing.rect(
                insert=(0, 0),
                size=(self.width, self.height),
                fill=gradient.get_paint_server(),
            )
        )

        for shape in pattern.shapes:
            drawing.add(self._shape_element(drawing, shape))

        _LOGGER.debug("Rendered %d shapes onto %dx%d canvas", len(pattern.shapes), self.width, self.height)
        return drawing

    def _shape_element(self, drawing: svgwrite.Drawing, shape: Shape) -> BaseElement:
        x = shape.x / 100 * self.width
        y = shape.y / 100 * self.height
        s = shape.size / 100 * min(self.width, self.height)
        fill = "none" if shape.stroke_only else shape.color
        stroke = shape.color if shape.stroke_only else "none"
        stroke_width = shape.stroke_width if shape.stroke_only else 0
        outline_width = shape.stroke_width or DEFAULT_STROKE_WIDTH
        opacity = shape.opacity

        if shape.type is ShapeType.CIRCLE:
            return drawing.circle(
                center=(x, y), r=s / 2,
                fill=fill, stroke=stroke, stroke_width=stroke_width, opacity=opacity,
            )

        if shape.type is ShapeType.RECT:
            element = drawing.rect(
                insert=(x - s / 2, y - s * 0.4), size=(s, s * 0.8), rx=s * 0.05,
                fill=fill, stroke=stroke, stroke_width=stroke_width, opacity=opacity,
            )
        elif shape.type is ShapeType.TRIANGLE:
            points = [(x, y - s / 2), (x - s / 2, y + s / 2), (x + s / 2, y + s / 2)]
            element = drawing.polygon(
                points=points,
                fill=fill, stroke=stroke, stroke_width=stroke_width, opacity=opacity,
            )
        elif shape.type is ShapeType.LINE:
            element = drawing.line(
                start=(x - s / 2, y), end=(x + s / 2, y),
                stroke=shape.color, stroke_width=outline_width, opacity=opacity,
                stroke_linecap="round",
            )
        elif shape.type is ShapeType.RING:
            return drawing.circle(
                center=(x, y), r=s / 2,
                fill="none", stroke=shape.color, stroke_width=outline_width, opacity=opacity,
            )
        elif shape.type is ShapeType.ARC:
            r = s / 2
            element = drawing.path(
                d=f"M {x - r} {y} A {r} {r} 0 0 1 {x + r} {y}",
                fill="none", stroke=shape.color, stroke_width=outline_width, opacity=opacity,
                stroke_linecap="round",
            )
        elif shape.type is ShapeType.DOT_GRID:
            element = drawing.g()
            spacing = s / DOT_GRID_SIZE
            for gx in range(DOT_GRID_SIZE):
                for gy in range(DOT_GRID_SIZE):
                    element.add(
                        drawing.circle(
                            center=(
                                x - s / 2 + gx * spacing + spacing / 2,
                                y - s / 2 + gy * spacing + spacing / 2,
                            ),
                            r=spacing * 0.15,
                            fill=shape.color,
                            opacity=opacity,
                        )
                    )
        else:
            raise ValueError(f"unsupported shape type: {shape.type!r}")

        element.rotate(shape.rotation, center=(x, y))
        return element


def render_svg(
    pattern: PatternData,
    *,
    seed: Optional[str] = None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    gradient_id: Optional[str] = None,
) -> str:
    """Return *pattern* as an SVG document string."""

    drawing = SvgRenderer(width, height).build(pattern, gradient_id=gradient_id or gradient_id_for(seed))
    return drawing.tostring()


def write_svg(
    pattern: PatternData,
    path: str,
    *,
    seed: Optional[str] = None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> str:
    """Write *pattern* to *path* as SVG and return the path."""

    drawing = SvgRenderer(width, height).build(pattern, gradient_id=gradient_id_for(seed))
    drawing.saveas(path)
    return path


__all__ = ["DEFAULT_HEIGHT", "DEFAULT_WIDTH", "SvgRenderer", "gradient_id_for", "render_svg", "write_svg"]
