"""Renderers turning pattern data into images."""

from __future__ import annotations

from .svg import SvgRenderer, render_svg, write_svg

__all__ = ["SvgRenderer", "render_svg", "write_svg"]
