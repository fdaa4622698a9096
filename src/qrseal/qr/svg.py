#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from xml.sax.saxutils import escape

from .dots import SCENE_SIZE, CirclePrimitive, DotRenderResult

_GROUP_OPACITY = 0.97
_FINDER_OPACITY = 0.95


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _circle(primitive: CirclePrimitive, *, color: str) -> str:
    if primitive.role == "module":
        return (
            f'<circle cx="{_fmt(primitive.cx)}" cy="{_fmt(primitive.cy)}" '
            f'r="{_fmt(primitive.r)}" fill="{color}"/>'
        )
    if primitive.filled:
        return (
            f'<circle cx="{_fmt(primitive.cx)}" cy="{_fmt(primitive.cy)}" '
            f'r="{_fmt(primitive.r)}" fill="{color}" opacity="{_FINDER_OPACITY}"/>'
        )
    return (
        f'<circle cx="{_fmt(primitive.cx)}" cy="{_fmt(primitive.cy)}" '
        f'r="{_fmt(primitive.r)}" fill="none" stroke="{color}" '
        f'stroke-width="{_fmt(primitive.stroke_width)}" opacity="{_FINDER_OPACITY}"/>'
    )


def to_svg_group(result: DotRenderResult, *, color: str = "#000") -> str:
    """Serialize primitives as a single ``<g>`` of ``<circle>`` elements."""
    color = escape(color, {'"': "&quot;"})
    lines = [
        f'<g id="qr-cloud" data-render-mode="SEAL" opacity="{_GROUP_OPACITY}">',
        f"  <!-- {result.circle_count} circular modules -->",
    ]
    lines.extend(f"  {_circle(dot, color=color)}" for dot in result.primitives)
    lines.extend(f"  {_circle(part, color=color)}" for part in result.finder_primitives)
    lines.append("</g>")
    return "\n".join(lines)


def to_svg_document(result: DotRenderResult, *, color: str = "#000") -> str:
    size = int(SCENE_SIZE)
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{size}" height="{size}" viewBox="0 0 {size} {size}">\n'
        f"{to_svg_group(result, color=color)}\n"
        "</svg>\n"
    )


__all__ = ["to_svg_document", "to_svg_group"]
