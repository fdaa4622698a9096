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

"""Dot-matrix QR rendering for circular seals.

Dark data modules become filled circles and the three finder patterns become
a "radar" motif: a stroked outer ring plus a filled core. The renderer only
ever produces circles. When a matrix yields no data dots the call fails with
DotRenderError instead of falling back to square modules, because downstream
overlay masking assumes circular shapes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from ..core.bounds import CONTRAST_BOOST_MAX, CONTRAST_BOOST_MIN
from .matrix import SEAL_ERROR_LEVEL, MatrixEncoder, ModuleMatrix, encode_matrix

# Scene space is the 1000x1000 seal canvas; raster space is the 512x512
# canvas used by the overlay stage.
SCENE_SIZE = 1000.0
RASTER_SIZE = 512
SCENE_TO_RASTER_SCALE = RASTER_SIZE / SCENE_SIZE

QR_CENTER_X = SCENE_SIZE / 2
QR_CENTER_Y = SCENE_SIZE / 2

INNER_RADAR_DIAMETER = 500.0
QR_RADIUS_FACTOR = 0.68

# Dot radius as a fraction of module size.
MODULE_RADIUS_FACTOR = 0.42

# Finder pattern side length in modules.
FINDER_SIZE = 7

# Finder motif ratios, in module sizes. Scan reliability depends on these.
FINDER_RING_INSET = 0.15
FINDER_RING_STROKE = 0.85
FINDER_CORE_RADIUS = 1.5

PrimitiveRole = Literal["module", "finder_ring", "finder_core"]


class DotRenderError(RuntimeError):
    """Raised when a token cannot be rendered as circular modules."""


@dataclass(frozen=True)
class DotRenderOptions:
    contrast_boost: float = 1.0
    url_prefix: str = ""


@dataclass(frozen=True)
class CirclePrimitive:
    cx: float
    cy: float
    r: float
    role: PrimitiveRole = "module"
    stroke_width: float = 0.0

    @property
    def filled(self) -> bool:
        return self.role != "finder_ring"


@dataclass(frozen=True)
class FinderInfo:
    center_x: float
    center_y: float
    outer_radius: float


@dataclass(frozen=True)
class QrGeometry:
    radius: float
    center_x: float
    center_y: float
    finders: tuple[FinderInfo, FinderInfo, FinderInfo]
    module_size: float
    modules: ModuleMatrix
    module_count: int
    module_size_px: float
    qr_top_left_px: tuple[float, float]

    @property
    def top_left(self) -> tuple[float, float]:
        return (self.center_x - self.radius, self.center_y - self.radius)

    def contains(self, x: float, y: float) -> bool:
        left, top = self.top_left
        side = 2 * self.radius
        return left <= x <= left + side and top <= y <= top + side


@dataclass(frozen=True)
class DotRenderResult:
    primitives: tuple[CirclePrimitive, ...]
    finder_primitives: tuple[CirclePrimitive, ...]
    geometry: QrGeometry
    circle_count: int

    @property
    def module_count(self) -> int:
        return self.geometry.module_count

    def all_primitives(self) -> tuple[CirclePrimitive, ...]:
        return self.primitives + self.finder_primitives


def is_finder_cell(row: int, col: int, size: int) -> bool:
    if row < FINDER_SIZE and col < FINDER_SIZE:
        return True
    if row < FINDER_SIZE and col >= size - FINDER_SIZE:
        return True
    return row >= size - FINDER_SIZE and col < FINDER_SIZE


def finder_outer_radius(module_size: float) -> float:
    return (FINDER_SIZE * module_size) / 2 - module_size * FINDER_RING_INSET


def dot_radius(module_size: float, contrast_boost: float = 1.0) -> float:
    # sqrt keeps dot area, not radius, linear in the boost
    return module_size * MODULE_RADIUS_FACTOR * math.sqrt(contrast_boost)


def default_qr_radius() -> float:
    return (INNER_RADAR_DIAMETER * QR_RADIUS_FACTOR) / 2


def render_metadata() -> dict[str, object]:
    return {
        "mode": "seal",
        "radius_factor": QR_RADIUS_FACTOR,
        "module_radius_factor": MODULE_RADIUS_FACTOR,
        "module_shape": "circle",
        "finder_style": "radar-concentric",
    }


def validate_render_options(options: DotRenderOptions) -> list[str]:
    errors: list[str] = []
    boost = options.contrast_boost
    if not math.isfinite(boost) or not CONTRAST_BOOST_MIN <= boost <= CONTRAST_BOOST_MAX:
        errors.append(
            f"contrast_boost must be between {CONTRAST_BOOST_MIN} and {CONTRAST_BOOST_MAX}"
        )
    return errors


def _finders(
    start_x: float, start_y: float, size: int, module_size: float
) -> tuple[FinderInfo, FinderInfo, FinderInfo]:
    half = FINDER_SIZE / 2
    outer = finder_outer_radius(module_size)
    return (
        FinderInfo(start_x + half * module_size, start_y + half * module_size, outer),
        FinderInfo(start_x + (size - half) * module_size, start_y + half * module_size, outer),
        FinderInfo(start_x + half * module_size, start_y + (size - half) * module_size, outer),
    )


def _finder_primitives(
    finders: tuple[FinderInfo, ...], module_size: float
) -> tuple[CirclePrimitive, ...]:
    primitives: list[CirclePrimitive] = []
    for finder in finders:
        primitives.append(
            CirclePrimitive(
                finder.center_x,
                finder.center_y,
                finder.outer_radius,
                role="finder_ring",
                stroke_width=module_size * FINDER_RING_STROKE,
            )
        )
        primitives.append(
            CirclePrimitive(
                finder.center_x,
                finder.center_y,
                module_size * FINDER_CORE_RADIUS,
                role="finder_core",
            )
        )
    return tuple(primitives)


def _check_arguments(token: str, radius: float, contrast_boost: float) -> None:
    if not token:
        raise ValueError("token cannot be empty")
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError("radius must be a positive number")
    if not math.isfinite(contrast_boost) or contrast_boost <= 0:
        raise ValueError("contrast_boost must be a positive number")


def render_dot_qr(
    token: str,
    radius: float,
    options: DotRenderOptions | None = None,
    *,
    encoder: MatrixEncoder = encode_matrix,
) -> DotRenderResult:
    """Render token as circular modules centered on the seal canvas.

    Args:
        token: Opaque token to encode (prefixed with ``options.url_prefix``).
        radius: Half the side of the QR square, in scene units.
        options: Contrast boost and URL prefix.
        encoder: Module matrix source, called once at the "M" error level.

    Returns:
        Dot primitives, finder primitives and the geometry descriptor.

    Raises:
        ValueError: If token, radius or contrast boost is invalid.
        DotRenderError: If no circular data modules would be produced.
    """
    options = options or DotRenderOptions()
    _check_arguments(token, radius, options.contrast_boost)

    matrix = encoder(f"{options.url_prefix}{token}", SEAL_ERROR_LEVEL)
    size = matrix.size
    if size <= 0:
        raise DotRenderError(f"empty module matrix for token {token[:10]}")

    module_size = (radius * 2) / size
    r = dot_radius(module_size, options.contrast_boost)
    start_x = QR_CENTER_X - radius
    start_y = QR_CENTER_Y - radius

    dots: list[CirclePrimitive] = []
    for row in range(size):
        for col in range(size):
            if is_finder_cell(row, col, size):
                continue
            if not matrix.modules[row][col]:
                continue
            dots.append(
                CirclePrimitive(
                    start_x + (col + 0.5) * module_size,
                    start_y + (row + 0.5) * module_size,
                    r,
                )
            )

    if not dots:
        raise DotRenderError(
            f"no circular modules generated for token {token[:10]}; "
            "square module fallback is not allowed"
        )

    finders = _finders(start_x, start_y, size, module_size)
    geometry = QrGeometry(
        radius=radius,
        center_x=QR_CENTER_X,
        center_y=QR_CENTER_Y,
        finders=finders,
        module_size=module_size,
        modules=matrix,
        module_count=size,
        module_size_px=module_size * SCENE_TO_RASTER_SCALE,
        qr_top_left_px=(start_x * SCENE_TO_RASTER_SCALE, start_y * SCENE_TO_RASTER_SCALE),
    )
    return DotRenderResult(
        primitives=tuple(dots),
        finder_primitives=_finder_primitives(finders, module_size),
        geometry=geometry,
        circle_count=len(dots),
    )


__all__ = [
    "CirclePrimitive",
    "DotRenderError",
    "DotRenderOptions",
    "DotRenderResult",
    "FINDER_CORE_RADIUS",
    "FINDER_RING_INSET",
    "FINDER_RING_STROKE",
    "FINDER_SIZE",
    "FinderInfo",
    "MODULE_RADIUS_FACTOR",
    "QR_CENTER_X",
    "QR_CENTER_Y",
    "QrGeometry",
    "RASTER_SIZE",
    "SCENE_SIZE",
    "SCENE_TO_RASTER_SCALE",
    "default_qr_radius",
    "dot_radius",
    "finder_outer_radius",
    "is_finder_cell",
    "render_dot_qr",
    "render_metadata",
    "validate_render_options",
]
