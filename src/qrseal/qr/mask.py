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

"""Raster-space queries over a QrGeometry for overlay decoration.

Overlay stages use these to keep ornaments out of dark modules, away from
module boundaries, and clear of the finder patterns.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .dots import RASTER_SIZE, SCENE_TO_RASTER_SCALE, QrGeometry

DEFAULT_EDGE_BUFFER_FACTOR = 0.12
DEFAULT_FINDER_EXCLUSION_MULTIPLIER = 1.25


class ModuleZone(IntEnum):
    OUTSIDE_QR = 0
    DARK_MODULE = 1
    LIGHT_MODULE = 2
    FINDER_ZONE = 3
    EDGE_BUFFER = 4


@dataclass(frozen=True)
class FinderExclusion:
    center_x_px: float
    center_y_px: float
    exclusion_radius_px: float

    def contains(self, px: float, py: float) -> bool:
        return math.hypot(px - self.center_x_px, py - self.center_y_px) < self.exclusion_radius_px


def finder_exclusions(
    geometry: QrGeometry,
    multiplier: float = DEFAULT_FINDER_EXCLUSION_MULTIPLIER,
) -> tuple[FinderExclusion, ...]:
    return tuple(
        FinderExclusion(
            center_x_px=finder.center_x * SCENE_TO_RASTER_SCALE,
            center_y_px=finder.center_y * SCENE_TO_RASTER_SCALE,
            exclusion_radius_px=finder.outer_radius * SCENE_TO_RASTER_SCALE * multiplier,
        )
        for finder in geometry.finders
    )


def _classify(
    geometry: QrGeometry,
    px: float,
    py: float,
    exclusions: tuple[FinderExclusion, ...],
    edge_buffer: float,
) -> ModuleZone:
    if any(zone.contains(px, py) for zone in exclusions):
        return ModuleZone.FINDER_ZONE

    left, top = geometry.qr_top_left_px
    step = geometry.module_size_px
    count = geometry.module_count
    right = left + count * step
    bottom = top + count * step
    if px < left or px >= right or py < top or py >= bottom:
        return ModuleZone.OUTSIDE_QR

    col = math.floor((px - left) / step)
    row = math.floor((py - top) / step)
    if not (0 <= row < count and 0 <= col < count):
        return ModuleZone.OUTSIDE_QR

    module_left = left + col * step
    module_top = top + row * step
    dist_to_edge = min(
        px - module_left,
        module_left + step - px,
        py - module_top,
        module_top + step - py,
    )
    if dist_to_edge < edge_buffer:
        return ModuleZone.EDGE_BUFFER
    if geometry.modules.is_dark(row, col):
        return ModuleZone.DARK_MODULE
    return ModuleZone.LIGHT_MODULE


def classify_pixel(
    geometry: QrGeometry,
    px: float,
    py: float,
    *,
    edge_buffer_factor: float = DEFAULT_EDGE_BUFFER_FACTOR,
    finder_multiplier: float = DEFAULT_FINDER_EXCLUSION_MULTIPLIER,
) -> ModuleZone:
    """Classify a raster-space point against the QR module grid."""
    return _classify(
        geometry,
        px,
        py,
        finder_exclusions(geometry, finder_multiplier),
        geometry.module_size_px * edge_buffer_factor,
    )


def build_module_mask(
    geometry: QrGeometry,
    *,
    size: int = RASTER_SIZE,
    edge_buffer_factor: float = DEFAULT_EDGE_BUFFER_FACTOR,
    finder_multiplier: float = DEFAULT_FINDER_EXCLUSION_MULTIPLIER,
) -> list[bytearray]:
    """Precompute ModuleZone values for every pixel of a size x size canvas."""
    exclusions = finder_exclusions(geometry, finder_multiplier)
    edge_buffer = geometry.module_size_px * edge_buffer_factor
    return [
        bytearray(
            _classify(geometry, px, py, exclusions, edge_buffer) for px in range(size)
        )
        for py in range(size)
    ]


__all__ = [
    "DEFAULT_EDGE_BUFFER_FACTOR",
    "DEFAULT_FINDER_EXCLUSION_MULTIPLIER",
    "FinderExclusion",
    "ModuleZone",
    "build_module_mask",
    "classify_pixel",
    "finder_exclusions",
]
