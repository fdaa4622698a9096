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

"""Dot-matrix QR rendering and geometry."""

from .batch import render_many
from .dots import (
    SCENE_TO_RASTER_SCALE,
    CirclePrimitive,
    DotRenderError,
    DotRenderOptions,
    DotRenderResult,
    FinderInfo,
    QrGeometry,
    default_qr_radius,
    render_dot_qr,
)
from .matrix import ModuleMatrix, encode_matrix

__all__ = [
    "CirclePrimitive",
    "DotRenderError",
    "DotRenderOptions",
    "DotRenderResult",
    "FinderInfo",
    "ModuleMatrix",
    "QrGeometry",
    "SCENE_TO_RASTER_SCALE",
    "default_qr_radius",
    "encode_matrix",
    "render_dot_qr",
    "render_many",
]
