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

"""Dot-QR seal rendering and label/seal print imposition."""

from .imposition import (
    PrintLayoutConfig,
    calculate_grid_layout,
    calculate_sheet_layout,
    validate_print_layout_config,
    validate_sheet_config,
)
from .qr import DotRenderError, DotRenderOptions, render_dot_qr

__all__ = [
    "DotRenderError",
    "DotRenderOptions",
    "PrintLayoutConfig",
    "calculate_grid_layout",
    "calculate_sheet_layout",
    "render_dot_qr",
    "validate_print_layout_config",
    "validate_sheet_config",
]
