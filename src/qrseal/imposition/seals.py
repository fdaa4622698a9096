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

"""Imposition of circular seals on print sheets.

All values are inches. Seals are rotation invariant, so only one orientation
is considered, and the grid is centered inside the usable area. Top and bottom
margins never drop below the registration-mark minimum.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.bounds import (
    DEFAULT_MARGIN_IN,
    DEFAULT_SPACING_IN,
    MAX_SEAL_MARGIN_IN,
    MIN_MARGIN_TOP_BOTTOM_IN,
    SEAL_SIZES_IN,
    SPACING_MAX_IN,
    SPACING_MIN_IN,
)
from ..core.validation import fit_count, is_finite_number
from .paper import LETTER, PaperDimensions
from .types import Position, SheetPosition, ceil_div


@dataclass(frozen=True)
class PrintLayoutConfig:
    seal_diameter_in: float
    spacing_in: float = DEFAULT_SPACING_IN
    paper: PaperDimensions = LETTER
    margin_in: float = DEFAULT_MARGIN_IN


@dataclass(frozen=True)
class SealLayout:
    columns: int
    rows: int
    seals_per_sheet: int
    cell_size_in: float
    grid_offset_x_in: float
    grid_offset_y_in: float
    usable_width_in: float
    usable_height_in: float


def calculate_grid_layout(config: PrintLayoutConfig) -> SealLayout:
    # spacing is edge-to-edge
    cell = config.seal_diameter_in + config.spacing_in

    margin_left = config.margin_in
    margin_right = config.margin_in
    margin_top = max(config.margin_in, MIN_MARGIN_TOP_BOTTOM_IN)
    margin_bottom = max(config.margin_in, MIN_MARGIN_TOP_BOTTOM_IN)

    usable_w = config.paper.width_in - margin_left - margin_right
    usable_h = config.paper.height_in - margin_top - margin_bottom

    columns = fit_count(usable_w, cell)
    rows = fit_count(usable_h, cell)

    return SealLayout(
        columns=columns,
        rows=rows,
        seals_per_sheet=columns * rows,
        cell_size_in=cell,
        grid_offset_x_in=margin_left + (usable_w - columns * cell) / 2,
        grid_offset_y_in=margin_top + (usable_h - rows * cell) / 2,
        usable_width_in=usable_w,
        usable_height_in=usable_h,
    )


def calculate_seal_positions(
    layout: SealLayout,
    config: PrintLayoutConfig,
    count: int | None = None,
) -> list[Position]:
    """Seal centers in reading order (left to right, then top to bottom)."""
    limit = layout.columns * layout.rows if count is None else count
    radius = config.seal_diameter_in / 2
    positions: list[Position] = []
    index = 0
    for row in range(layout.rows):
        for col in range(layout.columns):
            if index >= limit:
                return positions
            cell_x = layout.grid_offset_x_in + col * layout.cell_size_in
            cell_y = layout.grid_offset_y_in + row * layout.cell_size_in
            positions.append(Position(index, row, col, cell_x + radius, cell_y + radius))
            index += 1
    return positions


def calculate_sheet_count(total_seals: int, seals_per_sheet: int) -> int:
    return ceil_div(total_seals, seals_per_sheet)


def paginate_positions(
    layout: SealLayout,
    config: PrintLayoutConfig,
    total: int,
) -> list[SheetPosition]:
    """Positions for a job spanning several sheets; the last holds the remainder."""
    per_sheet = layout.seals_per_sheet
    sheets = calculate_sheet_count(total, per_sheet)
    full_sheet = calculate_seal_positions(layout, config)
    placed: list[SheetPosition] = []
    for sheet in range(sheets):
        remaining = total - sheet * per_sheet
        for position in full_sheet[: min(per_sheet, remaining)]:
            placed.append(SheetPosition(sheet=sheet, position=position))
    return placed


def validate_print_layout_config(config: PrintLayoutConfig) -> list[str]:
    """Return every violated constraint; an empty list means valid."""
    errors: list[str] = []

    if config.seal_diameter_in not in SEAL_SIZES_IN:
        sizes = ", ".join(str(size) for size in SEAL_SIZES_IN)
        errors.append(
            f'Invalid seal size: {config.seal_diameter_in}". Must be one of: {sizes}'
        )

    if not is_finite_number(config.spacing_in):
        errors.append(f"Spacing must be a finite number: {config.spacing_in}")
    elif config.spacing_in < SPACING_MIN_IN:
        errors.append(f'Spacing too small: {config.spacing_in}". Minimum is {SPACING_MIN_IN}"')
    elif config.spacing_in > SPACING_MAX_IN:
        errors.append(f'Spacing too large: {config.spacing_in}". Maximum is {SPACING_MAX_IN}"')

    if not is_finite_number(config.margin_in):
        errors.append(f"Margin must be a finite number: {config.margin_in}")
    elif config.margin_in < 0:
        errors.append(f'Margin cannot be negative: {config.margin_in}"')
    elif config.margin_in > MAX_SEAL_MARGIN_IN:
        errors.append(f'Margin too large: {config.margin_in}". Maximum is {MAX_SEAL_MARGIN_IN}"')

    if config.paper.width_in <= 0 or config.paper.height_in <= 0:
        errors.append("Paper dimensions must be positive")

    if calculate_grid_layout(config).seals_per_sheet == 0:
        errors.append("No seals fit on sheet with current configuration")

    return errors


def format_seal_size(size_in: float) -> str:
    if size_in == 1:
        return '1"'
    return f'{size_in:g}"'


def format_spacing(spacing_in: float) -> str:
    return f'{spacing_in:g}"'


__all__ = [
    "PrintLayoutConfig",
    "SealLayout",
    "calculate_grid_layout",
    "calculate_seal_positions",
    "calculate_sheet_count",
    "format_seal_size",
    "format_spacing",
    "paginate_positions",
    "validate_print_layout_config",
]
