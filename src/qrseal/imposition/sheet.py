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

"""Rectangular label imposition.

Labels are laid out on a grid that may be rotated by 90 degrees when that
strictly increases the number of labels per sheet. Ties keep the unrotated
reading direction that label templates are designed for.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.bounds import (
    DEFAULT_MARGIN_TOP_BOTTOM_IN,
    EXTREME_ASPECT_RATIO,
    HIGH_LABEL_COUNT_THRESHOLD,
    MAX_LABELS_PER_JOB,
    MAX_MARGIN_IN,
    MIN_MARGIN_IN,
    SMALL_LABEL_THRESHOLD_IN,
)
from ..core.validation import (
    ValidationIssue,
    check_positive,
    check_range,
    clamp_quantity,
    fit_count,
    fits_either_orientation,
)
from .paper import LETTER, PaperDimensions
from .types import Position, ceil_div


@dataclass(frozen=True)
class SheetLayout:
    columns: int
    rows: int
    per_sheet: int
    rotation_used: bool
    margin_left_in: float
    margin_right_in: float
    margin_top_in: float
    margin_bottom_in: float
    usable_width_in: float
    usable_height_in: float
    cell_width_in: float
    cell_height_in: float
    grid_offset_x_in: float
    grid_offset_y_in: float
    sheet_width_in: float
    sheet_height_in: float


GridLayout = SheetLayout


@dataclass(frozen=True)
class SheetValidationResult:
    valid: bool
    errors: tuple[ValidationIssue, ...]
    warnings: tuple[ValidationIssue, ...]
    layout: SheetLayout | None
    sheets_required: int
    clamped_quantity: int


def calculate_sheet_layout(
    label_width_in: float,
    label_height_in: float,
    margin_top_bottom_in: float = DEFAULT_MARGIN_TOP_BOTTOM_IN,
    *,
    margin_left_right_in: float = MIN_MARGIN_IN,
    paper: PaperDimensions = LETTER,
) -> SheetLayout:
    margin_left = margin_left_right_in
    margin_right = margin_left_right_in
    margin_top = max(margin_top_bottom_in, DEFAULT_MARGIN_TOP_BOTTOM_IN)
    margin_bottom = max(margin_top_bottom_in, DEFAULT_MARGIN_TOP_BOTTOM_IN)

    usable_w = paper.width_in - margin_left - margin_right
    usable_h = paper.height_in - margin_top - margin_bottom

    cols0 = fit_count(usable_w, label_width_in)
    rows0 = fit_count(usable_h, label_height_in)
    cols90 = fit_count(usable_w, label_height_in)
    rows90 = fit_count(usable_h, label_width_in)

    rotated = cols90 * rows90 > cols0 * rows0
    if rotated:
        columns, rows = cols90, rows90
        cell_w, cell_h = label_height_in, label_width_in
    else:
        columns, rows = cols0, rows0
        cell_w, cell_h = label_width_in, label_height_in

    return SheetLayout(
        columns=columns,
        rows=rows,
        per_sheet=columns * rows,
        rotation_used=rotated,
        margin_left_in=margin_left,
        margin_right_in=margin_right,
        margin_top_in=margin_top,
        margin_bottom_in=margin_bottom,
        usable_width_in=usable_w,
        usable_height_in=usable_h,
        cell_width_in=cell_w,
        cell_height_in=cell_h,
        grid_offset_x_in=margin_left + (usable_w - columns * cell_w) / 2,
        grid_offset_y_in=margin_top + (usable_h - rows * cell_h) / 2,
        sheet_width_in=paper.width_in,
        sheet_height_in=paper.height_in,
    )


def label_positions(layout: SheetLayout, count: int | None = None) -> list[Position]:
    """Label centers in reading order, at most one sheet's worth."""
    limit = layout.per_sheet if count is None else min(count, layout.per_sheet)
    positions: list[Position] = []
    for index in range(max(0, limit)):
        row, col = divmod(index, layout.columns)
        cell_x = layout.grid_offset_x_in + col * layout.cell_width_in
        cell_y = layout.grid_offset_y_in + row * layout.cell_height_in
        positions.append(
            Position(
                index=index,
                row=row,
                col=col,
                center_x_in=cell_x + layout.cell_width_in / 2,
                center_y_in=cell_y + layout.cell_height_in / 2,
            )
        )
    return positions


def _label_size_errors(
    label_width_in: float, label_height_in: float, paper: PaperDimensions
) -> list[ValidationIssue]:
    errors: list[ValidationIssue] = []
    for issue in (
        check_positive(label_width_in, field="label_width_in", label="Label width"),
        check_positive(label_height_in, field="label_height_in", label="Label height"),
    ):
        if issue is not None:
            errors.append(issue)
    if errors:
        return errors

    usable_w = paper.width_in - 2 * MIN_MARGIN_IN
    usable_h = paper.height_in - 2 * DEFAULT_MARGIN_TOP_BOTTOM_IN
    if fits_either_orientation(
        label_width_in, label_height_in, usable_width=usable_w, usable_height=usable_h
    ):
        return errors

    max_dimension = max(label_width_in, label_height_in)
    max_sheet_dimension = max(paper.width_in, paper.height_in)
    if max_dimension > max_sheet_dimension:
        message = (
            f'Label dimension {max_dimension}" exceeds maximum sheet dimension '
            f'of {max_sheet_dimension}"'
        )
    else:
        message = "Label is too large to fit on sheet even when rotated"
    errors.append(ValidationIssue("label_size", message))
    return errors


def _quantity_error(quantity: int) -> ValidationIssue | None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        return ValidationIssue("quantity", "Quantity must be at least 1")
    return None


def _safe_clamp(quantity: int) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return 1
    return clamp_quantity(max(quantity, 1), MAX_LABELS_PER_JOB)


def validate_sheet_config(
    label_width_in: float,
    label_height_in: float,
    margin_top_bottom_in: float,
    quantity: int,
    *,
    paper: PaperDimensions = LETTER,
) -> SheetValidationResult:
    """Validate a label print request and compute its layout.

    Errors block printing; warnings are advisory. Quantities above
    MAX_LABELS_PER_JOB are clamped with a warning.
    """
    errors = _label_size_errors(label_width_in, label_height_in, paper)
    margin_issue = check_range(
        margin_top_bottom_in,
        min_val=MIN_MARGIN_IN,
        max_val=MAX_MARGIN_IN,
        field="margin_top_bottom_in",
        label="Margin",
    )
    if margin_issue is not None:
        errors.append(margin_issue)
    quantity_issue = _quantity_error(quantity)
    if quantity_issue is not None:
        errors.append(quantity_issue)

    if errors:
        return SheetValidationResult(
            valid=False,
            errors=tuple(errors),
            warnings=(),
            layout=None,
            sheets_required=0,
            clamped_quantity=_safe_clamp(quantity),
        )

    layout = calculate_sheet_layout(
        label_width_in, label_height_in, margin_top_bottom_in, paper=paper
    )
    if layout.per_sheet == 0:
        errors.append(
            ValidationIssue(
                "label_size",
                "Label is too large to fit on the sheet with current margins",
            )
        )
        return SheetValidationResult(
            valid=False,
            errors=tuple(errors),
            warnings=(),
            layout=layout,
            sheets_required=0,
            clamped_quantity=_safe_clamp(quantity),
        )

    warnings: list[ValidationIssue] = []
    clamped = clamp_quantity(quantity, MAX_LABELS_PER_JOB)
    if quantity > MAX_LABELS_PER_JOB:
        warnings.append(
            ValidationIssue("quantity", f"Maximum of {MAX_LABELS_PER_JOB} labels per print job")
        )

    if label_width_in < SMALL_LABEL_THRESHOLD_IN or label_height_in < SMALL_LABEL_THRESHOLD_IN:
        warnings.append(
            ValidationIssue("label_size", "Very small labels may be difficult to handle")
        )
    if layout.per_sheet > HIGH_LABEL_COUNT_THRESHOLD:
        warnings.append(
            ValidationIssue(
                "label_count",
                f"{layout.per_sheet} labels per sheet may affect rendering performance",
            )
        )
    aspect_ratio = max(label_width_in / label_height_in, label_height_in / label_width_in)
    if aspect_ratio > EXTREME_ASPECT_RATIO:
        warnings.append(
            ValidationIssue("aspect_ratio", "Extreme aspect ratio may cause layout issues")
        )

    return SheetValidationResult(
        valid=True,
        errors=(),
        warnings=tuple(warnings),
        layout=layout,
        sheets_required=ceil_div(clamped, layout.per_sheet),
        clamped_quantity=clamped,
    )


def format_validation_error(result: SheetValidationResult) -> str:
    if result.valid:
        return ""
    return "; ".join(error.message for error in result.errors)


__all__ = [
    "GridLayout",
    "SheetLayout",
    "SheetValidationResult",
    "calculate_sheet_layout",
    "format_validation_error",
    "label_positions",
    "validate_sheet_config",
]
