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

"""Shared numeric guards for the layout calculators.

Every check here reports problems as data. Bad geometry is an expected input
from operators, so nothing in this module raises for it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Relative slack used when counting how many cells fit along an axis.
FIT_EPSILON = 1e-9


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str


ValidationError = ValidationIssue
ValidationWarning = ValidationIssue


def is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def check_positive(value: float, *, field: str, label: str) -> ValidationIssue | None:
    """Return an issue unless value is a finite number greater than zero."""
    if not is_finite_number(value) or value <= 0:
        return ValidationIssue(field, f"{label} must be greater than 0")
    return None


def check_range(
    value: float,
    *,
    min_val: float,
    max_val: float,
    field: str,
    label: str,
    unit: str = " inches",
) -> ValidationIssue | None:
    """Return an issue when value falls outside [min_val, max_val]."""
    if not is_finite_number(value) or value < min_val:
        return ValidationIssue(field, f"{label} must be at least {min_val}{unit}")
    if value > max_val:
        return ValidationIssue(field, f"{label} cannot exceed {max_val}{unit}")
    return None


def fit_count(usable: float, cell: float) -> int:
    """Number of whole cells that fit along an axis.

    Unlike a plain floor, exact fits such as ``0.9 / 0.3`` are not lost to
    binary rounding: a ratio within FIT_EPSILON of the next integer counts as
    that integer, as long as the cells overrun ``usable`` by no more than
    FIT_EPSILON relative to it. Non-finite input fits nothing.
    """
    if not (is_finite_number(usable) and is_finite_number(cell)):
        return 0
    if cell <= 0 or usable <= 0:
        return 0
    ratio = usable / cell
    count = math.floor(ratio)
    if ratio - count >= 1.0 - FIT_EPSILON * max(1.0, ratio):
        if (count + 1) * cell <= usable * (1.0 + FIT_EPSILON):
            count += 1
    return max(0, int(count))


def fits_either_orientation(
    width: float,
    height: float,
    *,
    usable_width: float,
    usable_height: float,
) -> bool:
    fits_normal = width <= usable_width and height <= usable_height
    fits_rotated = height <= usable_width and width <= usable_height
    return fits_normal or fits_rotated


def clamp_quantity(quantity: int, maximum: int) -> int:
    """Clamp a requested quantity to the per-job maximum (idempotent)."""
    return min(quantity, maximum)


__all__ = [
    "FIT_EPSILON",
    "ValidationError",
    "ValidationIssue",
    "ValidationWarning",
    "check_positive",
    "check_range",
    "clamp_quantity",
    "fit_count",
    "fits_either_orientation",
    "is_finite_number",
]
