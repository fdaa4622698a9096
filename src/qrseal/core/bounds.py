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

# US Letter sheet (inches).
LETTER_WIDTH_IN = 8.5
LETTER_HEIGHT_IN = 11.0

# A4 sheet, 210mm x 297mm (inches).
A4_WIDTH_IN = 8.27
A4_HEIGHT_IN = 11.69

# Fixed left/right margin for labels and lower bound for the requested margin.
MIN_MARGIN_IN = 0.25

# Upper bound for the requested label top/bottom margin.
MAX_MARGIN_IN = 2.0

# Registration marks need at least this much room at the top and bottom.
DEFAULT_MARGIN_TOP_BOTTOM_IN = 0.5
MIN_MARGIN_TOP_BOTTOM_IN = DEFAULT_MARGIN_TOP_BOTTOM_IN

# Largest label edge accepted on a sheet.
MAX_LABEL_WIDTH_IN = LETTER_WIDTH_IN
MAX_LABEL_HEIGHT_IN = LETTER_HEIGHT_IN

# Labels per print job; larger requests are clamped.
MAX_LABELS_PER_JOB = 1_000

# Advisory thresholds (warnings only).
SMALL_LABEL_THRESHOLD_IN = 0.5
HIGH_LABEL_COUNT_THRESHOLD = 30
EXTREME_ASPECT_RATIO = 4.0

# Supported seal diameters (inches).
SEAL_SIZES_IN = (0.75, 1.0, 1.25, 1.5)

# Edge-to-edge spacing between seals (inches).
SPACING_MIN_IN = 0.25
SPACING_MAX_IN = 1.0
SPACING_STEP_IN = 0.125
DEFAULT_SPACING_IN = 0.25

# Seal sheet margin (inches).
DEFAULT_MARGIN_IN = 0.25
MAX_SEAL_MARGIN_IN = 1.0

# Operator-facing contrast boost range for the dot renderer.
CONTRAST_BOOST_MIN = 1.0
CONTRAST_BOOST_MAX = 1.5


__all__ = [
    "A4_HEIGHT_IN",
    "A4_WIDTH_IN",
    "CONTRAST_BOOST_MAX",
    "CONTRAST_BOOST_MIN",
    "DEFAULT_MARGIN_IN",
    "DEFAULT_MARGIN_TOP_BOTTOM_IN",
    "DEFAULT_SPACING_IN",
    "EXTREME_ASPECT_RATIO",
    "HIGH_LABEL_COUNT_THRESHOLD",
    "LETTER_HEIGHT_IN",
    "LETTER_WIDTH_IN",
    "MAX_LABELS_PER_JOB",
    "MAX_LABEL_HEIGHT_IN",
    "MAX_LABEL_WIDTH_IN",
    "MAX_MARGIN_IN",
    "MAX_SEAL_MARGIN_IN",
    "MIN_MARGIN_IN",
    "MIN_MARGIN_TOP_BOTTOM_IN",
    "SEAL_SIZES_IN",
    "SMALL_LABEL_THRESHOLD_IN",
    "SPACING_MAX_IN",
    "SPACING_MIN_IN",
    "SPACING_STEP_IN",
]
