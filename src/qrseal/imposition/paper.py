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

from dataclasses import dataclass
from typing import Literal, cast

from ..core.bounds import A4_HEIGHT_IN, A4_WIDTH_IN, LETTER_HEIGHT_IN, LETTER_WIDTH_IN
from ..core.validation import is_finite_number

PaperType = Literal["LETTER", "A4", "CUSTOM"]


@dataclass(frozen=True)
class PaperDimensions:
    type: PaperType
    width_in: float
    height_in: float


LETTER = PaperDimensions("LETTER", LETTER_WIDTH_IN, LETTER_HEIGHT_IN)
A4 = PaperDimensions("A4", A4_WIDTH_IN, A4_HEIGHT_IN)

PAPER_SIZES: dict[str, PaperDimensions] = {
    "LETTER": LETTER,
    "A4": A4,
}


def normalize_paper_type(value: str) -> PaperType:
    key = value.strip().upper()
    if key not in ("LETTER", "A4", "CUSTOM"):
        raise ValueError(f"unknown paper size: {value}")
    return cast(PaperType, key)


def get_paper_dimensions(
    paper_type: str,
    custom_width_in: float | None = None,
    custom_height_in: float | None = None,
) -> PaperDimensions:
    """Resolve a paper type to its dimensions.

    Raises:
        ValueError: If the type is unknown, or CUSTOM is requested without a
            positive width and height.
    """
    key = normalize_paper_type(paper_type)
    if key == "CUSTOM":
        if not _positive(custom_width_in) or not _positive(custom_height_in):
            raise ValueError("custom paper size requires width and height")
        return PaperDimensions("CUSTOM", float(custom_width_in), float(custom_height_in))  # type: ignore[arg-type]
    return PAPER_SIZES[key]


def _positive(value: object) -> bool:
    return is_finite_number(value) and value > 0  # type: ignore[operator]


__all__ = [
    "A4",
    "LETTER",
    "PAPER_SIZES",
    "PaperDimensions",
    "PaperType",
    "get_paper_dimensions",
    "normalize_paper_type",
]
