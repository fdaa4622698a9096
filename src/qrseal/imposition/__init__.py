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

"""Print imposition for rectangular labels and circular seals."""

from .paper import A4, LETTER, PaperDimensions, get_paper_dimensions
from .seals import (
    PrintLayoutConfig,
    SealLayout,
    calculate_grid_layout,
    calculate_seal_positions,
    calculate_sheet_count,
    paginate_positions,
    validate_print_layout_config,
)
from .sheet import (
    SheetLayout,
    SheetValidationResult,
    calculate_sheet_layout,
    label_positions,
    validate_sheet_config,
)
from .types import Position, SheetPosition

__all__ = [
    "A4",
    "LETTER",
    "PaperDimensions",
    "Position",
    "PrintLayoutConfig",
    "SealLayout",
    "SheetLayout",
    "SheetPosition",
    "SheetValidationResult",
    "calculate_grid_layout",
    "calculate_seal_positions",
    "calculate_sheet_count",
    "calculate_sheet_layout",
    "get_paper_dimensions",
    "label_positions",
    "paginate_positions",
    "validate_print_layout_config",
    "validate_sheet_config",
]
