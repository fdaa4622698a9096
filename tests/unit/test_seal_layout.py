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

import math
import unittest

from qrseal.imposition.paper import A4, LETTER, get_paper_dimensions
from qrseal.imposition.seals import (
    PrintLayoutConfig,
    calculate_grid_layout,
    calculate_seal_positions,
    calculate_sheet_count,
    format_seal_size,
    format_spacing,
    paginate_positions,
    validate_print_layout_config,
)


class TestSealGridLayout(unittest.TestCase):
    def test_large_seals_on_letter(self) -> None:
        config = PrintLayoutConfig(seal_diameter_in=1.5, spacing_in=0.25, margin_in=0.25)
        layout = calculate_grid_layout(config)
        self.assertAlmostEqual(layout.cell_size_in, 1.75)
        self.assertEqual(layout.columns, 4)
        self.assertEqual(layout.rows, 5)
        self.assertEqual(layout.seals_per_sheet, 20)
        self.assertAlmostEqual(layout.grid_offset_x_in, 0.75)
        # top/bottom margin raised from 0.25 to the 0.5 registration minimum
        self.assertAlmostEqual(layout.usable_height_in, 10.0)
        self.assertAlmostEqual(layout.grid_offset_y_in, 1.125)

    def test_default_one_inch_seals(self) -> None:
        layout = calculate_grid_layout(PrintLayoutConfig(seal_diameter_in=1.0))
        self.assertEqual((layout.columns, layout.rows), (6, 8))
        self.assertEqual(layout.seals_per_sheet, 48)

    def test_a4_and_wide_margin(self) -> None:
        a4 = calculate_grid_layout(PrintLayoutConfig(seal_diameter_in=1.5, paper=A4))
        self.assertEqual((a4.columns, a4.rows), (4, 6))
        wide = calculate_grid_layout(PrintLayoutConfig(seal_diameter_in=1.5, margin_in=1.0))
        self.assertEqual((wide.columns, wide.rows), (3, 5))

    def test_grid_is_centered(self) -> None:
        for diameter in (0.75, 1.0, 1.25, 1.5):
            for paper in (LETTER, A4):
                with self.subTest(diameter=diameter, paper=paper.type):
                    config = PrintLayoutConfig(seal_diameter_in=diameter, paper=paper)
                    layout = calculate_grid_layout(config)
                    grid_w = layout.columns * layout.cell_size_in
                    trailing = paper.width_in - layout.grid_offset_x_in - grid_w
                    self.assertAlmostEqual(layout.grid_offset_x_in, trailing)

    def test_positions_reading_order(self) -> None:
        config = PrintLayoutConfig(seal_diameter_in=1.5)
        layout = calculate_grid_layout(config)
        positions = calculate_seal_positions(layout, config)
        self.assertEqual(len(positions), 20)
        self.assertAlmostEqual(positions[0].center_x_in, 1.5)
        self.assertAlmostEqual(positions[0].center_y_in, 1.875)
        self.assertAlmostEqual(positions[1].center_x_in, 1.5 + 1.75)
        self.assertEqual((positions[4].row, positions[4].col), (1, 0))
        self.assertAlmostEqual(positions[4].center_y_in, 1.875 + 1.75)
        self.assertEqual([p.index for p in positions], list(range(20)))
        self.assertEqual(len(calculate_seal_positions(layout, config, 7)), 7)

    def test_sheet_count(self) -> None:
        self.assertEqual(calculate_sheet_count(0, 20), 0)
        self.assertEqual(calculate_sheet_count(20, 20), 1)
        self.assertEqual(calculate_sheet_count(45, 20), 3)
        self.assertEqual(calculate_sheet_count(5, 0), 0)

    def test_paginate_positions(self) -> None:
        config = PrintLayoutConfig(seal_diameter_in=1.5)
        layout = calculate_grid_layout(config)
        placed = paginate_positions(layout, config, 45)
        self.assertEqual(len(placed), 45)
        sheets = [item.sheet for item in placed]
        self.assertEqual(max(sheets) + 1, calculate_sheet_count(45, 20))
        self.assertEqual(sheets.count(0), 20)
        self.assertEqual(sheets.count(2), 5)
        self.assertEqual(placed[20].position, placed[0].position)


class TestValidatePrintLayoutConfig(unittest.TestCase):
    def test_valid_sizes(self) -> None:
        for diameter in (0.75, 1.0, 1.25, 1.5):
            with self.subTest(diameter=diameter):
                config = PrintLayoutConfig(seal_diameter_in=diameter)
                self.assertEqual(validate_print_layout_config(config), [])

    def test_invalid_seal_size(self) -> None:
        errors = validate_print_layout_config(PrintLayoutConfig(seal_diameter_in=1.1))
        self.assertEqual(len(errors), 1)
        self.assertIn("Invalid seal size", errors[0])
        self.assertIn("0.75, 1.0, 1.25, 1.5", errors[0])

    def test_spacing_and_margin_bounds(self) -> None:
        cases = (
            ({"spacing_in": 0.1}, "Spacing too small"),
            ({"spacing_in": 1.5}, "Spacing too large"),
            ({"margin_in": -0.1}, "Margin cannot be negative"),
            ({"margin_in": 1.5}, "Margin too large"),
            ({"spacing_in": math.inf}, "Spacing must be a finite number"),
            ({"margin_in": math.nan}, "Margin must be a finite number"),
        )
        for overrides, expected in cases:
            with self.subTest(overrides=overrides):
                errors = validate_print_layout_config(
                    PrintLayoutConfig(seal_diameter_in=1.0, **overrides)
                )
                self.assertTrue(any(expected in error for error in errors), errors)

    def test_non_finite_values_are_reported_not_raised(self) -> None:
        for field in ("seal_diameter_in", "spacing_in", "margin_in"):
            for value in (math.nan, math.inf):
                overrides = {"seal_diameter_in": 1.0, field: value}
                with self.subTest(field=field, value=value):
                    errors = validate_print_layout_config(PrintLayoutConfig(**overrides))
                    self.assertIsInstance(errors, list)
                    self.assertTrue(errors)
                    self.assertTrue(all(isinstance(error, str) for error in errors))

    def test_every_violation_reported(self) -> None:
        config = PrintLayoutConfig(seal_diameter_in=2.0, spacing_in=2.0, margin_in=-1.0)
        errors = validate_print_layout_config(config)
        self.assertGreaterEqual(len(errors), 3)

    def test_nothing_fits_on_tiny_custom_paper(self) -> None:
        paper = get_paper_dimensions("CUSTOM", 1.5, 1.5)
        errors = validate_print_layout_config(
            PrintLayoutConfig(seal_diameter_in=0.75, paper=paper)
        )
        self.assertEqual(errors, ["No seals fit on sheet with current configuration"])


class TestPaperAndFormatting(unittest.TestCase):
    def test_custom_paper_requires_dimensions(self) -> None:
        with self.assertRaisesRegex(ValueError, "requires width and height"):
            get_paper_dimensions("CUSTOM")
        with self.assertRaises(ValueError):
            get_paper_dimensions("CUSTOM", 8.0, 0)
        custom = get_paper_dimensions("custom", 10, 12)
        self.assertEqual((custom.width_in, custom.height_in), (10.0, 12.0))

    def test_named_papers(self) -> None:
        self.assertEqual(get_paper_dimensions("letter"), LETTER)
        self.assertEqual(get_paper_dimensions(" A4 "), A4)
        with self.assertRaisesRegex(ValueError, "unknown paper size"):
            get_paper_dimensions("legal")

    def test_format_helpers(self) -> None:
        self.assertEqual(format_seal_size(1.0), '1"')
        self.assertEqual(format_seal_size(0.75), '0.75"')
        self.assertEqual(format_seal_size(1.5), '1.5"')
        self.assertEqual(format_spacing(0.25), '0.25"')


if __name__ == "__main__":
    unittest.main()
