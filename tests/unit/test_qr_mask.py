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

import unittest

from qrseal.qr.dots import SCENE_TO_RASTER_SCALE, render_dot_qr
from qrseal.qr.mask import (
    DEFAULT_FINDER_EXCLUSION_MULTIPLIER,
    ModuleZone,
    build_module_mask,
    classify_pixel,
    finder_exclusions,
)
from qrseal.qr.matrix import ModuleMatrix


def _checkerboard_geometry():
    matrix = ModuleMatrix.from_rows(
        [[(row + col) % 2 == 0 for col in range(21)] for row in range(21)]
    )
    return render_dot_qr("MASK", 170.0, encoder=lambda data, error: matrix).geometry


class TestModuleMask(unittest.TestCase):
    def setUp(self) -> None:
        self.geometry = _checkerboard_geometry()
        self.left, self.top = self.geometry.qr_top_left_px
        self.step = self.geometry.module_size_px

    def _module_center(self, row: int, col: int) -> tuple[float, float]:
        return (
            self.left + (col + 0.5) * self.step,
            self.top + (row + 0.5) * self.step,
        )

    def test_dark_and_light_module_centers(self) -> None:
        px, py = self._module_center(10, 10)
        self.assertEqual(classify_pixel(self.geometry, px, py), ModuleZone.DARK_MODULE)
        px, py = self._module_center(10, 11)
        self.assertEqual(classify_pixel(self.geometry, px, py), ModuleZone.LIGHT_MODULE)

    def test_module_boundary_is_edge_buffer(self) -> None:
        px = self.left + 10 * self.step + 0.1
        _, py = self._module_center(10, 10)
        self.assertEqual(classify_pixel(self.geometry, px, py), ModuleZone.EDGE_BUFFER)

    def test_outside_qr(self) -> None:
        self.assertEqual(classify_pixel(self.geometry, 2, 2), ModuleZone.OUTSIDE_QR)
        self.assertEqual(classify_pixel(self.geometry, 510, 510), ModuleZone.OUTSIDE_QR)

    def test_finder_centers_are_excluded(self) -> None:
        for zone in finder_exclusions(self.geometry):
            self.assertEqual(
                classify_pixel(self.geometry, zone.center_x_px, zone.center_y_px),
                ModuleZone.FINDER_ZONE,
            )

    def test_finder_exclusion_radius_scaled(self) -> None:
        finder = self.geometry.finders[0]
        zone = finder_exclusions(self.geometry)[0]
        self.assertAlmostEqual(
            zone.exclusion_radius_px,
            finder.outer_radius * SCENE_TO_RASTER_SCALE * DEFAULT_FINDER_EXCLUSION_MULTIPLIER,
        )
        self.assertAlmostEqual(zone.center_x_px, finder.center_x * SCENE_TO_RASTER_SCALE)

    def test_mask_matches_pointwise_classification(self) -> None:
        mask = build_module_mask(self.geometry)
        self.assertEqual(len(mask), 512)
        self.assertEqual(len(mask[0]), 512)
        for px, py in ((0, 0), (200, 200), (256, 256), (257, 300), (340, 180), (511, 511)):
            with self.subTest(px=px, py=py):
                self.assertEqual(mask[py][px], classify_pixel(self.geometry, px, py))
        zones = {value for row in mask for value in row}
        self.assertEqual(zones, {zone.value for zone in ModuleZone})


if __name__ == "__main__":
    unittest.main()
