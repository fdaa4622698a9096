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

import io
import re
import unittest
from xml.etree import ElementTree

from PIL import Image

from qrseal.qr.dots import render_dot_qr
from qrseal.qr.raster import png_bytes, rasterize
from qrseal.qr.svg import to_svg_document, to_svg_group

_TAG_RE = re.compile(r"<([a-zA-Z]+)")


class TestSvgOutput(unittest.TestCase):
    def setUp(self) -> None:
        self.result = render_dot_qr("SEAL-0001", 170.0)

    def test_group_contains_only_circles(self) -> None:
        svg = to_svg_group(self.result)
        tags = set(_TAG_RE.findall(svg))
        self.assertEqual(tags, {"g", "circle"})
        self.assertIn('data-render-mode="SEAL"', svg)
        self.assertNotIn("<rect", svg)
        self.assertNotIn("<path", svg)

    def test_circle_count_matches_primitives(self) -> None:
        svg = to_svg_group(self.result)
        self.assertEqual(svg.count("<circle"), len(self.result.all_primitives()))
        self.assertEqual(svg.count('stroke-width="'), 3)

    def test_coordinates_have_two_decimals(self) -> None:
        svg = to_svg_group(self.result)
        first = self.result.primitives[0]
        self.assertIn(f'cx="{first.cx:.2f}"', svg)
        self.assertIn(f'r="{first.r:.2f}"', svg)

    def test_document_wraps_group_in_scene_viewbox(self) -> None:
        svg = to_svg_document(self.result, color="#123456")
        self.assertTrue(svg.startswith("<svg"))
        self.assertIn('viewBox="0 0 1000 1000"', svg)
        self.assertIn('fill="#123456"', svg)

    def test_color_is_escaped_in_attributes(self) -> None:
        color = 'red" onload="x<&'
        svg = to_svg_document(self.result, color=color)
        self.assertNotIn('onload="', svg)
        root = ElementTree.fromstring(svg)
        circles = root.iter("{http://www.w3.org/2000/svg}circle")
        first = next(circles)
        self.assertEqual(first.get("fill"), color)


class TestRasterOutput(unittest.TestCase):
    def setUp(self) -> None:
        self.result = render_dot_qr("SEAL-0001", 170.0)

    def test_rasterize_default_canvas(self) -> None:
        image = rasterize(self.result)
        self.assertEqual(image.size, (512, 512))
        self.assertEqual(image.getpixel((0, 0)), (255, 255, 255, 255))

    def test_dot_centers_are_dark(self) -> None:
        image = rasterize(self.result)
        scale = 512 / 1000
        for dot in self.result.primitives[:10]:
            pixel = image.getpixel((int(dot.cx * scale), int(dot.cy * scale)))
            self.assertEqual(pixel, (0, 0, 0, 255))

    def test_finder_core_dark_and_ring_gap_light(self) -> None:
        image = rasterize(self.result)
        scale = 512 / 1000
        finder = self.result.geometry.finders[0]
        cx = int(finder.center_x * scale)
        cy = int(finder.center_y * scale)
        self.assertEqual(image.getpixel((cx, cy)), (0, 0, 0, 255))
        # between the core (1.5 modules) and the ring (~3.35 modules)
        gap = int((finder.center_x + 2.4 * self.result.geometry.module_size) * scale)
        self.assertEqual(image.getpixel((gap, cy)), (255, 255, 255, 255))

    def test_custom_colors(self) -> None:
        image = rasterize(self.result, dark="#ff0000", light="transparent")
        self.assertEqual(image.getpixel((0, 0)), (0, 0, 0, 0))

    def test_invalid_size_rejected(self) -> None:
        with self.assertRaises(ValueError):
            rasterize(self.result, size=0)

    def test_png_bytes_signature(self) -> None:
        data = png_bytes(self.result, size=256)
        self.assertTrue(data.startswith(b"\x89PNG\r\n\x1a\n"))
        with Image.open(io.BytesIO(data)) as image:
            self.assertEqual(image.size, (256, 256))


if __name__ == "__main__":
    unittest.main()
