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

import os
import unittest
from unittest import mock

from qrseal.qr.batch import RENDER_JOBS_ENV, render_many, resolve_workers
from qrseal.qr.dots import DotRenderError, DotRenderOptions, render_dot_qr
from qrseal.qr.matrix import ModuleMatrix


class TestRenderMany(unittest.TestCase):
    def test_results_match_serial_renders_in_order(self) -> None:
        tokens = [f"SEAL-{index:04d}" for index in range(12)]
        options = DotRenderOptions(contrast_boost=1.1)
        results = render_many(tokens, 170.0, options, jobs=3)
        self.assertEqual(len(results), len(tokens))
        for token, result in zip(tokens, results):
            with self.subTest(token=token):
                expected = render_dot_qr(token, 170.0, options)
                self.assertEqual(result.primitives, expected.primitives)
                self.assertEqual(result.geometry, expected.geometry)

    def test_empty_input(self) -> None:
        self.assertEqual(render_many([], 170.0), [])

    def test_errors_propagate(self) -> None:
        blank = ModuleMatrix.from_rows([[False] * 21 for _ in range(21)])
        with self.assertRaises(DotRenderError):
            render_many(["A", "B"], 170.0, encoder=lambda data, error: blank, jobs=2)


class TestResolveWorkers(unittest.TestCase):
    def test_explicit_jobs_capped_by_tasks_and_cpu(self) -> None:
        with mock.patch("qrseal.qr.batch.os.cpu_count", return_value=8):
            self.assertEqual(resolve_workers(3, jobs=6), 3)
            self.assertEqual(resolve_workers(100, jobs=16), 8)
            self.assertEqual(resolve_workers(100, jobs=2), 2)

    def test_auto_requires_minimum_tasks_per_worker(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            with mock.patch("qrseal.qr.batch.os.cpu_count", return_value=8):
                self.assertEqual(resolve_workers(3, jobs="auto"), 1)
                self.assertEqual(resolve_workers(8, jobs="auto"), 2)
                self.assertEqual(resolve_workers(100, jobs="auto"), 8)

    def test_env_override(self) -> None:
        with mock.patch.dict(os.environ, {RENDER_JOBS_ENV: "2"}):
            with mock.patch("qrseal.qr.batch.os.cpu_count", return_value=8):
                self.assertEqual(resolve_workers(100), 2)

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            resolve_workers(10, jobs=0)
        with mock.patch.dict(os.environ, {RENDER_JOBS_ENV: "many"}):
            with self.assertRaises(ValueError):
                resolve_workers(10)


if __name__ == "__main__":
    unittest.main()
