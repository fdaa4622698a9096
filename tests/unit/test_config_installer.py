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

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from qrseal.config import installer


class TestConfigInstaller(unittest.TestCase):
    def test_user_config_dir_precedence(self) -> None:
        with mock.patch.dict(os.environ, {installer.XDG_CONFIG_ENV: "/tmp/xdg"}, clear=False):
            with mock.patch.object(installer.sys, "platform", "linux"):
                self.assertEqual(installer._user_config_dir(), Path("/tmp/xdg/qrseal"))

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "darwin"):
                with mock.patch.object(installer.Path, "home", return_value=Path("/Users/example")):
                    self.assertEqual(
                        installer._user_config_dir(),
                        Path("/Users/example/.config/qrseal"),
                    )

        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(installer.XDG_CONFIG_ENV, None)
            with mock.patch.object(installer.sys, "platform", "linux"):
                with mock.patch.object(
                    installer, "user_config_dir", return_value="/opt/config/qrseal"
                ):
                    self.assertEqual(installer._user_config_dir(), Path("/opt/config/qrseal"))

    def test_packaged_configs_exist(self) -> None:
        for key, path in installer.PAPER_CONFIGS.items():
            with self.subTest(paper=key):
                self.assertTrue(path.is_file())

    def test_init_user_config_copies_every_paper_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            user_dir = Path(tmpdir) / "cfg"
            with mock.patch.object(installer, "_user_config_dir", return_value=user_dir):
                self.assertTrue(installer.user_config_needs_init())
                self.assertEqual(installer.init_user_config(), user_dir)
                self.assertTrue((user_dir / "letter.toml").is_file())
                self.assertTrue((user_dir / "a4.toml").is_file())
                self.assertFalse(installer.user_config_needs_init())

    def test_init_user_config_keeps_user_edits(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            user_dir = Path(tmpdir) / "cfg"
            user_dir.mkdir()
            (user_dir / "letter.toml").write_text("# edited\n", encoding="utf-8")
            with mock.patch.object(installer, "_user_config_dir", return_value=user_dir):
                installer.init_user_config()
            self.assertEqual((user_dir / "letter.toml").read_text(encoding="utf-8"), "# edited\n")

    def test_init_user_config_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with mock.patch.object(
                installer, "_user_config_dir", return_value=Path(tmpdir) / "cfg"
            ):
                with mock.patch.object(installer, "_copy_if_missing", side_effect=OSError("denied")):
                    with self.assertRaisesRegex(OSError, "unable to create config dir"):
                        installer.init_user_config()

    def test_resolve_config_path_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            user_dir = Path(tmpdir) / "cfg"
            with mock.patch.object(installer, "_user_config_dir", return_value=user_dir):
                with mock.patch.dict(os.environ, {}, clear=False):
                    os.environ.pop(installer.PAPER_SIZE_ENV, None)
                    self.assertEqual(
                        installer.resolve_config_path("custom.toml"), Path("custom.toml")
                    )
                    self.assertEqual(installer.resolve_config_path(), installer.DEFAULT_CONFIG_PATH)
                    self.assertEqual(
                        installer.resolve_config_path(paper_size="a4"),
                        installer.PAPER_CONFIGS["A4"],
                    )
                    with mock.patch.dict(os.environ, {installer.PAPER_SIZE_ENV: "A4"}):
                        self.assertEqual(
                            installer.resolve_config_path(), installer.PAPER_CONFIGS["A4"]
                        )

                    installer.init_user_config()
                    self.assertEqual(installer.resolve_config_path(), user_dir / "letter.toml")
                    self.assertEqual(
                        installer.resolve_config_path(paper_size="A4"), user_dir / "a4.toml"
                    )

    def test_resolve_config_path_unknown_paper(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown paper size"):
            installer.resolve_config_path(paper_size="legal")


if __name__ == "__main__":
    unittest.main()
