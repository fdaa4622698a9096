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

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PAPER_CONFIGS = {
    "LETTER": PACKAGE_ROOT / "config/letter.toml",
    "A4": PACKAGE_ROOT / "config/a4.toml",
}
DEFAULT_PAPER_SIZE = "LETTER"
DEFAULT_CONFIG_PATH = PAPER_CONFIGS[DEFAULT_PAPER_SIZE]
PAPER_SIZE_ENV = "QRSEAL_PAPER_SIZE"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


@dataclass(frozen=True)
class ConfigPaths:
    user_config_dir: Path
    user_paper_configs: dict[str, Path]


def _user_config_dir() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / "qrseal"
    if sys.platform == "darwin":
        return Path.home() / ".config" / "qrseal"
    return Path(user_config_dir("qrseal", appauthor=False))


def _build_paths() -> ConfigPaths:
    config_dir = _user_config_dir()
    return ConfigPaths(
        user_config_dir=config_dir,
        user_paper_configs={key: config_dir / path.name for key, path in PAPER_CONFIGS.items()},
    )


def init_user_config() -> Path:
    paths = _build_paths()
    try:
        paths.user_config_dir.mkdir(parents=True, exist_ok=True)
        for key, src in PAPER_CONFIGS.items():
            _copy_if_missing(src, paths.user_paper_configs[key])
    except OSError as exc:
        raise OSError(f"unable to create config dir at {paths.user_config_dir}") from exc
    return paths.user_config_dir


def user_config_needs_init() -> bool:
    paths = _build_paths()
    return any(not path.exists() for path in paths.user_paper_configs.values())


def resolve_config_path(path: str | Path | None = None, *, paper_size: str | None = None) -> Path:
    """Pick the TOML file to load.

    Order: explicit path, paper size argument, QRSEAL_PAPER_SIZE, the user's
    copy of the default paper config, then the packaged default.
    """
    if path:
        return Path(path)

    paths = _build_paths()
    requested = paper_size or os.environ.get(PAPER_SIZE_ENV)
    if requested:
        key = requested.strip().upper()
        if key not in PAPER_CONFIGS:
            raise ValueError(f"unknown paper size: {requested}")
        user_config = paths.user_paper_configs[key]
        return user_config if user_config.exists() else PAPER_CONFIGS[key]

    default_user_config = paths.user_paper_configs[DEFAULT_PAPER_SIZE]
    if default_user_config.exists():
        return default_user_config
    return DEFAULT_CONFIG_PATH


def _copy_if_missing(source: Path, dest: Path) -> None:
    if dest.exists():
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, dest)


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_PAPER_SIZE",
    "PAPER_CONFIGS",
    "PAPER_SIZE_ENV",
    "init_user_config",
    "resolve_config_path",
    "user_config_needs_init",
]
