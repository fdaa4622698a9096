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

import math
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from ..core.bounds import DEFAULT_MARGIN_IN, DEFAULT_MARGIN_TOP_BOTTOM_IN, DEFAULT_SPACING_IN
from ..imposition.paper import PaperDimensions, get_paper_dimensions
from ..qr.dots import DotRenderOptions, default_qr_radius
from .installer import DEFAULT_PAPER_SIZE, resolve_config_path


@dataclass(frozen=True)
class LabelDefaults:
    margin_top_bottom_in: float = DEFAULT_MARGIN_TOP_BOTTOM_IN


@dataclass(frozen=True)
class SealDefaults:
    diameter_in: float = 1.0
    spacing_in: float = DEFAULT_SPACING_IN
    margin_in: float = DEFAULT_MARGIN_IN


@dataclass(frozen=True)
class QrDefaults:
    radius: float = field(default_factory=default_qr_radius)
    contrast_boost: float = 1.0
    url_prefix: str = ""

    def render_options(self) -> DotRenderOptions:
        return DotRenderOptions(contrast_boost=self.contrast_boost, url_prefix=self.url_prefix)


@dataclass(frozen=True)
class RuntimeDefaults:
    render_jobs: int | Literal["auto"] | None = None


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    paper: PaperDimensions
    labels: LabelDefaults = field(default_factory=LabelDefaults)
    seals: SealDefaults = field(default_factory=SealDefaults)
    qr: QrDefaults = field(default_factory=QrDefaults)
    runtime: RuntimeDefaults = field(default_factory=RuntimeDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    return parse_app_config(data, paper_size=paper_size)


def parse_app_config(data: dict[str, object], *, paper_size: str | None = None) -> AppConfig:
    return AppConfig(
        paper=_parse_paper(_get_dict(data, "page"), paper_size=paper_size),
        labels=_parse_label_defaults(_get_dict(data, "labels")),
        seals=_parse_seal_defaults(_get_dict(data, "seals")),
        qr=_parse_qr_defaults(_get_dict(data, "qr")),
        runtime=_parse_runtime_defaults(_get_dict(data, "runtime")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_paper(cfg: dict[str, object], *, paper_size: str | None) -> PaperDimensions:
    size = paper_size or _parse_optional_str(cfg.get("size"), field="page.size")
    width = _parse_optional_float(cfg.get("width_in"), field="page.width_in")
    height = _parse_optional_float(cfg.get("height_in"), field="page.height_in")
    try:
        return get_paper_dimensions(size or DEFAULT_PAPER_SIZE, width, height)
    except ValueError as exc:
        raise ValueError(f"page: {exc}") from exc


def _parse_label_defaults(cfg: dict[str, object]) -> LabelDefaults:
    return LabelDefaults(
        margin_top_bottom_in=_parse_float(
            cfg.get("margin_top_bottom_in"),
            field="labels.margin_top_bottom_in",
            default=DEFAULT_MARGIN_TOP_BOTTOM_IN,
        ),
    )


def _parse_seal_defaults(cfg: dict[str, object]) -> SealDefaults:
    return SealDefaults(
        diameter_in=_parse_float(cfg.get("diameter_in"), field="seals.diameter_in", default=1.0),
        spacing_in=_parse_float(
            cfg.get("spacing_in"), field="seals.spacing_in", default=DEFAULT_SPACING_IN
        ),
        margin_in=_parse_float(
            cfg.get("margin_in"), field="seals.margin_in", default=DEFAULT_MARGIN_IN
        ),
    )


def _parse_qr_defaults(cfg: dict[str, object]) -> QrDefaults:
    radius = _parse_float(cfg.get("radius"), field="qr.radius", default=default_qr_radius())
    if radius <= 0:
        raise ValueError("qr.radius must be a positive number")
    boost = _parse_float(cfg.get("contrast_boost"), field="qr.contrast_boost", default=1.0)
    if boost <= 0:
        raise ValueError("qr.contrast_boost must be a positive number")
    return QrDefaults(
        radius=radius,
        contrast_boost=boost,
        url_prefix=_parse_optional_str(cfg.get("url_prefix"), field="qr.url_prefix") or "",
    )


def _parse_runtime_defaults(cfg: dict[str, object]) -> RuntimeDefaults:
    return RuntimeDefaults(
        render_jobs=_parse_optional_render_jobs(
            cfg.get("render_jobs"),
            field="runtime.render_jobs",
        ),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value.strip() or None


def _parse_float(value: object, *, field: str, default: float) -> float:
    parsed = _parse_optional_float(value, field=field)
    return default if parsed is None else parsed


def _parse_optional_float(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = float(text)
        except ValueError:
            raise ValueError(f"{field} must be a number") from None
    else:
        raise ValueError(f"{field} must be a number")
    if not math.isfinite(parsed):
        raise ValueError(f"{field} must be a finite number")
    return parsed


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_optional_render_jobs(
    value: object,
    *,
    field: str,
) -> int | Literal["auto"] | None:
    if value is None:
        return None
    if isinstance(value, str):
        normalized = value.strip().lower()
        if not normalized:
            return None
        if normalized == "auto":
            return "auto"
        parsed = _parse_int_strict(normalized, field=field)
        if parsed <= 0:
            raise ValueError(f"{field} must be 'auto' or a positive integer")
        return parsed
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be 'auto' or a positive integer")
    return parsed


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"{field} must be an integer") from None
    raise ValueError(f"{field} must be an integer")


__all__ = [
    "AppConfig",
    "LabelDefaults",
    "QrDefaults",
    "RuntimeDefaults",
    "SealDefaults",
    "UiDefaults",
    "load_app_config",
    "parse_app_config",
]
