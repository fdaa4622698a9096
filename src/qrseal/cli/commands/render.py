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

import json
from dataclasses import replace
from pathlib import Path
from typing import Literal

import typer

from ...qr.batch import render_many
from ...qr.dots import DotRenderResult, render_metadata, validate_render_options
from ...qr.raster import png_bytes
from ...qr.svg import to_svg_document
from ..core.common import _ctx_value, _load_config, _resolve_quiet, _run_cli
from ..core.log import _error
from ..ui import console

RenderFormat = Literal["svg", "png", "json"]

_RENDER_HELP = (
    "Render tokens as dot-QR seals (circles only, radar finder rings).\n\n"
    "Examples:\n"
    "  qrseal render ABC123 --format svg -o seal.svg\n"
    "  qrseal render ABC123 --format png -o seal.png\n"
    "  qrseal render ABC123 DEF456 --format json\n"
    "  qrseal render ABC123 DEF456 --format svg -o seals/\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    tokens: list[str] = typer.Argument(..., help="Token(s) to encode."),
    radius: float | None = typer.Option(
        None,
        "--radius",
        help="QR radius in scene units (default from config).",
        rich_help_panel="Geometry",
    ),
    contrast_boost: float | None = typer.Option(
        None,
        "--contrast-boost",
        help="Dot area multiplier, 1.0-1.5 (default from config).",
        rich_help_panel="Geometry",
    ),
    format: RenderFormat = typer.Option(
        "svg",
        "--format",
        "-f",
        help="Output format.",
        rich_help_panel="Outputs",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file, or a directory when several tokens are given.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> int:
        cfg = _load_config(ctx)
        quiet_value = _resolve_quiet(ctx, cfg)
        options = cfg.qr.render_options()
        if contrast_boost is not None:
            options = replace(options, contrast_boost=contrast_boost)
        problems = validate_render_options(options)
        if problems:
            for problem in problems:
                _error(problem)
            return 2

        results = render_many(
            tokens,
            cfg.qr.radius if radius is None else radius,
            options,
            jobs=cfg.runtime.render_jobs,
        )
        written = _write_results(tokens, results, format=format, output=output)
        if not quiet_value:
            for path in written:
                console.print(str(path))
        return 0

    _run_cli(_run, debug=debug_value)


def _write_results(
    tokens: list[str],
    results: list[DotRenderResult],
    *,
    format: RenderFormat,
    output: Path | None,
) -> list[Path]:
    if output is None:
        if format == "png":
            raise ValueError("png output requires --output")
        if format == "json":
            payload = [_result_payload(t, r) for t, r in zip(tokens, results)]
            typer.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
            return []
        if len(results) > 1:
            raise ValueError("rendering several tokens as svg requires --output DIR")
        typer.echo(to_svg_document(results[0]))
        return []

    if len(results) == 1 and not output.is_dir():
        targets = [output]
    else:
        output.mkdir(parents=True, exist_ok=True)
        targets = [output / f"seal-{index + 1:03d}.{format}" for index in range(len(results))]

    for target, token, result in zip(targets, tokens, results):
        target.parent.mkdir(parents=True, exist_ok=True)
        if format == "png":
            target.write_bytes(png_bytes(result))
        elif format == "json":
            target.write_text(json.dumps(_result_payload(token, result), indent=2), encoding="utf-8")
        else:
            target.write_text(to_svg_document(result), encoding="utf-8")
    return targets


def _result_payload(token: str, result: DotRenderResult) -> dict[str, object]:
    geometry = result.geometry
    return {
        "token": token,
        "metadata": render_metadata(),
        "circle_count": result.circle_count,
        "finder_primitive_count": len(result.finder_primitives),
        "geometry": {
            "radius": geometry.radius,
            "center_x": geometry.center_x,
            "center_y": geometry.center_y,
            "module_size": geometry.module_size,
            "module_count": geometry.module_count,
            "module_size_px": geometry.module_size_px,
            "qr_top_left_px": list(geometry.qr_top_left_px),
            "finders": [
                {
                    "center_x": finder.center_x,
                    "center_y": finder.center_y,
                    "outer_radius": finder.outer_radius,
                }
                for finder in geometry.finders
            ],
        },
    }
