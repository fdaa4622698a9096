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

import typer

from ...imposition.placement import suggest_qr_placement
from ...imposition.sheet import (
    SheetLayout,
    SheetValidationResult,
    label_positions,
    validate_sheet_config,
)
from ..core.common import _ctx_value, _load_config, _resolve_quiet, _run_cli
from ..core.log import _error, _warn
from ..ui import build_grid_table, build_kv_table, console

_LABELS_HELP = (
    "Lay out rectangular labels on a sheet and report how many sheets a job needs.\n\n"
    "Examples:\n"
    "  qrseal labels 2 1\n"
    "  qrseal labels 4 3 --quantity 120\n"
    "  qrseal --paper A4 labels 2.5 1.5 --margin 0.75 --positions\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_LABELS_HELP)(labels)


def labels(
    ctx: typer.Context,
    width: float = typer.Argument(..., help="Label width in inches."),
    height: float = typer.Argument(..., help="Label height in inches."),
    margin: float | None = typer.Option(
        None,
        "--margin",
        help="Top/bottom sheet margin in inches (default from config).",
        rich_help_panel="Layout",
    ),
    quantity: int = typer.Option(
        1,
        "--quantity",
        "-n",
        help="Number of labels to print.",
        rich_help_panel="Layout",
    ),
    positions: bool = typer.Option(
        False,
        "--positions",
        help="Print the label centers for the first sheet.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> int:
        cfg = _load_config(ctx)
        quiet_value = _resolve_quiet(ctx, cfg)
        margin_value = cfg.labels.margin_top_bottom_in if margin is None else margin
        result = validate_sheet_config(width, height, margin_value, quantity, paper=cfg.paper)
        for warning in result.warnings:
            _warn(warning.message, quiet=quiet_value)
        if not result.valid:
            for error in result.errors:
                _error(error.message)
            return 2
        if not quiet_value:
            layout = result.layout
            if layout is None:
                raise RuntimeError("label layout missing from a valid result")
            console.print(_summary_table(result, layout, width, height, paper_name=cfg.paper.type))
            if positions:
                console.print(_positions_table(result, layout))
        return 0

    _run_cli(_run, debug=debug_value)


def _summary_table(
    result: SheetValidationResult,
    layout: SheetLayout,
    width: float,
    height: float,
    *,
    paper_name: str,
):
    qr_box = suggest_qr_placement(width, height)
    return build_kv_table(
        [
            ("Paper", f'{paper_name} ({layout.sheet_width_in:g}" x {layout.sheet_height_in:g}")'),
            ("Label", f'{width:g}" x {height:g}"'),
            ("Rotated", "yes" if layout.rotation_used else "no"),
            ("Grid", f"{layout.columns} columns x {layout.rows} rows"),
            ("Labels per sheet", str(layout.per_sheet)),
            ("Quantity", str(result.clamped_quantity)),
            ("Sheets required", str(result.sheets_required)),
            (
                "Grid offset",
                f'{layout.grid_offset_x_in:.3f}" x {layout.grid_offset_y_in:.3f}"',
            ),
            (
                "QR box",
                f'{qr_box.width_in:g}" at ({qr_box.x_in:.2f}", {qr_box.y_in:.2f}")',
            ),
        ],
        title="Label sheet",
    )


def _positions_table(result: SheetValidationResult, layout: SheetLayout):
    count = min(result.clamped_quantity, layout.per_sheet)
    rows = [
        (pos.index + 1, pos.row + 1, pos.col + 1, f"{pos.center_x_in:.3f}", f"{pos.center_y_in:.3f}")
        for pos in label_positions(layout, count)
    ]
    return build_grid_table(("#", "Row", "Col", "X (in)", "Y (in)"), rows, title="Label centers")
