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

from ...imposition.seals import (
    PrintLayoutConfig,
    SealLayout,
    calculate_grid_layout,
    calculate_sheet_count,
    format_seal_size,
    format_spacing,
    paginate_positions,
    validate_print_layout_config,
)
from ..core.common import _ctx_value, _load_config, _resolve_quiet, _run_cli
from ..core.log import _error
from ..ui import build_grid_table, build_kv_table, console

_SEALS_HELP = (
    "Lay out circular seals on a sheet.\n\n"
    "Seal diameters: 0.75, 1, 1.25, 1.5 inches. Spacing is edge to edge.\n\n"
    "Examples:\n"
    "  qrseal seals\n"
    "  qrseal seals --diameter 1.5 --spacing 0.5\n"
    "  qrseal --paper A4 seals --count 100 --positions\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_SEALS_HELP)(seals)


def seals(
    ctx: typer.Context,
    diameter: float | None = typer.Option(
        None,
        "--diameter",
        "-d",
        help="Seal diameter in inches (default from config).",
        rich_help_panel="Layout",
    ),
    spacing: float | None = typer.Option(
        None,
        "--spacing",
        "-s",
        help="Edge-to-edge spacing in inches (default from config).",
        rich_help_panel="Layout",
    ),
    margin: float | None = typer.Option(
        None,
        "--margin",
        help="Sheet margin in inches (default from config).",
        rich_help_panel="Layout",
    ),
    count: int | None = typer.Option(
        None,
        "--count",
        "-n",
        min=1,
        help="Total seals to print (defaults to one full sheet).",
        rich_help_panel="Layout",
    ),
    positions: bool = typer.Option(
        False,
        "--positions",
        help="Print every seal center with its sheet number.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> int:
        cfg = _load_config(ctx)
        quiet_value = _resolve_quiet(ctx, cfg)
        config = PrintLayoutConfig(
            seal_diameter_in=cfg.seals.diameter_in if diameter is None else diameter,
            spacing_in=cfg.seals.spacing_in if spacing is None else spacing,
            paper=cfg.paper,
            margin_in=cfg.seals.margin_in if margin is None else margin,
        )
        problems = validate_print_layout_config(config)
        if problems:
            for problem in problems:
                _error(problem)
            return 2

        layout = calculate_grid_layout(config)
        total = layout.seals_per_sheet if count is None else count
        if not quiet_value:
            console.print(_summary_table(config, layout, total))
            if positions:
                console.print(_positions_table(config, layout, total))
        return 0

    _run_cli(_run, debug=debug_value)


def _summary_table(config: PrintLayoutConfig, layout: SealLayout, total: int):
    paper = config.paper
    return build_kv_table(
        [
            ("Paper", f'{paper.type} ({paper.width_in:g}" x {paper.height_in:g}")'),
            ("Seal size", format_seal_size(config.seal_diameter_in)),
            ("Spacing", format_spacing(config.spacing_in)),
            ("Grid", f"{layout.columns} columns x {layout.rows} rows"),
            ("Seals per sheet", str(layout.seals_per_sheet)),
            ("Total seals", str(total)),
            ("Sheets required", str(calculate_sheet_count(total, layout.seals_per_sheet))),
            (
                "Grid offset",
                f'{layout.grid_offset_x_in:.3f}" x {layout.grid_offset_y_in:.3f}"',
            ),
        ],
        title="Seal sheet",
    )


def _positions_table(config: PrintLayoutConfig, layout: SealLayout, total: int):
    rows = [
        (
            placed.sheet + 1,
            placed.position.index + 1,
            f"{placed.position.center_x_in:.3f}",
            f"{placed.position.center_y_in:.3f}",
        )
        for placed in paginate_positions(layout, config, total)
    ]
    return build_grid_table(("Sheet", "#", "X (in)", "Y (in)"), rows, title="Seal centers")
