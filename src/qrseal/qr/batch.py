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

import concurrent.futures
import functools
import os
from collections.abc import Sequence
from typing import Literal

from .dots import DotRenderOptions, DotRenderResult, render_dot_qr
from .matrix import MatrixEncoder, encode_matrix

RENDER_JOBS_ENV = "QRSEAL_RENDER_JOBS"
_DEFAULT_WORKERS_CAP = 8
_MIN_TASKS_PER_WORKER = 4


def render_many(
    tokens: Sequence[str],
    radius: float,
    options: DotRenderOptions | None = None,
    *,
    jobs: int | Literal["auto"] | None = None,
    encoder: MatrixEncoder = encode_matrix,
) -> list[DotRenderResult]:
    """Render every token, returning results in input order."""
    if not tokens:
        return []
    worker = functools.partial(render_dot_qr, radius=radius, options=options, encoder=encoder)
    workers = resolve_workers(len(tokens), jobs=jobs)
    if workers <= 1:
        return [worker(token) for token in tokens]

    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(worker, tokens))


def resolve_workers(task_count: int, *, jobs: int | Literal["auto"] | None = None) -> int:
    requested: int | None = None
    explicit = False
    if isinstance(jobs, int) and not isinstance(jobs, bool):
        if jobs <= 0:
            raise ValueError("jobs must be a positive integer or 'auto'")
        requested = jobs
        explicit = True
    elif jobs is None:
        raw = os.environ.get(RENDER_JOBS_ENV, "").strip().lower()
        if raw and raw != "auto":
            try:
                parsed = int(raw)
            except ValueError:
                raise ValueError(f"{RENDER_JOBS_ENV} must be a positive integer or 'auto'") from None
            if parsed > 0:
                requested = parsed
                explicit = True

    cpu = os.cpu_count() or 1
    if requested is None:
        requested = min(cpu, _DEFAULT_WORKERS_CAP)

    workers = max(1, min(requested, cpu, task_count))
    if not explicit:
        workers = min(workers, max(1, task_count // _MIN_TASKS_PER_WORKER))
    return max(1, workers)


__all__ = ["RENDER_JOBS_ENV", "render_many", "resolve_workers"]
