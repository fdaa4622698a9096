#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable

import segno

# Seal QRs are always encoded at this tier (~15% recovery).
SEAL_ERROR_LEVEL = "M"

_ERROR_LEVELS = frozenset({"L", "M", "Q", "H"})


@dataclass(frozen=True)
class ModuleMatrix:
    modules: tuple[tuple[bool, ...], ...]
    size: int

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[object]]) -> ModuleMatrix:
        modules = tuple(tuple(bool(cell) for cell in row) for row in rows)
        size = len(modules)
        for index, row in enumerate(modules):
            if len(row) != size:
                raise ValueError(
                    f"module matrix must be square: row {index} has {len(row)} cells, "
                    f"expected {size}"
                )
        return cls(modules=modules, size=size)

    def is_dark(self, row: int, col: int) -> bool:
        return self.modules[row][col]

    def dark_count(self) -> int:
        return sum(sum(row) for row in self.modules)


MatrixEncoder = Callable[[str, str], ModuleMatrix]


def make_qr(data: str, *, error: str = SEAL_ERROR_LEVEL) -> Any:
    level = error.strip().upper()
    if level not in _ERROR_LEVELS:
        raise ValueError(f"unsupported error correction level: {error}")
    return segno.make(
        data,
        error=level.lower(),
        micro=False,
        boost_error=False,
    )


def encode_matrix(data: str, error: str = SEAL_ERROR_LEVEL) -> ModuleMatrix:
    """Encode data into a square boolean module grid without a quiet zone."""
    if not data:
        raise ValueError("QR data cannot be empty")
    qr = make_qr(data, error=error)
    return ModuleMatrix.from_rows(qr.matrix_iter(scale=1, border=0))


__all__ = [
    "MatrixEncoder",
    "ModuleMatrix",
    "SEAL_ERROR_LEVEL",
    "encode_matrix",
    "make_qr",
]
