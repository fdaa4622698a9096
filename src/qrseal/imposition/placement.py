#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass

MIN_QR_SIZE_IN = 0.5
DEFAULT_QR_SIZE_IN = 0.7
DEFAULT_QR_MARGIN_IN = 0.1


@dataclass(frozen=True)
class QrBox:
    x_in: float
    y_in: float
    width_in: float
    height_in: float


@dataclass(frozen=True)
class SuggestedRegion:
    name: str
    region: QrBox


def suggest_qr_placement(
    label_width_in: float,
    label_height_in: float,
    *,
    min_qr_size_in: float = DEFAULT_QR_SIZE_IN,
    margin_in: float = DEFAULT_QR_MARGIN_IN,
) -> QrBox:
    """Default QR box: bottom-right corner, inset by margin."""
    size = max(
        MIN_QR_SIZE_IN,
        min(label_width_in - margin_in * 2, label_height_in - margin_in * 2, min_qr_size_in),
    )
    return QrBox(
        x_in=label_width_in - size - margin_in,
        y_in=label_height_in - size - margin_in,
        width_in=size,
        height_in=size,
    )


def calculate_max_qr_size(
    label_width_in: float,
    label_height_in: float,
    *,
    margin_in: float = DEFAULT_QR_MARGIN_IN,
) -> QrBox:
    """Largest centered QR box leaving margin on every side."""
    size = max(MIN_QR_SIZE_IN, min(label_width_in - margin_in * 2, label_height_in - margin_in * 2))
    return QrBox(
        x_in=(label_width_in - size) / 2,
        y_in=(label_height_in - size) / 2,
        width_in=size,
        height_in=size,
    )


def find_candidate_regions(
    label_width_in: float,
    label_height_in: float,
    *,
    qr_size_in: float = DEFAULT_QR_SIZE_IN,
    margin_in: float = DEFAULT_QR_MARGIN_IN,
) -> list[SuggestedRegion]:
    """Candidate QR boxes in preference order, bottom-right first."""
    size = min(qr_size_in, label_width_in - margin_in * 2, label_height_in - margin_in * 2)
    right = label_width_in - size - margin_in
    bottom = label_height_in - size - margin_in
    corners = (
        ("bottom-right", right, bottom),
        ("bottom-left", margin_in, bottom),
        ("top-right", right, margin_in),
        ("top-left", margin_in, margin_in),
        ("center", (label_width_in - size) / 2, (label_height_in - size) / 2),
    )
    return [SuggestedRegion(name, QrBox(x, y, size, size)) for name, x, y in corners]


__all__ = [
    "QrBox",
    "SuggestedRegion",
    "calculate_max_qr_size",
    "find_candidate_regions",
    "suggest_qr_placement",
]
