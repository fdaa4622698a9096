#!/usr/bin/env python3
from __future__ import annotations

import io

from PIL import Image, ImageColor, ImageDraw

from .dots import RASTER_SIZE, SCENE_SIZE, DotRenderResult


def _color_to_rgba(
    value: object,
    fallback: tuple[int, int, int, int],
) -> tuple[int, int, int, int]:
    if value is None:
        return fallback
    if isinstance(value, str):
        normalized = value.strip()
        if normalized.lower() in ("none", "transparent"):
            return (0, 0, 0, 0)
        rgb = ImageColor.getcolor(normalized, "RGBA")
        if isinstance(rgb, int):
            return (rgb, rgb, rgb, 255)
        return (int(rgb[0]), int(rgb[1]), int(rgb[2]), int(rgb[3]))
    if isinstance(value, (tuple, list)):
        if len(value) == 3:
            return (int(value[0]), int(value[1]), int(value[2]), 255)
        if len(value) == 4:
            return (int(value[0]), int(value[1]), int(value[2]), int(value[3]))
    return fallback


def rasterize(
    result: DotRenderResult,
    *,
    size: int = RASTER_SIZE,
    dark: object = None,
    light: object = None,
) -> Image.Image:
    """Draw the render primitives onto a square RGBA canvas of ``size`` pixels."""
    if size <= 0:
        raise ValueError("raster size must be positive")
    dark_rgba = _color_to_rgba(dark, (0, 0, 0, 255))
    light_rgba = _color_to_rgba(light, (255, 255, 255, 255))
    scale = size / SCENE_SIZE

    image = Image.new("RGBA", (size, size), light_rgba)
    draw = ImageDraw.Draw(image)
    for primitive in result.all_primitives():
        cx = primitive.cx * scale
        cy = primitive.cy * scale
        if primitive.filled:
            r = primitive.r * scale
            draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=dark_rgba)
            continue
        # stroke is centered on the ring radius
        half = primitive.stroke_width * scale / 2
        outer = primitive.r * scale + half
        width = max(1, round(primitive.stroke_width * scale))
        draw.ellipse(
            (cx - outer, cy - outer, cx + outer, cy + outer),
            outline=dark_rgba,
            width=width,
        )
    return image


def png_bytes(
    result: DotRenderResult,
    *,
    size: int = RASTER_SIZE,
    dark: object = None,
    light: object = None,
) -> bytes:
    image = rasterize(result, size=size, dark=dark, light=light)
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


__all__ = ["png_bytes", "rasterize"]
