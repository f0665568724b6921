# src/mazegen/render/image.py
# Render a maze to a Pillow image, optionally shaded by a distance field.

from __future__ import annotations

import os
from typing import Optional

from PIL import Image, ImageColor, ImageDraw

from ..config import VIEW
from ..distance import DistanceField
from ..grid import Grid
from .layout import fit, wall_segments


def render_image(
    grid: Grid,
    width: int = VIEW.width,
    height: int = VIEW.height,
    distances: Optional[DistanceField] = None,
    padding: int = VIEW.padding,
) -> Image.Image:
    layout = fit(grid, width, height, padding)
    canvas = Image.new("RGBA", (width, height), ImageColor.getrgb(VIEW.background) + (255,))

    if distances is not None:
        r, g, b = ImageColor.getrgb(VIEW.texture_color)[:3]
        shade = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(shade)
        for cell in grid:
            alpha = round(255 * distances.intensity(cell))
            draw.rectangle(layout.cell_box(cell), fill=(r, g, b, alpha))
        canvas = Image.alpha_composite(canvas, shade)

    draw = ImageDraw.Draw(canvas)
    wall = ImageColor.getrgb(VIEW.wall_color)[:3] + (255,)
    for start, end in wall_segments(grid, layout):
        draw.line([start, end], fill=wall, width=1)
    return canvas


def save_png(grid: Grid, out_png: str, **kwargs) -> None:
    img = render_image(grid, **kwargs)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
