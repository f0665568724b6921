# src/mazegen/render/surface.py
from __future__ import annotations

from typing import Optional

import pygame

from ..config import VIEW
from ..distance import DistanceField
from ..grid import Grid
from .layout import Layout, wall_segments


def draw_maze(
    surface: pygame.Surface,
    grid: Grid,
    layout: Layout,
    distances: Optional[DistanceField] = None,
) -> None:
    """
    Paint walls (and the distance texture, when given) onto `surface`.
    The texture colour is blended over the background by intensity, so a
    source cell keeps the background and the farthest cell gets the full colour.
    """
    bg = pygame.Color(VIEW.background)
    surface.fill(bg)

    if distances is not None:
        tex = pygame.Color(VIEW.texture_color)
        for cell in grid:
            x0, y0, x1, y1 = layout.cell_box(cell)
            colour = bg.lerp(tex, distances.intensity(cell))
            pygame.draw.rect(surface, colour, pygame.Rect(x0, y0, x1 - x0, y1 - y0))

    wall = pygame.Color(VIEW.wall_color)
    for start, end in wall_segments(grid, layout):
        pygame.draw.line(surface, wall, start, end)
