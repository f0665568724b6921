# src/mazegen/render/ascii.py
# Deterministic text rendering; golden fixtures are stored in this format.

from ..grid import Grid

VERTICAL_WALL = "|"
HORIZONTAL_WALL = "--"
HORIZONTAL_DOOR = "  "
VERTICAL_DOOR = " "
CORNER = "+"
SPACE = "  "


def render_ascii(grid: Grid) -> str:
    """
    One border line on top, then two lines per row: the row's east walls
    (led by the first cell's west wall) and the row's south walls.
    Lines are joined with "\\n", no trailing newline.
    """
    lines = []
    top = CORNER
    for cell in grid.cells[0]:
        top += (HORIZONTAL_WALL if cell.north else HORIZONTAL_DOOR) + CORNER
    lines.append(top)

    for row in grid.cells:
        mid = VERTICAL_WALL if row[0].west else VERTICAL_DOOR
        for cell in row:
            mid += SPACE + (VERTICAL_WALL if cell.east else VERTICAL_DOOR)
        lines.append(mid)

        bottom = CORNER
        for cell in row:
            bottom += (HORIZONTAL_WALL if cell.south else HORIZONTAL_DOOR) + CORNER
        lines.append(bottom)

    return "\n".join(lines)
