import pytest

from mazegen.directions import Direction, UnreachableDirection
from mazegen.grid import Cell, Grid, cell_id
from mazegen.mapgen.binary_tree import generate_binary_tree
from mazegen.rng import PMRandom

N, E, S, W, NONE = Direction.N, Direction.E, Direction.S, Direction.W, Direction.NONE

def test_create_closes_every_wall():
    g = Grid.create(3, 4)
    assert (g.rows, g.columns) == (3, 4)
    assert len(g.cells) == 3 and all(len(r) == 4 for r in g.cells)
    for c in g:
        assert (c.north, c.east, c.south, c.west) == (True, True, True, True)
    # [row][column] storage
    assert g.cells[2][1] == Cell(1, 2)
    assert g.passage_count() == 0

@pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 2)])
def test_create_rejects_empty_dimensions(rows, columns):
    with pytest.raises(ValueError):
        Grid.create(rows, columns)

def test_cell_identity_is_coordinates():
    a = Cell(1, 2)
    b = Cell(1, 2, north=False)
    assert a == b and hash(a) == hash(b)
    assert a != Cell(2, 1)
    assert cell_id(a) == "1:2"

def test_carve_opens_both_sides():
    g = Grid.create(2, 2)
    g.carve(g.cell(0, 1), N)
    assert not g.cell(0, 1).north and not g.cell(0, 0).south
    g.carve(g.cell(1, 1), W)
    assert not g.cell(1, 1).west and not g.cell(0, 1).east
    assert g.passage_count() == 2
    # everything else untouched
    assert g.cell(1, 0).south and g.cell(1, 0).west

def test_carve_none_is_noop():
    g = Grid.create(2, 2)
    before = g.wall_matrix()
    g.carve(g.cell(1, 0), NONE)
    assert g.wall_matrix() == before

def test_carve_off_grid_raises_without_mutation():
    g = Grid.create(2, 2)
    with pytest.raises(IndexError):
        g.carve(g.cell(0, 0), N)
    assert g.cell(0, 0).north

def test_move_is_pure_arithmetic():
    g = Grid.create(3, 3)
    c = g.cell(1, 1)
    assert g.move(c, N) == Cell(1, 0)
    assert g.move(c, E) == Cell(2, 1)
    assert g.move(c, S) == Cell(1, 2)
    assert g.move(c, W) == Cell(0, 1)
    assert g.move(c, NONE) is c
    with pytest.raises(IndexError):
        g.move(g.cell(2, 2), E)

def test_unknown_direction_is_a_fault():
    g = Grid.create(2, 2)
    with pytest.raises(UnreachableDirection):
        g.carve(g.cell(0, 0), "E")
    with pytest.raises(UnreachableDirection):
        g.move(g.cell(0, 0), None)

def test_in_bounds_directions_at_edges():
    g = Grid.create(3, 3)
    assert g.in_bounds_directions(g.cell(0, 0)) == [E, S]
    assert g.in_bounds_directions(g.cell(2, 0)) == [S, W]
    assert g.in_bounds_directions(g.cell(1, 1)) == [N, E, S, W]
    assert g.in_bounds_directions(g.cell(2, 2)) == [N, W]
    assert Grid.create(1, 1).in_bounds_directions(Cell(0, 0)) == []

def test_adjacent_vs_open_neighbors():
    g = Grid.create(3, 3)
    mid = g.cell(1, 1)
    assert g.adjacent_cells(mid) == [Cell(1, 0), Cell(2, 1), Cell(1, 2), Cell(0, 1)]
    assert g.open_neighbors(mid) == []
    g.carve(mid, W)
    g.carve(mid, N)
    # N, E, S, W order regardless of carve order
    assert g.open_neighbors(mid) == [Cell(1, 0), Cell(0, 1)]
    assert g.open_neighbors(g.cell(0, 1)) == [Cell(1, 1)]

def test_copy_is_independent():
    g = Grid.create(2, 2)
    snap = g.copy()
    g.carve(g.cell(0, 0), E)
    assert snap.cell(0, 0).east and not g.cell(0, 0).east

def test_wall_matrix_layout():
    g = Grid.create(1, 2)
    g.carve(g.cell(0, 0), E)
    assert g.wall_matrix() == [[(True, False, True, True), (True, True, True, False)]]

def test_grid_equality_sees_walls():
    carved = generate_binary_tree(3, 3, PMRandom(42), 0.5)
    assert carved != Grid.create(3, 3)
    assert carved == generate_binary_tree(3, 3, PMRandom(42), 0.5)
    assert carved == carved.copy()
    assert Grid.create(2, 3) != Grid.create(3, 2)
    assert Grid.create(2, 2) == Grid.create(2, 2)
