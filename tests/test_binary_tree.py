import pytest

from mazegen.mapgen.binary_tree import generate_binary_tree
from mazegen.rng import PMRandom
from maze_props import assert_spanning_tree

def test_spanning_tree_across_seeds_and_biases():
    for seed in (1, 7, 42, 2024):
        for bias in (0.0, 0.25, 0.5, 0.9, 1.0):
            g = generate_binary_tree(6, 9, PMRandom(seed), bias)
            assert_spanning_tree(g)

def test_same_seed_same_maze():
    a = generate_binary_tree(8, 8, PMRandom(99), 0.5)
    b = generate_binary_tree(8, 8, PMRandom(99), 0.5)
    assert a.wall_matrix() == b.wall_matrix()

def test_each_cell_opens_exactly_one_of_north_or_east():
    # North walls only open from below-carves and east walls only from
    # left-carves, so each cell's own choice is visible on its own flags.
    g = generate_binary_tree(5, 5, PMRandom(3), 0.5)
    for c in g:
        opened = (not c.north) + (not c.east)
        if (c.x, c.y) == (4, 0):
            assert opened == 0
        else:
            assert opened == 1, f"cell {c.x}:{c.y}"

def test_top_row_and_right_column_are_corridors():
    g = generate_binary_tree(4, 6, PMRandom(11), 0.5)
    corner = g.cell(5, 0)
    assert corner.north and corner.east
    assert not corner.west and not corner.south
    assert all(not g.cell(x, 0).east for x in range(5))
    assert all(not g.cell(5, y).north for y in range(1, 4))

def test_bias_extremes():
    # bias 0 never goes east off the boundary rules; bias 1 always does
    g = generate_binary_tree(4, 4, PMRandom(5), 0.0)
    assert all(not g.cell(x, y).north for y in range(1, 4) for x in range(4))
    g = generate_binary_tree(4, 4, PMRandom(5), 1.0)
    assert all(not g.cell(x, y).east for y in range(4) for x in range(3))

@pytest.mark.parametrize("rows,columns", [(1, 1), (1, 7), (7, 1)])
def test_degenerate_shapes_are_corridors(rows, columns):
    g = generate_binary_tree(rows, columns, PMRandom(42), 0.5)
    assert_spanning_tree(g)

def test_rejects_bias_out_of_range():
    with pytest.raises(ValueError):
        generate_binary_tree(3, 3, PMRandom(1), 1.5)
    with pytest.raises(ValueError):
        generate_binary_tree(3, 3, PMRandom(1), -0.1)

def test_history_has_one_snapshot_per_cell():
    history = []
    g = generate_binary_tree(3, 4, PMRandom(8), 0.5, history=history)
    assert len(history) == 12
    assert history[-1].wall_matrix() == g.wall_matrix()
    assert [h.passage_count() for h in history][:3] == [1, 2, 3]
    # top-right corner (index 3) carves nothing
    assert history[3].passage_count() == history[2].passage_count()
