import pytest

from Simulator import Face, Corner, geometry, neighborsOf, oppositeOf, borderCell


@pytest.mark.parametrize("face", list(Face))
def test_four_distinct_neighbors_never_opposite(face):
    neighbors = [side.face for side in neighborsOf(face)]
    assert len(set(neighbors)) == 4
    assert face not in neighbors
    assert oppositeOf(face) not in neighbors


@pytest.mark.parametrize("face", list(Face))
def test_neighbors_list_each_other(face):
    for side in neighborsOf(face):
        assert face in [other.face for other in neighborsOf(side.face)]


@pytest.mark.parametrize("face", list(Face))
def test_opposite_faces_share_neighbors(face):
    mine = {side.face for side in neighborsOf(face)}
    theirs = {side.face for side in neighborsOf(oppositeOf(face))}
    assert mine == theirs


def test_opposite_is_an_involution():
    for face in Face:
        assert oppositeOf(oppositeOf(face)) == face
        assert oppositeOf(face) != face


def test_table_is_read_only():
    with pytest.raises(TypeError):
        geometry._SIDES[Face.UP] = ()


@pytest.mark.parametrize("corner, expected", [
    (Corner.TOP_LEFT, [(0, 1), (1, 1), (2, 1), (3, 1)]),
    (Corner.TOP_RIGHT, [(1, 3), (1, 2), (1, 1), (1, 0)]),
    (Corner.BOTTOM_RIGHT, [(3, 2), (2, 2), (1, 2), (0, 2)]),
    (Corner.BOTTOM_LEFT, [(2, 0), (2, 1), (2, 2), (2, 3)]),
])
def test_border_cell_walks_edge_at_depth(corner, expected):
    assert [borderCell(corner, i, 4, 1) for i in range(4)] == expected


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("corner", list(Corner))
def test_border_cells_stay_on_one_line_inside_grid(size, corner):
    for depth in range(size):
        cells = [borderCell(corner, i, size, depth) for i in range(size)]
        assert len(set(cells)) == size
        assert all(0 <= row < size and 0 <= col < size for row, col in cells)
        rows = {row for row, _ in cells}
        cols = {col for _, col in cells}
        assert len(rows) == 1 or len(cols) == 1


def test_unknown_corner_rejected():
    with pytest.raises(ValueError):
        borderCell("top", 0, 3, 0)
