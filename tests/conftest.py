import pytest

from Simulator import Face, newCube


def labelCube(cube):
    # every sticker gets a unique label so moved stickers can be traced
    for face in Face:
        for row in range(cube.size):
            for col in range(cube.size):
                cube.faces[face][row, col] = "{}:{}:{}".format(face.name, row, col)
    return cube


@pytest.fixture
def labeledCube():
    return lambda size: labelCube(newCube(size))


def changedCells(before, after):
    changed = set()
    for face in Face:
        for row in range(before.size):
            for col in range(before.size):
                if before.faces[face][row, col] != after.faces[face][row, col]:
                    changed.add((face, row, col))
    return changed
