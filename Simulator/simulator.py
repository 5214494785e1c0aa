import collections
from enum import Enum

import numpy as np

import constants
from Simulator.geometry import Face, neighborsOf, borderCell


class Color(Enum):
	WHITE = "W"
	YELLOW = "Y"
	RED = "R"
	ORANGE = "O"
	BLUE = "B"
	GREEN = "G"


class Movement(Enum):
	CLOCKWISE = 0
	COUNTER_CLOCKWISE = 1
	HALF = 2


class Cube:
	def __init__(self, size = constants.kDefaultSize):
		if size < 1:
			raise ValueError("Cube size must be at least 1, got {}".format(size))
		self.size = size
		self.fillCube()

	def fillCube(self):
		self.faces = {face: np.full((self.size, self.size), Color(letter), dtype=object)
			for face, letter in zip(Face, constants.kSolvedColors)}

	def copy(self):
		other = Cube(self.size)
		other.faces = {face: grid.copy() for face, grid in self.faces.items()}
		return other

	def getState(self):
		return np.stack([self.faces[face] for face in Face])

	def isSolved(self):
		return all(np.all(grid == grid[0, 0]) for grid in self.faces.values())

	def colorCounts(self):
		return collections.Counter(self.getState().ravel())

	def __eq__(self, other):
		if not isinstance(other, Cube):
			return NotImplemented
		return self.size == other.size and np.array_equal(self.getState(), other.getState())

	def __repr__(self):
		return "<Cube size={} solved={}>".format(self.size, self.isSolved())


def newCube(size):
	return Cube(size)


def shiftCells(cells, movement):
	"""
	Cycle the values held by a group of (grid, row, col) cells.

	Clockwise moves the value of cell i onto cell i + 1, counter-clockwise
	onto cell i - 1, and a half turn onto the cell two places along. All
	values are read before any is written back.
	"""
	values = [grid[row, col] for grid, row, col in cells]
	if movement == Movement.CLOCKWISE:
		shifted = values[-1:] + values[:-1]
	elif movement == Movement.COUNTER_CLOCKWISE:
		shifted = values[1:] + values[:1]
	elif movement == Movement.HALF:
		shifted = values[2:] + values[:2]
	else:
		raise ValueError("Unknown movement: {}".format(movement))
	for (grid, row, col), value in zip(cells, shifted):
		grid[row, col] = value


def rotateGrid(grid, movement):
	# ring by ring, each position a top -> right -> bottom -> left group
	last = len(grid) - 1
	for ring in range(len(grid) // 2):
		for i in range(ring, last - ring):
			shiftCells([(grid, ring, i),
						(grid, i, last - ring),
						(grid, last - ring, last - i),
						(grid, last - i, ring)], movement)


def rotate(cube, face, movement, depth = 0):
	"""
	Turn the layer `depth` slices in from `face`. Only the outermost layer
	also turns the face's own stickers.
	"""
	if not 0 <= depth < cube.size:
		raise ValueError("Depth {} is out of range for a cube of size {}".format(depth, cube.size))
	if depth == 0:
		rotateGrid(cube.faces[face], movement)

	sides = neighborsOf(face)
	for moveIndex in range(cube.size):
		cells = []
		for side in sides:
			row, col = borderCell(side.corner, moveIndex, cube.size, depth)
			cells.append((cube.faces[side.face], row, col))
		shiftCells(cells, movement)
