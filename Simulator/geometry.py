import collections
from enum import Enum
from types import MappingProxyType


class Face(Enum):
	UP = 0
	LEFT = 1
	FRONT = 2
	RIGHT = 3
	BACK = 4
	DOWN = 5


class Corner(Enum):
	TOP_LEFT = 0
	TOP_RIGHT = 1
	BOTTOM_LEFT = 2
	BOTTOM_RIGHT = 3


Side = collections.namedtuple("Side", ["face", "corner"])

# For each face, the four faces around it and the corner of each neighbor
# that starts the shared border. Listed in the order a clockwise turn
# carries stickers: neighbor i moves onto neighbor i + 1.
_SIDES = MappingProxyType({
	Face.UP: (
		Side(Face.BACK, Corner.TOP_RIGHT),
		Side(Face.RIGHT, Corner.TOP_RIGHT),
		Side(Face.FRONT, Corner.TOP_RIGHT),
		Side(Face.LEFT, Corner.TOP_RIGHT),
	),
	Face.LEFT: (
		Side(Face.UP, Corner.TOP_LEFT),
		Side(Face.FRONT, Corner.TOP_LEFT),
		Side(Face.DOWN, Corner.TOP_LEFT),
		Side(Face.BACK, Corner.BOTTOM_RIGHT),
	),
	Face.FRONT: (
		Side(Face.UP, Corner.BOTTOM_LEFT),
		Side(Face.RIGHT, Corner.TOP_LEFT),
		Side(Face.DOWN, Corner.TOP_RIGHT),
		Side(Face.LEFT, Corner.BOTTOM_RIGHT),
	),
	Face.RIGHT: (
		Side(Face.UP, Corner.BOTTOM_RIGHT),
		Side(Face.BACK, Corner.TOP_LEFT),
		Side(Face.DOWN, Corner.BOTTOM_RIGHT),
		Side(Face.FRONT, Corner.BOTTOM_RIGHT),
	),
	Face.BACK: (
		Side(Face.UP, Corner.TOP_RIGHT),
		Side(Face.LEFT, Corner.TOP_LEFT),
		Side(Face.DOWN, Corner.BOTTOM_LEFT),
		Side(Face.RIGHT, Corner.BOTTOM_RIGHT),
	),
	Face.DOWN: (
		Side(Face.FRONT, Corner.BOTTOM_LEFT),
		Side(Face.RIGHT, Corner.BOTTOM_LEFT),
		Side(Face.BACK, Corner.BOTTOM_LEFT),
		Side(Face.LEFT, Corner.BOTTOM_LEFT),
	),
})

_OPPOSITES = MappingProxyType({
	Face.UP: Face.DOWN,
	Face.DOWN: Face.UP,
	Face.LEFT: Face.RIGHT,
	Face.RIGHT: Face.LEFT,
	Face.FRONT: Face.BACK,
	Face.BACK: Face.FRONT,
})


def neighborsOf(face):
	return _SIDES[face]


def oppositeOf(face):
	return _OPPOSITES[face]


def borderCell(corner, moveIndex, size, depth):
	"""
	Cell of a neighboring face touched by a turn, walking the edge that
	starts at `corner`, `depth` layers in from that edge.
	"""
	last = size - 1
	if corner == Corner.TOP_LEFT:
		return moveIndex, depth
	if corner == Corner.TOP_RIGHT:
		return depth, last - moveIndex
	if corner == Corner.BOTTOM_RIGHT:
		return last - moveIndex, last - depth
	if corner == Corner.BOTTOM_LEFT:
		return last - depth, moveIndex
	raise ValueError("Unknown corner: {}".format(corner))
