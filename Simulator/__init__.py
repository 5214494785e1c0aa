from Simulator.geometry import Face, Corner, Side, neighborsOf, oppositeOf, borderCell
from Simulator.simulator import Color, Movement, Cube, newCube, rotate, shiftCells
