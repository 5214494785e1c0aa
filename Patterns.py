import random
import re

import constants
import Render
from Simulator import Face, Movement, rotate

FACE_LETTERS = {
    "U": Face.UP,
    "L": Face.LEFT,
    "F": Face.FRONT,
    "R": Face.RIGHT,
    "B": Face.BACK,
    "D": Face.DOWN,
}

SUFFIXES = {
    "": Movement.CLOCKWISE,
    "'": Movement.COUNTER_CLOCKWISE,
    "2": Movement.HALF,
}

# optional 1-based layer, face letter, optional ' or 2
MOVE_PATTERN = re.compile(r"^(\d*)([ULFRBD])('|2)?$")

def waitForEnter():
    input()

def parseMove(token):
    match = MOVE_PATTERN.match(token)
    if match is None:
        raise ValueError("Invalid move: {!r}".format(token))
    layer, faceLetter, suffix = match.groups()
    depth = int(layer) - 1 if layer else 0
    if depth < 0:
        raise ValueError("Layers are numbered from 1: {!r}".format(token))
    return FACE_LETTERS[faceLetter], SUFFIXES[suffix or ""], depth

def parseMoves(text):
    return [parseMove(token) for token in text.split()]

def applyMoves(cube, text):
    moves = parseMoves(text)
    for _, _, depth in moves:
        if depth >= cube.size:
            raise ValueError("Layer {} does not exist on a cube of size {}".format(depth + 1, cube.size))
    for face, movement, depth in moves:
        rotate(cube, face, movement, depth)
    return moves

def applyFaces(cube, faces, movement=Movement.CLOCKWISE, depth=0):
    for face in faces:
        rotate(cube, face, movement, depth)

def getRandomFace(rng=random):
    faces = list(Face)
    return faces[rng.randint(0, len(faces) - 1)]

def scramble(cube, numMoves=constants.kScrambleLength, seed=None, printEachStep=False, colored=True):
    rng = random.Random(seed)
    turned = []
    for _ in range(numMoves):
        face = getRandomFace(rng)
        rotate(cube, face, Movement.CLOCKWISE, 0)
        turned.append(face)
        if printEachStep:
            waitForEnter()
            print("Moving face {}".format(face.name))
            Render.printCube(cube, colored)
    return turned

def checkerboard(cube, printEachStep=False, colored=True):
    """
    Half turn every other inner layer around each axis. Odd sizes end up
    with each face alternating between its own color and the opposite
    face's color.
    """
    for face in (Face.RIGHT, Face.UP, Face.FRONT):
        for depth in range(1, (cube.size + 1) // 2, 2):
            rotate(cube, face, Movement.HALF, depth)
            mirror = cube.size - depth - 1
            if mirror != depth:
                rotate(cube, face, Movement.HALF, mirror)
        if printEachStep:
            Render.printCube(cube, colored)
            waitForEnter()
