from colorama import Back, Fore, Style

import constants
from Simulator import Face, Color, Cube

STRIP = (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK)

# standard terminals have no orange background
BACKGROUNDS = {
    Color.WHITE: Back.LIGHTWHITE_EX,
    Color.YELLOW: Back.LIGHTYELLOW_EX,
    Color.RED: Back.RED,
    Color.ORANGE: Back.LIGHTRED_EX,
    Color.BLUE: Back.BLUE,
    Color.GREEN: Back.GREEN,
}

def letter(color):
    return color.value

def glyph(color):
    return Fore.BLACK + BACKGROUNDS[color] + constants.kGlyph + Style.RESET_ALL

def renderNet(cube, cellText, cellWidth):
    """
    Lay the cube out as a cross: up on top, then left, front, right and
    back side by side, then down.
    """
    padding = " " * (cube.size * cellWidth)
    lines = []
    for row in cube.faces[Face.UP]:
        lines.append(padding + "".join(cellText(color) for color in row))
    for rows in zip(*(cube.faces[face] for face in STRIP)):
        lines.append("".join(cellText(color) for row in rows for color in row))
    for row in cube.faces[Face.DOWN]:
        lines.append(padding + "".join(cellText(color) for color in row))
    return "\n".join(lines) + "\n"

def renderLetters(cube):
    return renderNet(cube, letter, 1)

def renderColors(cube):
    return renderNet(cube, glyph, len(constants.kGlyph))

def printCube(cube, colored=True):
    print(renderColors(cube) if colored else renderLetters(cube))

def parseRow(text, width):
    if len(text) != width:
        raise ValueError("Expected {} stickers in row {!r}".format(width, text))
    return [Color(char) for char in text]

def cubeFromLetters(text):
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    size = len(lines) // 3
    if size < 1 or len(lines) != 3 * size:
        raise ValueError("A net needs 3 * size rows, got {}".format(len(lines)))

    cube = Cube(size)
    up, middle, down = lines[:size], lines[size:2 * size], lines[2 * size:]
    for face, rows in ((Face.UP, up), (Face.DOWN, down)):
        for r, line in enumerate(rows):
            for c, color in enumerate(parseRow(line, size)):
                cube.faces[face][r, c] = color
    for r, line in enumerate(middle):
        colors = parseRow(line, 4 * size)
        for i, face in enumerate(STRIP):
            for c in range(size):
                cube.faces[face][r, c] = colors[i * size + c]
    return cube
