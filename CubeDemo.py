import sys

import colorama

import constants
import Patterns
import Render
from Simulator import newCube

USAGE = ("Invalid number of arguments. Must specify a mode (-checkerboard <size>, "
         "-scramble <size> [numMoves], -moves <size> \"<moves>\" or -demo), "
         "optionally followed by -seed <n>, -step and -plain")

def popFlag(args, flag):
    if flag in args:
        args.remove(flag)
        return True
    return False

def popOption(args, option):
    if option not in args:
        return None
    index = args.index(option)
    if index + 1 >= len(args):
        raise ValueError("{} needs a value".format(option))
    value = args[index + 1]
    del args[index:index + 2]
    return value

def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        colored = not popFlag(args, "-plain")
        step = popFlag(args, "-step")
        seed = popOption(args, "-seed")
        if seed is not None:
            seed = int(seed)

        if not args:
            print(USAGE)
            return 1
        mode = args[0].lower()

        if mode == "-demo":
            for size in constants.kDemoSizes:
                cube = newCube(size)
                Patterns.checkerboard(cube)
                Render.printCube(cube, colored)
            return 0

        if len(args) < 2:
            print(USAGE)
            return 1
        cube = newCube(int(args[1]))

        if mode == "-checkerboard":
            if step:
                Render.printCube(cube, colored)
            Patterns.checkerboard(cube, printEachStep=step, colored=colored)
        elif mode == "-scramble":
            numMoves = int(args[2]) if len(args) > 2 else constants.kScrambleLength
            faces = Patterns.scramble(cube, numMoves, seed=seed, printEachStep=step, colored=colored)
            print("Scramble: {}".format(" ".join(face.name for face in faces)))
        elif mode == "-moves":
            if len(args) < 3:
                print(USAGE)
                return 1
            Patterns.applyMoves(cube, args[2])
        else:
            print("Invalid first argument: must be -checkerboard, -scramble, -moves or -demo")
            return 1
    except ValueError as e:
        print("Invalid arguments: {}".format(e))
        return 1

    Render.printCube(cube, colored)
    return 0

def run():
    colorama.init()
    sys.exit(main())


if __name__ == "__main__":
    run()
