kDefaultSize = 3
kScrambleLength = 20
kDemoSizes = (5, 3, 6, 7)

# one letter per face, in net order: up, left, front, right, back, down
kSolvedColors = ("Y", "O", "B", "R", "G", "W")

kGlyph = "[]"
