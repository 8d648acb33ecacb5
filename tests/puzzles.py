"""Shared puzzles for the test suite."""

# A classic easy puzzle, solvable with naked and hidden singles
EASY_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the easy puzzle
EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Another puzzle solvable by elimination alone
SINGLES_PUZZLE = (
    "003020600"
    "900305001"
    "001806400"
    "008102900"
    "700000008"
    "006708200"
    "002609500"
    "800203009"
    "005010300"
)

# Two 5s in the first row
DUPLICATE_CLUE_PUZZLE = (
    "550070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

EMPTY_PUZZLE = "0" * 81


def as_lines(compact: str, blank: str = ".") -> str:
    """Turn an 81-character puzzle into nine lines."""
    compact = compact.replace("0", blank)
    return "\n".join(compact[i:i + 9] for i in range(0, 81, 9))

# Needs guessing: propagation narrows it for a while, then stalls
GUESSING_PUZZLE = (
    "800000000"
    "003600000"
    "070090200"
    "050007000"
    "000045700"
    "000100030"
    "001000068"
    "008500010"
    "090000400"
)
