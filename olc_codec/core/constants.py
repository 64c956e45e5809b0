"""Fixed symbols and section sizes of the Open Location Code format.

These values are the interchange format: every implementation must agree on
them exactly, or codes produced by one will not decode in another.
"""

from __future__ import annotations

# A separator used to break the code into two parts to aid memorability.
SEPARATOR = "+"

# The number of characters to place before the separator.
SEPARATOR_POSITION = 8

# The character used to pad codes.
PADDING_CHARACTER = "0"

# The character set used to encode the values.
CODE_ALPHABET = "23456789CFGHJMPQRVWX"
ENCODING_BASE = len(CODE_ALPHABET)
_ALPHABET_INDEX = {c: i for i, c in enumerate(CODE_ALPHABET)}

LATITUDE_MAX = 90
LONGITUDE_MAX = 180

# The max number of digits to process in a plus code.
MAX_DIGIT_COUNT = 15

# Maximum code length using lat/lng pair encoding (~13x13 meters at the
# equator). Excludes the separator and padding.
PAIR_CODE_LENGTH = 10

# First place value of the pairs (if the last pair value is 1).
PAIR_FIRST_PLACE_VALUE = ENCODING_BASE ** (PAIR_CODE_LENGTH // 2 - 1)

# Inverse of the precision of the pair section of the code.
PAIR_PRECISION = ENCODING_BASE**3

# Place value in degrees of each pair position.
PAIR_RESOLUTIONS = (20.0, 1.0, 0.05, 0.0025, 0.000125)

GRID_CODE_LENGTH = MAX_DIGIT_COUNT - PAIR_CODE_LENGTH
GRID_COLUMNS = 4
GRID_ROWS = 5

GRID_LAT_FIRST_PLACE_VALUE = GRID_ROWS ** (GRID_CODE_LENGTH - 1)
GRID_LNG_FIRST_PLACE_VALUE = GRID_COLUMNS ** (GRID_CODE_LENGTH - 1)

# Multiply degrees by these to get an integer count of the finest cells.
FINAL_LAT_PRECISION = PAIR_PRECISION * GRID_ROWS**GRID_CODE_LENGTH
FINAL_LNG_PRECISION = PAIR_PRECISION * GRID_COLUMNS**GRID_CODE_LENGTH

# Minimum length of a code that can be shortened.
MIN_TRIMMABLE_CODE_LEN = 6

# Fraction of a cell the reference may be away from the code centre and
# still allow trimming at that resolution (0.5 would be exact).
SHORTEN_SAFETY_FACTOR = 0.3

# ~14x14 meters.
CODE_PRECISION_NORMAL = 10
# ~2x3 meters.
CODE_PRECISION_EXTRA = 11


def alphabet_index(char: str) -> int:
    """Return the digit value of an upper-case alphabet symbol, or -1."""

    return _ALPHABET_INDEX.get(char, -1)
