"""Lexical classification of code strings.

All three predicates are total: they answer False for anything that is not a
well-formed code (including non-strings) and never raise.
"""

from __future__ import annotations

from typing import Any

from olc_codec.core.constants import (
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    alphabet_index,
)


def _has_valid_padding(code: str, sep: int) -> bool:
    # Padding only fills the pair section of a full-length prefix.
    if sep < SEPARATOR_POSITION:
        return False
    first = code.find(PADDING_CHARACTER)
    if first == 0:
        return False
    last = code.rfind(PADDING_CHARACTER)
    block = code[first : last + 1]
    if block.count(PADDING_CHARACTER) != len(block):
        return False
    if len(block) % 2 == 1 or len(block) > SEPARATOR_POSITION - 2:
        return False
    return last + 1 == sep and code.endswith(SEPARATOR)


def is_valid(code: Any) -> bool:
    """Whether code is a well-formed full or short code.

    The separator is required, appears once, and sits at an even index no
    later than 8. Padding may only form a single even-length block that ends
    at the separator of an otherwise full-length prefix.
    """

    if not isinstance(code, str) or not code:
        return False
    # Some non-ASCII letters uppercase to several alphabet symbols.
    if not code.isascii():
        return False
    if code.count(SEPARATOR) != 1 or len(code) == 1:
        return False
    sep = code.find(SEPARATOR)
    if sep > SEPARATOR_POSITION or sep % 2 == 1:
        return False
    if PADDING_CHARACTER in code and not _has_valid_padding(code, sep):
        return False
    # A single digit after the separator is not a defined precision.
    if len(code) - sep - 1 == 1:
        return False

    for ch in code.upper():
        if ch in (SEPARATOR, PADDING_CHARACTER):
            continue
        if alphabet_index(ch) < 0:
            return False
    return True


def is_short(code: Any) -> bool:
    """Whether code is valid and missing leading digits before the separator."""

    if not is_valid(code):
        return False
    return code.find(SEPARATOR) < SEPARATOR_POSITION


def is_full(code: Any) -> bool:
    """Whether code is valid, complete, and inside the latitude/longitude range."""

    if not is_valid(code) or is_short(code):
        return False
    code = code.upper()

    # The most significant digits alone can overshoot the globe.
    first_lat_value = alphabet_index(code[0]) * ENCODING_BASE
    if first_lat_value >= LATITUDE_MAX * 2:
        return False
    if len(code) > 1:
        first_lng_value = alphabet_index(code[1]) * ENCODING_BASE
        if first_lng_value >= LONGITUDE_MAX * 2:
            return False
    return True
