from __future__ import annotations

import logging

from olc_codec.core.constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    FINAL_LAT_PRECISION,
    FINAL_LNG_PRECISION,
    GRID_CODE_LENGTH,
    GRID_COLUMNS,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from olc_codec.core.errors import InvalidArgumentError
from olc_codec.core.settings import get_settings
from olc_codec.utils.coordinates import (
    clip_latitude,
    compute_latitude_precision,
    normalize_longitude,
    require_coordinates,
)


logger = logging.getLogger(__name__)


def _resolve_code_length(code_length: int | None) -> int:
    if code_length is None:
        return get_settings().default_code_length
    try:
        length = int(code_length)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            "Code length must be an integer", details={"code_length": code_length}
        ) from e
    length = min(length, MAX_DIGIT_COUNT)
    if length < 2 or (length < PAIR_CODE_LENGTH and length % 2 == 1):
        raise InvalidArgumentError(
            f"Invalid Open Location Code length: {code_length}",
            details={"code_length": code_length},
        )
    return length


def encode(latitude: float, longitude: float, code_length: int | None = None) -> str:
    """Encode a location into an Open Location Code.

    Latitude is clipped to [-90, 90] and longitude wrapped into [-180, 180);
    neither is an error. code_length defaults to the configured length (10
    unless overridden), is capped at 15, and must be even below 10 since odd
    pair lengths would describe a 20:1 strip rather than a near-square.

    Raises InvalidArgumentError for a bad length or a coordinate that has no
    position (NaN, infinite longitude).
    """

    length = _resolve_code_length(code_length)
    latitude, longitude = require_coordinates(latitude, longitude)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    # 90 would produce a digit past the end of the alphabet.
    if latitude == LATITUDE_MAX:
        latitude -= compute_latitude_precision(length)

    # Work in integer multiples of the finest cell so digit extraction is
    # exact. Rounding at 6 places before truncation absorbs float noise from
    # the multiplication.
    lat_val = int(round((latitude + LATITUDE_MAX) * FINAL_LAT_PRECISION, 6))
    lng_val = int(round((longitude + LONGITUDE_MAX) * FINAL_LNG_PRECISION, 6))

    digits: list[str] = []
    if length > PAIR_CODE_LENGTH:
        for _ in range(GRID_CODE_LENGTH):
            lat_digit = lat_val % GRID_ROWS
            lng_digit = lng_val % GRID_COLUMNS
            digits.append(CODE_ALPHABET[lat_digit * GRID_COLUMNS + lng_digit])
            lat_val //= GRID_ROWS
            lng_val //= GRID_COLUMNS
    else:
        lat_val //= GRID_ROWS**GRID_CODE_LENGTH
        lng_val //= GRID_COLUMNS**GRID_CODE_LENGTH

    for _ in range(PAIR_CODE_LENGTH // 2):
        digits.append(CODE_ALPHABET[lng_val % ENCODING_BASE])
        digits.append(CODE_ALPHABET[lat_val % ENCODING_BASE])
        lat_val //= ENCODING_BASE
        lng_val //= ENCODING_BASE

    # Digits were produced least significant first.
    code = "".join(reversed(digits))
    code = code[:SEPARATOR_POSITION] + SEPARATOR + code[SEPARATOR_POSITION:]

    if length >= SEPARATOR_POSITION:
        return code[: length + 1]
    return code[:length] + PADDING_CHARACTER * (SEPARATOR_POSITION - length) + SEPARATOR
