from __future__ import annotations

import logging

from olc_codec.core.constants import (
    ENCODING_BASE,
    FINAL_LAT_PRECISION,
    FINAL_LNG_PRECISION,
    GRID_COLUMNS,
    GRID_LAT_FIRST_PLACE_VALUE,
    GRID_LNG_FIRST_PLACE_VALUE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_FIRST_PLACE_VALUE,
    PAIR_PRECISION,
    SEPARATOR,
    alphabet_index,
)
from olc_codec.core.errors import InvalidCodeError
from olc_codec.models.code_area import CodeArea
from olc_codec.services.validator import is_full


logger = logging.getLogger(__name__)


def decode(code: str) -> CodeArea:
    """Decode a full code into the area it describes.

    The pair and grid sections are accumulated separately as integers and
    only converted to degrees at the end, so no float error builds up across
    digits. Raises InvalidCodeError unless code is a valid full code.
    """

    if not is_full(code):
        logger.debug("Rejected decode of %r", code)
        raise InvalidCodeError(
            f"Passed Open Location Code is not a valid full code: {code}",
            details={"code": code},
        )
    digits = code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "").upper()

    normal_lat = -LATITUDE_MAX * PAIR_PRECISION
    normal_lng = -LONGITUDE_MAX * PAIR_PRECISION
    grid_lat = 0
    grid_lng = 0

    pair_digits = min(len(digits), PAIR_CODE_LENGTH)
    pv = PAIR_FIRST_PLACE_VALUE
    for i in range(0, pair_digits, 2):
        normal_lat += alphabet_index(digits[i]) * pv
        normal_lng += alphabet_index(digits[i + 1]) * pv
        if i < pair_digits - 2:
            pv //= ENCODING_BASE

    lat_precision = pv / PAIR_PRECISION
    lng_precision = pv / PAIR_PRECISION

    if len(digits) > PAIR_CODE_LENGTH:
        row_pv = GRID_LAT_FIRST_PLACE_VALUE
        col_pv = GRID_LNG_FIRST_PLACE_VALUE
        grid_digits = min(len(digits), MAX_DIGIT_COUNT)
        for i in range(PAIR_CODE_LENGTH, grid_digits):
            value = alphabet_index(digits[i])
            grid_lat += (value // GRID_COLUMNS) * row_pv
            grid_lng += (value % GRID_COLUMNS) * col_pv
            if i < grid_digits - 1:
                row_pv //= GRID_ROWS
                col_pv //= GRID_COLUMNS
        lat_precision = row_pv / FINAL_LAT_PRECISION
        lng_precision = col_pv / FINAL_LNG_PRECISION

    lat = normal_lat / PAIR_PRECISION + grid_lat / FINAL_LAT_PRECISION
    lng = normal_lng / PAIR_PRECISION + grid_lng / FINAL_LNG_PRECISION

    # Round to 14 places to drop the noise from the float division above.
    return CodeArea(
        latitude_lo=round(lat, 14),
        longitude_lo=round(lng, 14),
        latitude_hi=round(lat + lat_precision, 14),
        longitude_hi=round(lng + lng_precision, 14),
        code_length=min(len(digits), MAX_DIGIT_COUNT),
    )
