from __future__ import annotations

import logging

from olc_codec.core.constants import (
    MIN_TRIMMABLE_CODE_LEN,
    PADDING_CHARACTER,
    PAIR_RESOLUTIONS,
    SHORTEN_SAFETY_FACTOR,
)
from olc_codec.core.errors import InvalidCodeError
from olc_codec.services.decoder import decode
from olc_codec.services.validator import is_full
from olc_codec.utils.coordinates import (
    clip_latitude,
    normalize_longitude,
    require_coordinates,
)


logger = logging.getLogger(__name__)


def shorten(code: str, latitude: float, longitude: float) -> str:
    """Remove as many leading pairs as the reference location allows.

    The closer the reference is to the code centre, the more pairs can go
    while recover_nearest() still finds the same code from that reference.
    Between two and four pairs are removed; the code comes back unchanged
    (uppercased) when the reference is too far away.
    """

    if not is_full(code):
        raise InvalidCodeError(
            f"Passed code is not valid and full: {code}", details={"code": code}
        )
    if PADDING_CHARACTER in code:
        raise InvalidCodeError(
            f"Cannot shorten padded codes: {code}", details={"code": code}
        )
    latitude, longitude = require_coordinates(latitude, longitude)

    code = code.upper()
    area = decode(code)
    # Unpadded full codes always have at least 8 digits, so this never trips today.
    if area.code_length < MIN_TRIMMABLE_CODE_LEN:
        raise InvalidCodeError(
            f"Code length must be at least {MIN_TRIMMABLE_CODE_LEN}",
            details={"code": code, "code_length": area.code_length},
        )

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    coderange = max(
        abs(area.latitude_center - latitude),
        abs(area.longitude_center - longitude),
    )

    # Try the finest trimmable resolution first so the most pairs go.
    for i in range(len(PAIR_RESOLUTIONS) - 2, 0, -1):
        if coderange < PAIR_RESOLUTIONS[i] * SHORTEN_SAFETY_FACTOR:
            trimmed = code[(i + 1) * 2 :]
            logger.debug("Shortened %s to %s (range=%s)", code, trimmed, coderange)
            return trimmed
    return code
