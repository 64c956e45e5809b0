from __future__ import annotations

import logging

from olc_codec.core.constants import (
    CODE_PRECISION_NORMAL,
    ENCODING_BASE,
    LATITUDE_MAX,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from olc_codec.core.errors import InvalidCodeError
from olc_codec.services.decoder import decode
from olc_codec.services.encoder import encode
from olc_codec.services.validator import is_full, is_short
from olc_codec.utils.coordinates import (
    clip_latitude,
    normalize_longitude,
    require_coordinates,
)


logger = logging.getLogger(__name__)


def recover_nearest(short_code: str, latitude: float, longitude: float) -> str:
    """Recover the full code nearest to the reference location.

    The missing leading digits are taken from the reference, which gives the
    right answer unless the reference sits near a cell edge; in that case
    the neighbouring cell's code can be closer, and the candidate is moved
    one cell towards the reference. Full codes are returned uppercased.
    """

    if not is_short(short_code):
        if is_full(short_code):
            return short_code.upper()
        raise InvalidCodeError(
            f"Passed short code is not valid: {short_code}",
            details={"code": short_code},
        )
    latitude, longitude = require_coordinates(latitude, longitude)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    short_code = short_code.upper()
    padding_length = SEPARATOR_POSITION - short_code.find(SEPARATOR)
    # Size of the cell the recovered digits select, in degrees.
    resolution = ENCODING_BASE ** (2 - (padding_length / 2))
    half_resolution = resolution / 2.0

    prefix = encode(latitude, longitude, CODE_PRECISION_NORMAL)[:padding_length]
    area = decode(prefix + short_code)

    center_lat = area.latitude_center
    center_lng = area.longitude_center

    # Stay within -90..90 when moving north or south.
    if (
        latitude + half_resolution < center_lat
        and center_lat - resolution >= -LATITUDE_MAX
    ):
        center_lat -= resolution
    elif (
        latitude - half_resolution > center_lat
        and center_lat + resolution <= LATITUDE_MAX
    ):
        center_lat += resolution

    # No range check: encode() wraps longitudes pushed past +-180.
    if longitude + half_resolution < center_lng:
        center_lng -= resolution
    elif longitude - half_resolution > center_lng:
        center_lng += resolution

    if (center_lat, center_lng) != area.latlng():
        logger.debug("Recovery of %s moved to a neighbouring cell", short_code)
    return encode(center_lat, center_lng, area.code_length)
