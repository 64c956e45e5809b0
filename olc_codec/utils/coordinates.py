from __future__ import annotations

import math

from olc_codec.core.constants import (
    ENCODING_BASE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
)
from olc_codec.core.errors import InvalidArgumentError


def require_coordinates(latitude: float, longitude: float) -> tuple[float, float]:
    """Return (latitude, longitude) as floats, rejecting values we cannot place.

    Out-of-range values are fine (they get clipped or wrapped), but NaN has no
    position and an infinite longitude cannot be wrapped.
    """

    try:
        lat = float(latitude)
        lng = float(longitude)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            "Coordinates must be numbers",
            details={"latitude": latitude, "longitude": longitude},
        ) from e
    if math.isnan(lat) or math.isnan(lng):
        raise InvalidArgumentError(
            "Coordinates must not be NaN",
            details={"latitude": latitude, "longitude": longitude},
        )
    if math.isinf(lng):
        raise InvalidArgumentError(
            "Longitude must be finite", details={"longitude": longitude}
        )
    return lat, lng


def clip_latitude(latitude: float) -> float:
    return min(float(LATITUDE_MAX), max(float(-LATITUDE_MAX), latitude))


def normalize_longitude(longitude: float) -> float:
    """Wrap longitude into [-180, 180)."""

    # fmod is exact, so this only saves iterations for far-out values.
    longitude = math.fmod(longitude, 360.0)
    while longitude < -LONGITUDE_MAX:
        longitude += 360
    while longitude >= LONGITUDE_MAX:
        longitude -= 360
    return longitude


def compute_latitude_precision(code_length: int) -> float:
    """Height in degrees of the area described by a code of this length.

    Up to 10 digits latitude and longitude share a precision; the grid section
    has more rows than columns so the two diverge after that.
    """

    if code_length <= PAIR_CODE_LENGTH:
        return float(ENCODING_BASE) ** math.floor(code_length / -2 + 2)
    return float(ENCODING_BASE) ** -3 / GRID_ROWS ** (code_length - PAIR_CODE_LENGTH)
