from __future__ import annotations

import pytest

from olc_codec import decode, encode, is_full
from olc_codec.core.constants import ENCODING_BASE, GRID_COLUMNS, PAIR_CODE_LENGTH
from olc_codec.utils.coordinates import compute_latitude_precision


CODE_LENGTHS = [2, 4, 6, 8, 10, 11, 12, 13, 14, 15]

POINTS = [
    (47.365590, 8.524997),
    (0.0, 0.0),
    (-33.8688, 151.2093),
    (35.6895, 139.6917),
    (51.5007, -0.1246),
    (-89.9, -179.9),
    (89.9, 179.9),
    (-0.000001, -0.000001),
]

# Allow for the 14-place rounding on decode.
EPS = 1e-9


def _longitude_precision(code_length: int) -> float:
    if code_length <= PAIR_CODE_LENGTH:
        return compute_latitude_precision(code_length)
    return float(ENCODING_BASE) ** -3 / GRID_COLUMNS ** (code_length - PAIR_CODE_LENGTH)


@pytest.mark.parametrize("code_length", CODE_LENGTHS)
@pytest.mark.parametrize(("latitude", "longitude"), POINTS)
def test_decoded_area_contains_encoded_point(
    latitude: float, longitude: float, code_length: int
) -> None:
    code = encode(latitude, longitude, code_length)
    assert is_full(code)
    area = decode(code)

    assert area.latitude_lo - EPS <= latitude <= area.latitude_hi + EPS
    assert area.longitude_lo - EPS <= longitude <= area.longitude_hi + EPS
    assert area.latitude_lo <= area.latitude_center <= area.latitude_hi
    assert area.longitude_lo <= area.longitude_center <= area.longitude_hi

    assert area.latitude_hi - area.latitude_lo == pytest.approx(
        compute_latitude_precision(code_length), abs=1e-12
    )
    assert area.longitude_hi - area.longitude_lo == pytest.approx(
        _longitude_precision(code_length), abs=1e-12
    )


@pytest.mark.parametrize(("latitude", "longitude"), POINTS)
def test_longer_codes_nest_inside_shorter_ones(latitude: float, longitude: float) -> None:
    areas = [decode(encode(latitude, longitude, n)) for n in CODE_LENGTHS]
    for outer, inner in zip(areas, areas[1:]):
        assert outer.latitude_lo - EPS <= inner.latitude_lo
        assert inner.latitude_hi <= outer.latitude_hi + EPS
        assert outer.longitude_lo - EPS <= inner.longitude_lo
        assert inner.longitude_hi <= outer.longitude_hi + EPS
        assert (inner.latitude_hi - inner.latitude_lo) < (
            outer.latitude_hi - outer.latitude_lo
        )


@pytest.mark.parametrize("code_length", CODE_LENGTHS)
@pytest.mark.parametrize(("latitude", "longitude"), POINTS)
def test_encoding_the_center_gives_the_same_code(
    latitude: float, longitude: float, code_length: int
) -> None:
    code = encode(latitude, longitude, code_length)
    assert encode(*decode(code).latlng(), code_length) == code


def test_wrapped_longitude_decodes_to_normalized_value() -> None:
    area = decode(encode(10.0, 190.0))
    assert area.contains(10.0, -170.0)
    area = decode(encode(10.0, 180.0))
    assert area.longitude_lo == pytest.approx(-180.0)
