from __future__ import annotations

from dataclasses import dataclass

from olc_codec.core.constants import LATITUDE_MAX, LONGITUDE_MAX


@dataclass(frozen=True, slots=True)
class CodeArea:
    """Bounding box of a decoded code.

    The box is lower-inclusive: a point on the south or west edge belongs to
    this area, a point on the north or east edge belongs to the neighbour.
    """

    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    code_length: int

    @property
    def latitude_center(self) -> float:
        return min(
            self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2, LATITUDE_MAX
        )

    @property
    def longitude_center(self) -> float:
        return min(
            self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2,
            LONGITUDE_MAX,
        )

    def latlng(self) -> tuple[float, float]:
        return self.latitude_center, self.longitude_center

    def contains(self, latitude: float, longitude: float) -> bool:
        return (
            self.latitude_lo <= latitude < self.latitude_hi
            and self.longitude_lo <= longitude < self.longitude_hi
        )
