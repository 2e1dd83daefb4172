"""Approximate radius search via an axis-aligned latitude/longitude box.

The rectangle is a flat-earth approximation of a circle: its corners admit
points up to ~41% farther than the nominal radius, and the longitude span
grows without bound toward the poles, where it is capped to the full
[-180, 180] range.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from hospital_directory.domain.errors import GeoValidationError

DEFAULT_RADIUS_METERS = 5000
METERS_PER_DEGREE_LATITUDE = 111000
MAX_LONGITUDE_DELTA = 180.0


@dataclass(frozen=True, slots=True)
class GeoPoint:
    latitude: float
    longitude: float

    @classmethod
    def from_raw(cls, lat: str | float | None, lng: str | float | None) -> GeoPoint:
        """
        Parse a query center.

        Raises:
            GeoValidationError: If either coordinate is missing, not numeric or out of range
        """
        if lat is None or lng is None or str(lat).strip() == "" or str(lng).strip() == "":
            raise GeoValidationError(
                "Latitude (lat) and longitude (lng) are required query parameters."
            )
        try:
            latitude = float(lat)
            longitude = float(lng)
        except ValueError:
            raise GeoValidationError("Latitude (lat) and longitude (lng) must be numeric.")

        if not math.isfinite(latitude) or not -90 <= latitude <= 90:
            raise GeoValidationError("Latitude must be between -90 and 90", field="lat")
        if not math.isfinite(longitude) or not -180 <= longitude <= 180:
            raise GeoValidationError("Longitude must be between -180 and 180", field="lng")

        return cls(latitude=latitude, longitude=longitude)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    @property
    def spans_all_longitudes(self) -> bool:
        return self.min_longitude <= -180.0 and self.max_longitude >= 180.0

    def contains(self, latitude: float, longitude: float) -> bool:
        if not self.min_latitude <= latitude <= self.max_latitude:
            return False
        return self.min_longitude <= longitude <= self.max_longitude


class BoundingBoxCalculator(ABC):
    """Turns a center and radius into a box usable as a query predicate."""

    @abstractmethod
    def calculate(self, center: GeoPoint, radius_meters: float) -> BoundingBox: ...


class RectangularBoundingBoxCalculator(BoundingBoxCalculator):
    """
    Constant meters-per-degree approximation.

    delta_lat = r / 111000
    delta_lng = r / (111000 * cos(lat))
    """

    def calculate(self, center: GeoPoint, radius_meters: float) -> BoundingBox:
        if not math.isfinite(radius_meters) or radius_meters <= 0:
            raise GeoValidationError("maxDistance must be a positive number of meters")

        delta_lat = radius_meters / METERS_PER_DEGREE_LATITUDE
        delta_lng = self._longitude_delta(center.latitude, radius_meters)

        if delta_lng >= MAX_LONGITUDE_DELTA:
            min_longitude, max_longitude = -180.0, 180.0
        else:
            min_longitude = max(center.longitude - delta_lng, -180.0)
            max_longitude = min(center.longitude + delta_lng, 180.0)

        return BoundingBox(
            min_latitude=max(center.latitude - delta_lat, -90.0),
            max_latitude=min(center.latitude + delta_lat, 90.0),
            min_longitude=min_longitude,
            max_longitude=max_longitude,
        )

    @staticmethod
    def _longitude_delta(latitude: float, radius_meters: float) -> float:
        cos_lat = math.cos(math.radians(latitude))
        if cos_lat <= 0:
            return MAX_LONGITUDE_DELTA
        delta = radius_meters / (METERS_PER_DEGREE_LATITUDE * cos_lat)
        # Degenerate near the poles: the box covers every longitude.
        if not math.isfinite(delta) or delta > MAX_LONGITUDE_DELTA:
            return MAX_LONGITUDE_DELTA
        return delta


def parse_radius(raw: str | int | float | None) -> float:
    """Parse ``maxDistance``; absent means DEFAULT_RADIUS_METERS."""
    if raw is None or str(raw).strip() == "":
        return float(DEFAULT_RADIUS_METERS)
    try:
        return float(raw)
    except ValueError:
        raise GeoValidationError("maxDistance must be a number of meters", field="maxDistance")
