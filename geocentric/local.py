"""Local east-north-up cartesian frames tangent to an ellipsoid"""

__all__ = ['LocalTangentFrame']

from typing import Sequence, Tuple

import numpy as np
from pydantic import validate_call

from geocentric.ellipsoid import WGS84, EllipsoidFrame, normalize_longitude


class LocalTangentFrame:
    """
    A cartesian east-north-up frame whose origin is a point on or near an ellipsoid.

    The up axis follows the ellipsoid normal at the origin; east and north span the tangent
    plane. Positions are converted through the geocentric frame, so the results are exact
    at any distance from the origin (no flat-earth approximation).
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        lat0: float,
        lon0: float,
        h0: float = 0.,
        ellipsoid: EllipsoidFrame = WGS84,
    ):
        self.ellipsoid = ellipsoid
        x0, y0, z0, rotation = ellipsoid.to_cartesian(lat0, lon0, h0, with_rotation=True)
        self.lat0, self.lon0, self.h0 = lat0, normalize_longitude(lon0), h0
        self._origin = np.array([x0, y0, z0])
        self._rotation = rotation

    def __repr__(self):
        return f'<LocalTangentFrame({self.lat0}, {self.lon0}, {self.h0}) on {self.ellipsoid!r}>'

    @property
    def origin(self) -> np.ndarray:
        """Geocentric position of the origin"""
        return self._origin.copy()

    @property
    def rotation(self) -> np.ndarray:
        """Matrix whose columns are the local east, north and up axes in geocentric coordinates"""
        return self._rotation.copy()

    def forward(self, lat: float, lon: float, h: float = 0.) -> Tuple[float, float, float]:
        """
        Convert geodetic coordinates to local coordinates.

        Args:
            lat:
                Latitude, in degrees

            lon:
                Longitude, in degrees

            h:
                (Default 0) Height above the ellipsoid, in meters

        Returns:
            (east, north, up) in meters
        """
        ecef = np.array(self.ellipsoid.to_cartesian(lat, lon, h))
        east, north, up = self._rotation.T @ (ecef - self._origin)
        return float(east), float(north), float(up)

    def reverse(self, east: float, north: float, up: float) -> Tuple[float, float, float]:
        """
        Convert local coordinates to geodetic coordinates.

        Args:
            east:
                Meters along the local east axis

            north:
                Meters along the local north axis

            up:
                Meters along the local up axis

        Returns:
            (latitude, longitude, height), angles in degrees and height in meters
        """
        x, y, z = self._origin + self._rotation @ np.array([east, north, up], dtype=float)
        return self.ellipsoid.to_geodetic(float(x), float(y), float(z))

    def vector_to_ecef(self, enu: Sequence[float]) -> np.ndarray:
        """Rotate a free vector (e.g. a velocity) from local to geocentric axes"""
        return self._rotation @ np.asarray(enu, dtype=float)

    def vector_to_local(self, ecef: Sequence[float]) -> np.ndarray:
        """Rotate a free vector (e.g. a velocity) from geocentric to local axes"""
        return self._rotation.T @ np.asarray(ecef, dtype=float)
