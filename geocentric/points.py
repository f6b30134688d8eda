"""
Representations of a specific point in geodetic and geocentric coordinates
"""

__all__ = ['CartesianPoint', 'GeodeticPoint']

import math
from typing import Optional, Tuple, Union

import numpy as np

from geocentric.conversion import resolve_ellipsoid
from geocentric.ellipsoid import EllipsoidFrame, normalize_longitude
from geocentric.errors import InvalidParameter


class GeodeticPoint:
    """A latitude/longitude pair with a height above the ellipsoid"""

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        height: Union[float, int, str] = 0.,
    ):
        lat, lon = float(latitude), float(longitude)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidParameter(f'Latitude and longitude must be finite, not ({lat}, {lon})')

        if not -90 <= lat <= 90:
            # Distance travelled north from the south pole, in [0, 360)
            t = math.fmod(lat + 90, 360.)
            if t < 0:
                t += 360
            if t > 180:
                # Crosses one of the poles
                lat = 270 - t
                lon = lon + 180
            else:
                lat = t - 90

        self.latitude = lat
        self.longitude = normalize_longitude(lon)
        self.height = float(height)

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.height == other.height
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.height))

    def __repr__(self):
        return f'<GeodeticPoint({self.latitude}, {self.longitude}, {self.height})>'

    def to_float(self) -> Tuple[float, float, float]:
        """Returns (latitude, longitude, height)"""
        return self.latitude, self.longitude, self.height

    def to_cartesian(self, frame: Optional[EllipsoidFrame] = None) -> 'CartesianPoint':
        """
        Convert this point to geocentric coordinates.

        Args:
            frame:
                The ellipsoid to convert on. Defaults to the configured default ellipsoid
                (see geocentric.conversion.set_default_ellipsoid).

        Returns:
            CartesianPoint
        """
        x, y, z = resolve_ellipsoid(frame).to_cartesian(*self.to_float())
        return CartesianPoint(x, y, z)


class CartesianPoint:
    """A point in the geocentric (ECEF) frame, in meters"""

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        z: Union[float, int, str],
    ):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __eq__(self, other):
        if not isinstance(other, CartesianPoint):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<CartesianPoint({self.x}, {self.y}, {self.z})>'

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> 'CartesianPoint':
        """Create a CartesianPoint from a length-3 array"""
        if np.shape(arr) != (3,):
            raise ValueError(f'Expected an array of shape (3,), got {np.shape(arr)}')

        return cls(*(float(v) for v in arr))

    def to_float(self) -> Tuple[float, float, float]:
        """Returns (x, y, z)"""
        return self.x, self.y, self.z

    def to_numpy(self) -> np.ndarray:
        """Returns the point as a length-3 array"""
        return np.array(self.to_float())

    def to_geodetic(self, frame: Optional[EllipsoidFrame] = None) -> GeodeticPoint:
        """
        Convert this point to geodetic coordinates.

        Args:
            frame:
                The ellipsoid to convert on. Defaults to the configured default ellipsoid
                (see geocentric.conversion.set_default_ellipsoid).

        Returns:
            GeodeticPoint

        Raises:
            InvalidParameter: if a coordinate is NaN, since the resulting latitude and
                longitude are NaN. Use EllipsoidFrame.to_geodetic to get NaN back instead.
        """
        lat, lon, h = resolve_ellipsoid(frame).to_geodetic(*self.to_float())
        return GeodeticPoint(lat, lon, h)
