"""
Conversions between geodetic and geocentric (ECEF) coordinates on an ellipsoid of revolution
"""

__all__ = ['EllipsoidFrame', 'WGS84', 'normalize_longitude']

import math
from typing import Tuple

import numpy as np
from pydantic import validate_call

from geocentric._const import DBL_EPSILON, WGS84_A, WGS84_F
from geocentric.errors import InvalidParameter
from geocentric.utils.logging import LOGGER, warn_once


# (sin(lat), cos(lat), sin(lon), cos(lon), height)
_Solution = Tuple[float, float, float, float, float]


def _sq(x: float) -> float:
    return x * x


def _sincosd(degrees: float) -> Tuple[float, float]:
    """Sine and cosine of an angle in degrees; NaN for non-finite angles"""
    if not math.isfinite(degrees):
        return math.nan, math.nan

    rad = math.radians(degrees)
    return math.sin(rad), math.cos(rad)


def normalize_longitude(lon: float) -> float:
    """
    Reduce a longitude to the half-open range [-180, 180).

    Args:
        lon:
            A longitude, in degrees

    Returns:
        (float) the equivalent longitude; NaN if the input is not finite
    """
    if not math.isfinite(lon):
        return math.nan

    lon = math.fmod(lon, 360.)
    if lon >= 180:
        return lon - 360
    if lon < -180:
        return lon + 360

    return lon


def _longitude_trig(x: float, y: float, radius: float) -> Tuple[float, float]:
    """sin/cos of longitude from the equatorial components; lon = 0 on the axis"""
    if radius:
        return y / radius, x / radius

    return 0., 1.


def _point_mass(x: float, y: float, z: float, h: float) -> _Solution:
    """
    Treat the body as a point: latitude is geocentric and the distance to the center is the
    height. Coordinates are halved so that the radii cannot overflow.
    """
    radius = math.hypot(x / 2, y / 2)
    slam, clam = _longitude_trig(x / 2, y / 2, radius)
    hyp = math.hypot(z / 2, radius)
    return (z / 2) / hyp, radius / hyp, slam, clam, h


def _sphere(radius: float, z: float, h: float, a: float) -> Tuple[float, float, float]:
    """
    Sphere: latitude is geocentric. The origin is sent to the north pole, as it is for an
    ellipsoid.
    """
    zz = 1. if h == 0 else z
    hyp = math.hypot(zz, radius)
    return zz / hyp, radius / hyp, h - a


class EllipsoidFrame:
    """
    An ellipsoid of revolution and the geocentric frame attached to it.

    Converts geodetic coordinates (latitude, longitude, height above the ellipsoid) to
    Earth-Centered Earth-Fixed cartesian coordinates and back. The reverse conversion is
    exact to round-off, needs no iteration, and is total over all real inputs including the
    center, the poles and points at astronomical distances.

    Instances are immutable; every derived quantity is fixed at construction, so a single frame
    may be shared freely between threads.
    """

    @validate_call
    def __init__(self, a: float, f: float):
        """
        Args:
            a:
                The equatorial radius, in meters

            f:
                The flattening. Zero gives a sphere and negative values a prolate spheroid.
                Values greater than 1 are taken to be the inverse flattening.
        """
        if f > 1:
            LOGGER.debug('Flattening %s interpreted as inverse flattening', f)
            f = 1 / f

        if not (math.isfinite(a) and a > 0):
            raise InvalidParameter(f'Major radius must be positive and finite, not {a}')
        if not (math.isfinite(f) and f < 1):
            raise InvalidParameter(f'Flattening must be finite and less than 1, not {f}')

        self._a = a
        self._f = f
        self._e2 = f * (2 - f)
        self._e2m = _sq(1 - f)  # 1 - e2
        self._e2a = abs(self._e2)
        self._e4a = _sq(self._e2)
        self._max_radius = 2 * a / DBL_EPSILON

    def __eq__(self, other):
        if not isinstance(other, EllipsoidFrame):
            return False

        return self._a == other._a and self._f == other._f

    def __hash__(self):
        return hash((self._a, self._f))

    def __repr__(self):
        return f'<EllipsoidFrame(a={self._a}, f={self._f})>'

    @property
    def major_radius(self) -> float:
        """The equatorial radius, in meters"""
        return self._a

    @property
    def minor_radius(self) -> float:
        """The polar radius, in meters"""
        return self._a * (1 - self._f)

    @property
    def flattening(self) -> float:
        return self._f

    @property
    def e2(self) -> float:
        """Eccentricity squared; negative for a prolate spheroid"""
        return self._e2

    @property
    def e2m(self) -> float:
        """1 - e2"""
        return self._e2m

    @property
    def max_radius(self) -> float:
        """Distance from the center beyond which the body is treated as a point mass"""
        return self._max_radius

    @staticmethod
    def rotation(sphi: float, cphi: float, slam: float, clam: float) -> np.ndarray:
        """
        The local east-north-up axes expressed in geocentric coordinates.

        Args:
            sphi:
                Sine of latitude

            cphi:
                Cosine of latitude

            slam:
                Sine of longitude

            clam:
                Cosine of longitude

        Returns:
            (np.ndarray) a 3x3 matrix whose columns are the east, north and up unit vectors.
            Left-multiplying a local vector by it gives the geocentric vector.
        """
        return np.array([
            [-slam, -clam * sphi, clam * cphi],
            [clam, -slam * sphi, slam * cphi],
            [0., cphi, sphi],
        ])

    def to_cartesian(self, lat: float, lon: float, h: float, with_rotation: bool = False):
        """
        Convert geodetic coordinates to geocentric coordinates.

        Args:
            lat:
                Latitude, in degrees. Should lie in [-90, 90].

            lon:
                Longitude, in degrees

            h:
                Height above the ellipsoid, in meters

            with_rotation: (bool)
                (Default False) If True, also return the east-north-up rotation matrix at the point

        Returns:
            (x, y, z) in meters, followed by the rotation matrix if requested
        """
        lon = normalize_longitude(lon)
        sphi, cphi = _sincosd(lat)
        slam, clam = _sincosd(lon)

        # Exact zeros at the poles and on the cardinal meridians
        if abs(lat) == 90:
            cphi = 0.
        if lon == -180:
            slam = 0.
        if abs(lon) == 90:
            clam = 0.

        n = self._a / math.sqrt(1 - self._e2 * _sq(sphi))
        z = (self._e2m * n + h) * sphi
        x = (n + h) * cphi
        y = x * slam
        x *= clam

        if with_rotation:
            return x, y, z, self.rotation(sphi, cphi, slam, clam)

        return x, y, z

    def to_geodetic(self, x: float, y: float, z: float, with_rotation: bool = False):
        """
        Convert geocentric coordinates to geodetic coordinates.

        The first applicable of the following is used:
            * a point-mass approximation beyond max_radius from the center
            * a direct solution on a sphere
            * limiting forms on the equatorial plane (oblate) or the axis (prolate), near the
              center, where the general solution degenerates to 0/0
            * the general solution of the resolvent cubic

        Args:
            x:
                Geocentric x, in meters

            y:
                Geocentric y, in meters

            z:
                Geocentric z, in meters

            with_rotation: (bool)
                (Default False) If True, also return the east-north-up rotation matrix at the point

        Returns:
            (latitude, longitude, height), angles in degrees with longitude in [-180, 180),
            followed by the rotation matrix if requested
        """
        radius = math.hypot(x, y)
        h = math.hypot(radius, z)

        if h > self._max_radius:
            warn_once(
                'Point lies beyond the maximum radius of the ellipsoid; the body is treated as '
                'a point mass. (this warning will not repeat)'
            )
            sphi, cphi, slam, clam, h = _point_mass(x, y, z, h)
        else:
            slam, clam = _longitude_trig(x, y, radius)
            if self._e4a == 0:
                sphi, cphi, h = _sphere(radius, z, h, self._a)
            else:
                sphi, cphi, h = self._ellipsoid(radius, z)

        lat = math.degrees(math.atan2(sphi, cphi))
        lon = -math.degrees(math.atan2(-slam, clam))
        # Longitudes are bounded to [-180, 180)
        if lon == 180:
            lon = -180.

        if with_rotation:
            return lat, lon, h, self.rotation(sphi, cphi, slam, clam)

        return lat, lon, h

    def _ellipsoid(self, radius: float, z: float) -> Tuple[float, float, float]:
        """sin(lat), cos(lat) and height for a point within max_radius of an ellipsoid"""
        p = _sq(radius / self._a)
        q = self._e2m * _sq(z / self._a)
        r = (p + q - self._e4a) / 6

        # Prolate spheroids swap the roles of R and z
        if self._f < 0:
            p, q = q, p

        if self._e4a * q == 0 and r <= 0:
            return self._degenerate(p, z)

        return self._cubic(p, q, r, radius, z)

    def _degenerate(self, p: float, z: float) -> Tuple[float, float, float]:
        """
        Limits of the general solution where k -> 0 (oblate, equatorial plane) or
        k + e2 -> 0 (prolate, rotation axis).
        """
        oblate = self._f >= 0
        zz = math.sqrt((self._e4a - p if oblate else p) / self._e2m)
        xx = math.sqrt(p if oblate else self._e4a - p)
        hyp = math.hypot(zz, xx)
        sphi, cphi = zz / hyp, xx / hyp
        if z < 0:
            sphi = -sphi

        h = -self._a * (self._e2m if oblate else 1) * hyp / self._e2a
        return sphi, cphi, h

    def _cubic(
        self, p: float, q: float, r: float, radius: float, z: float
    ) -> Tuple[float, float, float]:
        """
        Solve the resolvent cubic for the general case.

        S and disc are scaled by r^3 and T by r so that r = 0 never divides.
        """
        e4q = self._e4a * q
        S = self._e4a * p * q / 4
        r2 = _sq(r)
        r3 = r * r2
        disc = S * (2 * r3 + S)

        u = r
        if disc >= 0:
            T3 = S + r3
            # Sign of the root maximizes |T3|; u does not depend on it
            T3 += -math.sqrt(disc) if T3 < 0 else math.sqrt(disc)
            T = float(np.cbrt(T3))  # real root
            u += T + (r2 / T if T != 0 else 0.)
        else:
            # Three real roots; this one avoids cancellation. disc < 0 implies r < 0
            ang = math.atan2(math.sqrt(-disc), -(S + r3))
            u += 2 * r * math.cos(ang / 3)

        v = math.sqrt(_sq(u) + e4q)
        # uv = u + v, rearranged for u < 0
        uv = e4q / (v - u) if u < 0 else u + v
        # Round-off in uv - q can push w negative
        w = max(0., self._e2a * (uv - q) / (2 * v))
        k = uv / (math.sqrt(uv + _sq(w)) + w)

        if self._f >= 0:
            k1, k2 = k, k + self._e2
        else:
            k1, k2 = k - self._e2, k

        d = k1 * radius / k2
        hyp = math.hypot(z / k1, radius / k2)
        sphi = (z / k1) / hyp
        cphi = (radius / k2) / hyp
        h = (1 - self._e2m / k1) * math.hypot(d, z)
        return sphi, cphi, h


WGS84 = EllipsoidFrame(WGS84_A, WGS84_F)
