"""
Module-level geodetic/geocentric conversions.
Supports switching the default ellipsoid between named presets or a custom EllipsoidFrame.
"""

__all__ = [
    'ecef_to_geodetic', 'enu_rotation', 'geodetic_to_ecef',
    'get_default_ellipsoid', 'resolve_ellipsoid', 'set_default_ellipsoid',
]

from typing import Literal, Tuple, Union

import numpy as np

from geocentric._const import EARTH_RADIUS_METERS, GRS80_A, GRS80_F
from geocentric.ellipsoid import WGS84, EllipsoidFrame


_ELLIPSOIDS = {
    'wgs84': WGS84,
    'grs80': EllipsoidFrame(GRS80_A, GRS80_F),
    'sphere': EllipsoidFrame(EARTH_RADIUS_METERS, 0.),
}

_PresetName = Literal['wgs84', 'grs80', 'sphere']

# The ellipsoid used when none is given (default WGS84)
_default_ellipsoid = WGS84


def resolve_ellipsoid(ellipsoid: Union[EllipsoidFrame, str, None] = None) -> EllipsoidFrame:
    """
    Look up an ellipsoid.

    Args:
        ellipsoid:
            An EllipsoidFrame (returned as-is), the name of a preset, or None for the
            configured default

    Returns:
        EllipsoidFrame
    """
    if ellipsoid is None:
        return _default_ellipsoid

    if isinstance(ellipsoid, EllipsoidFrame):
        return ellipsoid

    key = str(ellipsoid).lower()
    if key not in _ELLIPSOIDS:
        raise ValueError(f"Unknown ellipsoid '{ellipsoid}'. Options: {list(_ELLIPSOIDS.keys())}")

    return _ELLIPSOIDS[key]


def set_default_ellipsoid(ellipsoid: Union[EllipsoidFrame, _PresetName]):
    """
    Set the ellipsoid used by conversions that are not given one.

    Args:
        ellipsoid: An EllipsoidFrame, or one of 'wgs84', 'grs80' or 'sphere'
    """
    global _default_ellipsoid

    _default_ellipsoid = resolve_ellipsoid(ellipsoid)


def get_default_ellipsoid() -> EllipsoidFrame:
    """The ellipsoid used by conversions that are not given one"""
    return _default_ellipsoid


def geodetic_to_ecef(
    lat: float,
    lon: float,
    h: float = 0.,
    ellipsoid: Union[EllipsoidFrame, str, None] = None,
) -> Tuple[float, float, float]:
    """
    Convert geodetic coordinates to geocentric coordinates.

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        h:
            (Default 0) Height above the ellipsoid, in meters

        ellipsoid:
            (Default None) An EllipsoidFrame or preset name; the configured default if None

    Returns:
        (x, y, z) in meters
    """
    return resolve_ellipsoid(ellipsoid).to_cartesian(lat, lon, h)


def ecef_to_geodetic(
    x: float,
    y: float,
    z: float,
    ellipsoid: Union[EllipsoidFrame, str, None] = None,
) -> Tuple[float, float, float]:
    """
    Convert geocentric coordinates to geodetic coordinates.

    Args:
        x:
            Geocentric x, in meters

        y:
            Geocentric y, in meters

        z:
            Geocentric z, in meters

        ellipsoid:
            (Default None) An EllipsoidFrame or preset name; the configured default if None

    Returns:
        (latitude, longitude, height), angles in degrees and height in meters
    """
    return resolve_ellipsoid(ellipsoid).to_geodetic(x, y, z)


def enu_rotation(lat: float, lon: float) -> np.ndarray:
    """
    The east-north-up rotation matrix at a geodetic location.

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

    Returns:
        (np.ndarray) 3x3 matrix with the east, north and up unit vectors as columns
    """
    *_, rotation = _default_ellipsoid.to_cartesian(lat, lon, 0., with_rotation=True)
    return rotation
