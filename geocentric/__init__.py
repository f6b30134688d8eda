
from geocentric._version import __version__  # noqa: F401
from geocentric.utils.logging import LOGGER
from geocentric.errors import InvalidParameter
from geocentric.ellipsoid import WGS84, EllipsoidFrame
from geocentric.points import CartesianPoint, GeodeticPoint
from geocentric.conversion import (
    ecef_to_geodetic, enu_rotation, geodetic_to_ecef, get_default_ellipsoid,
    set_default_ellipsoid
)
from geocentric.local import LocalTangentFrame

__all__ = [
    'CartesianPoint',
    'EllipsoidFrame',
    'GeodeticPoint',
    'InvalidParameter',
    'LocalTangentFrame',
    'WGS84',
    'ecef_to_geodetic',
    'enu_rotation',
    'geodetic_to_ecef',
    'get_default_ellipsoid',
    'set_default_ellipsoid',
    'LOGGER',
]
