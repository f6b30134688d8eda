import numpy as np
from pytest import approx

from geocentric.ellipsoid import EllipsoidFrame


def assert_geodetic_equal(actual, expected, angle_tol=1e-9, height_tol=1e-6, check_lon=True):
    """
    Asserts that two (latitude, longitude, height) triples are equal within tolerance.

    Args:
        actual: The computed triple
        expected: The expected triple
        angle_tol: Absolute tolerance on latitude and longitude, in degrees.
                   Default is 1e-9 (approx 0.1mm on the surface).
        height_tol: Absolute tolerance on height, in meters
        check_lon: Longitude is undefined on the rotation axis; pass False to skip it
    """
    try:
        assert actual[0] == approx(expected[0], abs=angle_tol)
        if check_lon:
            assert actual[1] == approx(expected[1], abs=angle_tol)
        assert actual[2] == approx(expected[2], abs=height_tol)
    except AssertionError as e:
        print(actual)
        print(expected)
        raise e


def assert_orthonormal(rotation: np.ndarray):
    """Asserts that a matrix is a proper rotation (orthonormal columns, right-handed)"""
    assert rotation.shape == (3, 3)
    np.testing.assert_allclose(rotation.T @ rotation, np.eye(3), atol=1e-14)
    assert np.linalg.det(rotation) == approx(1., abs=1e-14)


def reference_frames():
    """Oblate, spherical and prolate test ellipsoids"""
    return [
        EllipsoidFrame(6378137., 1 / 298.257223563),
        EllipsoidFrame(6378137., 0.3),
        EllipsoidFrame(6378137., 0.),
        EllipsoidFrame(6378137., -1 / 150),
        EllipsoidFrame(6378137., -0.3),
    ]
