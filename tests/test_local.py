import math

import numpy as np
import pytest
from pytest import approx

from geocentric import WGS84, EllipsoidFrame, LocalTangentFrame

from tests.functions import assert_geodetic_equal, assert_orthonormal


def test_local_frame_init():
    frame = LocalTangentFrame(10., 370., 5.)
    assert (frame.lat0, frame.lon0, frame.h0) == (10., 10., 5.)
    assert frame.ellipsoid is WGS84
    np.testing.assert_array_equal(frame.origin, WGS84.to_cartesian(10., 10., 5.))
    assert_orthonormal(frame.rotation)

    # Properties are copies
    frame.origin[0] = 0.
    assert frame.origin[0] != 0.

    assert repr(LocalTangentFrame(1., 2., 3.)) == (
        '<LocalTangentFrame(1.0, 2.0, 3.0) on <EllipsoidFrame(a=6378137.0, f=0.0033528106647474805)>>'
    )

    with pytest.raises(ValueError):
        LocalTangentFrame(0., 0., 0., ellipsoid='wgs84')


def test_local_frame_forward():
    frame = LocalTangentFrame(0., 0.)
    assert frame.forward(0., 0., 0.) == (approx(0., abs=1e-9),) * 3
    assert frame.forward(0., 0., 100.) == (
        approx(0., abs=1e-9), approx(0., abs=1e-9), approx(100., abs=1e-6)
    )

    # 1 degree of longitude along the equator
    east, north, up = frame.forward(0., 1., 0.)
    assert east == approx(6378137. * math.sin(math.radians(1.)), rel=1e-12)
    assert north == approx(0., abs=1e-9)
    assert up < 0

    frame = LocalTangentFrame(45., -75., 200.)
    east, north, up = frame.forward(45.001, -75., 200.)
    assert east == approx(0., abs=1e-6)
    assert 100 < north < 120
    assert up == approx(0., abs=0.01)


def test_local_frame_round_trip():
    frames = [
        LocalTangentFrame(51.4778, -0.0014, 45.),
        LocalTangentFrame(-89.5, 120., 2800.),
        LocalTangentFrame(10., 10., 0., ellipsoid=EllipsoidFrame(1000., -0.2)),
    ]
    for frame in frames:
        for enu in [(0., 0., 0.), (100., -250., 30.), (-1e5, 2e4, -500.)]:
            scale = frame.ellipsoid.major_radius / 6378137.
            enu = tuple(v * scale for v in enu)
            lat, lon, h = frame.reverse(*enu)
            np.testing.assert_allclose(frame.forward(lat, lon, h), enu, atol=1e-6)

        assert_geodetic_equal(frame.reverse(0., 0., 0.), (frame.lat0, frame.lon0, frame.h0))


def test_local_frame_vectors():
    frame = LocalTangentFrame(0., 0.)
    np.testing.assert_allclose(frame.vector_to_ecef([0., 0., 1.]), [1., 0., 0.])
    np.testing.assert_allclose(frame.vector_to_ecef([1., 0., 0.]), [0., 1., 0.])
    np.testing.assert_allclose(frame.vector_to_local([0., 0., 1.]), [0., 1., 0.])

    frame = LocalTangentFrame(37.4, -122.1, 30.)
    velocity = np.array([12., -3., 0.5])
    np.testing.assert_allclose(
        frame.vector_to_local(frame.vector_to_ecef(velocity)), velocity, atol=1e-12
    )
    assert np.linalg.norm(frame.vector_to_ecef(velocity)) == approx(np.linalg.norm(velocity))
