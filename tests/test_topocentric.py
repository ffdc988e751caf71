import math

import pytest

from artsat.geometry import dot_product, vector_length
from artsat.topocentric import (
    AngularRates,
    angle_between,
    azimuth_altitude,
    compute_angular_rates,
    make_orthogonal_basis,
)


@pytest.mark.parametrize(
    "vect", [(3.0, 4.0, 0.0), (1.0, -2.0, 5.0), (-7000.0, 100.0, -300.0)]
)
def test_basis_is_orthonormal(vect):
    length, x, y, z = make_orthogonal_basis(vect)
    assert length == pytest.approx(vector_length(vect))
    for v in (x, y, z):
        assert vector_length(v) == pytest.approx(1.0)
    assert abs(dot_product(x, y)) < 1e-12
    assert abs(dot_product(x, z)) < 1e-12
    assert abs(dot_product(y, z)) < 1e-12
    assert x[2] == 0.0


def test_basis_z_is_along_input():
    length, _, _, z = make_orthogonal_basis((3.0, 4.0, 0.0))
    assert z == pytest.approx((3.0 / length, 4.0 / length, 0.0))


def test_basis_rejects_polar_vector():
    with pytest.raises(ValueError):
        make_orthogonal_basis((0.0, 0.0, 2.0))


def test_basis_rejects_zero_vector():
    with pytest.raises(ValueError):
        make_orthogonal_basis((0.0, 0.0, 0.0))


def test_angle_between_perpendicular():
    assert angle_between((1.0, 0.0, 0.0), (0.0, 3.0, 0.0)) == pytest.approx(90.0)


def test_angle_between_parallel_and_antiparallel():
    assert abs(angle_between((2.0, 1.0, 1.0), (4.0, 2.0, 2.0))) < 1e-6
    assert angle_between((2.0, 1.0, 1.0), (-2.0, -1.0, -1.0)) == pytest.approx(180.0)


def test_angle_between_is_symmetric():
    a, b = (1.0, 2.0, 3.0), (-3.0, 0.5, 2.0)
    assert angle_between(a, b) == pytest.approx(angle_between(b, a))


def test_angle_between_zero_vector():
    with pytest.raises(ValueError):
        angle_between((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))


def test_rates_total_matches_components():
    rates = compute_angular_rates((6000.0, 1000.0, 500.0), (400.0, 300.0, 200.0), (1.0, 5.0, -3.0))
    assert isinstance(rates, AngularRates)
    assert rates.total == pytest.approx(math.hypot(rates.ra_motion, rates.dec_motion))
    assert 0.0 <= rates.position_angle <= 360.0


def test_rates_scale_inversely_with_distance():
    vel = (0.0, 0.0, 7.0)
    near = compute_angular_rates((0.0, 0.0, 0.0), (500.0, 0.0, 0.0), vel)
    far = compute_angular_rates((0.0, 0.0, 0.0), (1000.0, 0.0, 0.0), vel)
    assert near.total == pytest.approx(2.0 * far.total)


def test_radial_motion_has_no_angular_rate():
    rates = compute_angular_rates((0.0, 0.0, 0.0), (300.0, 400.0, 100.0), (3.0, 4.0, 1.0))
    assert abs(rates.total) < 1e-12


def test_overhead_and_nadir_altitudes():
    obs = (4000.0, 3000.0, 3500.0)
    _, alt_up = azimuth_altitude(obs, (40.0, 30.0, 35.0))
    _, alt_down = azimuth_altitude(obs, (-40.0, -30.0, -35.0))
    assert alt_up == pytest.approx(90.0)
    assert alt_down == pytest.approx(-alt_up)


def test_azimuth_in_range_and_altitude_bounded():
    obs = (5000.0, -2000.0, 3000.0)
    for topo in [(100.0, 0.0, 0.0), (0.0, 100.0, 50.0), (-30.0, 20.0, -10.0)]:
        az, alt = azimuth_altitude(obs, topo)
        assert 0.0 <= az <= 360.0
        assert -90.0 <= alt <= 90.0