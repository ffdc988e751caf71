"""Vector helpers and sky-plane geometry used when matching observed motion."""

from __future__ import annotations

import math
from typing import Sequence

Vector = tuple[float, float, float]


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 3-vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross_product(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Cross product a x b."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def vector_length(v: Sequence[float]) -> float:
    """Euclidean length of a 3-vector."""
    return math.sqrt(dot_product(v, v))


def normalize(v: Sequence[float]) -> Vector:
    """Return the unit vector along ``v``."""
    length = vector_length(v)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def polar_to_cartesian(ra: float, dec: float) -> Vector:
    """Unit vector for a given RA and declination (radians)."""
    cos_dec = math.cos(dec)
    return (cos_dec * math.cos(ra), cos_dec * math.sin(ra), math.sin(dec))


def create_orthogonal_vects(v: Sequence[float]) -> tuple[Vector, Vector]:
    """For a unit vector, return (xi, eta): xi in the xy plane, eta perpendicular to both."""
    tval = math.hypot(v[0], v[1])
    if tval == 0.0:  # directly at a celestial pole
        xi: Vector = (1.0, 0.0, 0.0)
    else:
        xi = (v[1] / tval, -v[0] / tval, 0.0)
    return xi, cross_product(v, xi)


def relative_motion(ra_dec: Sequence[float]) -> float:
    """Difference, in radians, between two motions on the sky.

    ``ra_dec`` holds eight values: start and end RA/dec of the first object,
    then start and end RA/dec of the second.  Both are projected onto a plane
    tangent at the mean of the four points.
    """
    if len(ra_dec) != 8:
        raise ValueError("relative_motion needs eight values")
    points = [polar_to_cartesian(ra_dec[i], ra_dec[i + 1]) for i in range(0, 8, 2)]
    mid = normalize(tuple(sum(components) for components in zip(*points)))
    xi_vect, eta_vect = create_orthogonal_vects(mid)
    xi = []
    eta = []
    for point in points:
        dist = dot_product(mid, point)
        xi.append(dot_product(xi_vect, point) / dist)
        eta.append(dot_product(eta_vect, point) / dist)
    delta_xi = (xi[0] - xi[1]) - (xi[2] - xi[3])
    delta_eta = (eta[0] - eta[1]) - (eta[2] - eta[3])
    return math.hypot(delta_xi, delta_eta)


def angular_separation(delta_ra: float, dec1: float, dec2: float) -> tuple[float, float]:
    """Separation (radians) and position angle (degrees, [0, 360)) from (0, dec1) to (delta_ra, dec2)."""
    sin_d1, cos_d1 = math.sin(dec1), math.cos(dec1)
    sin_d2, cos_d2 = math.sin(dec2), math.cos(dec2)
    x = cos_d1 * sin_d2 - sin_d1 * cos_d2 * math.cos(delta_ra)
    y = cos_d2 * math.sin(delta_ra)
    z = sin_d1 * sin_d2 + cos_d1 * cos_d2 * math.cos(delta_ra)
    dist = math.atan2(math.hypot(x, y), z)
    posn_ang = math.atan2(y, x)
    if posn_ang < 0.0:
        posn_ang += 2.0 * math.pi
    return dist, math.degrees(posn_ang)


def compute_aberration(t_cen: float, ra: float, dec: float) -> tuple[float, float]:
    """Apply annual aberration (leading Ron-Vondrak terms) to an RA/dec."""
    l3 = 1.7534703 + 628.3075849 * t_cen
    sin_l3, cos_l3 = math.sin(l3), math.cos(l3)
    sin_2l3 = 2.0 * sin_l3 * cos_l3
    cos_2l3 = 2.0 * cos_l3 * cos_l3 - 1.0
    x = -1719914.0 * sin_l3 - 25.0 * cos_l3 + 6434.0 * sin_2l3 + 28007.0 * cos_2l3
    y = 25.0 * sin_l3 + 1578089.0 * cos_l3 + 25697.0 * sin_2l3 - 5904.0 * cos_2l3
    z = 10.0 * sin_l3 + 684185.0 * cos_l3 + 11141.0 * sin_2l3 - 2559.0 * cos_2l3
    c = 17314463350.0  # speed of light, 173.1446335 AU/day, scaled
    sin_ra, cos_ra = math.sin(ra), math.cos(ra)
    new_ra = ra - (y * cos_ra - x * sin_ra) / (c * math.cos(dec))
    new_dec = dec + ((x * cos_ra + y * sin_ra) * math.sin(dec) - z * math.cos(dec)) / c
    return new_ra, new_dec