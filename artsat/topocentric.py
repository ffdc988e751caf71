"""Topocentric geometry for ephemerides: local bases, angles and apparent motion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from artsat.geometry import Vector, cross_product, dot_product, vector_length

_OMEGA_E = 1.00273790934  # Earth rotations per sidereal day
_MINUTES_PER_DAY = 1440.0
_EARTH_RATE = _OMEGA_E * 2.0 * math.pi / _MINUTES_PER_DAY  # radians/minute
_RAD_TO_ARCMIN = math.degrees(1.0) * 60.0


@dataclass(frozen=True)
class AngularRates:
    """Apparent motion of a satellite as seen by an observer.

    ``total`` and the components are in arcminutes/minute (= arcseconds/second);
    ``position_angle`` is in degrees.
    """

    total: float
    position_angle: float
    ra_motion: float
    dec_motion: float


def make_orthogonal_basis(vect: Sequence[float]) -> tuple[float, Vector, Vector, Vector]:
    """Build a basis around ``vect``.

    Returns ``(length, x, y, z)``: the length of ``vect``; ``z`` the unit vector
    along it; ``x`` a unit vector perpendicular to it in the xy plane; and
    ``y`` perpendicular to both.
    """
    length = vector_length(vect)
    if length == 0.0:
        raise ValueError("cannot build a basis around a zero-length vector")
    z: Vector = (vect[0] / length, vect[1] / length, vect[2] / length)
    horizontal = math.hypot(z[0], z[1])
    if horizontal == 0.0:
        raise ValueError("vector lies along the z axis; basis is undefined")
    x: Vector = (z[1] / horizontal, -z[0] / horizontal, 0.0)
    y = cross_product(z, x)
    return length, x, y, z


def angle_between(a: Sequence[float], b: Sequence[float]) -> float:
    """Angle between two vectors, in degrees."""
    norm2 = dot_product(a, a) * dot_product(b, b)
    if norm2 == 0.0:
        raise ValueError("angle is undefined for a zero-length vector")
    cos_ang = dot_product(a, b) / math.sqrt(norm2)
    cos_ang = max(-1.0, min(1.0, cos_ang))
    return math.degrees(math.acos(cos_ang))


def compute_angular_rates(
    obs_pos: Sequence[float],
    topo_posn: Sequence[float],
    sat_vel: Sequence[float],
) -> AngularRates:
    """Apparent angular motion of a satellite.

    ``obs_pos`` is the observer's geocentric position (km), ``topo_posn`` the
    satellite relative to the observer (km), and ``sat_vel`` the satellite's
    geocentric velocity in km/minute.  The observer's motion from Earth's
    rotation is taken out.
    """
    vel = (
        sat_vel[0] + _EARTH_RATE * obs_pos[1],
        sat_vel[1] - _EARTH_RATE * obs_pos[0],
        sat_vel[2],
    )
    dist, x_vect, y_vect, _ = make_orthogonal_basis(topo_posn)
    xmotion = dot_product(vel, x_vect) / dist  # radians/minute
    ymotion = dot_product(vel, y_vect) / dist
    total = math.hypot(xmotion, ymotion)
    position_angle = math.degrees(math.pi + math.atan2(xmotion, ymotion))
    return AngularRates(
        total=total * _RAD_TO_ARCMIN,
        position_angle=position_angle,
        ra_motion=-xmotion * _RAD_TO_ARCMIN,
        dec_motion=-ymotion * _RAD_TO_ARCMIN,
    )


def azimuth_altitude(
    obs_pos: Sequence[float], topo_posn: Sequence[float]
) -> tuple[float, float]:
    """Azimuth and altitude, in degrees, of a target seen from ``obs_pos``."""
    _, x_vect, y_vect, _ = make_orthogonal_basis(obs_pos)
    az = math.degrees(
        math.pi
        + math.atan2(dot_product(x_vect, topo_posn), dot_product(y_vect, topo_posn))
    )
    alt = 90.0 - angle_between(topo_posn, obs_pos)
    return az, alt