"""Observer positions, topocentric RA/dec/distance, and approximate precession."""

from __future__ import annotations

import math
from typing import Sequence

EARTH_MAJOR_AXIS = 6378140.0
EARTH_MINOR_AXIS = 6356755.0
EARTH_AXIS_RATIO = EARTH_MINOR_AXIS / EARTH_MAJOR_AXIS

_J2000 = 2451545.0
_SECONDS_PER_DAY = 86400.0
_OMEGA_E = 1.00273790934  # Earth rotations per sidereal day

Vector = tuple[float, float, float]


def greenwich_sidereal_time(jd: float) -> float:
    """Return Greenwich mean sidereal time, in radians in [0, 2*pi), for a UT JD."""
    ut = math.fmod(jd + 0.5, 1.0)
    t_cen = (jd - ut - _J2000) / 36525.0
    gmst = 24110.54841 + t_cen * (
        8640184.812866 + t_cen * (0.093104 - t_cen * 6.2e-6)
    )
    gmst = math.fmod(gmst + _SECONDS_PER_DAY * _OMEGA_E * ut, _SECONDS_PER_DAY)
    if gmst < 0.0:
        gmst += _SECONDS_PER_DAY
    return 2.0 * math.pi * gmst / _SECONDS_PER_DAY


def observer_cartesian_coords(
    jd: float, lon: float, rho_cos_phi: float, rho_sin_phi: float
) -> Vector:
    """Return the observer's geocentric position in km, in the equator-of-date frame."""
    angle = lon + greenwich_sidereal_time(jd)
    scale = EARTH_MAJOR_AXIS / 1000.0
    return (
        math.cos(angle) * rho_cos_phi * scale,
        math.sin(angle) * rho_cos_phi * scale,
        rho_sin_phi * scale,
    )


def earth_lat_alt_to_parallax(lat: float, ht_in_meters: float) -> tuple[float, float]:
    """Convert geodetic latitude (radians) and height to (rho_cos_phi, rho_sin_phi)."""
    u = math.atan(math.sin(lat) * EARTH_AXIS_RATIO / math.cos(lat))
    ht = ht_in_meters / EARTH_MAJOR_AXIS
    rho_sin_phi = EARTH_AXIS_RATIO * math.sin(u) + ht * math.sin(lat)
    rho_cos_phi = math.cos(u) + ht * math.cos(lat)
    return rho_cos_phi, rho_sin_phi


def get_satellite_ra_dec_delta(
    observer_loc: Sequence[float], satellite_loc: Sequence[float]
) -> tuple[float, float, float]:
    """Return (ra, dec, distance) of a satellite as seen from an observer.

    RA is in [0, 2*pi); distance is in the units of the input vectors.
    """
    vect = [s - o for s, o in zip(satellite_loc, observer_loc)]
    delta = math.sqrt(sum(v * v for v in vect))
    if delta == 0.0:
        raise ValueError("observer and satellite positions coincide")
    ra = math.atan2(vect[1], vect[0])
    if ra < 0.0:
        ra += 2.0 * math.pi
    dec = math.asin(vect[2] / delta)
    return ra, dec, delta


def _precess(t_centuries: float, ra: float, dec: float) -> tuple[float, float]:
    m = (3.07496 + 0.00186 * t_centuries / 2.0) * (math.pi / 180.0) / 240.0
    n = (1.33621 - 0.00057 * t_centuries / 2.0) * (math.pi / 180.0) / 240.0
    ra_rate = m + n * math.sin(ra) * math.tan(dec)
    dec_rate = n * math.cos(ra)
    return ra - t_centuries * ra_rate * 100.0, dec - t_centuries * dec_rate * 100.0


def epoch_of_date_to_j2000(jd: float, ra: float, dec: float) -> tuple[float, float]:
    """Precess an equator-of-date RA/dec to J2000 (approximate, Meeus)."""
    return _precess((jd - _J2000) / 36525.0, ra, dec)


def j2000_to_epoch_of_date(jd: float, ra: float, dec: float) -> tuple[float, float]:
    """Precess a J2000 RA/dec to the equator of date (approximate, Meeus)."""
    return _precess(-(jd - _J2000) / 36525.0, ra, dec)