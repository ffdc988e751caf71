"""Observations grouped into tracklets, and the range checks applied to TLEs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from artsat.geometry import Vector, angular_separation

MAX_TIME_SEP = 0.1  # days; pairs further apart may come from different orbits
OPTIMAL_DIST = math.pi / 180.0  # one degree, in radians
_HOURS_PER_DAY = 24.0


@dataclass
class Observation:
    """One astrometric observation.

    ``text`` is the 80-column record: columns 1-12 identify the object and
    columns 78-80 hold the observatory code.  ``ra`` and ``dec`` are in
    radians; ``observer_loc`` is the observer's geocentric position in km.
    """

    text: str
    jd: float
    ra: float
    dec: float
    observer_loc: Vector = (0.0, 0.0, 0.0)

    @property
    def object_id(self) -> str:
        """The twelve columns identifying the observed object."""
        return self.text[:12]

    @property
    def mpc_code(self) -> str:
        """The three-character observatory code."""
        return self.text[77:80]

    @property
    def has_location(self) -> bool:
        """True once a non-geocentric observer position has been set."""
        return any(self.observer_loc)


@dataclass
class Tracklet:
    """Observations of one object, with the pair chosen to describe its motion.

    ``speed`` is in degrees/hour (= arcminutes/minute).
    """

    observations: list[Observation]
    idx1: int = 0
    idx2: int = 0
    speed: float = 0.0
    matches: list = field(default_factory=list)

    @property
    def n_obs(self) -> int:
        return len(self.observations)

    @property
    def first(self) -> Observation:
        """Earlier observation of the chosen pair."""
        return self.observations[self.idx1]

    @property
    def second(self) -> Observation:
        """Later observation of the chosen pair."""
        return self.observations[self.idx2]


@dataclass(frozen=True)
class FoundRange:
    """A NORAD number already covered by our own TLEs over a span of JDs."""

    norad_number: int
    min_jd: float
    max_jd: float


def find_good_pair(observations: Sequence[Observation]) -> tuple[int, int, float]:
    """Pick the pair of observations best describing an object's motion.

    Looks for the pair from the same observatory, less than 0.1 day apart,
    whose separation is closest to one degree.  Returns ``(idx1, idx2, speed)``
    with speed in degrees/hour; ``(0, 0, 0.0)`` if no pair qualifies.
    Observations must be in time order.
    """
    idx1 = idx2 = 0
    speed = 0.0
    best_score = 1e30
    for b, obs_b in enumerate(observations):
        for a in range(b + 1, len(observations)):
            obs_a = observations[a]
            dt = obs_a.jd - obs_b.jd
            if dt >= MAX_TIME_SEP:
                break
            if dt < 0.0:
                raise ValueError("observations are not in time order")
            if obs_a.mpc_code != obs_b.mpc_code:
                continue
            dist, _ = angular_separation(obs_b.ra - obs_a.ra, obs_b.dec, obs_a.dec)
            score = abs(dist - OPTIMAL_DIST)
            if best_score > score:
                best_score = score
                idx1, idx2 = b, a
                if dt:
                    speed = dist / dt
                else:
                    speed = math.inf if dist else math.nan
    speed = math.degrees(speed) / _HOURS_PER_DAY
    return idx1, idx2, speed


def group_tracklets(
    observations: Iterable[Observation], separate: bool = False
) -> list[Tracklet]:
    """Sort observations by object and time, and group them into tracklets.

    With ``separate`` each observation becomes a tracklet of its own.  Each
    tracklet gets its best pair and speed from :func:`find_good_pair`.
    """
    ordered = sorted(observations, key=lambda obs: (obs.object_id, obs.jd))
    groups: list[list[Observation]] = []
    for obs in ordered:
        if separate or not groups or groups[-1][-1].object_id != obs.object_id:
            groups.append([obs])
        else:
            groups[-1].append(obs)
    tracklets = []
    for group in groups:
        idx1, idx2, speed = find_good_pair(group)
        tracklets.append(Tracklet(group, idx1, idx2, speed))
    return tracklets


def select_fast(
    tracklets: Iterable[Tracklet], speed_cutoff: float, include_singletons: bool = True
) -> list[Tracklet]:
    """Keep multi-observation tracklets at least as fast as the cutoff,
    and single observations if ``include_singletons``."""
    return [
        tracklet
        for tracklet in tracklets
        if (tracklet.speed >= speed_cutoff and tracklet.n_obs > 1)
        or (include_singletons and tracklet.n_obs == 1)
    ]


def got_obs_in_range(
    tracklets: Iterable[Tracklet], jd_start: float, jd_end: float
) -> bool:
    """True if any observation falls strictly between the two JDs."""
    for tracklet in tracklets:
        obs = tracklet.observations
        if obs and obs[0].jd < jd_end and obs[-1].jd > jd_start:
            if any(jd_start < o.jd < jd_end for o in obs):
                return True
    return False


def is_in_range(jd: float, tle_start: float, tle_range: float) -> bool:
    """True if a JD is covered by a TLE span; a zero start or range covers all."""
    return (
        not tle_range
        or not tle_start
        or tle_start <= jd <= tle_start + tle_range
    )


def already_found_desig(
    norad_number: int, found: Iterable[FoundRange], jd: float
) -> bool:
    """True if ``norad_number`` was already handled for a span strictly containing ``jd``."""
    return any(
        entry.norad_number == norad_number and entry.min_jd < jd < entry.max_jd
        for entry in found
    )