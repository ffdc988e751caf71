"""Reading observation records: field lines, roving observers, station codes."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from artsat.geometry import Vector
from artsat.observe import observer_cartesian_coords
from artsat.satutil import local_then_config_open
from artsat.tracklets import Observation

# WGS84-style axes used for roving observers given by longitude/latitude/altitude.
ROVER_MAJOR_AXIS = 6378137.0
ROVER_MINOR_AXIS = 6356752.0

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEXAGESIMAL_SPLIT = re.compile(r"[\s:]+")


@dataclass(frozen=True)
class Offset:
    """Observer position from a second-line record (spacecraft or roving observer).

    ``posn`` is geocentric, in km.
    """

    jd: float
    posn: Vector
    mpc_code: str


def extract_csv_value(line: str, idx: int) -> str:
    """Return the ``idx``-th comma-separated field, without a leading quote.

    The field ends at the next comma or quotation mark.  Raises ValueError
    if the line has no such field.
    """
    pos = 0
    while idx and pos < len(line):
        if line[pos] == ",":
            idx -= 1
        pos += 1
    if pos >= len(line):
        raise ValueError(f"no field {idx} in {line!r}")
    if line[pos] == '"':
        pos += 1
    end = pos
    while end < len(line) and line[end] not in ',"':
        end += 1
    return line[pos:end]


def _sexagesimal_parts(text: str) -> tuple[int, list[float]]:
    """Split text into a sign and one to three non-negative numeric parts."""
    stripped = text.strip()
    if not stripped:
        raise ValueError("empty angle")
    sign = 1
    if stripped[0] in "+-":
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:].lstrip()
    parts = [p for p in _SEXAGESIMAL_SPLIT.split(stripped) if p]
    if not 1 <= len(parts) <= 3:
        raise ValueError(f"cannot parse angle {text!r}")
    values = []
    for part in parts:
        if not _NUMBER_RE.fullmatch(part) or part[0] in "+-":
            raise ValueError(f"cannot parse angle {text!r}")
        values.append(float(part))
    if any(v >= 60.0 for v in values[1:]):
        raise ValueError(f"minutes and seconds must be below 60: {text!r}")
    return sign, values


def _combine(values: Sequence[float]) -> float:
    return sum(v / 60.0 ** i for i, v in enumerate(values))


def parse_ra(text: str) -> float:
    """Parse an RA to radians.

    A single number is decimal degrees; two or three parts are hours,
    minutes and seconds.
    """
    sign, values = _sexagesimal_parts(text)
    if len(values) == 1:
        degrees = values[0]
    else:
        degrees = _combine(values) * 15.0
    return math.radians(sign * degrees)


def parse_dec(text: str) -> float:
    """Parse a declination to radians: decimal degrees or degrees, minutes, seconds."""
    sign, values = _sexagesimal_parts(text)
    degrees = _combine(values)
    if degrees > 90.0:
        raise ValueError(f"declination out of range: {text!r}")
    return math.radians(sign * degrees)


def _lat_alt_to_parallax(
    lat: float, ht_in_meters: float, major: float, minor: float
) -> tuple[float, float]:
    ratio = minor / major
    u = math.atan(math.sin(lat) * ratio / math.cos(lat))
    ht = ht_in_meters / major
    rho_sin_phi = ratio * math.sin(u) + ht * math.sin(lat)
    rho_cos_phi = math.cos(u) + ht * math.cos(lat)
    return rho_cos_phi, rho_sin_phi


def parse_roving_offset(line: str, jd: float) -> Offset:
    """Build an Offset from a roving-observer record.

    Longitude, latitude (degrees) and altitude (meters) start at column 35;
    the observatory code is in columns 78-80.  Raises ValueError if the
    three values cannot be read.
    """
    fields = line[34:].split()
    try:
        lon, lat, alt = (float(f) for f in fields[:3])
    except ValueError as exc:
        raise ValueError(f"Couldn't parse roving observer: {line!r}") from exc
    if len(fields) < 3:
        raise ValueError(f"Couldn't parse roving observer: {line!r}")
    rho_cos_phi, rho_sin_phi = _lat_alt_to_parallax(
        math.radians(lat), alt, ROVER_MAJOR_AXIS, ROVER_MINOR_AXIS
    )
    posn = observer_cartesian_coords(jd, math.radians(lon), rho_cos_phi, rho_sin_phi)
    return Offset(jd, posn, line[77:80])


def offset_matches_obs(offset: Offset, obs: Observation) -> bool:
    """True if an offset belongs to an observation still lacking a position."""
    return (
        offset.jd == obs.jd
        and not obs.has_location
        and offset.mpc_code == obs.mpc_code
    )


def attach_offsets(
    observations: Sequence[Observation], offsets: Iterable[Offset]
) -> tuple[list[Offset], list[Observation]]:
    """Give each offset's position to the first observation it matches.

    Returns the offsets that matched nothing and the observations that
    are left without a position.
    """
    unmatched = []
    for offset in offsets:
        target = next(
            (obs for obs in observations if offset_matches_obs(offset, obs)), None
        )
        if target is None:
            unmatched.append(offset)
        else:
            target.observer_loc = offset.posn
    missing = [obs for obs in observations if not obs.has_location]
    return unmatched, missing


class StationCodes:
    """Observatory code list, searchable by three-character code.

    Codes are only found at the start of a line other than the first.
    Codes that were looked up and not found are recorded in ``missing``.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._cache: dict[str, str] = {}
        self.missing: set[str] = set()

    @classmethod
    def from_files(
        cls,
        filenames: Sequence[str] = ("ObsCodes.html", "ObsCodes.htm"),
        rovers: str | None = "rovers.txt",
    ) -> "StationCodes":
        """Load the first station list found, plus the rovers file if present."""
        text = None
        for name in filenames:
            try:
                with local_then_config_open(name, "rb") as handle:
                    text = handle.read().decode("latin-1")
                break
            except OSError:
                continue
        if text is None:
            raise FileNotFoundError(
                "Failed to find MPC station list 'ObsCodes.html'"
            )
        if rovers:
            try:
                with local_then_config_open(rovers, "rb") as handle:
                    text += handle.read().decode("latin-1")
            except OSError:
                pass
        return cls(text)

    def lookup(self, code: str) -> str:
        """Return the line for an observatory code; raise KeyError if absent."""
        key = code[:3]
        if key in self._cache:
            return self._cache[key]
        start = self._text.find("\n" + key)
        if start < 0:
            self.missing.add(key)
            raise KeyError(f"Station code '{key}' not found.")
        start += 1
        end = start
        while end < len(self._text) and self._text[end] >= " ":
            end += 1
        line = self._text[start:end]
        self._cache[key] = line
        return line