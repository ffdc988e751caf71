"""Reading the control lines of TLE list files and finding which TLE files to use."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from typing import Iterable

from artsat.satutil import trim_line

_JD_OF_ORDINAL_ZERO = 1721424.5  # JD of midnight starting proleptic day ordinal 0
_INTL_DESIG_WIDTH = 8

_DATE_RE = re.compile(
    r"(\d{4})-(\d{1,2})-(\d{1,2})"
    r"(?:(\.\d*)|T(\d{1,2}):(\d{2})(?::(\d{2}(?:\.\d*)?))?)?"
)
_INT_RE = re.compile(r"\s*([+-]?\d+)")

RANGE_PREFIX = "# Range:"
EPHEM_RANGE_PREFIX = "# Ephem range:"
ID_PREFIX = "# ID:"
INCLUDE_PREFIX = "# Include "


@dataclass(frozen=True)
class TleListEntry:
    """A TLE file named by a list file, with the span of JDs it covers.

    ``norad_number`` and ``intl_desig`` come from a preceding '# ID:' line,
    when there is one.
    """

    filename: str
    jd_start: float
    jd_end: float
    norad_number: int | None = None
    intl_desig: str | None = None


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def parse_date(text: str) -> float:
    """Parse 'YYYY-MM-DD', 'YYYY-MM-DD.ddd' or 'YYYY-MM-DDTHH:MM[:SS]' (UTC) to a JD."""
    match = _DATE_RE.fullmatch(text.strip())
    if not match:
        raise ValueError(f"cannot parse date {text!r}")
    year, month, day, fraction, hours, minutes, seconds = match.groups()
    try:
        date = datetime.date(int(year), int(month), int(day))
    except ValueError as exc:
        raise ValueError(f"invalid date {text!r}") from exc
    day_fraction = 0.0
    if fraction is not None:
        day_fraction = float("0" + fraction)
    elif hours is not None:
        h, m = int(hours), int(minutes)
        s = float(seconds) if seconds is not None else 0.0
        if h > 23 or m > 59 or s >= 60.0:
            raise ValueError(f"invalid time of day in {text!r}")
        day_fraction = (h + m / 60.0 + s / 3600.0) / 24.0
    return date.toordinal() + _JD_OF_ORDINAL_ZERO + day_fraction


def parse_range_line(line: str) -> tuple[float, float]:
    """Read a '# Range: start end' line; return the two JDs."""
    if not line.startswith(RANGE_PREFIX):
        raise ValueError(f"not a range line: {line!r}")
    fields = line[len(RANGE_PREFIX):].split()
    if len(fields) < 2:
        raise ValueError(f"range line needs two dates: {line!r}")
    return parse_date(fields[0]), parse_date(fields[1])


def parse_ephem_range(line: str) -> tuple[float, float, float]:
    """Read a '# Ephem range: mjd_start mjd_end step' line; return the three values."""
    if not line.startswith(EPHEM_RANGE_PREFIX):
        raise ValueError(f"not an ephemeris range line: {line!r}")
    fields = line[len(EPHEM_RANGE_PREFIX):].split()
    if len(fields) < 3:
        raise ValueError(f"ephemeris range line needs three values: {line!r}")
    try:
        mjd_start, mjd_end, step = (float(f) for f in fields[:3])
    except ValueError as exc:
        raise ValueError(f"bad ephemeris range line: {line!r}") from exc
    return mjd_start, mjd_end, step


def parse_id_line(line: str) -> tuple[int, str]:
    """Read a '# ID: NORAD intl' line; the designation is padded to eight columns."""
    if not line.startswith(ID_PREFIX):
        raise ValueError(f"not an ID line: {line!r}")
    fields = line[len(ID_PREFIX):].split()
    if len(fields) < 2:
        raise ValueError(f"ID line needs a NORAD number and a designation: {line!r}")
    try:
        norad = int(fields[0])
    except ValueError as exc:
        raise ValueError(f"bad NORAD number in {line!r}") from exc
    return norad, fields[1].ljust(_INTL_DESIG_WIDTH)


def include_path(tle_file_name: str, name: str) -> str:
    """Path of an included file, taken relative to the including file's directory."""
    cut = max(tle_file_name.rfind("/"), tle_file_name.rfind("\\")) + 1
    return tle_file_name[:cut] + name


def scan_tle_list(
    lines: Iterable[str], desig: str, jd_start: float, jd_end: float
) -> list[TleListEntry]:
    """Find the files in a TLE list that may hold ``desig`` between two JDs.

    A file is chosen when its '# Include' line follows a '# Range:' line
    overlapping the span and no '# ID:' line naming another object.  The
    range and ID are forgotten after each include.
    """
    entries = []
    in_range = False
    id_matches = True
    range_start = range_end = 0.0
    norad: int | None = None
    intl: str | None = None
    for raw in lines:
        line = trim_line(raw)
        if line.startswith(RANGE_PREFIX):
            range_start, range_end = parse_range_line(line)
            if range_start < jd_end and range_end > jd_start:
                in_range = True
        if line.startswith(ID_PREFIX):
            norad = _atoi(line[5:])
            intl = line[13:].strip() or None
            if desig != line[13:] and _atoi(line[5:]) != _atoi(desig):
                id_matches = False
        if line.startswith(INCLUDE_PREFIX):
            if in_range and id_matches:
                entries.append(
                    TleListEntry(
                        line[len(INCLUDE_PREFIX):], range_start, range_end, norad, intl
                    )
                )
            in_range = False
            id_matches = True
            norad = intl = None
    return entries