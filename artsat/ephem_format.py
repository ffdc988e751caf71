"""Options and text formatting for topocentric satellite ephemerides."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Sequence

from artsat.designations import fix_desig

_HOURS_PER_DAY = 24.0
_MINUTES_PER_DAY = 1440.0
_SECONDS_PER_DAY = 86400.0

_HEADER_TEXT = (
    "Date (UTC)  Time       R.A. (J2000)  decl   Azim   Alt  Elong"
    "  LuElo  Dist(km) \"/sec     PA"
)
_GEO_HEADER_TEXT = (
    "Date (UTC)  Time       R.A. (J2000)  decl   Elong  LuElo  Dist(km) \"/sec     PA"
)
_STATE_VECTOR_HEADER = (
    "Date (UTC)  Time"
    "          x            y            z"
    "          vx           vy           vz\n"
)

_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class EphemOptions:
    """Settings for an ephemeris run, as given on the command line.

    ``start_time`` is the unparsed -t text; ``None`` means "now".
    """

    mpc_code: str = "500"
    tle_list_filename: str = "tle_list.txt"
    override_tle_filename: str | None = None
    start_time: str | None = None
    n_steps: int = 20
    step_size: float = 1.0 / 24.0
    round_to_nearest_step: bool = True
    show_separate_motions: bool = False
    motion_units: int = 1
    output_mjd: bool = False
    output_state_vectors: bool = False
    verbose: int = 0
    desigs: list[str] = field(default_factory=list)


def parse_step_size(text: str) -> float:
    """Step size in days; a trailing 'h', 'm' or 's' gives hours, minutes or seconds."""
    if not text:
        raise ValueError("empty step size")
    step = _atof(text)
    suffix = text[-1]
    if suffix == "h":
        step /= _HOURS_PER_DAY
    elif suffix == "m":
        step /= _MINUTES_PER_DAY
    elif suffix == "s":
        step /= _SECONDS_PER_DAY
    return step


def round_to_step(jd: float, step_size: float) -> float:
    """Round a JD down to a whole number of steps since midnight UT."""
    if not step_size:
        return jd
    return math.floor((jd - 0.5) / step_size) * step_size + 0.5


def motion_precision(rate: float) -> int:
    """Decimal places used to show a motion rate so it fits six columns."""
    if rate < 9.999:
        return 4
    if rate < 99.99:
        return 3
    if rate < 999.9:
        return 2
    if rate < 9999.0:
        return 1
    return 0


def format_motion(rate: float, pa: float) -> str:
    """Format a total motion rate and its position angle."""
    precision = motion_precision(rate)
    return f"  {rate:6.{precision}f} {pa:6.1f}"


def format_separate_motions(ra_motion: float, dec_motion: float, precision: int) -> str:
    """Format the RA and dec components of motion with signs."""
    return f"  {ra_motion:+7.{precision}f} {dec_motion:+7.{precision}f}"


def build_header(
    is_geocentric: bool,
    separate_motions: bool,
    motion_units: int,
    show_magnitude: bool,
    state_vectors: bool,
) -> str:
    """Column header line(s) for an ephemeris, ending in a newline."""
    if state_vectors:
        return _STATE_VECTOR_HEADER
    header = _GEO_HEADER_TEXT if is_geocentric else _HEADER_TEXT
    if separate_motions:
        header += '    RA "/sec  dec'
    if motion_units == 60:
        header = header.replace("/sec ", "/min ")
    header += "      Mag\n" if show_magnitude else "\n"
    return header


def _option_value(argv: Sequence[str], i: int) -> str:
    arg = argv[i]
    if len(arg) == 2 and i + 1 < len(argv):
        return argv[i + 1]
    return arg[2:]


def parse_args(argv: Sequence[str]) -> EphemOptions:
    """Build options from command-line arguments; raise ValueError on bad input."""
    if not argv:
        raise ValueError("no arguments given")
    options = EphemOptions()
    for i, arg in enumerate(argv):
        if not (arg.startswith("-") and len(arg) > 1):
            continue
        value = _option_value(argv, i)
        flag = arg[1]
        if flag == "c":
            options.mpc_code = value
        elif flag == "f":
            options.tle_list_filename = value
        elif flag == "F":
            options.override_tle_filename = value
        elif flag == "t":
            options.start_time = value
        elif flag == "m":
            options.output_mjd = True
        elif flag == "n":
            options.n_steps = _atoi(value)
        elif flag == "r":
            options.round_to_nearest_step = False
        elif flag == "s":
            if value:
                options.step_size = parse_step_size(value)
        elif flag == "S":
            options.show_separate_motions = True
        elif flag == "u":
            options.motion_units = 60
        elif flag == "o":
            options.desigs.append(fix_desig(value[:29]))
        elif flag == "v":
            options.verbose = 1 + _atoi(value)
        elif flag == "V":
            options.output_state_vectors = True
        else:
            raise ValueError(f"Unrecognized option '{arg}'")
    return options