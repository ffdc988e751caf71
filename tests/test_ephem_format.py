import math

import pytest

from artsat.ephem_format import (
    EphemOptions,
    build_header,
    format_motion,
    format_separate_motions,
    motion_precision,
    parse_args,
    parse_step_size,
    round_to_step,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("30m", 30 / 1440.0),
        ("2h", 2 / 24.0),
        ("10s", 10 / 86400.0),
        ("1.5", 1.5),
    ],
)
def test_parse_step_size(text, expected):
    assert parse_step_size(text) == pytest.approx(expected)


def test_parse_step_size_empty():
    with pytest.raises(ValueError):
        parse_step_size("")


@pytest.mark.parametrize("jd, step", [(2460000.73, 1 / 24.0), (2459123.1234, 0.25), (2451545.0, 1 / 1440.0)])
def test_round_to_step_invariants(jd, step):
    rounded = round_to_step(jd, step)
    assert rounded <= jd + 1e-9
    assert jd - rounded < step + 1e-9
    n = (rounded - 0.5) / step
    assert n == pytest.approx(round(n), abs=1e-3)


def test_round_to_step_zero_step():
    assert round_to_step(2460000.123, 0.0) == 2460000.123


@pytest.mark.parametrize(
    "rate, precision",
    [(5.0, 4), (50.0, 3), (500.0, 2), (5000.0, 1), (50000.0, 0)],
)
def test_motion_precision(rate, precision):
    assert motion_precision(rate) == precision


def test_format_motion():
    assert format_motion(1.23456, 45.0) == "  1.2346   45.0"


def test_format_motion_width():
    for rate in (0.5, 12.3, 456.7, 8765.4, 12345.6):
        assert len(format_motion(rate, 123.4)) == len("  ") + 6 + 1 + 6


def test_format_separate_motions():
    assert format_separate_motions(1.5, -2.25, 3) == "   +1.500  -2.250"


def test_header_geocentric_vs_topocentric():
    geo = build_header(True, False, 1, False, False)
    topo = build_header(False, False, 1, False, False)
    assert geo.startswith("Date (UTC)")
    assert "Azim" not in geo and "Azim" in topo
    assert geo.endswith("PA\n")


def test_header_minute_units_and_separate():
    header = build_header(False, True, 60, False, False)
    assert '"/sec' not in header
    assert header.count('"/min') == 2
    assert "RA" in header.split("PA", 1)[1]


def test_header_magnitude_and_vectors():
    assert build_header(True, False, 1, True, False).endswith("Mag\n")
    vectors = build_header(False, True, 60, True, True)
    assert "vx" in vectors and "Mag" not in vectors


def test_parse_args_defaults_and_values():
    opts = parse_args(["-c", "T05", "-n", "5", "-s", "10m", "-o", "1998-067A"])
    assert isinstance(opts, EphemOptions)
    assert opts.mpc_code == "T05"
    assert opts.n_steps == 5
    assert opts.step_size == pytest.approx(10 / 1440.0)
    assert opts.desigs == ["98067A"]
    assert opts.round_to_nearest_step is True


def test_parse_args_attached_and_flags():
    opts = parse_args(["-c500", "-u", "-v2", "-r", "-S", "-V", "-m", "-o25544"])
    assert opts.mpc_code == "500"
    assert opts.motion_units == 60
    assert opts.verbose == 3
    assert opts.round_to_nearest_step is False
    assert opts.show_separate_motions and opts.output_state_vectors and opts.output_mjd
    assert opts.desigs == ["25544"]


def test_parse_args_defaults():
    opts = parse_args(["-o", "25544"])
    assert opts.n_steps == 20
    assert opts.step_size == pytest.approx(1 / 24.0)
    assert opts.start_time is None


def test_parse_args_unknown_option():
    with pytest.raises(ValueError):
        parse_args(["-q"])


def test_parse_args_empty():
    with pytest.raises(ValueError):
        parse_args([])


def test_rounded_start_consistent_with_parsed_step():
    opts = parse_args(["-s", "2h"])
    start = round_to_step(2460100.37, opts.step_size)
    assert math.isclose((start - 0.5) * 12, round((start - 0.5) * 12), abs_tol=1e-4)