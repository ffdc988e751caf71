# artsat

Helpers for working with artificial satellites as seen by an observer on the
ground: where the observer is, where a satellite appears on the sky, how fast
it appears to move, how its designations are written, and which files of a
TLE list cover a given object and time span. Plain Python, no dependencies.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `artsat.observe`: `greenwich_sidereal_time`, `observer_cartesian_coords`
  (observer position in km from longitude and parallax constants),
  `earth_lat_alt_to_parallax`, `get_satellite_ra_dec_delta` (RA, dec and
  distance of a satellite seen from an observer), and approximate precession
  with `epoch_of_date_to_j2000` and `j2000_to_epoch_of_date`.
- `artsat.geometry`: vector helpers (`dot_product`, `cross_product`,
  `vector_length`, `normalize`, `polar_to_cartesian`,
  `create_orthogonal_vects`), `angular_separation` (separation and position
  angle), `relative_motion` (difference between a computed and an observed
  motion on the sky) and `compute_aberration`.
- `artsat.designations`: sexagesimal text with `format_base_60`,
  `format_ra` and `format_dec`; international designations with
  `fix_desig`, `pack_intl_desig`, `unpack_intl`, `compare_intl_desigs` and
  `desig_match`; `remove_redundant_desig` strips a designation (and an
  adjoining ` = `) from a satellite name.
- `artsat.topocentric`: `make_orthogonal_basis`, `angle_between`,
  `compute_angular_rates` (returns an `AngularRates` with total rate,
  position angle and RA/dec components) and `azimuth_altitude`.
- `artsat.ephem_format`: `EphemOptions` and `parse_args` for ephemeris
  command-line options (unknown options raise `ValueError`),
  `parse_step_size` (suffix `h`, `m` or `s`), `round_to_step`,
  `motion_precision`, `format_motion`, `format_separate_motions` and
  `build_header`.
- `artsat.tracklets`: `Observation`, `Tracklet` and `FoundRange`;
  `group_tracklets` sorts observations and groups them by object,
  `find_good_pair` picks the pair best describing the motion,
  `select_fast` drops slow movers, and `got_obs_in_range`, `is_in_range`
  and `already_found_desig` are the range checks applied to TLEs.
- `artsat.observations`: `extract_csv_value`, `parse_ra`, `parse_dec`,
  `parse_roving_offset` (an `Offset` from a roving-observer record),
  `offset_matches_obs`, `attach_offsets`, and `StationCodes`, which looks up
  an observatory code's line with `lookup` (raising `KeyError` if absent)
  and can load `ObsCodes.html`/`ObsCodes.htm` plus `rovers.txt` with
  `StationCodes.from_files`.
- `artsat.tlefile`: `parse_date`, `parse_range_line`, `parse_ephem_range`,
  `parse_id_line`, `include_path`, and `scan_tle_list`, which returns the
  `TleListEntry` files of a TLE list whose `# Range:` and `# ID:` lines fit
  a designation and span of JDs.
- `artsat.satutil`: `trim_line`, `make_config_dir_name` and
  `local_then_config_open` (open a file locally, else from
  `$HOME/.find_orb/`).
- `artsat.outcomp`: comparison of two position listings, below.

## Example

    from math import radians
    from artsat.observe import (
        earth_lat_alt_to_parallax,
        observer_cartesian_coords,
        get_satellite_ra_dec_delta,
    )

    rho_cos_phi, rho_sin_phi = earth_lat_alt_to_parallax(radians(44.0), 100.0)
    observer = observer_cartesian_coords(2460000.5, radians(-69.9),
                                         rho_cos_phi, rho_sin_phi)
    ra, dec, delta = get_satellite_ra_dec_delta(observer, (7000.0, 0.0, 0.0))

## Comparing position listings

    artsat-out-comp first_output.txt second_output.txt

Lines are read in pairs. A pair counts when both lines hold positions (a
control character at column 74 and decimal points at columns 30, 47 and 64);
the x, y and z values starting at columns 23, 40 and 57 are compared. The
command prints how many lines were read, how many had positions, and the
largest difference in km with the line where it occurs. If either file
cannot be opened it says so and exits with status 1. The same comparison is
available as `artsat.outcomp.compare_outputs`, which returns a `Comparison`.

## What this package does not do

It does not read or propagate TLEs: there is no orbit propagator, so it
cannot compute satellite positions by itself. Positions and velocities have
to come from elsewhere. Accordingly there is no command that prints an
ephemeris or identifies which satellites match a file of observations; the
modules supply the geometry, parsing, formatting and list scanning such
tools are built from. `StationCodes.lookup` returns an observatory's raw
line and does not parse its longitude and parallax constants.