import math

import pytest

from artsat.tracklets import (
    FoundRange,
    Observation,
    Tracklet,
    already_found_desig,
    find_good_pair,
    got_obs_in_range,
    group_tracklets,
    is_in_range,
    select_fast,
)

DEG = math.pi / 180.0
HOUR = 1.0 / 24.0


def make_obs(desig, jd, ra=1.0, dec=0.0, code="568"):
    text = desig.ljust(12) + " " * 65 + code
    return Observation(text=text, jd=jd, ra=ra, dec=dec)


def test_observation_fields():
    obs = make_obs("     K23A00A", 2460000.5, code="T05")
    assert obs.object_id == "     K23A00A"
    assert obs.mpc_code == "T05"
    assert obs.has_location is False
    obs.observer_loc = (1.0, 0.0, 0.0)
    assert obs.has_location is True


def test_is_in_range():
    assert is_in_range(5.0, 0.0, 10.0)
    assert is_in_range(5.0, 100.0, 0.0)
    assert is_in_range(100.0, 100.0, 10.0)
    assert is_in_range(110.0, 100.0, 10.0)
    assert not is_in_range(99.9, 100.0, 10.0)
    assert not is_in_range(110.1, 100.0, 10.0)


def test_already_found_desig_bounds_are_strict():
    found = [FoundRange(25544, 100.0, 110.0)]
    assert already_found_desig(25544, found, 105.0)
    assert not already_found_desig(25544, found, 100.0)
    assert not already_found_desig(25544, found, 110.0)
    assert not already_found_desig(12345, found, 105.0)
    assert not already_found_desig(25544, [], 105.0)


def test_find_good_pair_single():
    assert find_good_pair([make_obs("A", 2460000.5)]) == (0, 0, 0.0)


def test_find_good_pair_one_degree_per_hour():
    obs = [
        make_obs("A", 2460000.5, dec=0.0),
        make_obs("A", 2460000.5 + HOUR, dec=DEG),
    ]
    idx1, idx2, speed = find_good_pair(obs)
    assert (idx1, idx2) == (0, 1)
    assert speed == pytest.approx(1.0)


def test_find_good_pair_prefers_one_degree_separation():
    obs = [
        make_obs("A", 2460000.5, dec=0.0),
        make_obs("A", 2460000.5 + 0.01, dec=0.1 * DEG),
        make_obs("A", 2460000.5 + 0.02, dec=1.0 * DEG),
    ]
    idx1, idx2, _ = find_good_pair(obs)
    assert (idx1, idx2) == (0, 2)


def test_find_good_pair_skips_other_codes_and_long_gaps():
    different_codes = [
        make_obs("A", 2460000.5, code="568"),
        make_obs("A", 2460000.5 + HOUR, dec=DEG, code="T05"),
    ]
    assert find_good_pair(different_codes) == (0, 0, 0.0)
    far_apart = [
        make_obs("A", 2460000.5),
        make_obs("A", 2460000.5 + 0.2, dec=DEG),
    ]
    assert find_good_pair(far_apart) == (0, 0, 0.0)


def test_find_good_pair_rejects_unsorted():
    obs = [make_obs("A", 2460000.6), make_obs("A", 2460000.5, dec=DEG)]
    with pytest.raises(ValueError):
        find_good_pair(obs)


def test_group_tracklets_groups_and_sorts():
    obs = [
        make_obs("B", 2460000.52, dec=DEG),
        make_obs("A", 2460000.51),
        make_obs("B", 2460000.50),
        make_obs("A", 2460000.50),
    ]
    tracklets = group_tracklets(obs)
    assert [t.first.object_id.strip() for t in tracklets] == ["A", "B"]
    assert all(t.n_obs == 2 for t in tracklets)
    for tracklet in tracklets:
        jds = [o.jd for o in tracklet.observations]
        assert jds == sorted(jds)
        assert tracklet.second.jd >= tracklet.first.jd


def test_group_tracklets_separate():
    obs = [make_obs("A", 2460000.5), make_obs("A", 2460000.51)]
    tracklets = group_tracklets(obs, separate=True)
    assert len(tracklets) == 2
    assert all(t.n_obs == 1 and t.speed == 0.0 for t in tracklets)


def test_select_fast():
    fast = Tracklet([make_obs("A", 1.0), make_obs("A", 1.01)], 0, 1, 0.5)
    slow = Tracklet([make_obs("B", 1.0), make_obs("B", 1.01)], 0, 1, 0.0001)
    single = Tracklet([make_obs("C", 1.0)])
    assert select_fast([fast, slow, single], 0.001, True) == [fast, single]
    assert select_fast([fast, slow, single], 0.001, False) == [fast]


def test_got_obs_in_range():
    tracklets = [Tracklet([make_obs("A", 10.0), make_obs("A", 12.0)])]
    assert got_obs_in_range(tracklets, 9.0, 11.0)
    assert not got_obs_in_range(tracklets, 10.5, 11.5)
    assert not got_obs_in_range(tracklets, 10.0, 12.0)
    assert not got_obs_in_range([], 0.0, 100.0)