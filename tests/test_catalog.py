import numpy as np
import pytest

from swarmshow.formations.base import GeneratorKind, segment_ranges
from swarmshow.formations.catalog import (CATEGORIES, formation_ids, generate_targets, get_formation,
                                          is_stochastic)

ALL_IDS = formation_ids()
DETERMINISTIC_IDS = [fid for fid in ALL_IDS if not is_stochastic(fid)]
STOCHASTIC_IDS = [fid for fid in ALL_IDS if is_stochastic(fid)]


def test_catalog_is_large_and_categorized():
    assert len(ALL_IDS) >= 40
    assert len(set(ALL_IDS)) == len(ALL_IDS)
    for fid in ALL_IDS:
        assert get_formation(fid).category in CATEGORIES
    for cat in CATEGORIES:
        assert formation_ids(cat), cat


def test_expected_stochastic_set():
    assert set(STOCHASTIC_IDS) == {"random", "galaxy", "fireworks", "cloud", "tree"}


@pytest.mark.parametrize("formation_id", ALL_IDS)
@pytest.mark.parametrize("n", [1, 2, 3, 7, 150])
def test_length_matches_swarm_size(formation_id, n):
    targets = generate_targets(formation_id, n, 8.0, (1.0, 2.0, 3.0), rng=np.random.default_rng(0))
    assert targets.shape == (n, 3)
    assert np.isfinite(targets).all()


@pytest.mark.parametrize("formation_id", DETERMINISTIC_IDS)
def test_deterministic_generators_are_pure(formation_id):
    a = generate_targets(formation_id, 60, 5.0, (0.5, -1.0, 2.0))
    b = generate_targets(formation_id, 60, 5.0, (0.5, -1.0, 2.0))
    assert np.array_equal(a, b)


@pytest.mark.parametrize("formation_id", DETERMINISTIC_IDS)
def test_translation_commutes(formation_id):
    anchor = np.array([20.0, -3.0, 4.5])
    moved = generate_targets(formation_id, 40, 3.0, anchor)
    origin = generate_targets(formation_id, 40, 3.0, (0.0, 0.0, 0.0))
    np.testing.assert_allclose(moved, origin + anchor)


@pytest.mark.parametrize("formation_id", DETERMINISTIC_IDS)
def test_scale_is_linear_and_zero_collapses(formation_id):
    one = generate_targets(formation_id, 30, 1.0, (0.0, 0.0, 0.0))
    three = generate_targets(formation_id, 30, 3.0, (0.0, 0.0, 0.0))
    np.testing.assert_allclose(three, 3.0 * one, atol=1e-12)
    collapsed = generate_targets(formation_id, 30, 0.0, (1.0, 2.0, 3.0))
    np.testing.assert_allclose(collapsed, np.tile([1.0, 2.0, 3.0], (30, 1)))


@pytest.mark.parametrize("formation_id", STOCHASTIC_IDS)
def test_stochastic_generators_follow_the_seed(formation_id):
    a = generate_targets(formation_id, 50, 4.0, (0.0, 0.0, 0.0), rng=np.random.default_rng(11))
    b = generate_targets(formation_id, 50, 4.0, (0.0, 0.0, 0.0), rng=np.random.default_rng(11))
    c = generate_targets(formation_id, 50, 4.0, (0.0, 0.0, 0.0), rng=np.random.default_rng(12))
    assert np.array_equal(a, b)
    assert not np.array_equal(a, c)


def test_random_stays_within_scaled_cube():
    targets = generate_targets("random", 500, 4.0, (10.0, 0.0, 0.0), rng=np.random.default_rng(1))
    assert (np.abs(targets - [10.0, 0.0, 0.0]) <= 4.0).all()


@pytest.mark.parametrize("n", [0, -1, -50])
def test_empty_swarm_yields_no_targets(n):
    targets = generate_targets("circle", n, 8.0, (0.0, 0.0, 0.0))
    assert targets.shape == (0, 3)


def test_unknown_formation_yields_no_targets():
    assert generate_targets("dodecahedron", 10, 8.0, (0.0, 0.0, 0.0)).shape == (0, 3)


def test_segment_ranges_are_half_open_and_cover_everything():
    uppers = [0.35, 0.55, 0.70, 0.85, 1.0]
    assert segment_ranges(100, uppers) == [(0, 35), (35, 55), (55, 70), (70, 85), (85, 100)]
    assert segment_ranges(10, uppers) == [(0, 4), (4, 6), (6, 7), (7, 9), (9, 10)]
    for n in range(1, 40):
        ranges = segment_ranges(n, uppers)
        assert ranges[0][0] == 0
        assert ranges[-1][1] == n
        for (_, stop), (start, _) in zip(ranges, ranges[1:]):
            assert stop == start


def test_segment_ranges_last_part_absorbs_rounding():
    assert segment_ranges(10000, [0.5, 0.9999]) == [(0, 5000), (5000, 10000)]


def test_kinds_are_tagged():
    assert get_formation("circle").kind is GeneratorKind.CLOSED_FORM
    assert get_formation("airplane").kind is GeneratorKind.SEGMENTED
    assert get_formation("random").kind is GeneratorKind.STOCHASTIC
