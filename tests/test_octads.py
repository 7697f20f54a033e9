import itertools
import os
import random

import pytest

from mog.errors import AmbiguousInput, CompletionError, InvalidPattern, NoCompletion
from mog.golay import is_codeword
from mog.octads import (
    complete_octad,
    complete_sextet,
    is_octad,
    nearest_codewords,
    octads,
)
from mog.points import N_POINTS, points_of, vector_from_points


def test_octad_count_and_steiner_property() -> None:
    all_octads = octads()
    assert len(all_octads) == 759
    rng = random.Random(5)
    for _ in range(50):
        five = vector_from_points(rng.sample(range(N_POINTS), 5))
        assert sum(1 for o in all_octads if o & five == five) == 1


def test_complete_octad_top_row() -> None:
    octad = complete_octad([0, 1, 2, 3, 4])
    assert points_of(octad) == [0, 1, 2, 3, 4, 11, 17, 23]
    assert is_octad(octad)


def test_complete_octad_accepts_bitsets() -> None:
    v = vector_from_points([0, 1, 2, 3, 4])
    assert complete_octad(v) == complete_octad([4, 3, 2, 1, 0])


def test_complete_octad_sampled_five_point_sets() -> None:
    rng = random.Random(6)
    for _ in range(300):
        five = vector_from_points(rng.sample(range(N_POINTS), 5))
        octad = complete_octad(five)
        assert is_octad(octad)
        assert octad & five == five


def test_complete_octad_six_and_seven_points() -> None:
    octad = complete_octad([0, 1, 2, 3, 4])
    pts = points_of(octad)
    assert complete_octad(pts[:6]) == octad
    assert complete_octad(pts[1:8]) == octad
    assert complete_octad(octad) == octad


def test_complete_octad_six_points_off_any_octad() -> None:
    # {0..4} lies only in the octad {0,1,2,3,4,11,17,23}.
    with pytest.raises(NoCompletion):
        complete_octad([0, 1, 2, 3, 4, 5])


def test_complete_octad_errors() -> None:
    with pytest.raises(AmbiguousInput):
        complete_octad([0, 1, 2, 3])
    with pytest.raises(AmbiguousInput):
        complete_octad([])
    with pytest.raises(NoCompletion):
        complete_octad([0, 1, 2, 3, 4, 5, 6, 7])
    with pytest.raises(NoCompletion):
        complete_octad(range(9))
    with pytest.raises(InvalidPattern):
        complete_octad([0, 1, 2, 3, 24])
    # Both failures share a base class.
    with pytest.raises(CompletionError):
        complete_octad([0])


def test_complete_octad_all_five_point_sets() -> None:
    if os.environ.get("MOG_RUN_SLOW_TESTS") != "1":
        pytest.skip("Set MOG_RUN_SLOW_TESTS=1 to check all 42504 five-point sets.")
    seen = set()
    for five in itertools.combinations(range(N_POINTS), 5):
        v = vector_from_points(five)
        octad = complete_octad(v)
        assert is_octad(octad)
        assert octad & v == v
        seen.add(octad)
    assert len(seen) == 759


def test_complete_sextet_partitions_points() -> None:
    rng = random.Random(7)
    for _ in range(30):
        tetrad = vector_from_points(rng.sample(range(N_POINTS), 4))
        tetrads = complete_sextet(tetrad)
        assert len(tetrads) == 6
        assert tetrads[0] == tetrad
        union = 0
        for t in tetrads:
            assert t.bit_count() == 4
            assert union & t == 0
            union |= t
        assert union == (1 << N_POINTS) - 1
        for a, b in itertools.combinations(tetrads, 2):
            assert is_octad(a | b)
        lowest = [(t & -t).bit_length() for t in tetrads[1:]]
        assert lowest == sorted(lowest)


def test_complete_sextet_errors() -> None:
    with pytest.raises(AmbiguousInput):
        complete_sextet([0, 1, 2])
    with pytest.raises(NoCompletion):
        complete_sextet([0, 1, 2, 3, 4])


def test_nearest_codewords_unique_within_radius() -> None:
    octad = complete_octad([0, 1, 2, 3, 4])
    received = octad ^ vector_from_points([5, 6])
    result = nearest_codewords(received)
    assert result.unique
    assert result.codewords == (octad,)
    assert result.distance == 2


def test_nearest_codewords_at_distance_four() -> None:
    v = vector_from_points([0, 1, 2, 3])
    result = nearest_codewords(v)
    assert result.distance == 4
    assert not result.unique
    assert len(result.codewords) == 6
    assert result.codewords[0] == 0
    for c in result.codewords:
        assert is_codeword(c)
        assert (c ^ v).bit_count() == 4
    for c in result.codewords[1:]:
        assert is_octad(c)
        assert c & v == v
