import random

import pytest

from mog.errors import UnknownGenerator
from mog.golay import codewords, encode, is_codeword
from mog.grid import GridState
from mog.m24 import (
    BRICK,
    GENERATOR_ORDERS,
    M24_ORDER,
    apply,
    apply_to_vector,
    extend_from_outside,
    generator,
    generator_names,
    generator_order,
    is_automorphism,
    m24_group,
    random_word,
    word,
)
from mog.octads import is_octad
from mog.permutation import Permutation


def test_generator_names_and_orders() -> None:
    assert generator_names() == ["g1", "g2", "g3", "g4", "g5", "g6"]
    for name in generator_names():
        perm = generator(name)
        assert perm.order == GENERATOR_ORDERS[name] == generator_order(name)
        assert is_automorphism(perm)


def test_generators_map_octads_to_octads() -> None:
    rng = random.Random(9)
    sample = rng.sample([c for c in codewords() if c.bit_count() == 8], 40)
    for name in generator_names():
        perm = generator(name)
        for octad in sample:
            assert is_octad(perm.apply_vector(octad))


def test_unknown_generator() -> None:
    with pytest.raises(UnknownGenerator):
        generator("g7")
    with pytest.raises(UnknownGenerator):
        word(["g1", "h"])


def test_brick_stabiliser_generators_fix_the_brick() -> None:
    for name in ("g3", "g4", "g5"):
        assert apply_to_vector(generator(name), BRICK) == BRICK
    assert apply_to_vector(generator("g1"), BRICK) != BRICK


def test_extend_from_outside_translation_is_g3() -> None:
    assert extend_from_outside(lambda v: v ^ 1) == generator("g3")
    assert extend_from_outside(lambda v: v).is_identity


def test_non_automorphism_is_rejected() -> None:
    swap = Permutation.from_cycles([(0, 1)])
    assert not is_automorphism(swap)
    assert not is_automorphism(Permutation.identity(3))


def test_word_products_and_inverses() -> None:
    assert word([]).is_identity
    assert word(["g1", "g1^-1"]).is_identity
    assert word(["g5'"]) == generator("g5").inverse()
    assert word(["g1", "g2"]) == generator("g1") * generator("g2")


def test_random_words_preserve_the_code() -> None:
    rng = random.Random(10)
    for _ in range(50):
        letters, perm = random_word(rng.randint(1, 10), rng)
        assert perm == word(letters)
        for _ in range(5):
            c = encode(rng.getrandbits(12))
            assert is_codeword(perm.apply_vector(c))


def test_apply_generator_order_times_restores_state() -> None:
    state = GridState.from_points([0, 1, 2, 3, 4]).with_highlights(errors=1 << 9)
    for name in generator_names():
        perm = generator(name)
        moved = state
        for _ in range(perm.order):
            moved = apply(perm, moved)
        assert moved == state


def test_group_order_is_m24() -> None:
    group = m24_group()
    assert group.order == M24_ORDER
    assert group.orbit(0) == list(range(24))
    assert word(["g1", "g4", "g5^-1"]) in group
    assert Permutation.from_cycles([(0, 1)]) not in group
