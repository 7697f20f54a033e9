import random

import pytest

from mog.group import PermutationGroup, StabilizerChain
from mog.permutation import Permutation


def _sym(n: int) -> PermutationGroup:
    gens = [
        Permutation.from_cycles([(0, 1)], degree=n),
        Permutation.from_cycles([tuple(range(n))], degree=n),
    ]
    return PermutationGroup(gens, name=f"S{n}")


def test_symmetric_group_orders() -> None:
    assert _sym(3).order == 6
    assert _sym(4).order == 24
    assert _sym(6).order == 720


def test_alternating_group_order() -> None:
    gens = [
        Permutation.from_cycles([(0, 1, 2)], degree=5),
        Permutation.from_cycles([(0, 1, 2, 3, 4)], degree=5),
    ]
    group = PermutationGroup(gens, name="A5")
    assert group.order == 60
    assert Permutation.from_cycles([(0, 1), (2, 3)], degree=5) in group
    assert Permutation.from_cycles([(0, 1)], degree=5) not in group


def test_cyclic_group_ops() -> None:
    c4 = Permutation.from_cycles([(0, 1, 2, 3)], degree=4)
    group = PermutationGroup([c4], name="C4")
    assert group.order == 4
    assert group.id().is_identity
    assert group.mul(c4, group.inv(c4)) == group.id()
    assert group.repr(c4) == "(0,1,2,3)"
    assert group.orbit(0) == [0, 1, 2, 3]
    assert group.chain.base() == [3]


def test_trivial_group_needs_degree() -> None:
    with pytest.raises(ValueError):
        PermutationGroup([])
    assert PermutationGroup([], degree=5).order == 1


def test_random_elements_and_words_are_members() -> None:
    group = _sym(5)
    rng = random.Random(8)
    for _ in range(20):
        assert group.contains(group.random_element(rng))
        word, value = group.random_word(6, rng)
        assert len(word) == 6
        expected = group.id()
        for idx, exp in word:
            expected = expected * (group.generators[idx] ** exp)
        assert value == expected


def test_stabilizer_chain_transversals() -> None:
    chain = StabilizerChain(3)
    chain.add((1, 2, 0))
    chain.add((1, 0, 2))
    assert chain.order() == 6
    assert chain.contains((2, 1, 0))


def test_find_element_respects_constraints() -> None:
    group = _sym(4)
    found = group.find_element(lambda p, image: image == (p + 1) % 4)
    assert found == Permutation.from_cycles([(0, 1, 2, 3)], degree=4)
    c4 = PermutationGroup([Permutation.from_cycles([(0, 1, 2, 3)], degree=4)])
    swaps = {0: 1, 1: 0}
    assert c4.find_element(lambda p, image: image == swaps.get(p, image)) is None
