"""Named generators of M24 acting on the 24 MOG points.

g1  couple cycle: columns (0,1) -> (4,5), (2,3) -> (0,1), (4,5) -> (2,3)
g2  multiply every row label by w (rows 1 -> w -> wbar -> 1)
g3  add the hexacode word (0, 0, 1, 1, 1, 1) to the row labels
g4  octad-stabiliser element inducing v -> v + v_1 e_0 on the 16 points
    outside the first brick
g5  octad-stabiliser element inducing the cyclic shift of coordinates on
    those 16 points
g6  conjugate the row labels (w <-> wbar) and swap columns 4 and 5

The 16 points outside the first brick (columns 0-1) carry affine coordinates
v = (col - 2) << 2 | row, under which the codewords avoiding the brick are
the affine hyperplanes. Every affine map of these 16 points extends uniquely
to an element of the octad stabiliser 2^4:A8; g3, g4 and g5 generate that
stabiliser and g1 moves the brick, so g1, g3, g4, g5 already generate M24.
"""

from __future__ import annotations

import random
from functools import lru_cache
from typing import Callable, Dict, List, Sequence, Tuple

from . import gf4
from .errors import UnknownGenerator
from .golay import GENERATOR_ROWS, codewords, is_codeword
from .grid import GridState
from .group import PermutationGroup
from .permutation import Permutation, compose, identity, invert
from .points import (
    ALL_POINTS,
    N_POINTS,
    bit_indices,
    column_mask,
    permute_bits,
    point_index,
    point_position,
)

M24_ORDER = 244_823_040

BRICK = column_mask(0) | column_mask(1)
OUTSIDE = ALL_POINTS & ~BRICK

GENERATOR_ORDERS: Dict[str, int] = {
    "g1": 3,
    "g2": 3,
    "g3": 2,
    "g4": 2,
    "g5": 4,
    "g6": 2,
}

GENERATOR_DESCRIPTIONS: Dict[str, str] = {
    "g1": "cycle the three couples of columns",
    "g2": "multiply row labels by w",
    "g3": "translate rows by the hexacode word (0,0,1,1,1,1)",
    "g4": "transvection on the 16 points outside the first brick",
    "g5": "coordinate shift on the 16 points outside the first brick",
    "g6": "conjugate row labels and swap columns 4 and 5",
}


def _from_grid_map(fn: Callable[[int, int], Tuple[int, int]]) -> Permutation:
    """Permutation sending (row, col) to fn(row, col)."""
    return Permutation.from_function(lambda p: point_index(*fn(*point_position(p))))


def _outside_vector(p: int) -> int:
    row, col = point_position(p)
    return ((col - 2) << 2) | row


def _outside_point(v: int) -> int:
    return point_index(v & 3, (v >> 2) + 2)


def is_automorphism(perm: Permutation) -> bool:
    """True when perm maps the Golay code onto itself."""
    if perm.degree != N_POINTS:
        return False
    return all(is_codeword(perm.apply_vector(row)) for row in GENERATOR_ROWS)


def extend_from_outside(affine_map: Callable[[int], int]) -> Permutation:
    """Extend an affine map of the 16 outside points to an automorphism.

    The action on the brick is recovered from pairs: a codeword meeting the
    brick in a pair must go to the codeword, among the two agreeing with its
    image outside the brick, that meets the brick in a pair.
    """
    images: List[int] = [-1] * N_POINTS
    for p in bit_indices(OUTSIDE):
        images[p] = _outside_point(affine_map(_outside_vector(p)))

    by_outside: Dict[int, int] = {}
    for w in codewords():
        by_outside.setdefault(w & OUTSIDE, w)

    pair_images: Dict[int, int] = {}
    for w in codewords():
        inner = w & BRICK
        if inner.bit_count() != 2 or inner in pair_images:
            continue
        target = by_outside.get(permute_bits(w & OUTSIDE, images))
        if target is None:
            raise RuntimeError("Map of the outside points does not preserve the code.")
        target_inner = target & BRICK
        if target_inner.bit_count() != 2:
            target_inner ^= BRICK
        pair_images[inner] = target_inner

    for p in bit_indices(BRICK):
        candidates = BRICK
        for pair, image in pair_images.items():
            if (pair >> p) & 1:
                candidates &= image
        if candidates.bit_count() != 1:
            raise RuntimeError(f"Could not determine the image of brick point {p}.")
        images[p] = candidates.bit_length() - 1

    perm = Permutation(tuple(images))
    if not is_automorphism(perm):
        raise RuntimeError("Extended permutation is not a Golay code automorphism.")
    return perm


def _transvection(v: int) -> int:
    return v ^ ((v >> 1) & 1)


def _rotate(v: int) -> int:
    return ((v << 1) | (v >> 3)) & 0b1111


_TRANSLATION_WORD = (0, 0, 1, 1, 1, 1)
_SWAP_45 = {4: 5, 5: 4}


@lru_cache(maxsize=1)
def _generators() -> Dict[str, Permutation]:
    gens = {
        "g1": _from_grid_map(lambda row, col: (row, (col - 2) % 6)),
        "g2": _from_grid_map(lambda row, col: (gf4.mul(gf4.OMEGA, row), col)),
        "g3": _from_grid_map(lambda row, col: (row ^ _TRANSLATION_WORD[col], col)),
        "g4": extend_from_outside(_transvection),
        "g5": extend_from_outside(_rotate),
        "g6": _from_grid_map(lambda row, col: (gf4.conjugate(row), _SWAP_45.get(col, col))),
    }
    for name, perm in gens.items():
        if not is_automorphism(perm):
            raise RuntimeError(f"Generator {name} is not a Golay code automorphism.")
    return gens


def generator_names() -> List[str]:
    return list(GENERATOR_ORDERS)


def generator(name: str) -> Permutation:
    try:
        return _generators()[name]
    except KeyError:
        known = ", ".join(generator_names())
        raise UnknownGenerator(f"Unknown generator '{name}'; expected one of {known}.") from None


def generator_order(name: str) -> int:
    generator(name)
    return GENERATOR_ORDERS[name]


def _parse_letter(token: str) -> Permutation:
    raw = token.strip()
    for suffix in ("^-1", "'"):
        if raw.endswith(suffix):
            return generator(raw[: -len(suffix)]).inverse()
    return generator(raw)


def word(names: Sequence[str]) -> Permutation:
    """Product of named generators, applied left to right.

    A trailing ``^-1`` or ``'`` on a name stands for the inverse.
    """
    value = identity()
    for token in names:
        value = compose(value, _parse_letter(token))
    return value


def random_word(length: int, rng: random.Random) -> Tuple[List[str], Permutation]:
    names = generator_names()
    letters: List[str] = []
    for _ in range(length):
        name = rng.choice(names)
        letters.append(name if rng.random() < 0.5 else name + "^-1")
    return letters, word(letters)


def apply(perm: Permutation, state: GridState) -> GridState:
    """Relabel every cell of state by perm."""
    return state.permuted(perm.images)


def apply_to_vector(perm: Permutation, v: int) -> int:
    return perm.apply_vector(v)


@lru_cache(maxsize=1)
def m24_group() -> PermutationGroup:
    gens = _generators()
    return PermutationGroup([gens[name] for name in generator_names()], name="M24")


__all__ = [
    "M24_ORDER",
    "BRICK",
    "OUTSIDE",
    "GENERATOR_ORDERS",
    "GENERATOR_DESCRIPTIONS",
    "is_automorphism",
    "extend_from_outside",
    "generator_names",
    "generator",
    "generator_order",
    "word",
    "random_word",
    "apply",
    "apply_to_vector",
    "compose",
    "invert",
    "identity",
    "m24_group",
]
