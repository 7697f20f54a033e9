"""Octad and sextet completion for S(5,8,24) on the MOG grid."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Tuple, Union

from .errors import AmbiguousInput, NoCompletion
from .golay import CORRECTION_RADIUS, codewords, decode, is_codeword
from .points import N_POINTS, check_vector, points_of, vector_from_points

MIN_COMPLETION_POINTS = 5
OCTAD_SIZE = 8
TETRAD_SIZE = 4

PointSet = Union[int, Iterable[int]]


def _to_vector(points: PointSet) -> int:
    if isinstance(points, int):
        return check_vector(points)
    return vector_from_points(points)


def is_octad(v: int) -> bool:
    return check_vector(v).bit_count() == OCTAD_SIZE and is_codeword(v)


def complete_octad(points: PointSet) -> int:
    """Return the unique octad containing the given points.

    Accepts an iterable of points or a 24-bit vector. Five points always
    determine an octad; six or seven do when they lie in one. Eight points are
    returned unchanged when they already form an octad.
    """
    v = _to_vector(points)
    k = v.bit_count()
    if k < MIN_COMPLETION_POINTS:
        raise AmbiguousInput(
            f"{k} points do not determine an octad; need at least {MIN_COMPLETION_POINTS}."
        )
    if k >= OCTAD_SIZE:
        if k == OCTAD_SIZE and is_codeword(v):
            return v
        raise NoCompletion(f"Points {points_of(v)} do not form an octad.")
    # An octad through the points is within distance 3, so it is the decoded word.
    octad = decode(v).codeword
    if octad.bit_count() != OCTAD_SIZE or (octad & v) != v:
        raise NoCompletion(f"No octad contains the points {points_of(v)}.")
    return octad


def complete_sextet(points: PointSet) -> Tuple[int, ...]:
    """Return the six tetrads of the sextet determined by four points.

    The given tetrad comes first; the others follow in order of their lowest
    point.
    """
    v = _to_vector(points)
    k = v.bit_count()
    if k < TETRAD_SIZE:
        raise AmbiguousInput(f"{k} points do not determine a sextet; need exactly 4.")
    if k > TETRAD_SIZE:
        raise NoCompletion(f"A sextet is determined by 4 points, got {k}.")
    tetrads = [v]
    covered = v
    for p in range(N_POINTS):
        if (covered >> p) & 1:
            continue
        tetrad = complete_octad(v | (1 << p)) & ~v
        tetrads.append(tetrad)
        covered |= tetrad
    assert len(tetrads) == 6
    return tuple(tetrads)


@dataclass(frozen=True)
class NearestCodewords:
    """All codewords at minimum distance from a vector."""

    codewords: Tuple[int, ...]
    distance: int

    @property
    def unique(self) -> bool:
        return len(self.codewords) == 1


def nearest_codewords(v: int) -> NearestCodewords:
    """One codeword within distance 3, otherwise the six at distance 4."""
    v = check_vector(v)
    result = decode(v)
    if result.distance <= CORRECTION_RADIUS:
        return NearestCodewords(codewords=(result.codeword,), distance=result.distance)
    # Weight-4 errors to the nearest codewords are the tetrads of one sextet.
    sextet = complete_sextet(result.error)
    return NearestCodewords(
        codewords=tuple(sorted(v ^ tetrad for tetrad in sextet)),
        distance=result.distance,
    )


@lru_cache(maxsize=1)
def octads() -> Tuple[int, ...]:
    """All 759 octads, sorted."""
    return tuple(w for w in codewords() if w.bit_count() == OCTAD_SIZE)


__all__ = [
    "MIN_COMPLETION_POINTS",
    "OCTAD_SIZE",
    "NearestCodewords",
    "is_octad",
    "complete_octad",
    "complete_sextet",
    "nearest_codewords",
    "octads",
]
