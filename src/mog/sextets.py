"""Ordered sextets, their GF(4) labellings and the permutations they induce.

A labelling of an ordered sextet gives every point a GF(4) label such that
sending a point of tetrad i with label r to the grid point (r, i) is an
automorphism of the Golay code. The standard labelling is the MOG itself:
tetrad i is column i and labels are row labels.

Two labellings of the same ordered sextet differ by an element fixing every
column, i.e. r -> s * r + h[i] on column i for a nonzero scalar s and a
hexacode word h. There are 3 * 64 of them, so a labelling is pinned down by
two distinct labels in one tetrad (fixing s) and one label in each of two
further tetrads (fixing h, since any three hexacode coordinates determine
the word).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from . import gf4
from .errors import AmbiguousInput, InvalidPattern, NoCompletion
from .hexacode import HEXACODE_WORDS
from .m24 import is_automorphism, m24_group
from .octads import PointSet, complete_sextet, is_octad
from .permutation import Permutation
from .points import (
    ALL_POINTS,
    N_COLS,
    N_POINTS,
    N_ROWS,
    check_point,
    column_mask,
    point_index,
    point_position,
    points_of,
)

N_TETRADS = 6
LABELLINGS_PER_SEXTET = 3 * len(HEXACODE_WORDS)

_ROW_IDENTITY = tuple(range(N_ROWS))


@dataclass(frozen=True)
class OrderedSextet:
    """Six tetrads in a fixed order; tetrad i is sent to column i."""

    tetrads: Tuple[int, ...]

    def __post_init__(self) -> None:
        tetrads = tuple(int(t) for t in self.tetrads)
        if len(tetrads) != N_TETRADS:
            raise InvalidPattern(f"A sextet has {N_TETRADS} tetrads, got {len(tetrads)}.")
        union = 0
        for t in tetrads:
            if t < 0 or t > ALL_POINTS or t.bit_count() != 4 or union & t:
                raise InvalidPattern(f"Tetrads must be disjoint 4-point sets: {tetrads}.")
            union |= t
        for i in range(1, N_TETRADS):
            if not is_octad(tetrads[0] | tetrads[i]):
                raise InvalidPattern("Tetrads do not form a sextet.")
        object.__setattr__(self, "tetrads", tetrads)

    @classmethod
    def standard(cls) -> "OrderedSextet":
        return cls(tuple(column_mask(col) for col in range(N_COLS)))

    @classmethod
    def from_tetrad(
        cls, points: PointSet, order: Optional[Sequence[int]] = None
    ) -> "OrderedSextet":
        """The sextet of a tetrad, in complete_sextet order unless order is given."""
        sextet = cls(complete_sextet(points))
        return sextet if order is None else sextet.reordered(order)

    def reordered(self, order: Sequence[int]) -> "OrderedSextet":
        """New position i holds the tetrad at position order[i]."""
        order = [int(i) for i in order]
        if sorted(order) != list(range(N_TETRADS)):
            raise InvalidPattern(f"Order must be a permutation of 0..5, got {order}.")
        return OrderedSextet(tuple(self.tetrads[i] for i in order))

    @property
    def columns(self) -> Tuple[int, ...]:
        """Position of the tetrad containing each point."""
        cols = [0] * N_POINTS
        for i, t in enumerate(self.tetrads):
            for p in points_of(t):
                cols[p] = i
        return tuple(cols)

    def column_of(self, point: int) -> int:
        return self.columns[check_point(point)]


def standard_sextet_permutation(
    column_images: Sequence[int],
    row_maps: Optional[Sequence[Sequence[int]]] = None,
) -> Permutation:
    """Permutation of the standard sextet moving column j to column_images[j].

    row_maps[j] gives the new row of each row of column j (identity when
    omitted). Raises InvalidPattern unless the result is an automorphism.
    """
    column_images = [int(c) for c in column_images]
    if sorted(column_images) != list(range(N_COLS)):
        raise InvalidPattern(f"Column images must permute 0..5, got {column_images}.")
    maps = [_ROW_IDENTITY] * N_COLS if row_maps is None else [tuple(m) for m in row_maps]
    if len(maps) != N_COLS:
        raise InvalidPattern(f"Expected {N_COLS} row maps, got {len(maps)}.")

    def image(p: int) -> int:
        row, col = point_position(p)
        return point_index(gf4.check_element(maps[col][row]), column_images[col])

    perm = Permutation.from_function(image)
    if not is_automorphism(perm):
        raise InvalidPattern("Column and row maps do not give a Golay code automorphism.")
    return perm


@dataclass(frozen=True)
class SextetLabelling:
    sextet: OrderedSextet
    labels: Tuple[int, ...]

    def __post_init__(self) -> None:
        labels = tuple(gf4.check_element(x) for x in self.labels)
        if len(labels) != N_POINTS:
            raise InvalidPattern(f"Expected {N_POINTS} labels, got {len(labels)}.")
        object.__setattr__(self, "labels", labels)
        if not is_automorphism(self.to_standard):
            raise InvalidPattern("Labels do not form a MOG labelling of the sextet.")

    def label(self, point: int) -> int:
        return self.labels[check_point(point)]

    @property
    def to_standard(self) -> Permutation:
        """Send each point to (its label, its tetrad's position) on the grid."""
        cols = self.sextet.columns
        return Permutation(tuple(point_index(self.labels[p], cols[p]) for p in range(N_POINTS)))

    @property
    def from_standard(self) -> Permutation:
        """Send the grid point (r, i) to the point of tetrad i labelled r."""
        return self.to_standard.inverse()

    def stabilizer_permutation(
        self,
        column_images: Sequence[int],
        row_maps: Optional[Sequence[Sequence[int]]] = None,
    ) -> Permutation:
        """Move tetrad i to tetrad column_images[i], relabelling as row_maps says."""
        standard = standard_sextet_permutation(column_images, row_maps)
        return self.to_standard * standard * self.from_standard

    def render(self) -> str:
        """Grid of 'tetrad:label' cells."""
        cols = self.sextet.columns
        lines = []
        for r in range(N_ROWS):
            cells = []
            for c in range(N_COLS):
                p = r * N_COLS + c
                cells.append(f"{cols[p]}:{gf4.symbol_name(self.labels[p]):<4}")
            lines.append(" ".join(cells).rstrip())
        return "\n".join(lines)


@lru_cache(maxsize=64)
def _base_rows(sextet: OrderedSextet) -> Tuple[int, ...]:
    """Labels of some labelling of sextet."""
    cols = sextet.columns
    perm = m24_group().find_element(lambda p, image: image % N_COLS == cols[p])
    if perm is None:
        raise RuntimeError("No automorphism sends the sextet onto the columns.")
    return tuple(image // N_COLS for image in perm.images)


def _normalize(labels: Mapping[int, int]) -> List[Tuple[int, int]]:
    return sorted((check_point(p), gf4.check_element(x)) for p, x in labels.items())


def complete_labelling(sextet: OrderedSextet, labels: Mapping[int, int]) -> SextetLabelling:
    """Extend a partial labelling {point: label} to the unique full labelling.

    Needs two distinct labels in one tetrad and labels in two other tetrads.
    Raises AmbiguousInput when the labels do not pin a labelling down and
    NoCompletion when they contradict every labelling.
    """
    cols = sextet.columns
    by_column: Dict[int, List[Tuple[int, int]]] = {}
    for p, x in _normalize(labels):
        by_column.setdefault(cols[p], []).append((p, x))

    for col, entries in by_column.items():
        used = [x for _, x in entries]
        if len(set(used)) != len(used):
            raise NoCompletion(f"Two points of tetrad {col} share a label.")
    doubled = [col for col, entries in sorted(by_column.items()) if len(entries) >= 2]
    if not doubled:
        raise AmbiguousInput("One tetrad needs two labels to fix the scale.")
    if len(by_column) < 3:
        raise AmbiguousInput(f"Labels cover {len(by_column)} tetrads; need 3.")

    base = _base_rows(sextet)
    (p, x), (q, y) = by_column[doubled[0]][:2]
    scale = gf4.mul(x ^ y, gf4.inv(base[p] ^ base[q]))
    shift = {
        col: entries[0][1] ^ gf4.mul(scale, base[entries[0][0]])
        for col, entries in by_column.items()
    }
    known = sorted(shift.items())[:3]
    word = next(w for w in HEXACODE_WORDS if all(w[col] == s for col, s in known))

    full = tuple(gf4.mul(scale, base[pt]) ^ word[cols[pt]] for pt in range(N_POINTS))
    for pt, x in _normalize(labels):
        if full[pt] != x:
            raise NoCompletion(f"Label of point {pt} contradicts the other labels.")
    return SextetLabelling(sextet=sextet, labels=full)


def labelling_from_permutation(sextet: OrderedSextet, perm: Permutation) -> SextetLabelling:
    """Read labels off an automorphism sending tetrad i onto column i."""
    cols = sextet.columns
    for p in range(N_POINTS):
        if perm(p) % N_COLS != cols[p]:
            raise InvalidPattern("Permutation does not send the tetrads onto the columns.")
    return SextetLabelling(sextet=sextet, labels=tuple(perm(p) // N_COLS for p in range(N_POINTS)))


def parse_labels(items: Iterable[str]) -> Dict[int, int]:
    """Parse 'point=label' items such as '5=w' or '7=1'."""
    labels: Dict[int, int] = {}
    for item in items:
        point, sep, label = item.partition("=")
        if not sep:
            raise InvalidPattern(f"Expected point=label, got '{item}'.")
        try:
            p = check_point(int(point))
        except ValueError as exc:
            raise InvalidPattern(f"Invalid point '{point}'.") from exc
        labels[p] = gf4.parse_symbol(label)
    return labels


__all__ = [
    "N_TETRADS",
    "LABELLINGS_PER_SEXTET",
    "OrderedSextet",
    "SextetLabelling",
    "standard_sextet_permutation",
    "complete_labelling",
    "labelling_from_permutation",
    "parse_labels",
]
