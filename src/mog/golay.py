"""Extended binary Golay code on the MOG grid.

Vectors are 24-bit ints (bit p = point p, see ``mog.points``). A vector is a
codeword iff every column has the parity of the top row and the column
scores form a hexacode word. The code is self-dual, so the generator rows
double as parity-check rows.

Decoding never enumerates the 4096 codewords. For each of the 64 hexacode
words and both parities there are exactly two admissible patterns per column
(a pattern and its complement); the nearest codeword for that choice takes the
closer pattern in every column and, if the top-row parity comes out wrong,
swaps the column where the two candidates are closest in cost.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, List, Sequence, Tuple

import numpy as np

from . import gf4
from .errors import InvalidPattern
from .gf2 import bitrows_to_matrix, gf2_rref, span_codewords
from .hexacode import (
    HEXACODE_WORDS,
    HexacodeWord,
    column_patterns,
    hexacode_word,
    interpret_columns,
)
from .points import (
    COLUMN_FULL,
    N_COLS,
    N_POINTS,
    bit_indices,
    check_vector,
    column_mask,
    column_patterns_of,
    vector_from_columns,
)

DIMENSION = 12
MIN_DISTANCE = 8
CORRECTION_RADIUS = 3


def codeword_from_hexacode(word: Sequence[int], parity: int) -> int:
    """A codeword whose columns read as word with the given parity."""
    patterns = [column_patterns(s, parity)[0] for s in word]
    top = 0
    for p in patterns:
        top ^= p & 1
    if top != parity:
        patterns[0] ^= COLUMN_FULL
    return vector_from_columns(patterns)


def _build_generator_rows() -> Tuple[int, ...]:
    rows: List[int] = []
    # Even words with a zero hexacode word: pairs of full columns.
    for col in range(1, N_COLS):
        rows.append(column_mask(0) | column_mask(col))
    rows.append(codeword_from_hexacode((0,) * N_COLS, 1))
    for a, b, c in ((1, 0, 0), (0, 1, 0), (0, 0, 1)):
        for scalar in (gf4.ONE, gf4.OMEGA):
            word = hexacode_word(gf4.mul(scalar, a), gf4.mul(scalar, b), gf4.mul(scalar, c))
            rows.append(codeword_from_hexacode(word, 0))
    return tuple(rows)


GENERATOR_ROWS: Tuple[int, ...] = _build_generator_rows()
PARITY_CHECK_ROWS: Tuple[int, ...] = GENERATOR_ROWS

_reduced, _pivots = gf2_rref(GENERATOR_ROWS, N_POINTS)
REDUCED_ROWS: Tuple[int, ...] = tuple(_reduced)
INFORMATION_SET: Tuple[int, ...] = tuple(_pivots)
del _reduced, _pivots


@dataclass(frozen=True)
class DecodeResult:
    """Nearest codeword to a received vector.

    Attributes:
        codeword: the decoded codeword
        corrected: points flipped to reach it
        distance: number of flipped points
        hexacode_word: column scores of the codeword
        parity: common column parity of the codeword
    """

    codeword: int
    corrected: FrozenSet[int]
    distance: int
    hexacode_word: HexacodeWord
    parity: int

    @property
    def error(self) -> int:
        bits = 0
        for p in self.corrected:
            bits |= 1 << p
        return bits

    @property
    def unique(self) -> bool:
        """True when the distance is within the guaranteed correction radius."""
        return self.distance <= CORRECTION_RADIUS


def syndrome(v: int) -> int:
    """12-bit syndrome of v against the parity-check rows."""
    v = check_vector(v)
    s = 0
    for i, row in enumerate(PARITY_CHECK_ROWS):
        s |= ((v & row).bit_count() & 1) << i
    return s


def is_codeword(v: int) -> bool:
    return syndrome(v) == 0


def satisfies_mog_rule(v: int) -> bool:
    """Check the column/hexacode membership rule directly."""
    v = check_vector(v)
    reading = interpret_columns(column_patterns_of(v))
    if reading is None:
        return False
    _, parity = reading
    return (v & ((1 << N_COLS) - 1)).bit_count() % 2 == parity


def encode(data: int) -> int:
    """Systematic encoding: bit i of data lands on point INFORMATION_SET[i]."""
    d = int(data)
    if d < 0 or d >= 1 << DIMENSION:
        raise InvalidPattern(f"Data must be a {DIMENSION}-bit value, got {data!r}.")
    word = 0
    for i in range(DIMENSION):
        if (d >> i) & 1:
            word ^= REDUCED_ROWS[i]
    return word


def extract_data(codeword: int) -> int:
    """Inverse of encode on codewords."""
    if not is_codeword(codeword):
        raise InvalidPattern(f"{codeword:#08x} is not a Golay codeword.")
    data = 0
    for i, p in enumerate(INFORMATION_SET):
        if (codeword >> p) & 1:
            data |= 1 << i
    return data


def _fit(columns: Sequence[int], word: HexacodeWord, parity: int) -> Tuple[int, List[int]]:
    chosen: List[int] = []
    cost = 0
    top = 0
    swap_col = 0
    swap_gap = 5
    for col, pattern in enumerate(columns):
        low, high = column_patterns(word[col], parity)
        d_low = (pattern ^ low).bit_count()
        d_high = 4 - d_low
        if d_low <= d_high:
            pick = low
            cost += d_low
        else:
            pick = high
            cost += d_high
        gap = abs(d_high - d_low)
        if gap < swap_gap:
            swap_gap = gap
            swap_col = col
        top ^= pick & 1
        chosen.append(pick)
    if top != parity:
        chosen[swap_col] ^= COLUMN_FULL
        cost += swap_gap
    return cost, chosen


def _nearest(columns: Sequence[int]) -> Tuple[int, List[int], HexacodeWord, int]:
    best = None
    for word in HEXACODE_WORDS:
        for parity in (0, 1):
            cost, chosen = _fit(columns, word, parity)
            if best is None or cost < best[0]:
                best = (cost, chosen, word, parity)
                if cost == 0:
                    return best
    assert best is not None
    return best


def decode(received: int) -> DecodeResult:
    """Decode received to a nearest codeword.

    Any error of weight <= 3 is corrected exactly. At distance 4 there are six
    nearest codewords and the first one found is returned.
    """
    received = check_vector(received)
    cost, chosen, word, parity = _nearest(column_patterns_of(received))
    codeword = vector_from_columns(chosen)
    corrected = frozenset(bit_indices(received ^ codeword))
    assert len(corrected) == cost
    return DecodeResult(
        codeword=codeword,
        corrected=corrected,
        distance=cost,
        hexacode_word=word,
        parity=parity,
    )


def generator_rows() -> List[int]:
    return list(GENERATOR_ROWS)


def parity_check_rows() -> List[int]:
    return list(PARITY_CHECK_ROWS)


def information_set() -> Tuple[int, ...]:
    return INFORMATION_SET


def generator_matrix(systematic: bool = False) -> np.ndarray:
    """12x24 uint8 generator matrix (reduced row echelon form if systematic)."""
    rows = REDUCED_ROWS if systematic else GENERATOR_ROWS
    return bitrows_to_matrix(rows, N_POINTS)


def parity_check_matrix() -> np.ndarray:
    return bitrows_to_matrix(PARITY_CHECK_ROWS, N_POINTS)


@lru_cache(maxsize=1)
def codewords() -> Tuple[int, ...]:
    """All 4096 codewords, sorted."""
    return tuple(span_codewords(GENERATOR_ROWS))


def weight_distribution() -> Dict[int, int]:
    counts = Counter(w.bit_count() for w in codewords())
    return dict(sorted(counts.items()))


__all__ = [
    "DIMENSION",
    "MIN_DISTANCE",
    "CORRECTION_RADIUS",
    "GENERATOR_ROWS",
    "PARITY_CHECK_ROWS",
    "REDUCED_ROWS",
    "INFORMATION_SET",
    "DecodeResult",
    "codeword_from_hexacode",
    "syndrome",
    "is_codeword",
    "satisfies_mog_rule",
    "encode",
    "extract_data",
    "decode",
    "generator_rows",
    "parity_check_rows",
    "information_set",
    "generator_matrix",
    "parity_check_matrix",
    "codewords",
    "weight_distribution",
]
