"""Hexacode table: GF(4) scores of MOG column patterns and the hexacode.

A column pattern is a 4-bit int whose bit r marks the point in row r. Its
score is the GF(4) sum of the labels of the marked rows, which with the
0..3 encoding of GF(4) is the XOR of the marked row indices.

The hexacode is the [6,3,4] code over GF(4)

    {(a, b, c, f(1), f(w), f(wbar)) : f(x) = a x^2 + b x + c}.
"""

from __future__ import annotations

from itertools import product
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from . import gf4
from .errors import InvalidPattern

HexacodeWord = Tuple[int, int, int, int, int, int]


def _check_pattern(pattern: int) -> int:
    p = int(pattern)
    if p < 0 or p > 15:
        raise InvalidPattern(f"Column pattern must be in 0..15, got {pattern!r}.")
    return p


def _score(pattern: int) -> int:
    s = 0
    for r in range(4):
        if (pattern >> r) & 1:
            s ^= r
    return s


_SCORES: Tuple[int, ...] = tuple(_score(p) for p in range(16))


def _build_pattern_table() -> Dict[Tuple[int, int], Tuple[int, int]]:
    table: Dict[Tuple[int, int], List[int]] = {}
    for p in range(16):
        key = (_SCORES[p], p.bit_count() % 2)
        table.setdefault(key, []).append(p)
    out: Dict[Tuple[int, int], Tuple[int, int]] = {}
    for key, patterns in table.items():
        low, high = sorted(patterns)
        assert high == low ^ 0b1111
        out[key] = (low, high)
    return out


# (score, parity) -> (pattern, complement); every class has exactly two members.
_PATTERNS_BY_CLASS = _build_pattern_table()


def column_score(pattern: int) -> int:
    """GF(4) score of a column pattern."""
    return _SCORES[_check_pattern(pattern)]


def column_parity(pattern: int) -> int:
    return _check_pattern(pattern).bit_count() % 2


def column_patterns(symbol: int, parity: int) -> Tuple[int, int]:
    """The two column patterns with the given score and parity."""
    s = gf4.check_element(symbol)
    if parity not in (0, 1):
        raise InvalidPattern(f"Parity must be 0 or 1, got {parity!r}.")
    return _PATTERNS_BY_CLASS[(s, parity)]


def pattern_symbols(pattern: int, max_flips: int = 0) -> FrozenSet[int]:
    """GF(4) symbols a column can read as after changing at most max_flips bits."""
    p = _check_pattern(pattern)
    if max_flips < 0:
        raise ValueError("max_flips must be nonnegative")
    return frozenset(
        _SCORES[q] for q in range(16) if (p ^ q).bit_count() <= max_flips
    )


def hexacode_word(a: int, b: int, c: int) -> HexacodeWord:
    """Evaluate f(x) = a x^2 + b x + c to build the word (a, b, c, f(1), f(w), f(wbar))."""
    a, b, c = gf4.check_element(a), gf4.check_element(b), gf4.check_element(c)
    values = []
    for x in (gf4.ONE, gf4.OMEGA, gf4.OMEGA_BAR):
        values.append(gf4.mul(a, gf4.mul(x, x)) ^ gf4.mul(b, x) ^ c)
    return (a, b, c, values[0], values[1], values[2])


HEXACODE_WORDS: Tuple[HexacodeWord, ...] = tuple(
    hexacode_word(a, b, c) for a, b, c in product(gf4.ELEMENTS, repeat=3)
)
_HEXACODE_SET: FrozenSet[HexacodeWord] = frozenset(HEXACODE_WORDS)


def is_hexacode_word(word: Sequence[int]) -> bool:
    if len(word) != 6:
        return False
    return tuple(gf4.check_element(x) for x in word) in _HEXACODE_SET


def hamming_distance(u: Sequence[int], v: Sequence[int]) -> int:
    return sum(1 for x, y in zip(u, v) if x != y)


def nearest_hexacode_words(word: Sequence[int]) -> Tuple[int, List[HexacodeWord]]:
    """Return (distance, words) for the hexacode words closest to word."""
    if len(word) != 6:
        raise InvalidPattern(f"Hexacode words have length 6, got {len(word)}.")
    target = tuple(gf4.check_element(x) for x in word)
    best = 7
    found: List[HexacodeWord] = []
    for h in HEXACODE_WORDS:
        d = hamming_distance(h, target)
        if d < best:
            best = d
            found = [h]
        elif d == best:
            found.append(h)
    return best, found


def interpret_columns(patterns: Sequence[int]) -> Optional[Tuple[HexacodeWord, int]]:
    """Read six column patterns as (hexacode word, common parity).

    Returns None when the column parities differ or the scores do not form a
    hexacode word. The top-row condition of the MOG rule is not checked here.
    """
    if len(patterns) != 6:
        raise InvalidPattern(f"Expected 6 column patterns, got {len(patterns)}.")
    checked = [_check_pattern(p) for p in patterns]
    parities = {p.bit_count() % 2 for p in checked}
    if len(parities) != 1:
        return None
    word = tuple(_SCORES[p] for p in checked)
    if word not in _HEXACODE_SET:
        return None
    return word, parities.pop()  # type: ignore[return-value]


__all__ = [
    "HexacodeWord",
    "HEXACODE_WORDS",
    "column_score",
    "column_parity",
    "column_patterns",
    "pattern_symbols",
    "hexacode_word",
    "is_hexacode_word",
    "hamming_distance",
    "nearest_hexacode_words",
    "interpret_columns",
]
