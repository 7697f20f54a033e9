"""Point indexing for the 4x6 MOG grid and 24-bit bitset helpers.

Layout (point indices)::

    row 0  |  0  1    2  3    4  5
    row 1  |  6  7    8  9   10 11
    row w  | 12 13   14 15   16 17
    row wb | 18 19   20 21   22 23

Row r carries the GF(4) label r. Columns 0-1, 2-3 and 4-5 are the three
couples (bricks) of the MOG.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .errors import InvalidPattern

N_POINTS = 24
N_ROWS = 4
N_COLS = 6
ALL_POINTS = (1 << N_POINTS) - 1
COLUMN_FULL = 0b1111


def check_point(p: int) -> int:
    p_int = int(p)
    if p_int < 0 or p_int >= N_POINTS:
        raise InvalidPattern(f"Point must be in 0..{N_POINTS - 1}, got {p!r}.")
    return p_int


def check_vector(v: int) -> int:
    v_int = int(v)
    if v_int < 0 or v_int > ALL_POINTS:
        raise InvalidPattern(f"Vector must be a 24-bit value, got {v!r}.")
    return v_int


def point_index(row: int, col: int) -> int:
    if not (0 <= row < N_ROWS and 0 <= col < N_COLS):
        raise InvalidPattern(f"Grid position ({row}, {col}) is outside the 4x6 grid.")
    return row * N_COLS + col


def point_position(p: int) -> Tuple[int, int]:
    """Return (row, col) of point p."""
    return divmod(check_point(p), N_COLS)


def bit_indices(v: int) -> List[int]:
    """Indices of the set bits of v, ascending."""
    indices: List[int] = []
    while v:
        lsb = v & -v
        indices.append(lsb.bit_length() - 1)
        v -= lsb
    return indices


def vector_from_points(points: Iterable[int]) -> int:
    v = 0
    for p in points:
        v |= 1 << check_point(p)
    return v


def points_of(v: int) -> List[int]:
    return bit_indices(check_vector(v))


def weight(v: int) -> int:
    return int(v).bit_count()


def column_pattern(v: int, col: int) -> int:
    """4-bit pattern of column col: bit r is the point in row r."""
    pattern = 0
    for r in range(N_ROWS):
        if (v >> (r * N_COLS + col)) & 1:
            pattern |= 1 << r
    return pattern


def column_patterns_of(v: int) -> List[int]:
    return [column_pattern(v, col) for col in range(N_COLS)]


def vector_from_columns(patterns: Iterable[int]) -> int:
    v = 0
    for col, pattern in enumerate(patterns):
        for r in range(N_ROWS):
            if (pattern >> r) & 1:
                v |= 1 << (r * N_COLS + col)
    return v


def column_mask(col: int) -> int:
    return vector_from_columns([COLUMN_FULL if c == col else 0 for c in range(N_COLS)])


def row_mask(row: int) -> int:
    return ((1 << N_COLS) - 1) << (row * N_COLS)


def permute_bits(v: int, images: Iterable[int]) -> int:
    """Move bit i of v to position images[i]."""
    images = list(images)
    out = 0
    for i in bit_indices(v):
        out |= 1 << images[i]
    return out


def format_vector(v: int, marks: str = "#.") -> str:
    """Render v as a 4-line grid, couples separated by two spaces."""
    lines = []
    for r in range(N_ROWS):
        cells = []
        for col in range(N_COLS):
            cells.append(marks[0] if (v >> (r * N_COLS + col)) & 1 else marks[1])
        lines.append("  ".join(" ".join(cells[i : i + 2]) for i in range(0, N_COLS, 2)))
    return "\n".join(lines)


def parse_vector(text: str) -> int:
    """Parse '0,1,5' (points), '0x1f' (hex) or a 24-character bit string (point 0 first)."""
    raw = text.strip()
    if not raw:
        raise InvalidPattern("Empty vector; expected points, hex or a bit string.")
    if raw.lower().startswith("0x"):
        try:
            return check_vector(int(raw, 16))
        except ValueError as exc:
            raise InvalidPattern(f"Invalid hex vector '{raw}'.") from exc
    if len(raw) == N_POINTS and set(raw) <= {"0", "1"}:
        return sum(1 << i for i, ch in enumerate(raw) if ch == "1")
    points: List[int] = []
    for part in raw.replace(" ", ",").split(","):
        if not part:
            continue
        try:
            points.append(int(part))
        except ValueError as exc:
            raise InvalidPattern(f"Invalid point '{part}'; expected integers.") from exc
    return vector_from_points(points)


__all__ = [
    "N_POINTS",
    "N_ROWS",
    "N_COLS",
    "ALL_POINTS",
    "COLUMN_FULL",
    "check_point",
    "check_vector",
    "point_index",
    "point_position",
    "bit_indices",
    "vector_from_points",
    "points_of",
    "weight",
    "column_pattern",
    "column_patterns_of",
    "vector_from_columns",
    "column_mask",
    "row_mask",
    "permute_bits",
    "format_vector",
    "parse_vector",
]
