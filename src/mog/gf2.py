"""Small GF(2) linear algebra helpers using int bitsets."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np


def gf2_rank(rows: List[int], n_cols: int) -> int:
    """Compute rank over GF(2) via Gaussian elimination."""
    rref_rows, _ = gf2_rref(rows, n_cols)
    return len(rref_rows)


def gf2_rref(rows: Sequence[int], n_cols: int) -> Tuple[List[int], List[int]]:
    """Reduced row echelon form of bitset rows.

    Returns the nonzero reduced rows and their pivot columns (ascending). The
    pivot column of row i is set in row i only.
    """
    if n_cols < 0:
        raise ValueError("n_cols must be nonnegative")
    mat = [int(r) for r in rows]
    m = len(mat)
    pivots: List[int] = []
    r = 0
    for c in range(n_cols):
        if r >= m:
            break
        bit = 1 << c
        pivot_row = None
        for i in range(r, m):
            if mat[i] & bit:
                pivot_row = i
                break
        if pivot_row is None:
            continue
        if pivot_row != r:
            mat[r], mat[pivot_row] = mat[pivot_row], mat[r]
        pivots.append(c)
        pivot_val = mat[r]
        for i in range(m):
            if i != r and (mat[i] & bit):
                mat[i] ^= pivot_val
        r += 1
    return mat[:r], pivots


def span_codewords(rows: Sequence[int]) -> List[int]:
    """Enumerate all vectors in the row span of rows, sorted."""
    k = len(rows)
    words = [0]
    for i in range(k):
        words.extend([w ^ rows[i] for w in words])
    return sorted(words)


def bitrows_to_matrix(rows: Sequence[int], n_cols: int) -> np.ndarray:
    """Unpack bitset rows into a uint8 matrix (column j = bit j)."""
    mat = np.zeros((len(rows), n_cols), dtype=np.uint8)
    for r, row in enumerate(rows):
        for c in range(n_cols):
            if (row >> c) & 1:
                mat[r, c] = 1
    return mat


__all__ = [
    "gf2_rank",
    "gf2_rref",
    "span_codewords",
    "bitrows_to_matrix",
]
