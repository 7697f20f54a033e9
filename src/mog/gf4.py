"""Arithmetic in GF(4) = {0, 1, w, wbar} with elements encoded as 0..3.

The encoding makes addition a bitwise XOR: 1 + w = wbar is 1 ^ 2 == 3.
"""

from __future__ import annotations

from typing import Tuple

from .errors import InvalidPattern

ZERO = 0
ONE = 1
OMEGA = 2
OMEGA_BAR = 3

ELEMENTS: Tuple[int, ...] = (ZERO, ONE, OMEGA, OMEGA_BAR)
SYMBOL_NAMES: Tuple[str, ...] = ("0", "1", "w", "wbar")

# w * w = wbar, w * wbar = 1, wbar * wbar = w.
_MUL_TABLE: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 0, 0),
    (0, 1, 2, 3),
    (0, 2, 3, 1),
    (0, 3, 1, 2),
)
_INV_TABLE: Tuple[int, ...] = (0, 1, 3, 2)


def check_element(x: int) -> int:
    x_int = int(x)
    if x_int < 0 or x_int > 3:
        raise InvalidPattern(f"GF(4) element must be in 0..3, got {x!r}.")
    return x_int


def add(a: int, b: int) -> int:
    return check_element(a) ^ check_element(b)


def mul(a: int, b: int) -> int:
    return _MUL_TABLE[check_element(a)][check_element(b)]


def inv(a: int) -> int:
    a_int = check_element(a)
    if a_int == ZERO:
        raise ZeroDivisionError("0 has no inverse in GF(4).")
    return _INV_TABLE[a_int]


def conjugate(a: int) -> int:
    """Frobenius map x -> x^2 (swaps w and wbar)."""
    return mul(a, a)


def symbol_name(a: int) -> str:
    return SYMBOL_NAMES[check_element(a)]


def parse_symbol(text: str) -> int:
    """Parse '0', '1', 'w' or 'wbar' (or the codes 2 and 3)."""
    raw = text.strip().lower()
    if raw in SYMBOL_NAMES:
        return SYMBOL_NAMES.index(raw)
    if raw in ("2", "3"):
        return int(raw)
    raise InvalidPattern(f"Unknown GF(4) symbol '{text}'; expected 0, 1, w or wbar.")


__all__ = [
    "ZERO",
    "ONE",
    "OMEGA",
    "OMEGA_BAR",
    "ELEMENTS",
    "SYMBOL_NAMES",
    "check_element",
    "add",
    "mul",
    "inv",
    "conjugate",
    "symbol_name",
    "parse_symbol",
]
