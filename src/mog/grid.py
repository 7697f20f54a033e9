"""Grid state: selection and highlights of the 24 MOG cells."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Tuple

from .points import (
    N_COLS,
    N_POINTS,
    N_ROWS,
    check_point,
    check_vector,
    permute_bits,
)


class CellState(Enum):
    UNSELECTED = "unselected"
    SELECTED = "selected"
    OCTAD = "octad"
    ERROR = "error"


_CELL_MARKS = {
    CellState.UNSELECTED: ".",
    CellState.SELECTED: "#",
    CellState.OCTAD: "o",
    CellState.ERROR: "x",
}


@dataclass(frozen=True)
class GridState:
    """Selection plus octad/error highlights as 24-bit masks.

    A cell reads as ERROR, OCTAD, SELECTED or UNSELECTED, in that priority.
    Instances are immutable; every change returns a new state.
    """

    selected: int = 0
    octad: int = 0
    errors: int = 0

    def __post_init__(self) -> None:
        for name in ("selected", "octad", "errors"):
            check_vector(getattr(self, name))

    @classmethod
    def from_points(cls, points: Iterable[int]) -> "GridState":
        selected = 0
        for p in points:
            selected |= 1 << check_point(p)
        return cls(selected=selected)

    def cell(self, point: int) -> CellState:
        bit = 1 << check_point(point)
        if self.errors & bit:
            return CellState.ERROR
        if self.octad & bit:
            return CellState.OCTAD
        if self.selected & bit:
            return CellState.SELECTED
        return CellState.UNSELECTED

    def cells(self) -> Tuple[CellState, ...]:
        return tuple(self.cell(p) for p in range(N_POINTS))

    def is_selected(self, point: int) -> bool:
        return bool((self.selected >> check_point(point)) & 1)

    def with_point(self, point: int, selected: bool) -> "GridState":
        """Set one cell's selection; highlights computed for the old selection are dropped."""
        bit = 1 << check_point(point)
        mask = self.selected | bit if selected else self.selected & ~bit
        return GridState(selected=mask)

    def with_highlights(self, *, octad: int = 0, errors: int = 0) -> "GridState":
        return replace(self, octad=octad, errors=errors)

    def cleared(self) -> "GridState":
        return GridState()

    def permuted(self, images: Iterable[int]) -> "GridState":
        """Move the content of cell i to cell images[i]."""
        images = list(images)
        return GridState(
            selected=permute_bits(self.selected, images),
            octad=permute_bits(self.octad, images),
            errors=permute_bits(self.errors, images),
        )

    def render(self) -> str:
        lines = []
        for r in range(N_ROWS):
            marks = [_CELL_MARKS[self.cell(r * N_COLS + c)] for c in range(N_COLS)]
            lines.append("  ".join(" ".join(marks[i : i + 2]) for i in range(0, N_COLS, 2)))
        return "\n".join(lines)


__all__ = ["CellState", "GridState"]
