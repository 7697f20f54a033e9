"""Synchronous session API consumed by a presentation layer.

The session owns one GridState. Every call computes the complete new state
before assigning it, so a call that raises leaves the state untouched.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

from .golay import DecodeResult, decode
from .grid import GridState
from .m24 import apply, generator
from .octads import NearestCodewords, complete_octad, complete_sextet, nearest_codewords
from .permutation import Permutation
from .points import check_vector, points_of
from .sextets import OrderedSextet, SextetLabelling, complete_labelling


def _log(verbose: bool, msg: str) -> None:
    if verbose:
        print(msg)


class MogSession:
    def __init__(self, *, verbose: bool = False, state: Optional[GridState] = None) -> None:
        self.verbose = verbose
        self._state = state if state is not None else GridState()

    @property
    def state(self) -> GridState:
        return self._state

    @property
    def selection(self) -> int:
        return self._state.selected

    def _commit(self, state: GridState) -> GridState:
        self._state = state
        return state

    def select(self, point: int) -> GridState:
        return self._commit(self._state.with_point(point, True))

    def deselect(self, point: int) -> GridState:
        return self._commit(self._state.with_point(point, False))

    def toggle(self, point: int) -> GridState:
        return self._commit(self._state.with_point(point, not self._state.is_selected(point)))

    def reset(self) -> GridState:
        _log(self.verbose, "[reset]")
        return self._commit(self._state.cleared())

    def complete_octad(self) -> int:
        """Complete the selection to its octad and highlight the added points."""
        selected = self._state.selected
        octad = complete_octad(selected)
        _log(self.verbose, f"[complete] {points_of(selected)} -> {points_of(octad)}")
        self._commit(self._state.with_highlights(octad=octad & ~selected))
        return octad

    def complete_sextet(self) -> Tuple[int, ...]:
        return complete_sextet(self._state.selected)

    def nearest_codewords(self) -> NearestCodewords:
        return nearest_codewords(self._state.selected)

    def complete_labelling(
        self, labels: Mapping[int, int], order: Optional[Sequence[int]] = None
    ) -> SextetLabelling:
        """Label the sextet of the selected tetrad from a partial {point: label} map."""
        sextet = OrderedSextet.from_tetrad(self._state.selected, order)
        labelling = complete_labelling(sextet, labels)
        _log(self.verbose, f"[label] to_standard = {labelling.to_standard}")
        return labelling

    def apply_labelling(self, labelling: SextetLabelling, *, inverse: bool = False) -> GridState:
        """Move the grid by the labelling's to_standard (or from_standard) permutation."""
        perm = labelling.from_standard if inverse else labelling.to_standard
        return self.apply_permutation(perm)

    def apply_permutation(self, perm: Permutation) -> GridState:
        return self._commit(apply(perm, self._state))

    def apply_generator(self, name: str) -> GridState:
        perm = generator(name)
        _log(self.verbose, f"[generator] {name} = {perm}")
        return self.apply_permutation(perm)

    def decode(self, vector: Optional[int] = None) -> DecodeResult:
        """Decode vector, or the current selection when vector is None.

        Decoding the selection marks the corrected points as errors.
        """
        if vector is not None:
            return decode(check_vector(vector))
        result = decode(self._state.selected)
        _log(
            self.verbose,
            f"[decode] distance={result.distance} corrected={sorted(result.corrected)}",
        )
        self._commit(self._state.with_highlights(errors=result.error))
        return result


__all__ = ["MogSession"]
