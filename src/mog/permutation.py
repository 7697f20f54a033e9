"""Permutations of the 24 MOG points as immutable values.

Conventions follow GAP with 0-based points: ``images[i]`` is the image of
``i`` and ``a * b`` means "apply a, then b".
"""

from __future__ import annotations

from dataclasses import dataclass
from math import lcm
from typing import Callable, Iterable, List, Sequence, Tuple

from .errors import InvalidPattern
from .points import N_POINTS, permute_bits


@dataclass(frozen=True)
class Permutation:
    images: Tuple[int, ...]

    def __post_init__(self) -> None:
        images = tuple(int(x) for x in self.images)
        if sorted(images) != list(range(len(images))):
            raise InvalidPattern(f"Not a permutation of 0..{len(images) - 1}: {images}.")
        object.__setattr__(self, "images", images)

    @classmethod
    def identity(cls, degree: int = N_POINTS) -> "Permutation":
        return cls(tuple(range(degree)))

    @classmethod
    def from_function(cls, fn: Callable[[int], int], degree: int = N_POINTS) -> "Permutation":
        return cls(tuple(fn(i) for i in range(degree)))

    @classmethod
    def from_cycles(cls, cycles: Iterable[Sequence[int]], degree: int = N_POINTS) -> "Permutation":
        images = list(range(degree))
        seen = set()
        for cycle in cycles:
            for x in cycle:
                if x in seen or not 0 <= x < degree:
                    raise InvalidPattern(f"Invalid cycle entry {x} in {list(cycle)}.")
                seen.add(x)
            for i, x in enumerate(cycle):
                images[x] = cycle[(i + 1) % len(cycle)]
        return cls(tuple(images))

    @property
    def degree(self) -> int:
        return len(self.images)

    def __call__(self, point: int) -> int:
        return self.images[point]

    def apply_vector(self, v: int) -> int:
        """Image of a bitset: bit i moves to bit images[i]."""
        return permute_bits(v, self.images)

    def compose(self, other: "Permutation") -> "Permutation":
        """self first, then other."""
        if other.degree != self.degree:
            raise InvalidPattern("Cannot compose permutations of different degree.")
        return Permutation(tuple(other.images[x] for x in self.images))

    def __mul__(self, other: "Permutation") -> "Permutation":
        return self.compose(other)

    def inverse(self) -> "Permutation":
        inv = [0] * self.degree
        for i, x in enumerate(self.images):
            inv[x] = i
        return Permutation(tuple(inv))

    def __pow__(self, k: int) -> "Permutation":
        base = self if k >= 0 else self.inverse()
        result = Permutation.identity(self.degree)
        for _ in range(abs(int(k))):
            result = result * base
        return result

    @property
    def is_identity(self) -> bool:
        return all(i == x for i, x in enumerate(self.images))

    def cycles(self) -> List[Tuple[int, ...]]:
        """Nontrivial cycles, each starting at its smallest point."""
        seen = set()
        out: List[Tuple[int, ...]] = []
        for start in range(self.degree):
            if start in seen or self.images[start] == start:
                continue
            cycle = [start]
            seen.add(start)
            x = self.images[start]
            while x != start:
                cycle.append(x)
                seen.add(x)
                x = self.images[x]
            out.append(tuple(cycle))
        return out

    @property
    def order(self) -> int:
        return lcm(1, *(len(c) for c in self.cycles()))

    def support(self) -> List[int]:
        return [i for i, x in enumerate(self.images) if i != x]

    def cycle_type(self) -> Tuple[int, ...]:
        """Cycle lengths including fixed points, descending."""
        lengths = [len(c) for c in self.cycles()]
        lengths.extend([1] * (self.degree - sum(lengths)))
        return tuple(sorted(lengths, reverse=True))

    def __str__(self) -> str:
        cycles = self.cycles()
        if not cycles:
            return "()"
        return "".join("(" + ",".join(str(x) for x in c) + ")" for c in cycles)


def identity(degree: int = N_POINTS) -> Permutation:
    return Permutation.identity(degree)


def compose(a: Permutation, b: Permutation) -> Permutation:
    """Apply a, then b."""
    return a.compose(b)


def invert(a: Permutation) -> Permutation:
    return a.inverse()


__all__ = ["Permutation", "identity", "compose", "invert"]
