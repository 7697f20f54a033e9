"""Permutation groups given by generators, with 0-based point conventions.

The stabiliser chain is built with Knuth's variant of the Schreier-Sims
algorithm ("Efficient representation of perm groups", 1991). Level k holds
coset representatives for the subgroup fixing every point above k, so the
base is degree-1, degree-2, ..., 0.
"""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .permutation import Permutation

Images = Tuple[int, ...]


def _mul(a: Images, b: Images) -> Images:
    return tuple(b[x] for x in a)


def _inverse(a: Images) -> Images:
    inv = [0] * len(a)
    for i, x in enumerate(a):
        inv[x] = i
    return tuple(inv)


class StabilizerChain:
    """Transversals T_k and strong generators S_k for a permutation group."""

    def __init__(self, degree: int) -> None:
        self.degree = int(degree)
        ident = tuple(range(self.degree))
        self._identity = ident
        self.strong: List[List[Images]] = [[] for _ in range(self.degree)]
        self.transversal: List[Dict[int, Images]] = [{k: ident} for k in range(self.degree)]

    def contains(self, perm: Images, level: Optional[int] = None) -> bool:
        """Sift perm (which must fix every point above level) through the chain."""
        k = self.degree - 1 if level is None else level
        g = perm
        for i in range(k, -1, -1):
            sigma = self.transversal[i].get(g[i])
            if sigma is None:
                return False
            g = _mul(g, _inverse(sigma))
        return True

    def add(self, perm: Images, level: Optional[int] = None) -> None:
        k = self.degree - 1 if level is None else level
        if k < 0 or self.contains(perm, k):
            return
        self.strong[k].append(perm)
        for sigma in list(self.transversal[k].values()):
            self._extend(_mul(sigma, perm), k)

    def _extend(self, perm: Images, k: int) -> None:
        j = perm[k]
        sigma = self.transversal[k].get(j)
        if sigma is not None:
            self.add(_mul(perm, _inverse(sigma)), k - 1)
            return
        self.transversal[k][j] = perm
        for s in list(self.strong[k]):
            self._extend(_mul(perm, s), k)

    def order(self) -> int:
        total = 1
        for table in self.transversal:
            total *= len(table)
        return total

    def base(self) -> List[int]:
        return [k for k in range(self.degree - 1, -1, -1) if len(self.transversal[k]) > 1]


class PermutationGroup:
    """Finite permutation group with mul/inv/id in the style of FiniteGroup."""

    def __init__(
        self,
        generators: Sequence[Permutation],
        *,
        name: Optional[str] = None,
        degree: Optional[int] = None,
    ) -> None:
        gens = list(generators)
        if degree is None:
            if not gens:
                raise ValueError("degree is required for a group without generators.")
            degree = gens[0].degree
        for g in gens:
            if g.degree != degree:
                raise ValueError(f"Generator degree {g.degree} does not match degree={degree}.")
        self.degree = int(degree)
        self.generators = gens
        self.name = name or f"<{len(gens)} generators>"
        self._chain: Optional[StabilizerChain] = None

    @property
    def chain(self) -> StabilizerChain:
        if self._chain is None:
            chain = StabilizerChain(self.degree)
            for g in self.generators:
                chain.add(g.images)
            self._chain = chain
        return self._chain

    @property
    def order(self) -> int:
        return self.chain.order()

    def mul(self, a: Permutation, b: Permutation) -> Permutation:
        return a * b

    def inv(self, a: Permutation) -> Permutation:
        return a.inverse()

    def id(self) -> Permutation:
        return Permutation.identity(self.degree)

    def contains(self, perm: Permutation) -> bool:
        if perm.degree != self.degree:
            return False
        return self.chain.contains(perm.images)

    def __contains__(self, perm: object) -> bool:
        return isinstance(perm, Permutation) and self.contains(perm)

    def find_element(self, allowed: Callable[[int, int], bool]) -> Optional[Permutation]:
        """Some element g with allowed(p, g(p)) for every point p, or None.

        Backtracks through the stabiliser chain from the top level down and
        drops a branch as soon as the image of its base point is refused.
        """
        chain = self.chain

        def search(k: int, suffix: Images) -> Optional[Images]:
            if k < 0:
                return suffix
            # Representatives below level k fix k, so its image is final here.
            for key, rep in chain.transversal[k].items():
                if not allowed(k, suffix[key]):
                    continue
                found = search(k - 1, _mul(rep, suffix))
                if found is not None:
                    return found
            return None

        found = search(self.degree - 1, self._identity_images())
        return Permutation(found) if found is not None else None

    def orbit(self, point: int) -> List[int]:
        seen = {point}
        queue = [point]
        for x in queue:
            for g in self.generators:
                y = g(x)
                if y not in seen:
                    seen.add(y)
                    queue.append(y)
        return sorted(seen)

    def random_word(
        self, length: int, rng: random.Random
    ) -> Tuple[List[Tuple[int, int]], Permutation]:
        """Random product of generators and inverses.

        Returns the word as (generator index, exponent +1/-1) pairs and its value.
        """
        word: List[Tuple[int, int]] = []
        value = self.id()
        for _ in range(length):
            idx = rng.randrange(len(self.generators))
            exp = rng.choice((1, -1))
            word.append((idx, exp))
            value = value * (self.generators[idx] ** exp)
        return word, value

    def random_element(self, rng: random.Random) -> Permutation:
        """Uniform random element read off the stabiliser chain."""
        g = self._identity_images()
        for table in self.chain.transversal:
            reps = list(table.values())
            g = _mul(g, reps[rng.randrange(len(reps))])
        return Permutation(g)

    def _identity_images(self) -> Images:
        return tuple(range(self.degree))

    def repr(self, a: Permutation) -> str:
        return str(a)


__all__ = ["StabilizerChain", "PermutationGroup"]
