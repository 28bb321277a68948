"""Deterministic role assignment for candidate atom pairs."""

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..elements import atomic_number


@dataclass(frozen=True)
class CanonicalPair:
    """A candidate pair with the heavier atom in the first ("a") role.

    Indices are 0-based atom ids.
    """

    first: int
    second: int
    z_first: int
    z_second: int

    @property
    def indices(self) -> Tuple[int, int]:
        return self.first, self.second

    @property
    def atom_ids(self) -> Tuple[int, int]:
        """1-based atom ids as written to feature tables and bond blocks."""
        return self.first + 1, self.second + 1


class PairCanonicalizer:
    """Orders atom pairs by descending atomic number.

    Equal atomic numbers fall back to ascending atom index, which is the
    generation order of candidate pairs. The ordering depends only on the
    unordered pair, so ``(i, j)`` and ``(j, i)`` canonicalize identically.
    """

    def __init__(self, elements: Sequence[str]):
        """
        Initialize canonicalizer.

        Args:
            elements: Element symbols indexed by atom id
        """
        self._atomic_numbers = tuple(atomic_number(e) for e in elements)

    @property
    def atomic_numbers(self) -> Tuple[int, ...]:
        return self._atomic_numbers

    def canonicalize(self, i: int, j: int) -> CanonicalPair:
        """Return the canonical form of the pair ``(i, j)``."""
        if i == j:
            raise ValueError(f"A pair needs two distinct atoms, got ({i}, {j})")
        z_i = self._atomic_numbers[i]
        z_j = self._atomic_numbers[j]
        if z_i < z_j or (z_i == z_j and i > j):
            i, j, z_i, z_j = j, i, z_j, z_i
        return CanonicalPair(first=i, second=j, z_first=z_i, z_second=z_j)

    def recanonicalize(self, pair: CanonicalPair) -> CanonicalPair:
        """Canonicalize an existing pair value; canonical pairs come back equal."""
        return self.canonicalize(pair.first, pair.second)
