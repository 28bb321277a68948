"""Local environment descriptors for the two atoms of a candidate pair."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ...utils.geometry import argsort_stable
from .pair_canonicalizer import CanonicalPair


@dataclass(frozen=True)
class NeighborFeature:
    """One nearest non-pair neighbor of a pair atom."""

    index: int
    atomic_number: int
    dist_to_owner: float
    dist_to_other: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return float(self.atomic_number), self.dist_to_owner, self.dist_to_other


PADDING_NEIGHBOR = NeighborFeature(
    index=-1, atomic_number=0, dist_to_owner=0.0, dist_to_other=0.0
)


class NeighborFeatureExtractor:
    """Selects the nearest atoms around each end of a candidate bond.

    For a pair atom ``p`` with partner ``q`` the neighbors are the first
    ``n_neighbors`` atoms of ``p``'s distance row in ascending order,
    skipping both pair atoms. Equal distances keep atom index order.
    """

    def __init__(
        self,
        distances: np.ndarray,
        atomic_numbers: Sequence[int],
        n_neighbors: int = 3,
    ):
        """
        Initialize extractor.

        Args:
            distances: Square distance matrix of the molecule
            atomic_numbers: Atomic number per atom id
            n_neighbors: Maximum neighbors per pair atom
        """
        self._distances = distances
        self._atomic_numbers = atomic_numbers
        self.n_neighbors = n_neighbors
        # Each row ordering is reused by every pair the atom takes part in.
        self._orderings = {}

    def _ordering(self, atom: int) -> np.ndarray:
        if atom not in self._orderings:
            self._orderings[atom] = argsort_stable(self._distances[atom])
        return self._orderings[atom]

    def neighbors_of(self, owner: int, other: int) -> List[NeighborFeature]:
        """
        Nearest non-pair neighbors of ``owner`` in the pair ``(owner, other)``.

        Returns:
            At most ``n_neighbors`` features, fewer when the molecule has
            fewer non-pair atoms
        """
        neighbors: List[NeighborFeature] = []
        if self.n_neighbors == 0:
            return neighbors
        for candidate in self._ordering(owner):
            if candidate == owner or candidate == other:
                continue
            neighbors.append(
                NeighborFeature(
                    index=int(candidate),
                    atomic_number=self._atomic_numbers[candidate],
                    dist_to_owner=float(self._distances[owner, candidate]),
                    dist_to_other=float(self._distances[other, candidate]),
                )
            )
            if len(neighbors) >= self.n_neighbors:
                break
        return neighbors

    def extract(
        self, pair: CanonicalPair
    ) -> Tuple[List[NeighborFeature], List[NeighborFeature]]:
        """Neighbors of the first and the second pair atom, in that order."""
        a, b = pair.indices
        return self.neighbors_of(a, b), self.neighbors_of(b, a)
