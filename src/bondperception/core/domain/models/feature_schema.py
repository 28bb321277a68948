#!/usr/bin/env python3
# src/bondperception/core/domain/models/feature_schema.py

"""
Column schema shared by the feature table and the bond classifier.

A trained classifier only makes sense for the exact column order it was
trained on, so the order is an explicit, versioned value instead of a
positional convention.
"""

from dataclasses import dataclass
from typing import List, Tuple

SCHEMA_VERSION = 1

PAIR_COLUMNS: Tuple[str, ...] = ("id1", "id2", "q", "ata", "atb", "distab")
ID_COLUMNS: Tuple[str, str] = ("id1", "id2")
PREDICTION_COLUMN = "preds"

# Role labels of the two pair atoms, in the order their neighbors are emitted.
PAIR_ROLES: Tuple[str, str] = ("a", "b")


def neighbor_columns(role: str, other: str, rank: int) -> Tuple[str, str, str]:
    """Column names for the ``rank``-th (1-based) neighbor of a pair atom.

    Example: ``neighbor_columns("a", "b", 1) == ("ata1", "dista1", "dista1b")``.
    """
    return (
        f"at{role}{rank}",
        f"dist{role}{rank}",
        f"dist{role}{rank}{other}",
    )


@dataclass(frozen=True)
class FeatureSchema:
    """Ordered feature columns for a given number of neighbors per pair atom."""

    n_neighbors: int = 3
    version: int = SCHEMA_VERSION

    def __post_init__(self):
        if self.n_neighbors < 0:
            raise ValueError(f"n_neighbors must be >= 0, got {self.n_neighbors}")

    @classmethod
    def from_neighbor_counts(cls, count_a: int, count_b: int) -> "FeatureSchema":
        """Schema for unpadded rows, derived from the neighbor counts of a row.

        Within one molecule both pair atoms always see the same number of
        non-pair atoms, so unequal counts indicate an extraction bug.
        """
        if count_a != count_b:
            raise ValueError(
                f"Neighbor counts differ between pair atoms: {count_a} != {count_b}"
            )
        return cls(n_neighbors=count_a)

    @property
    def columns(self) -> Tuple[str, ...]:
        columns: List[str] = list(PAIR_COLUMNS)
        for role, other in (PAIR_ROLES, PAIR_ROLES[::-1]):
            for rank in range(1, self.n_neighbors + 1):
                columns.extend(neighbor_columns(role, other, rank))
        return tuple(columns)

    @property
    def width(self) -> int:
        return len(PAIR_COLUMNS) + 2 * 3 * self.n_neighbors

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "n_neighbors": self.n_neighbors,
            "columns": list(self.columns),
        }
