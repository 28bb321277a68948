#!/usr/bin/env python3
# src/bondperception/core/domain/models/molecule.py

"""
Domain model representing a molecule parsed from a geometry file.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..exceptions import StructureError


@dataclass(frozen=True, eq=False)
class Molecule:
    """Atoms, coordinates and metadata of a 3-D structure.

    Atom ids are the 0-based positions in ``elements``; output formats
    number atoms from 1.
    """

    elements: Tuple[str, ...]
    coordinates: np.ndarray
    charge: int = 0
    name: str = ""
    info: str = ""

    def __post_init__(self):
        """Normalize inputs and enforce the atom count invariant."""
        elements = tuple(str(e) for e in self.elements)
        try:
            coordinates = np.array(self.coordinates, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise StructureError(f"Invalid coordinates: {e}") from e

        if len(elements) == 0:
            raise StructureError("A molecule needs at least one atom")
        if coordinates.ndim != 2 or coordinates.shape[1] != 3:
            raise StructureError(
                f"Coordinates must have shape (n_atoms, 3), got {coordinates.shape}"
            )
        if coordinates.shape[0] != len(elements):
            raise StructureError(
                f"Got {len(elements)} elements but {coordinates.shape[0]} coordinates"
            )

        coordinates.setflags(write=False)
        object.__setattr__(self, "elements", elements)
        object.__setattr__(self, "coordinates", coordinates)
        object.__setattr__(self, "charge", int(self.charge))

    @classmethod
    def from_atoms(
        cls,
        elements: Sequence[str],
        coordinates: Sequence[Sequence[float]],
        charge: int = 0,
        **metadata,
    ) -> "Molecule":
        """Create a molecule from element symbols and xyz triples."""
        return cls(tuple(elements), np.asarray(coordinates), charge, **metadata)

    @property
    def atom_count(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.elements)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return self.coordinates

    def __len__(self) -> int:
        return self.atom_count
