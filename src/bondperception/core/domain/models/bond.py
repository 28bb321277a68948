#!/usr/bin/env python3
# src/bondperception/core/domain/models/bond.py

"""
Domain model representing a predicted chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum


class BondType(Enum):
    """Bond types as numbered in the connection table bond block."""

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    AROMATIC = 4
    UNKNOWN = 0

    @classmethod
    def from_order(cls, order: int) -> "BondType":
        """Map a predicted bond order to a bond type."""
        try:
            return cls(order)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Bond:
    """Represents a bond between two atoms.

    Atom ids are 1-based, as written to the bond block.
    """

    atom1_id: int
    atom2_id: int
    bond_order: int = 1

    @property
    def bond_type(self) -> BondType:
        return BondType.from_order(self.bond_order)
