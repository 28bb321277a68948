# src/bondperception/core/services/bond_reconstruction_service.py
"""Service turning classifier predictions into a connection table."""

import logging
from typing import Iterable, List

import numpy as np
import pandas as pd

from ..domain.exceptions import PredictionError, StructureError
from ..domain.models.bond import Bond
from ..domain.models.feature_schema import ID_COLUMNS, PREDICTION_COLUMN
from ..domain.models.molecule import Molecule

logger = logging.getLogger(__name__)

COMMENT_LINE = "ML generated sdf"
# Unused legacy atom and bond attributes.
ZERO_SUFFIX = " 0  0  0  0  0"


def count_bonds(table: pd.DataFrame) -> int:
    """Number of rows predicted as bonds."""
    if PREDICTION_COLUMN not in table.columns:
        raise PredictionError(f"Prediction column '{PREDICTION_COLUMN}' not found")
    return int((table[PREDICTION_COLUMN] > 0).sum())


class BondReconstructor:
    """Builds bonds and molblocks from a feature table with predictions."""

    def bonds_from_predictions(
        self, table: pd.DataFrame, atom_count: int
    ) -> List[Bond]:
        """
        Select the predicted bonds of a feature table.

        Args:
            table: Feature table with a prediction column
            atom_count: Number of atoms in the molecule

        Returns:
            Bonds for rows with a positive prediction, in table order, each
            with the lower atom id first

        Raises:
            PredictionError: If the prediction column is absent
            StructureError: If a bond references an atom outside the molecule
        """
        if PREDICTION_COLUMN not in table.columns:
            raise PredictionError(f"Prediction column '{PREDICTION_COLUMN}' not found")

        selected = table.loc[table[PREDICTION_COLUMN] > 0]
        id1_column, id2_column = ID_COLUMNS
        bonds = []
        for id1, id2, pred in zip(
            selected[id1_column], selected[id2_column], selected[PREDICTION_COLUMN]
        ):
            # Table ids are heavy atom first; bond lines use ascending ids.
            id1, id2 = sorted((int(id1), int(id2)))
            bond = Bond(
                atom1_id=id1,
                atom2_id=id2,
                bond_order=max(1, int(np.rint(pred))),
            )
            for atom_id in (bond.atom1_id, bond.atom2_id):
                if not 1 <= atom_id <= atom_count:
                    raise StructureError(
                        f"Bond ({bond.atom1_id}, {bond.atom2_id}) references atom "
                        f"{atom_id}, molecule has {atom_count} atoms"
                    )
            bonds.append(bond)
        return bonds

    def create_molblock(self, molecule: Molecule, table: pd.DataFrame) -> str:
        """Render a molecule and its predicted bonds as a molblock."""
        bonds = self.bonds_from_predictions(table, molecule.atom_count)
        return self.format_molblock(molecule, bonds)

    def format_molblock(self, molecule: Molecule, bonds: Iterable[Bond]) -> str:
        """
        Format the connection table text.

        Atoms are written in original atom order; bonds in the given order.
        """
        bonds = list(bonds)
        lines = [
            molecule.name,
            COMMENT_LINE,
            "",
            f"{molecule.atom_count:>3}{len(bonds):>3}" + "  0" * 8 + "  1 V2000",
        ]
        for element, (x, y, z) in zip(molecule.elements, molecule.get_coordinates()):
            lines.append(f"{x:10.4f}{y:10.4f}{z:10.4f} {element:<2}{ZERO_SUFFIX}")
        for bond in bonds:
            lines.append(
                f"{bond.atom1_id:>3}{bond.atom2_id:>3}{bond.bond_order:>3}{ZERO_SUFFIX}"
            )

        logger.debug(
            f"Molblock with {molecule.atom_count} atoms and {len(bonds)} bonds"
        )
        return "".join(line + "\n" for line in lines)
