"""Domain model for the outcome of bond perception on one molecule."""

from dataclasses import dataclass
from typing import List

import networkx as nx
import pandas as pd

from .bond import Bond
from .molecule import Molecule


@dataclass
class PerceptionResult:
    """Contains the predicted bonds of a molecule and their provenance."""

    molecule: Molecule
    features: pd.DataFrame
    bonds: List[Bond]
    molblock: str

    @property
    def num_bonds(self) -> int:
        return len(self.bonds)

    def to_graph(self) -> nx.Graph:
        """Build a graph with one node per atom and one edge per predicted bond.

        Nodes are 1-based atom ids carrying the element symbol; edges carry
        the bond order.
        """
        graph = nx.Graph()
        for atom_id, element in enumerate(self.molecule.elements, start=1):
            graph.add_node(atom_id, element=element)
        for bond in self.bonds:
            graph.add_edge(bond.atom1_id, bond.atom2_id, order=bond.bond_order)
        return graph

    def num_fragments(self) -> int:
        """Number of disconnected fragments in the predicted structure."""
        return nx.number_connected_components(self.to_graph())
