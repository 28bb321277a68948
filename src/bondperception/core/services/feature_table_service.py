# src/bondperception/core/services/feature_table_service.py
"""Service assembling the per-pair feature table of a molecule."""

import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from ..domain.exceptions import FeatureShapeError
from ..domain.implementations.neighbor_feature_extractor import (
    PADDING_NEIGHBOR,
    NeighborFeature,
    NeighborFeatureExtractor,
)
from ..domain.implementations.pair_canonicalizer import PairCanonicalizer
from ..domain.models.config import PerceptionConfig
from ..domain.models.feature_schema import FeatureSchema
from ..domain.models.molecule import Molecule
from ..utils.geometry import candidate_pairs, distance_matrix

logger = logging.getLogger(__name__)


class FeatureTableBuilder:
    """Builds one feature row per candidate pair of a molecule."""

    def __init__(self, config: Optional[PerceptionConfig] = None):
        """Initialize builder with pipeline configuration."""
        self._config = config or PerceptionConfig()

    @property
    def config(self) -> PerceptionConfig:
        return self._config

    def _pad(self, neighbors: List[NeighborFeature]) -> List[NeighborFeature]:
        missing = self._config.n_neighbors - len(neighbors)
        return neighbors + [PADDING_NEIGHBOR] * missing

    def schema_for(self, molecule: Molecule) -> FeatureSchema:
        """Schema of the table built for ``molecule``.

        Without padding, rows only hold the neighbors that exist, which is
        the same number for every pair of one molecule.
        """
        if self._config.pad_missing_neighbors:
            return self._config.schema
        available = max(molecule.atom_count - 2, 0)
        return FeatureSchema(n_neighbors=min(self._config.n_neighbors, available))

    def build(self, molecule: Molecule) -> pd.DataFrame:
        """
        Create the feature table of a molecule.

        Args:
            molecule: Molecule to describe

        Returns:
            DataFrame with one row per atom pair within the distance cutoff
            and columns in schema order

        Raises:
            FeatureShapeError: If a row width disagrees with the header
        """
        config = self._config
        dtype = config.float_type
        distances = distance_matrix(molecule.get_coordinates(), dtype=dtype)
        canonicalizer = PairCanonicalizer(molecule.elements)
        extractor = NeighborFeatureExtractor(
            distances, canonicalizer.atomic_numbers, config.n_neighbors
        )

        schema: Optional[FeatureSchema] = None
        rows: List[List[float]] = []
        for i, j in candidate_pairs(distances, config.distance_cutoff):
            pair = canonicalizer.canonicalize(i, j)
            id1, id2 = pair.atom_ids
            row = [
                id1,
                id2,
                molecule.charge,
                pair.z_first,
                pair.z_second,
                float(distances[i, j]),
            ]

            neighbors_a, neighbors_b = extractor.extract(pair)
            if config.pad_missing_neighbors:
                neighbors_a = self._pad(neighbors_a)
                neighbors_b = self._pad(neighbors_b)
            for neighbor in neighbors_a + neighbors_b:
                row.extend(neighbor.as_tuple())

            # Header comes from the first row; every later row must match it.
            if schema is None:
                if config.pad_missing_neighbors:
                    schema = config.schema
                else:
                    schema = FeatureSchema.from_neighbor_counts(
                        len(neighbors_a), len(neighbors_b)
                    )
            if len(row) != schema.width:
                raise FeatureShapeError(
                    f"Feature row for pair ({id1}, {id2}) has {len(row)} values, "
                    f"header has {schema.width}"
                )
            rows.append(row)

        if schema is None:
            schema = self.schema_for(molecule)

        logger.debug(
            f"Built {len(rows)} feature rows x {schema.width} columns "
            f"for {molecule.atom_count} atoms"
        )
        data = np.array(rows, dtype=dtype).reshape(len(rows), schema.width)
        table = pd.DataFrame(data, columns=list(schema.columns))
        table.attrs["schema_version"] = schema.version
        return table


def feature_matrix(table: pd.DataFrame, schema: FeatureSchema) -> np.ndarray:
    """
    Extract the classifier input from a feature table.

    Args:
        table: Feature table, possibly with extra columns such as predictions
        schema: Column layout expected by the classifier

    Returns:
        2-D array in schema column order

    Raises:
        FeatureShapeError: If the table lacks schema columns
    """
    missing = [c for c in schema.columns if c not in table.columns]
    if missing:
        raise FeatureShapeError(f"Feature table is missing columns: {missing}")
    return table.loc[:, list(schema.columns)].to_numpy()
