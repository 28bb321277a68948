"""Service running bond perception end to end."""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd
from sklearn.datasets import load_svmlight_file
from sklearn.metrics import accuracy_score

from ...infrastructure.repositories.xyz_repository import mol_from_xyz_string
from ..domain.exceptions import PredictionError
from ..domain.interfaces.bond_classifier import BondClassifier
from ..domain.models.config import PerceptionConfig
from ..domain.models.feature_schema import PREDICTION_COLUMN, FeatureSchema
from ..domain.models.molecule import Molecule
from ..domain.models.perception_result import PerceptionResult
from .bond_reconstruction_service import BondReconstructor
from .feature_table_service import FeatureTableBuilder, feature_matrix

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Accuracy of a classifier on a labelled data set."""

    accuracy: float
    n_correct: int
    n_samples: int


class BondPerceptionService:
    """Service predicting the bonds of molecules with a bond classifier."""

    def __init__(
        self,
        classifier: BondClassifier,
        config: Optional[PerceptionConfig] = None,
        feature_builder: Optional[FeatureTableBuilder] = None,
        reconstructor: Optional[BondReconstructor] = None,
    ):
        """Initialize service with a classifier and optional collaborators."""
        self._classifier = classifier
        self._config = config or PerceptionConfig()
        self._builder = feature_builder or FeatureTableBuilder(self._config)
        self._reconstructor = reconstructor or BondReconstructor()

    def create_dataframe(self, molecule: Molecule) -> pd.DataFrame:
        """Feature table of a molecule, without predictions."""
        return self._builder.build(molecule)

    def predict_mol(self, molecule: Molecule) -> pd.DataFrame:
        """
        Score every candidate pair of a molecule.

        Returns:
            Feature table with an appended prediction column

        Raises:
            PredictionError: If the classifier fails or is misaligned
        """
        table = self._builder.build(molecule)
        schema = self._builder.schema_for(molecule)
        expected = self._classifier.schema
        if expected is not None and expected != schema:
            raise PredictionError(
                f"Classifier was trained on {expected.width} features "
                f"(schema v{expected.version}), table has {schema.width} "
                f"(schema v{schema.version})"
            )

        if len(table) == 0:
            preds = np.zeros(0, dtype=self._config.float_type)
        else:
            preds = np.asarray(self._classifier.predict(feature_matrix(table, schema)))
            if preds.reshape(-1).shape[0] != len(table):
                raise PredictionError(
                    f"Classifier returned {preds.size} predictions for "
                    f"{len(table)} candidate pairs"
                )

        table = table.copy()
        table[PREDICTION_COLUMN] = preds.reshape(-1)
        logger.info(
            f"{molecule.name or 'molecule'}: {len(table)} candidate pairs, "
            f"{int((table[PREDICTION_COLUMN] > 0).sum())} predicted bonds"
        )
        return table

    def perceive(self, molecule: Molecule) -> PerceptionResult:
        """Predict bonds and render the molecule as a connection table."""
        table = self.predict_mol(molecule)
        bonds = self._reconstructor.bonds_from_predictions(table, molecule.atom_count)
        molblock = self._reconstructor.format_molblock(molecule, bonds)
        return PerceptionResult(
            molecule=molecule, features=table, bonds=bonds, molblock=molblock
        )

    def molblock_from_xyz_string(self, contents: str, name: str = "") -> str:
        """Parse XYZ text and return the predicted molblock."""
        return self.perceive(mol_from_xyz_string(contents, name=name)).molblock


def evaluate_model(
    classifier: BondClassifier,
    data_path: str,
    schema: Optional[FeatureSchema] = None,
) -> EvaluationResult:
    """
    Evaluate a classifier on a labelled svmlight/libsvm data set.

    Args:
        classifier: Classifier to evaluate
        data_path: Data set with one labelled feature row per line
        schema: Feature layout; fixes the column count when given

    Returns:
        EvaluationResult with the fraction of correctly predicted labels
    """
    logger.info(f"Loading evaluation data set: {data_path}")
    schema = schema or classifier.schema
    if schema is not None:
        features, labels = load_svmlight_file(data_path, n_features=schema.width)
    else:
        features, labels = load_svmlight_file(data_path)

    preds = np.asarray(classifier.predict(features.toarray())).reshape(-1)
    if preds.shape[0] != labels.shape[0]:
        raise PredictionError(
            f"Classifier returned {preds.shape[0]} predictions for "
            f"{labels.shape[0]} rows"
        )

    accuracy = float(accuracy_score(labels, np.rint(preds)))
    n_correct = int(accuracy_score(labels, np.rint(preds), normalize=False))
    logger.info(f"accuracy={accuracy:.4f} ({n_correct}/{labels.shape[0]} correct)")
    return EvaluationResult(
        accuracy=accuracy, n_correct=n_correct, n_samples=int(labels.shape[0])
    )
