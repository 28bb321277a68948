"""Interface for bond classifiers."""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from ..models.feature_schema import FeatureSchema


class BondClassifier(ABC):
    """Abstract base class for models scoring candidate pairs."""

    #: Column layout the model was trained on, if known.
    schema: Optional[FeatureSchema] = None

    @abstractmethod
    def predict(self, features: np.ndarray) -> np.ndarray:
        """
        Predict a bond order for each candidate pair.

        Args:
            features: 2-D array with one row per candidate pair, columns in
                feature schema order

        Returns:
            1-D array with one prediction per row; values > 0 are bonds
        """
        pass
