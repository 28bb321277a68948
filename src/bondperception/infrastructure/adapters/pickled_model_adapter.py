"""Adapter exposing a persisted estimator as a bond classifier."""

import logging
import os
import pickle
from typing import Any, Optional

import numpy as np

from ...core.domain.exceptions import PredictionError
from ...core.domain.interfaces.bond_classifier import BondClassifier
from ...core.domain.models.feature_schema import SCHEMA_VERSION, FeatureSchema

logger = logging.getLogger(__name__)


class PickledModelClassifier(BondClassifier):
    """Bond classifier backed by a pickled estimator.

    The pickle holds either the estimator itself or a dictionary with the
    keys ``"model"`` and optionally ``"schema"`` (as produced by
    ``FeatureSchema.to_dict``). Any object with a ``predict(X)`` method
    works, e.g. a scikit-learn or xgboost model.
    """

    def __init__(self, model_path: str):
        """
        Initialize adapter.

        Args:
            model_path: Path to the pickled model; loaded on first use
        """
        self.model_path = model_path
        self._model: Optional[Any] = None
        self._schema: Optional[FeatureSchema] = None

    @property
    def model(self) -> Any:
        if self._model is None:
            self.load()
        return self._model

    @property
    def schema(self) -> Optional[FeatureSchema]:
        """Feature layout stored with the model, if any."""
        if self._model is None:
            self.load()
        return self._schema

    def load(self) -> None:
        """
        Load the persisted model.

        Raises:
            PredictionError: If the file is missing or does not hold a model
        """
        if not os.path.exists(self.model_path):
            raise PredictionError(f"Model file not found: {self.model_path}")

        logger.info(f"Loading model: {self.model_path}")
        try:
            with open(self.model_path, "rb") as f:
                saved = pickle.load(f)
        except (
            OSError,
            EOFError,
            pickle.UnpicklingError,
            ImportError,
            AttributeError,
        ) as e:
            raise PredictionError(f"Could not load model {self.model_path}: {e}") from e

        if isinstance(saved, dict):
            model = saved.get("model")
            schema = saved.get("schema")
            if schema is not None:
                version = schema.get("version", SCHEMA_VERSION)
                if version != SCHEMA_VERSION:
                    raise PredictionError(
                        f"Model expects feature schema version {version}, "
                        f"this build produces version {SCHEMA_VERSION}"
                    )
                self._schema = FeatureSchema(n_neighbors=schema["n_neighbors"])
        else:
            model = saved

        if not hasattr(model, "predict"):
            raise PredictionError(
                f"Object in {self.model_path} has no predict method: {type(model)}"
            )
        self._model = model

    def predict(self, features: np.ndarray) -> np.ndarray:
        """Predict one value per feature row."""
        features = np.asarray(features)
        if features.ndim != 2:
            raise PredictionError(
                f"Feature matrix must be 2-D, got shape {features.shape}"
            )
        model = self.model
        if self._schema is not None and features.shape[1] != self._schema.width:
            raise PredictionError(
                f"Model expects {self._schema.width} features, got {features.shape[1]}"
            )

        try:
            preds = np.asarray(model.predict(features)).reshape(-1)
        except Exception as e:
            raise PredictionError(f"Model prediction failed: {e}") from e

        if preds.shape[0] != features.shape[0]:
            raise PredictionError(
                f"Model returned {preds.shape[0]} predictions for "
                f"{features.shape[0]} rows"
            )
        return preds
