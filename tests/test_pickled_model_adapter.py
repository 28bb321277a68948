import pickle

import numpy as np
import pytest
from sklearn.dummy import DummyClassifier

from bondperception.core.domain.exceptions import PredictionError
from bondperception.core.domain.models.feature_schema import FeatureSchema
from bondperception.infrastructure.adapters.pickled_model_adapter import (
    PickledModelClassifier,
)


def dump(obj, path):
    with open(path, "wb") as f:
        pickle.dump(obj, f)
    return path


class TestPickledModelClassifier:
    """Tests for the persisted model adapter."""

    def test_predict(self, pickled_model):
        classifier = PickledModelClassifier(str(pickled_model))
        preds = classifier.predict(np.ones((4, 24)))
        assert preds.tolist() == [1, 1, 1, 1]
        assert classifier.schema is None

    def test_model_is_loaded_lazily(self, tmp_path):
        classifier = PickledModelClassifier(str(tmp_path / "missing.model"))
        with pytest.raises(PredictionError):
            classifier.predict(np.ones((1, 24)))

    def test_bundle_with_schema(self, tmp_path):
        model = DummyClassifier(strategy="constant", constant=2)
        model.fit(np.ones((2, 18)), [0, 2])
        path = dump(
            {"model": model, "schema": FeatureSchema(n_neighbors=2).to_dict()},
            tmp_path / "bundle.pkl",
        )

        classifier = PickledModelClassifier(str(path))

        assert classifier.schema == FeatureSchema(n_neighbors=2)
        assert classifier.predict(np.ones((3, 18))).tolist() == [2, 2, 2]
        with pytest.raises(PredictionError):
            classifier.predict(np.ones((3, 24)))

    def test_schema_version_mismatch(self, tmp_path):
        schema = FeatureSchema().to_dict()
        schema["version"] = 99
        path = dump({"model": DummyClassifier(), "schema": schema}, tmp_path / "m.pkl")
        with pytest.raises(PredictionError):
            PickledModelClassifier(str(path)).load()

    def test_object_without_predict(self, tmp_path):
        path = dump({"weights": [1, 2, 3]}, tmp_path / "weights.pkl")
        with pytest.raises(PredictionError):
            PickledModelClassifier(str(path)).load()

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "corrupt.model"
        path.write_bytes(b"not a pickle")
        with pytest.raises(PredictionError):
            PickledModelClassifier(str(path)).load()

    def test_feature_matrix_must_be_2d(self, pickled_model):
        with pytest.raises(PredictionError):
            PickledModelClassifier(str(pickled_model)).predict(np.ones(24))
