import pickle

import numpy as np
import pytest
from sklearn.dummy import DummyClassifier

from bondperception.core.domain.interfaces.bond_classifier import BondClassifier
from bondperception.core.domain.models.molecule import Molecule

WATER_XYZ = """3
water, experimental geometry
O          0.00000        0.00000        0.00000
H          0.75700        0.58600        0.00000
H         -0.75700        0.58600        0.00000
"""

ETHANE_XYZ = """8
ethane
C         -0.76500        0.00000        0.00000
C          0.76500        0.00000        0.00000
H         -1.16300        1.01300        0.00000
H         -1.16300       -0.50600        0.87700
H         -1.16300       -0.50600       -0.87700
H          1.16300       -1.01300        0.00000
H          1.16300        0.50600        0.87700
H          1.16300        0.50600       -0.87700
"""


class ConstantClassifier(BondClassifier):
    """Predicts the same value for every row and records its inputs."""

    def __init__(self, value: float = 1.0):
        self.value = value
        self.calls = []

    def predict(self, features: np.ndarray) -> np.ndarray:
        self.calls.append(features)
        return np.full(features.shape[0], self.value)


class ShortDistanceClassifier(BondClassifier):
    """Single bond for pairs closer than a threshold, read from column distab."""

    def __init__(self, threshold: float = 1.6):
        self.threshold = threshold

    def predict(self, features: np.ndarray) -> np.ndarray:
        return (features[:, 5] < self.threshold).astype(float)


@pytest.fixture
def water():
    return Molecule.from_atoms(
        ["O", "H", "H"],
        [[0.0, 0.0, 0.0], [0.757, 0.586, 0.0], [-0.757, 0.586, 0.0]],
        name="water",
    )


@pytest.fixture
def carbon_monoxide():
    return Molecule.from_atoms(["C", "O"], [[0.0, 0.0, 0.0], [0.0, 0.0, 1.0]])


@pytest.fixture
def pickled_model(tmp_path):
    """Pickled estimator predicting a single bond for every candidate pair."""
    model = DummyClassifier(strategy="constant", constant=1)
    model.fit(np.ones((2, 24)), [0, 1])
    path = tmp_path / "xgb.model"
    with open(path, "wb") as f:
        pickle.dump(model, f)
    return path


@pytest.fixture
def bond_everything():
    return ConstantClassifier(1.0)


@pytest.fixture
def bond_nothing():
    return ConstantClassifier(0.0)


@pytest.fixture
def distance_classifier():
    return ShortDistanceClassifier()
