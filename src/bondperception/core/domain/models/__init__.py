"""Domain model classes."""

from .molecule import Molecule
from .bond import Bond, BondType
from .feature_schema import FeatureSchema
from .config import PerceptionConfig

__all__ = [
    "Molecule",
    "Bond",
    "BondType",
    "FeatureSchema",
    "PerceptionConfig",
]
