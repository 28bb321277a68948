"""Core business logic services."""

from .feature_table_service import FeatureTableBuilder, feature_matrix
from .bond_reconstruction_service import BondReconstructor, count_bonds
from .bond_perception_service import (
    BondPerceptionService,
    EvaluationResult,
    evaluate_model,
)

__all__ = [
    "FeatureTableBuilder",
    "feature_matrix",
    "BondReconstructor",
    "count_bonds",
    "BondPerceptionService",
    "EvaluationResult",
    "evaluate_model",
]
