"""Machine learned bond perception for 3-D molecular structures."""

from .core.domain.models.molecule import Molecule
from .core.domain.models.config import PerceptionConfig
from .core.services.bond_perception_service import BondPerceptionService
from .infrastructure.repositories.xyz_repository import (
    mol_from_xyz_file,
    mol_from_xyz_string,
)
from .infrastructure.adapters.pickled_model_adapter import PickledModelClassifier

__version__ = "0.1.0"

__all__ = [
    "Molecule",
    "PerceptionConfig",
    "BondPerceptionService",
    "PickledModelClassifier",
    "mol_from_xyz_file",
    "mol_from_xyz_string",
]
