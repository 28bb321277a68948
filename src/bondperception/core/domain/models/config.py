"""Configuration for the bond perception pipeline."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

import numpy as np

from .feature_schema import FeatureSchema

SUPPORTED_DTYPES = ("float32", "float64")


@dataclass
class PerceptionConfig:
    """
    Parameters of feature extraction and prediction.

    Attributes:
        distance_cutoff: Maximum pair distance for a bond candidate
        n_neighbors: Nearest non-pair atoms described per pair atom
        pad_missing_neighbors: Pad rows with zeros when a molecule has fewer
            than ``n_neighbors`` eligible atoms, keeping a uniform width
        dtype: Floating point precision used for all distances
        model_path: Path of the persisted classifier
    """

    distance_cutoff: float = 3.0
    n_neighbors: int = 3
    pad_missing_neighbors: bool = True
    dtype: str = "float32"
    model_path: str = "xgb.model"

    def __post_init__(self):
        """Validate parameters after initialization."""
        self.validate()

    def validate(self) -> None:
        """Validate that all parameters are within acceptable ranges."""
        if not self.distance_cutoff > 0.0:
            raise ValueError(
                f"distance_cutoff must be positive, got {self.distance_cutoff}"
            )
        if self.n_neighbors < 0:
            raise ValueError(f"n_neighbors must be >= 0, got {self.n_neighbors}")
        if self.dtype not in SUPPORTED_DTYPES:
            raise ValueError(
                f"dtype must be one of {SUPPORTED_DTYPES}, got {self.dtype!r}"
            )

    @property
    def float_type(self) -> np.dtype:
        return np.dtype(self.dtype)

    @property
    def schema(self) -> FeatureSchema:
        """Schema of padded feature tables built with this configuration."""
        return FeatureSchema(n_neighbors=self.n_neighbors)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save_to_file(self, filename: str) -> None:
        """
        Save the configuration to a JSON file.

        Args:
            filename: Path to save the configuration file
        """
        filepath = Path(filename)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=4)

    @classmethod
    def from_json(cls, filename: str) -> "PerceptionConfig":
        """
        Load configuration from a JSON file.

        Unknown keys are ignored and missing keys keep their defaults.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist
            ValueError: If the configuration file is invalid
        """
        filepath = Path(filename)
        if not filepath.exists():
            raise FileNotFoundError(f"Configuration file not found: {filename}")

        try:
            with open(filepath, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a JSON object")

        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
