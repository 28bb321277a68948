"""Domain layer: models, element data and feature extraction."""
