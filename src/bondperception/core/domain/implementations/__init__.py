"""Feature extraction building blocks."""

from .pair_canonicalizer import CanonicalPair, PairCanonicalizer
from .neighbor_feature_extractor import NeighborFeature, NeighborFeatureExtractor

__all__ = [
    "CanonicalPair",
    "PairCanonicalizer",
    "NeighborFeature",
    "NeighborFeatureExtractor",
]
