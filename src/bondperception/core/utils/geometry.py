# src/bondperception/core/utils/geometry.py

"""Geometry helpers: distance matrices and candidate pair search."""

from typing import Iterator, Tuple

import numpy as np


def distance_matrix(coordinates: np.ndarray, dtype=np.float32) -> np.ndarray:
    """Compute all-pairs Euclidean distances.

    Args:
        coordinates: Array of shape (n_atoms, 3)
        dtype: Floating point precision of the computation and the result

    Returns:
        Symmetric (n_atoms, n_atoms) matrix with a zero diagonal
    """
    coords = np.asarray(coordinates, dtype=dtype)
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    return np.sqrt(np.sum(diff * diff, axis=-1, dtype=dtype))


def argsort_stable(values: np.ndarray) -> np.ndarray:
    """Indices that sort ``values`` ascending; ties keep index order."""
    return np.argsort(values, kind="stable")


def candidate_pairs(
    distances: np.ndarray, cutoff: float
) -> Iterator[Tuple[int, int]]:
    """Yield each unordered atom pair ``(i, j)``, ``i < j``, within ``cutoff``.

    Pairs are generated in row-major order of the upper triangle.
    """
    n_atoms = distances.shape[0]
    for i in range(n_atoms):
        for j in range(i + 1, n_atoms):
            if distances[i, j] <= cutoff:
                yield i, j
