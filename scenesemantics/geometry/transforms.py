"""Mini README: Coordinate-frame composition for mesh fragments.

Structure:
    * apply_transform / apply_transform_many - local positions to world space.
    * rotate_vector / rotate_vectors - rotation-only mapping for normals.
    * distance / distances - Euclidean distance helpers.
    * translation_of - origin of a local-to-world matrix.
    * validate_transform - sanity checks for 4x4 rigid transforms.
    * as_point - convert vectors into hashable ``WorldPoint`` tuples.

Transforms are column-vector 4x4 matrices (``world = M @ [x, y, z, 1]``),
matching the layout AR frameworks report for anchor transforms.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

WorldPoint = Tuple[float, float, float]


def apply_transform(matrix: np.ndarray, point: Iterable[float]) -> np.ndarray:
    """Map a local position (w=1) into world space."""

    local = np.asarray(point, dtype=float)
    return matrix[:3, :3] @ local + matrix[:3, 3]


def apply_transform_many(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Vectorised ``apply_transform`` for an (N, 3) array."""

    local = np.asarray(points, dtype=float).reshape(-1, 3)
    return local @ matrix[:3, :3].T + matrix[:3, 3]


def rotate_vector(matrix: np.ndarray, vector: Iterable[float]) -> np.ndarray:
    """Apply only the rotation part of ``matrix`` (w=0)."""

    return matrix[:3, :3] @ np.asarray(vector, dtype=float)


def rotate_vectors(matrix: np.ndarray, vectors: np.ndarray) -> np.ndarray:
    local = np.asarray(vectors, dtype=float).reshape(-1, 3)
    return local @ matrix[:3, :3].T


def translation_of(matrix: np.ndarray) -> np.ndarray:
    """Return the translation column, i.e. the fragment origin in world space."""

    return np.array(matrix[:3, 3], dtype=float)


def distance(a: Iterable[float], b: Iterable[float]) -> float:
    """Euclidean distance between two 3D points."""

    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))


def distances(points: np.ndarray, target: Iterable[float]) -> np.ndarray:
    """Distance from every row of ``points`` to ``target``."""

    return np.linalg.norm(np.asarray(points, dtype=float) - np.asarray(target, dtype=float), axis=1)


def as_point(vector: Iterable[float]) -> WorldPoint:
    """Convert a 3-vector into a tuple of Python floats."""

    x, y, z = (float(component) for component in vector)
    return (x, y, z)


def validate_transform(matrix: np.ndarray, *, strict: bool = False) -> bool:
    """
    Validate that ``matrix`` is usable as a local-to-world transform.

    Checks:
    - Shape is (4, 4)
    - No NaN or Inf values
    - Bottom row is [0, 0, 0, 1]
    - With ``strict``: rotation part is orthonormal with determinant +1
    """
    matrix = np.asarray(matrix, dtype=float)
    if matrix.shape != (4, 4):
        return False

    if not np.all(np.isfinite(matrix)):
        return False

    if not np.allclose(matrix[3, :], [0, 0, 0, 1], atol=1e-6):
        return False

    if strict:
        rotation = matrix[:3, :3]
        if not np.allclose(rotation @ rotation.T, np.eye(3), atol=1e-4):
            return False
        if not np.isclose(np.linalg.det(rotation), 1.0, atol=1e-4):
            return False

    return True
