"""Mini README: Rigid-transform and distance helpers.

Pure numpy functions shared by the mesh store, the query engine and the
aggregator. Nothing here keeps state.
"""

from .transforms import (
    WorldPoint,
    apply_transform,
    apply_transform_many,
    as_point,
    distance,
    distances,
    rotate_vector,
    rotate_vectors,
    translation_of,
    validate_transform,
)

__all__ = [
    "WorldPoint",
    "apply_transform",
    "apply_transform_many",
    "as_point",
    "distance",
    "distances",
    "rotate_vector",
    "rotate_vectors",
    "translation_of",
    "validate_transform",
]
