"""Mini README: Spatial queries over mesh snapshots.

Provides nearest-face search, the proximity-threshold classification used
by tap queries, and the distance-based culling that bounds tap queries to
fragments near the requested point.
"""

from .engine import (
    DEFAULT_CUTOFF_DISTANCE,
    DEFAULT_PROXIMITY_THRESHOLD,
    ClassificationHit,
    NeighborTriple,
    SpatialQueryEngine,
    cull_and_sort,
    nearest_classified_face,
    nearest_face,
)

__all__ = [
    "ClassificationHit",
    "DEFAULT_CUTOFF_DISTANCE",
    "DEFAULT_PROXIMITY_THRESHOLD",
    "NeighborTriple",
    "SpatialQueryEngine",
    "cull_and_sort",
    "nearest_classified_face",
    "nearest_face",
]
