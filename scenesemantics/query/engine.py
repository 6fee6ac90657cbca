"""Mini README: Brute-force nearest-face and threshold classification search.

Structure:
    * ClassificationHit - result of a tap query (center, label, neighbours).
    * nearest_face - globally closest face by center distance.
    * cull_and_sort - drop distant fragments, order the rest by origin distance.
    * nearest_classified_face - first face within a threshold, with its label.
    * SpatialQueryEngine - binds configured threshold/cutoff to the functions.

Every search is a linear scan over all faces of the supplied fragments; no
spatial index is kept. Scans are vectorised per fragment with numpy but
visit fragments in the order given and faces in fragment order, so ties
resolve to the first face encountered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

import numpy as np

from ..errors import UnmappedLabelError
from ..geometry import WorldPoint, as_point, distance, distances
from ..labels import Label
from ..logging_utils import get_logger
from ..mesh.fragment import MeshFragment

LOGGER = get_logger(__name__)

DEFAULT_PROXIMITY_THRESHOLD = 0.05
DEFAULT_CUTOFF_DISTANCE = 4.0

NeighborTriple = Tuple[WorldPoint, WorldPoint, WorldPoint]
_Default = TypeVar("_Default")


@dataclass(frozen=True, slots=True)
class ClassificationHit:
    """Outcome of a proximity-threshold query."""

    center: Optional[WorldPoint] = None
    label: Label = Label.NONE
    neighbors: Tuple[WorldPoint, ...] = ()
    distance: Optional[float] = None

    @property
    def is_match(self) -> bool:
        return self.center is not None

    @classmethod
    def miss(cls) -> "ClassificationHit":
        return cls()


def nearest_face(
    point: Iterable[float],
    fragments: Iterable[MeshFragment],
    default: _Default = None,
) -> Union[NeighborTriple, _Default]:
    """Return the world-space vertices of the face whose center is closest to ``point``.

    When there is nothing to scan, ``default`` is returned unchanged.
    """

    target = np.asarray(point, dtype=float)
    best_distance = np.inf
    best: Optional[Tuple[MeshFragment, int]] = None
    for fragment in fragments:
        if fragment.face_count == 0:
            continue
        face_distances = distances(fragment.world_face_centers(), target)
        index = int(np.argmin(face_distances))
        # Strict comparison keeps the earlier fragment on ties.
        if face_distances[index] < best_distance:
            best_distance = float(face_distances[index])
            best = (fragment, index)

    if best is None:
        return default
    fragment, index = best
    first, second, third = (as_point(vertex) for vertex in fragment.world_face_vertices(index))
    return (first, second, third)


def cull_and_sort(
    point: Iterable[float],
    fragments: Iterable[MeshFragment],
    cutoff_distance: float = DEFAULT_CUTOFF_DISTANCE,
) -> List[MeshFragment]:
    """Keep fragments whose origin is within ``cutoff_distance``, nearest first."""

    target = np.asarray(point, dtype=float)
    ranked = [(distance(fragment.origin, target), fragment) for fragment in fragments]
    kept = [entry for entry in ranked if entry[0] <= cutoff_distance]
    kept.sort(key=lambda entry: entry[0])
    return [fragment for _, fragment in kept]


def _resolve_label(fragment: MeshFragment, face_index: int) -> Label:
    try:
        return fragment.label_of(face_index)
    except UnmappedLabelError as exc:
        LOGGER.warning("Face %s of %s: %s; reporting None", face_index, fragment.identifier, exc)
        return Label.NONE


def nearest_classified_face(
    point: Iterable[float],
    fragments: Iterable[MeshFragment],
    threshold: float = DEFAULT_PROXIMITY_THRESHOLD,
    cutoff_distance: float = DEFAULT_CUTOFF_DISTANCE,
) -> ClassificationHit:
    """Find the first face whose world center lies within ``threshold`` of ``point``.

    Fragments farther than ``cutoff_distance`` are ignored and the rest are
    scanned nearest-origin first. The first qualifying face wins, which is
    not necessarily the closest one. On a match the nearest face of the
    filtered fragments is reported as ``neighbors``.
    """

    target = np.asarray(point, dtype=float)
    candidates = cull_and_sort(target, fragments, cutoff_distance)
    LOGGER.debug("Scanning %s fragments within %.2f of %s", len(candidates), cutoff_distance, target)

    for fragment in candidates:
        if fragment.face_count == 0:
            continue
        centers = fragment.world_face_centers()
        face_distances = distances(centers, target)
        within = np.flatnonzero(face_distances <= threshold)
        if within.size == 0:
            continue
        index = int(within[0])
        neighbors = nearest_face(target, candidates, default=())
        return ClassificationHit(
            center=as_point(centers[index]),
            label=_resolve_label(fragment, index),
            neighbors=tuple(neighbors),
            distance=float(face_distances[index]),
        )

    return ClassificationHit.miss()


class SpatialQueryEngine:
    """Query facade carrying the configured threshold and cutoff."""

    def __init__(
        self,
        *,
        threshold: float = DEFAULT_PROXIMITY_THRESHOLD,
        cutoff_distance: float = DEFAULT_CUTOFF_DISTANCE,
    ) -> None:
        if threshold < 0:
            raise ValueError("Proximity threshold must be non-negative")
        if cutoff_distance < 0:
            raise ValueError("Cutoff distance must be non-negative")
        self.threshold = threshold
        self.cutoff_distance = cutoff_distance

    def nearest_face(
        self, point: Iterable[float], fragments: Sequence[MeshFragment], default: _Default = None
    ) -> Union[NeighborTriple, _Default]:
        return nearest_face(point, fragments, default)

    def classify(self, point: Iterable[float], fragments: Sequence[MeshFragment]) -> ClassificationHit:
        """Run the threshold search with this engine's settings."""

        return nearest_classified_face(
            point, fragments, threshold=self.threshold, cutoff_distance=self.cutoff_distance
        )
