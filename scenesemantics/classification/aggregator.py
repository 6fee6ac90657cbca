"""Mini README: Group mesh vertices into deduplicated per-label buckets.

Structure:
    * AggregationResult - combined vertex list plus label buckets.
    * ClassificationAggregator - full traversal of a set of fragments.
    * aggregate_by_classification - functional shortcut.

Unlike tap queries, aggregation never filters by distance: exports need the
whole mesh. Bucket membership uses exact coordinate equality, so vertices
shared by adjacent faces collapse while near-duplicates from neighbouring
fragments stay distinct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from ..errors import UnmappedLabelError
from ..geometry import WorldPoint, as_point
from ..labels import Label
from ..logging_utils import get_logger
from ..mesh.fragment import MeshFragment

LOGGER = get_logger(__name__)


def _empty_buckets() -> Dict[Label, List[WorldPoint]]:
    return {label: [] for label in Label}


@dataclass(slots=True)
class AggregationResult:
    """World-space points for export."""

    all_points: List[WorldPoint] = field(default_factory=list)
    buckets: Dict[Label, List[WorldPoint]] = field(default_factory=_empty_buckets)
    skipped_faces: int = 0

    def counts(self) -> Dict[str, int]:
        """Bucket sizes keyed by label name, for logging and summaries."""

        return {label.value: len(points) for label, points in self.buckets.items()}


class ClassificationAggregator:
    """Traverse every face and vertex of a fragment set."""

    def aggregate(self, fragments: Iterable[MeshFragment]) -> AggregationResult:
        result = AggregationResult()
        seen: Dict[Label, Set[WorldPoint]] = {label: set() for label in Label}

        for fragment in fragments:
            LOGGER.debug(
                "Aggregating %s (%s faces, %s vertices)",
                fragment.identifier,
                fragment.face_count,
                fragment.vertex_count,
            )
            world_vertices = fragment.world_vertices()
            for face_index in range(fragment.face_count):
                try:
                    label = fragment.label_of(face_index)
                except UnmappedLabelError as exc:
                    LOGGER.warning("Skipping face %s of %s: %s", face_index, fragment.identifier, exc)
                    result.skipped_faces += 1
                    continue
                bucket = result.buckets[label]
                bucket_seen = seen[label]
                for vertex_index in fragment.faces[face_index]:
                    point = as_point(world_vertices[vertex_index])
                    if point in bucket_seen:
                        continue
                    bucket_seen.add(point)
                    bucket.append(point)

            result.all_points.extend(as_point(vertex) for vertex in world_vertices)

        LOGGER.info(
            "Aggregated %s vertices into buckets %s", len(result.all_points), result.counts()
        )
        return result


def aggregate_by_classification(fragments: Iterable[MeshFragment]) -> AggregationResult:
    """Aggregate ``fragments`` with a default ``ClassificationAggregator``."""

    return ClassificationAggregator().aggregate(fragments)
