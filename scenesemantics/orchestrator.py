"""Mini README: Tap-query and export orchestration.

Structure:
    * QueryOrchestrator - combines the fragment store, query engine,
      aggregator and exporter into the two user-facing operations.

Usage:
    ``tap_query`` and ``export`` return ``concurrent.futures.Future`` objects
    completed by a worker pool. Snapshots are captured on the calling thread
    when the request is made; scanning happens in the background. Callers
    bound to a UI thread must marshal results back themselves. Exports run
    one at a time, in request order, on a dedicated single-worker executor
    because each one deletes and recreates the destination directory; tap
    queries never wait on them. Nothing is cancellable.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterable, Optional

from .classification import ClassificationAggregator
from .configuration import SceneSemanticsSettings, get_settings
from .export import ExportDestination, ExportReport, ObjExporter
from .logging_utils import apply_settings, get_logger
from .mesh import MeshFragmentStore, MeshSnapshot
from .providers import REGISTRY
from .query import DEFAULT_CUTOFF_DISTANCE, DEFAULT_PROXIMITY_THRESHOLD, ClassificationHit, SpatialQueryEngine

LOGGER = get_logger(__name__)


class QueryOrchestrator:
    """Run tap queries and exports against fresh mesh snapshots."""

    def __init__(
        self,
        store: MeshFragmentStore,
        *,
        destination: ExportDestination,
        exporter: Optional[ObjExporter] = None,
        aggregator: Optional[ClassificationAggregator] = None,
        threshold: float = DEFAULT_PROXIMITY_THRESHOLD,
        cutoff_distance: float = DEFAULT_CUTOFF_DISTANCE,
        max_workers: Optional[int] = None,
    ) -> None:
        self.store = store
        self.destination = destination
        self.exporter = exporter or ObjExporter()
        self.aggregator = aggregator or ClassificationAggregator()
        self.engine = SpatialQueryEngine(threshold=threshold, cutoff_distance=cutoff_distance)
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="scenesemantics")
        self._export_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="scenesemantics-export")
        LOGGER.debug(
            "Orchestrator ready (threshold=%.3f, cutoff=%.2f, destination=%s)",
            threshold,
            cutoff_distance,
            destination.root,
        )

    @classmethod
    def from_settings(cls, settings: Optional[SceneSemanticsSettings] = None) -> "QueryOrchestrator":
        """Build an orchestrator from configuration, resolving the provider by name."""

        settings = settings or get_settings()
        apply_settings(settings)
        provider = REGISTRY.create(settings.mesh_provider, source=settings.snapshot_archive)
        return cls(
            MeshFragmentStore(provider),
            destination=ExportDestination(settings.export_directory),
            threshold=settings.proximity_threshold,
            cutoff_distance=settings.cutoff_distance,
            max_workers=settings.max_workers,
        )

    def tap_query(self, point: Iterable[float]) -> "Future[ClassificationHit]":
        """Classify the surface nearest ``point`` in the background."""

        target = tuple(float(component) for component in point)
        snapshot = self.store.snapshot()
        return self._executor.submit(self._run_tap_query, target, snapshot)

    def _run_tap_query(self, point: tuple[float, ...], snapshot: MeshSnapshot) -> ClassificationHit:
        hit = self.engine.classify(point, snapshot.fragments)
        if hit.is_match:
            LOGGER.info("Tap at %s classified as %s (distance %.4f)", point, hit.label.value, hit.distance)
        else:
            LOGGER.info("Tap at %s matched no face within %.3f", point, self.engine.threshold)
        return hit

    def export(self) -> "Future[ExportReport]":
        """Aggregate the whole mesh and write the OBJ files in the background."""

        snapshot = self.store.snapshot()
        return self._export_executor.submit(self._run_export, snapshot)

    def _run_export(self, snapshot: MeshSnapshot) -> ExportReport:
        aggregation = self.aggregator.aggregate(snapshot.fragments)
        LOGGER.info("Exporting %s fragments to %s", len(snapshot), self.destination.root)
        recreated = self.destination.recreate()
        report = self.exporter.export_classification(aggregation, self.destination)
        if not recreated:
            # Stale files from a previous export may remain.
            report.failed.insert(0, str(self.destination.root))
        return report

    def close(self, wait: bool = True) -> None:
        self._export_executor.shutdown(wait=wait)
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "QueryOrchestrator":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
