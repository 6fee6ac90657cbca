"""Mini README: Export world-space point sets to vertex-only OBJ files.

Structure:
    * ExportDestination - explicit handle on the directory receiving exports.
    * ExportReport - which files were written and which failed.
    * ObjExporter - serialises point sequences as ``v x y z`` lines.
    * read_obj_vertices - parse ``v`` records back into points.

Only vertex records are written; faces and normals are not part of the
format. Coordinates use Python's shortest round-trip float representation,
so reading a file back yields exactly the exported values. File-system
errors are logged and reported, never raised to the caller.
"""

from __future__ import annotations

import contextlib
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ..classification import AggregationResult
from ..errors import ExportIOError
from ..geometry import WorldPoint
from ..labels import Label
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ALL_POINTS_FILENAME = "allVertex.obj"


def label_filename(label: Label) -> str:
    return f"{label.value}.obj"


@dataclass(slots=True)
class ExportReport:
    """Summary of one classification export."""

    directory: Path
    written: List[Path] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed


class ExportDestination:
    """Directory that is wiped and recreated before every export."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / name

    def recreate(self) -> bool:
        """Delete the directory (if present) and create it again."""

        try:
            if self.root.is_dir():
                shutil.rmtree(self.root)
            elif self.root.exists():
                self.root.unlink()
        except OSError as exc:
            LOGGER.error("%s", ExportIOError(self.root, "delete", exc))
            return False
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            LOGGER.error("%s", ExportIOError(self.root, "create", exc))
            return False
        LOGGER.debug("Recreated export directory %s", self.root)
        return True

    def __repr__(self) -> str:
        return f"ExportDestination({str(self.root)!r})"


class ObjExporter:
    """Persist point sets as OBJ vertex lists."""

    def export(self, points: Sequence[WorldPoint] | np.ndarray, destination: Path) -> Optional[Path]:
        """Write ``points`` to ``destination``; returns ``None`` if writing failed."""

        if isinstance(points, np.ndarray) and points.size and (points.ndim != 2 or points.shape[1] != 3):
            raise ValueError("Point array must be of shape (N, 3)")
        LOGGER.info("Exporting %s points to %s", len(points), destination)
        staging = destination.with_name(destination.name + ".tmp")
        try:
            with staging.open("w", encoding="utf-8") as obj_file:
                for x, y, z in points:
                    obj_file.write(f"v {float(x)} {float(y)} {float(z)}\n")
            os.replace(staging, destination)
        except OSError as exc:
            LOGGER.error("%s", ExportIOError(destination, "write", exc))
            with contextlib.suppress(OSError):
                staging.unlink()
            return None
        return destination

    def export_classification(
        self, aggregation: AggregationResult, destination: ExportDestination
    ) -> ExportReport:
        """Write the combined point list and one file per label."""

        report = ExportReport(directory=destination.root)
        targets: List[tuple[str, Iterable[WorldPoint]]] = [(ALL_POINTS_FILENAME, aggregation.all_points)]
        targets.extend((label_filename(label), aggregation.buckets.get(label, [])) for label in Label)
        for name, points in targets:
            written = self.export(list(points), destination.path_for(name))
            if written is None:
                report.failed.append(name)
                continue
            report.written.append(written)
        if report.failed:
            LOGGER.warning("Export to %s incomplete; failed files: %s", destination.root, report.failed)
        else:
            LOGGER.info("Exported %s files to %s", len(report.written), destination.root)
        return report


def read_obj_vertices(path: Path) -> List[WorldPoint]:
    """Parse the ``v`` records of an OBJ file, ignoring everything else."""

    points: List[WorldPoint] = []
    with path.open("r", encoding="utf-8") as obj_file:
        for line_number, line in enumerate(obj_file, start=1):
            tokens = line.split()
            if not tokens or tokens[0] != "v":
                continue
            if len(tokens) < 4:
                raise ValueError(f"{path}:{line_number}: vertex record needs three coordinates")
            points.append((float(tokens[1]), float(tokens[2]), float(tokens[3])))
    return points
