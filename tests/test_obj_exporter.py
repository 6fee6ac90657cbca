"""Mini README: Tests for OBJ serialisation and the export destination.

Confirms the ``v x y z`` format, exact round-tripping, overwrite semantics,
and that file-system failures are reported without raising.
"""

from __future__ import annotations

import numpy as np
import pytest

from scenesemantics.classification import Label, aggregate_by_classification
from scenesemantics.export import (
    ALL_POINTS_FILENAME,
    ExportDestination,
    ObjExporter,
    label_filename,
    read_obj_vertices,
)
from scenesemantics.mesh import MeshFragment


def test_export_writes_one_vertex_line_per_point(tmp_path) -> None:
    destination = ObjExporter().export([(1.0, 2.5, -3.0), (0.0, 0.0, 0.0)], tmp_path / "points.obj")
    assert destination == tmp_path / "points.obj"
    assert destination.read_text(encoding="utf-8") == "v 1.0 2.5 -3.0\nv 0.0 0.0 0.0\n"


def test_export_round_trips_exact_values(tmp_path) -> None:
    points = [(0.1, -2.5e-7, 123456.789), (1.0 / 3.0, -0.0, 42.0), (0.1, -2.5e-7, 123456.789)]
    path = ObjExporter().export(points, tmp_path / "round.obj")
    assert read_obj_vertices(path) == points


def test_export_accepts_numpy_arrays(tmp_path) -> None:
    array = np.array([[0.5, 1.5, 2.5], [3.0, 4.0, 5.0]])
    path = ObjExporter().export(array, tmp_path / "array.obj")
    assert read_obj_vertices(path) == [(0.5, 1.5, 2.5), (3.0, 4.0, 5.0)]

    with pytest.raises(ValueError):
        ObjExporter().export(np.zeros((2, 2)), tmp_path / "bad.obj")


def test_export_overwrites_existing_file(tmp_path) -> None:
    target = tmp_path / "points.obj"
    target.write_text("v 9 9 9\nv 8 8 8\n", encoding="utf-8")
    ObjExporter().export([(1.0, 1.0, 1.0)], target)
    assert read_obj_vertices(target) == [(1.0, 1.0, 1.0)]
    assert not (tmp_path / "points.obj.tmp").exists()


def test_export_failure_returns_none(tmp_path) -> None:
    """Missing directories are reported by return value, not by raising."""

    assert ObjExporter().export([(1.0, 1.0, 1.0)], tmp_path / "missing" / "points.obj") is None


def test_read_obj_vertices_ignores_other_records(tmp_path) -> None:
    path = tmp_path / "mixed.obj"
    path.write_text("# comment\nv 1 2 3\nvn 0 0 1\n\nf 1 1 1\nv 4 5 6\n", encoding="utf-8")
    assert read_obj_vertices(path) == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]


def test_destination_recreate_clears_stale_files(tmp_path) -> None:
    destination = ExportDestination(tmp_path / "ObjFile")
    assert destination.recreate()
    stale = destination.path_for("stale.obj")
    stale.write_text("v 0 0 0\n", encoding="utf-8")

    assert destination.recreate()
    assert destination.root.is_dir()
    assert not stale.exists()


def test_export_classification_writes_nine_files(tmp_path) -> None:
    fragment = MeshFragment.from_world_triangles(
        [[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]], ["Wall"]
    )
    destination = ExportDestination(tmp_path / "ObjFile")
    destination.recreate()

    report = ObjExporter().export_classification(aggregate_by_classification([fragment]), destination)

    expected = {ALL_POINTS_FILENAME} | {label_filename(label) for label in Label}
    assert report.succeeded
    assert {path.name for path in report.written} == expected
    assert len(expected) == 9
    assert len(read_obj_vertices(destination.path_for("Wall.obj"))) == 3
    assert read_obj_vertices(destination.path_for("Door.obj")) == []


def test_export_classification_continues_after_a_failed_file(tmp_path) -> None:
    """A single unwritable file is reported while its siblings are still written."""

    destination = ExportDestination(tmp_path / "ObjFile")
    destination.recreate()
    destination.path_for("Wall.obj").mkdir()

    report = ObjExporter().export_classification(aggregate_by_classification([]), destination)

    assert report.failed == ["Wall.obj"]
    assert len(report.written) == 8
    assert destination.path_for(ALL_POINTS_FILENAME).exists()
    assert not destination.path_for("Wall.obj.tmp").exists()
