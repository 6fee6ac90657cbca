"""Mini README: Export utilities for aggregated mesh points.

Exposes the vertex-only OBJ exporter, the explicit ``ExportDestination``
directory handle and a matching reader for exported files.
"""

from .obj_exporter import (
    ALL_POINTS_FILENAME,
    ExportDestination,
    ExportReport,
    ObjExporter,
    label_filename,
    read_obj_vertices,
)

__all__ = [
    "ALL_POINTS_FILENAME",
    "ExportDestination",
    "ExportReport",
    "ObjExporter",
    "label_filename",
    "read_obj_vertices",
]
