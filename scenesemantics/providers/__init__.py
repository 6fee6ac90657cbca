"""Mini README: Mesh provider subsystem package initialiser.

Providers stand in for the AR framework: they hand the fragment store the
current set of mesh fragments. The package is divided into ``base`` for the
abstract interface, ``registry`` for name-based lookup, and concrete
providers that register themselves on import.
"""

from .base import MeshProvider
from .registry import MeshProviderRegistry, REGISTRY
from .memory import StaticMeshProvider
from .archive import ArchiveMeshProvider, load_snapshot_archive, save_snapshot_archive

__all__ = [
    "ArchiveMeshProvider",
    "MeshProvider",
    "MeshProviderRegistry",
    "REGISTRY",
    "StaticMeshProvider",
    "load_snapshot_archive",
    "save_snapshot_archive",
]
