"""Mini README: Mesh fragment model and per-query snapshot store.

Exposes the immutable ``MeshFragment`` container, the ``MeshSnapshot`` used
for the lifetime of one query, and the ``MeshFragmentStore`` that pulls
snapshots from a mesh provider.
"""

from .fragment import MeshFragment, WorldGeometry
from .store import MeshFragmentStore, MeshSnapshot

__all__ = ["MeshFragment", "MeshFragmentStore", "MeshSnapshot", "WorldGeometry"]
