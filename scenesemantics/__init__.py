"""Mini README: Core package initializer for scenesemantics.

The package answers two questions about a scene-reconstruction mesh: which
semantic surface lies under a tapped point, and which world-space points
belong to each surface label. Convenience imports expose the high-level
services without requiring callers to know the module structure.
"""

from .logging_utils import get_logger
from .labels import Label
from .mesh import MeshFragment, MeshFragmentStore, MeshSnapshot
from .orchestrator import QueryOrchestrator

__all__ = [
    "Label",
    "MeshFragment",
    "MeshFragmentStore",
    "MeshSnapshot",
    "QueryOrchestrator",
    "get_logger",
]
