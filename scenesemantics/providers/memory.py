"""Mini README: In-memory mesh provider.

Structure:
    * StaticMeshProvider - holds the latest fragments pushed by a host.

Hosts bridging a live AR session push a fresh list of fragments whenever the
reconstruction updates. Until the first push (or after ``clear``) the
provider reports that no frame is active.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence, Tuple

from ..logging_utils import get_logger
from ..mesh.fragment import MeshFragment
from .base import MeshProvider
from .registry import REGISTRY

LOGGER = get_logger(__name__)


@REGISTRY.register
class StaticMeshProvider(MeshProvider):
    """Serve whichever fragments were last supplied."""

    provider_name = "static"

    def __init__(self, source: Optional[Iterable[MeshFragment]] = None) -> None:
        super().__init__(source=None)
        self._lock = threading.Lock()
        self._fragments: Optional[Tuple[MeshFragment, ...]] = None
        if source is not None:
            self.update(source)

    def update(self, fragments: Iterable[MeshFragment]) -> None:
        """Replace the current frame's fragments."""

        frozen = tuple(fragments)
        with self._lock:
            self._fragments = frozen
        LOGGER.debug("Static provider updated with %s fragments", len(frozen))

    def clear(self) -> None:
        """Drop the current frame so snapshots come back empty."""

        with self._lock:
            self._fragments = None

    def current_fragments(self) -> Optional[Sequence[MeshFragment]]:
        with self._lock:
            return self._fragments
