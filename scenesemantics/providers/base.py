"""Mini README: Abstract base class describing mesh providers.

Structure:
    * MeshProvider - interface implemented by AR bridges and replay sources.

A provider returns the fragments of its current frame, or ``None`` (or raises
``ProviderUnavailableError``) when no frame is active. The fragment store is
responsible for turning those cases into empty snapshots.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from ..logging_utils import get_logger
from ..mesh.fragment import MeshFragment

LOGGER = get_logger(__name__)


class MeshProvider(ABC):
    """Base interface for mesh sources."""

    provider_name: str = "generic"

    def __init__(self, source: Optional[Any] = None) -> None:
        self.source = source
        LOGGER.debug("Initialising %s mesh provider with source %r", self.provider_name, source)

    @abstractmethod
    def current_fragments(self) -> Optional[Sequence[MeshFragment]]:
        """Return the fragments of the current frame, or ``None`` without a frame."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for host displays."""

        return {
            "provider": self.provider_name,
            "source": str(self.source) if self.source is not None else "not configured",
        }
