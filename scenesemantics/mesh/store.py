"""Mini README: Per-query snapshots of the live mesh.

Structure:
    * MeshSnapshot - immutable ordered tuple of fragments for one query.
    * MeshFragmentStore - pulls snapshots from a ``MeshProvider``.

A snapshot is taken once at the start of every query. Provider failures
never propagate: they are logged and degrade to an empty snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Tuple

from ..errors import ProviderUnavailableError
from ..logging_utils import get_logger
from .fragment import MeshFragment

if TYPE_CHECKING:  # pragma: no cover
    from ..providers.base import MeshProvider

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class MeshSnapshot:
    """Fixed set of fragments used for the duration of one query."""

    fragments: Tuple[MeshFragment, ...] = ()

    def __iter__(self) -> Iterator[MeshFragment]:
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    @property
    def total_vertices(self) -> int:
        return sum(fragment.vertex_count for fragment in self.fragments)

    @property
    def total_faces(self) -> int:
        return sum(fragment.face_count for fragment in self.fragments)

    @classmethod
    def empty(cls) -> "MeshSnapshot":
        return cls(())


class MeshFragmentStore:
    """Read-only access to the provider's current fragments."""

    def __init__(self, provider: "MeshProvider") -> None:
        self.provider = provider

    def snapshot(self) -> MeshSnapshot:
        """Capture the provider's fragments, or an empty snapshot if there is no frame."""

        try:
            fragments = self.provider.current_fragments()
        except ProviderUnavailableError as exc:
            LOGGER.warning("Mesh provider %s unavailable: %s", self.provider.provider_name, exc)
            return MeshSnapshot.empty()
        except Exception:
            LOGGER.exception("Mesh provider %s failed while snapshotting", self.provider.provider_name)
            return MeshSnapshot.empty()

        if fragments is None:
            LOGGER.warning("Mesh provider %s has no active frame", self.provider.provider_name)
            return MeshSnapshot.empty()

        snapshot = MeshSnapshot(tuple(fragments))
        LOGGER.debug(
            "Captured snapshot with %s fragments (%s faces)", len(snapshot), snapshot.total_faces
        )
        return snapshot
