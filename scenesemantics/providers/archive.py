"""Mini README: Replay captured meshes from ``.npz`` snapshot archives.

Structure:
    * save_snapshot_archive - persist fragments with ``numpy.savez_compressed``.
    * load_snapshot_archive - rebuild fragments from an archive.
    * ArchiveMeshProvider - provider re-reading an archive on every snapshot.

Archive layout: ``fragment_count`` and ``identifiers`` plus, for fragment
``i``, the arrays ``i_vertices``, ``i_faces``, ``i_normals``,
``i_classifications`` and ``i_transform``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ..errors import ProviderUnavailableError
from ..logging_utils import get_logger
from ..mesh.fragment import MeshFragment
from .base import MeshProvider
from .registry import REGISTRY

LOGGER = get_logger(__name__)


def save_snapshot_archive(fragments: Iterable[MeshFragment], path: Path) -> Path:
    """Write fragments to ``path`` so they can be replayed later."""

    fragments = list(fragments)
    arrays = {
        "fragment_count": np.array(len(fragments)),
        "identifiers": np.array([fragment.identifier for fragment in fragments], dtype=str),
    }
    for index, fragment in enumerate(fragments):
        classifications = fragment.classifications
        if classifications.dtype == object:
            classifications = np.array(
                [getattr(value, "value", value) for value in classifications], dtype=str
            )
        arrays[f"{index}_vertices"] = fragment.vertices
        arrays[f"{index}_faces"] = fragment.faces
        arrays[f"{index}_normals"] = fragment.normals
        arrays[f"{index}_classifications"] = classifications
        arrays[f"{index}_transform"] = fragment.transform

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as archive_file:
        np.savez_compressed(archive_file, **arrays)
    LOGGER.info("Saved %s fragments to %s", len(fragments), path)
    return path


def load_snapshot_archive(path: Path) -> List[MeshFragment]:
    """Read fragments written by ``save_snapshot_archive``."""

    with np.load(path, allow_pickle=False) as archive:
        count = int(archive["fragment_count"])
        identifiers = [str(identifier) for identifier in archive["identifiers"]]
        fragments = [
            MeshFragment(
                vertices=archive[f"{index}_vertices"],
                faces=archive[f"{index}_faces"],
                normals=archive[f"{index}_normals"],
                classifications=archive[f"{index}_classifications"],
                transform=archive[f"{index}_transform"],
                identifier=identifiers[index],
            )
            for index in range(count)
        ]
    LOGGER.debug("Loaded %s fragments from %s", len(fragments), path)
    return fragments


@REGISTRY.register
class ArchiveMeshProvider(MeshProvider):
    """Treat a snapshot archive on disk as the current frame."""

    provider_name = "archive"

    def __init__(self, source: Optional[Path | str] = None) -> None:
        super().__init__(source=Path(source) if source is not None else None)

    def current_fragments(self) -> Optional[Sequence[MeshFragment]]:
        if self.source is None or not self.source.exists():
            raise ProviderUnavailableError(f"Snapshot archive {self.source} is not available")
        try:
            return load_snapshot_archive(self.source)
        except (OSError, KeyError, ValueError) as exc:
            raise ProviderUnavailableError(f"Snapshot archive {self.source} is unreadable: {exc}") from exc
