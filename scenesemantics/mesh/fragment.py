"""Mini README: Immutable triangulated mesh fragments.

Structure:
    * MeshFragment - vertex/face/normal/classification buffers plus a rigid
      local-to-world transform.
    * WorldGeometry - world-space view of a fragment's buffers.

Fragments mirror what scene reconstruction hands out per anchor: local-space
buffers and a transform. Arrays are copied and frozen on construction so a
snapshot can be shared between worker threads without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, NamedTuple

import numpy as np

from ..geometry import apply_transform_many, rotate_vectors, translation_of, validate_transform
from ..labels import Label


def _frozen_array(values: Any, *, dtype: Any = None, columns: int | None = None) -> np.ndarray:
    array = np.array(values, dtype=dtype)
    if columns is not None:
        if array.size == 0:
            array = array.reshape(0, columns)
        if array.ndim != 2 or array.shape[1] != columns:
            raise ValueError(f"Expected an array of shape (N, {columns}), got {array.shape}")
    array.setflags(write=False)
    return array


class WorldGeometry(NamedTuple):
    """World-space vertices, the shared face indices and rotated normals."""

    vertices: np.ndarray
    faces: np.ndarray
    normals: np.ndarray


@dataclass(frozen=True, slots=True, eq=False)
class MeshFragment:
    """A locally triangulated patch of the reconstructed scene."""

    vertices: np.ndarray
    faces: np.ndarray
    classifications: np.ndarray
    transform: np.ndarray = field(default_factory=lambda: np.eye(4))
    normals: np.ndarray = field(default_factory=lambda: np.empty((0, 3)))
    identifier: str = "fragment"

    def __post_init__(self) -> None:
        vertices = _frozen_array(self.vertices, dtype=float, columns=3)
        faces = _frozen_array(self.faces, dtype=np.int64, columns=3)
        normals = _frozen_array(self.normals, dtype=float, columns=3)
        classifications = _frozen_array(self.classifications)
        transform = _frozen_array(self.transform, dtype=float)

        if faces.size and (faces.min() < 0 or faces.max() >= len(vertices)):
            raise ValueError(
                f"Fragment {self.identifier} has face indices outside 0..{len(vertices) - 1}"
            )
        if classifications.ndim != 1 or len(classifications) != len(faces):
            raise ValueError(
                f"Fragment {self.identifier} needs one classification per face "
                f"({len(faces)}), got {classifications.shape}"
            )
        if len(normals) and len(normals) != len(vertices):
            raise ValueError(
                f"Fragment {self.identifier} normals must parallel the vertex buffer"
            )
        if not validate_transform(transform):
            raise ValueError(f"Fragment {self.identifier} transform is not a 4x4 affine matrix")

        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "faces", faces)
        object.__setattr__(self, "normals", normals)
        object.__setattr__(self, "classifications", classifications)
        object.__setattr__(self, "transform", transform)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    @property
    def origin(self) -> np.ndarray:
        """World-space position of the fragment's local origin."""

        return translation_of(self.transform)

    def face_vertices(self, face_index: int) -> np.ndarray:
        """Local positions of the three vertices of ``face_index``."""

        return self.vertices[self.faces[face_index]]

    def face_center(self, face_index: int) -> np.ndarray:
        """Local geometric center (vertex mean) of ``face_index``."""

        return self.face_vertices(face_index).mean(axis=0)

    def face_centers(self) -> np.ndarray:
        """Local centers of every face as an (M, 3) array."""

        return self.vertices[self.faces].mean(axis=1)

    def classification_of(self, face_index: int) -> Any:
        """Raw classification value as delivered by the provider."""

        return self.classifications[face_index]

    def label_of(self, face_index: int) -> Label:
        """Resolved label; raises ``UnmappedLabelError`` for unknown values."""

        return Label.parse(self.classification_of(face_index))

    def world_vertices(self) -> np.ndarray:
        return apply_transform_many(self.transform, self.vertices)

    def world_face_vertices(self, face_index: int) -> np.ndarray:
        return apply_transform_many(self.transform, self.face_vertices(face_index))

    def world_face_centers(self) -> np.ndarray:
        return apply_transform_many(self.transform, self.face_centers())

    def world_geometry(self) -> WorldGeometry:
        """Vertices and normals in world space; normals are rotated, not translated."""

        return WorldGeometry(
            vertices=self.world_vertices(),
            faces=np.array(self.faces),
            normals=rotate_vectors(self.transform, self.normals),
        )

    @classmethod
    def from_world_triangles(
        cls,
        triangles: Iterable[Iterable[Iterable[float]]],
        classifications: Iterable[Any],
        *,
        transform: np.ndarray | None = None,
        identifier: str = "fragment",
    ) -> "MeshFragment":
        """Build a fragment from explicit triangles, one vertex triple per face."""

        vertices = np.array([vertex for triangle in triangles for vertex in triangle], dtype=float)
        faces = np.arange(len(vertices), dtype=np.int64).reshape(-1, 3)
        return cls(
            vertices=vertices,
            faces=faces,
            classifications=np.array(list(classifications)),
            transform=np.eye(4) if transform is None else transform,
            identifier=identifier,
        )
