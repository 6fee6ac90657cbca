"""Mini README: Tests for the rigid-transform helpers.

Covers point and normal mapping, distance symmetry, and the transform
validation used when fragments are constructed.
"""

from __future__ import annotations

import numpy as np
import pytest

from scenesemantics.geometry import (
    apply_transform,
    apply_transform_many,
    as_point,
    distance,
    distances,
    rotate_vector,
    translation_of,
    validate_transform,
)


def _rotation_z_90(translation=(1.0, 2.0, 3.0)) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, :3] = [[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]
    matrix[:3, 3] = translation
    return matrix


def test_apply_transform_rotates_then_translates() -> None:
    """Positions pick up both the rotation and the translation."""

    world = apply_transform(_rotation_z_90(), (1.0, 0.0, 0.0))
    assert world == pytest.approx([1.0, 3.0, 3.0])


def test_apply_transform_many_matches_single_point_version() -> None:
    matrix = _rotation_z_90()
    points = np.array([[1.0, 0.0, 0.0], [0.0, 2.0, -1.0]])
    many = apply_transform_many(matrix, points)
    for row, point in zip(many, points):
        assert row == pytest.approx(apply_transform(matrix, point))


def test_rotate_vector_ignores_translation() -> None:
    """Normals are directions, so the translation column must not leak in."""

    assert rotate_vector(_rotation_z_90(), (1.0, 0.0, 0.0)) == pytest.approx([0.0, 1.0, 0.0])


def test_distance_is_symmetric_and_zero_on_identity() -> None:
    a, b = (0.0, 0.0, 0.0), (3.0, 4.0, 0.0)
    assert distance(a, b) == pytest.approx(5.0)
    assert distance(b, a) == pytest.approx(5.0)
    assert distance(b, b) == 0.0
    assert distances(np.array([a, b]), a) == pytest.approx([0.0, 5.0])


def test_translation_and_as_point() -> None:
    origin = translation_of(_rotation_z_90((4.0, 5.0, 6.0)))
    point = as_point(origin)
    assert point == (4.0, 5.0, 6.0)
    assert all(type(component) is float for component in point)


def test_validate_transform_rejects_malformed_matrices() -> None:
    assert validate_transform(np.eye(4))
    assert validate_transform(_rotation_z_90(), strict=True)
    assert not validate_transform(np.eye(3))

    projective = np.eye(4)
    projective[3, 0] = 0.5
    assert not validate_transform(projective)

    scaled = np.diag([2.0, 2.0, 2.0, 1.0])
    assert validate_transform(scaled)
    assert not validate_transform(scaled, strict=True)

    broken = np.eye(4)
    broken[0, 3] = np.nan
    assert not validate_transform(broken)
