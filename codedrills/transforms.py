"""4x4 homogeneous transforms for column vectors, in the usual OpenGL layout."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

Vector = Sequence[float] | np.ndarray


def _vec3(value: Vector) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray, what: str) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError(f"{what} has zero length")
    return vector / length


def _matrix(matrix: np.ndarray) -> np.ndarray:
    result = np.asarray(matrix, dtype=np.float64)
    if result.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {result.shape}")
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection; ``fovy`` is in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    half = math.tan(fovy / 2.0)
    if half == 0.0:
        raise ValueError("field of view must not be zero")
    focal = 1.0 / half
    result = np.zeros((4, 4))
    result[0, 0] = focal / aspect
    result[1, 1] = focal
    result[2, 2] = (far + near) / (near - far)
    result[2, 3] = 2.0 * far * near / (near - far)
    result[3, 2] = -1.0
    return result


def look_at(eye: Vector, target: Vector, up: Vector) -> np.ndarray:
    """Return a view matrix placing the camera at ``eye`` facing ``target``."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(target) - eye_v, "view direction")
    side = _normalize(np.cross(forward, _vec3(up)), "up vector across view direction")
    true_up = np.cross(side, forward)
    result = np.identity(4)
    result[0, :3] = side
    result[1, :3] = true_up
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye_v)
    result[1, 3] = -np.dot(true_up, eye_v)
    result[2, 3] = np.dot(forward, eye_v)
    return result


def translate(matrix: np.ndarray, offset: Vector) -> np.ndarray:
    """Return ``matrix`` followed (on the right) by a translation."""
    step = np.identity(4)
    step[:3, 3] = _vec3(offset)
    return _matrix(matrix) @ step


def rotate(matrix: np.ndarray, angle: float, axis: Vector) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = unit = _normalize(_vec3(axis), "rotation axis")
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    step = np.identity(4)
    step[:3, :3] = cos_a * np.identity(3) + (1.0 - cos_a) * np.outer(unit, unit) + sin_a * cross
    return _matrix(matrix) @ step


def scale(matrix: np.ndarray, factors: float | Vector) -> np.ndarray:
    """Return ``matrix`` followed by a scaling; a single number scales uniformly."""
    values = np.broadcast_to(np.asarray(factors, dtype=np.float64), (3,))
    step = np.diag([*values, 1.0])
    return _matrix(matrix) @ step


def normal_matrix(model: np.ndarray) -> np.ndarray:
    """Return the inverse transpose of ``model``, used to transform normals."""
    return np.linalg.inv(_matrix(model)).T