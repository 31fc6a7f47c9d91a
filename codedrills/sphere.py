"""Triangle mesh of a UV sphere with per-vertex normals."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SphereMesh:
    """Interleaved vertex data and triangle indices.

    Each row of ``vertices`` is ``x, y, z, nx, ny, nz``; ``indices`` lists
    vertex numbers three per triangle.
    """

    vertices: np.ndarray
    indices: np.ndarray

    @property
    def positions(self) -> np.ndarray:
        return self.vertices[:, :3]

    @property
    def normals(self) -> np.ndarray:
        return self.vertices[:, 3:]

    @property
    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)


def _triangles(sectors: int, stacks: int) -> Iterator[tuple[int, int, int]]:
    for stack in range(stacks):
        first_row = stack * (sectors + 1)
        for sector in range(sectors):
            k1 = first_row + sector
            k2 = k1 + sectors + 1
            if stack != 0:
                yield (k1, k2, k1 + 1)
            if stack != stacks - 1:
                yield (k1 + 1, k2, k2 + 1)


def build_sphere(radius: float = 1.0, sectors: int = 36, stacks: int = 18) -> SphereMesh:
    """Build a sphere centred on the origin with its poles on the z axis."""
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")
    if sectors < 1 or stacks < 1:
        raise ValueError("sectors and stacks must both be at least 1")

    stack_angles = math.pi / 2 - np.arange(stacks + 1) * (math.pi / stacks)
    sector_angles = np.arange(sectors + 1) * (2 * math.pi / sectors)

    ring = radius * np.cos(stack_angles)[:, None]
    x = ring * np.cos(sector_angles)[None, :]
    y = ring * np.sin(sector_angles)[None, :]
    z = np.broadcast_to((radius * np.sin(stack_angles))[:, None], x.shape)

    positions = np.stack([x, y, z], axis=-1).reshape(-1, 3)
    vertices = np.hstack([positions, positions / radius]).astype(np.float32)

    indices = np.fromiter(
        (index for triangle in _triangles(sectors, stacks) for index in triangle),
        dtype=np.uint32,
    )
    return SphereMesh(vertices=vertices, indices=indices)