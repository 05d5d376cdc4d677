# aerolab/spatial_hash.py

"""
Uniform-grid spatial hash for the collision spheres.

Each collision object is filed under the integer cell containing its
center; a sphere query only visits the cells it can reach instead of
testing every object.
"""

import math
from collections import defaultdict

import numpy as np


class SpatialHash:
    """Maps quantized 3D cell keys to the collision objects centred in them."""

    def __init__(self, cell_size):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self._grid = defaultdict(list)
        self._max_radius = 0.0

    def __len__(self):
        return sum(len(objs) for objs in self._grid.values())

    def clear(self):
        self._grid.clear()
        self._max_radius = 0.0

    def cell_key(self, position):
        return (
            math.floor(position[0] / self.cell_size),
            math.floor(position[1] / self.cell_size),
            math.floor(position[2] / self.cell_size),
        )

    def insert(self, obj):
        self._grid[self.cell_key(obj["center"])].append(obj)
        self._max_radius = max(self._max_radius, obj["radius"])

    def build(self, objects):
        """Clear and insert every object."""
        self.clear()
        for obj in objects:
            self.insert(obj)

    def candidates(self, position, reach):
        """Objects in every cell within `reach` of position."""
        lo = self.cell_key([c - reach for c in position])
        hi = self.cell_key([c + reach for c in position])
        found = []
        for ix in range(lo[0], hi[0] + 1):
            for iy in range(lo[1], hi[1] + 1):
                for iz in range(lo[2], hi[2] + 1):
                    cell = self._grid.get((ix, iy, iz))
                    if cell:
                        found.extend(cell)
        return found

    def query_sphere(self, position, radius):
        """
        Closest object overlapping a sphere at position, or None.
        Overlap means center distance < radius + object radius.
        """
        position = np.asarray(position, dtype=float)
        best = None
        best_dist = math.inf
        for obj in self.candidates(position, radius + self._max_radius):
            dist = float(np.linalg.norm(position - obj["center"]))
            if dist < radius + obj["radius"] and dist < best_dist:
                best = obj
                best_dist = dist
        return best
