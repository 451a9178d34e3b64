"""Seeded height field over tile coordinates.

Wraps a single OpenSimplex generator built once per world. The generator is
never recreated per sample, so every height depends only on the seed and the
tile coordinate.
"""

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

from .config import Scale
from .exceptions import ConfigurationError
from .types import Coordinate


def remap_unit(value: float) -> float:
    """Map native noise output in [-1, 1] onto [0, 1].

    Simplex output can overshoot [-1, 1] slightly, so the result is clipped.
    """
    return min(1.0, max(0.0, (value + 1.0) / 2.0))


class NoiseField:
    """Deterministic scalar field mapping tile coordinates to [0, 1]."""

    def __init__(self, seed: int, map_scale: Scale):
        try:
            self._generator = OpenSimplex(seed=seed)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ConfigurationError(
                f"Cannot build noise generator for seed {seed!r}"
            ) from exc
        self.seed = seed
        self.map_scale = map_scale

    def sample(self, tile: Coordinate) -> float:
        """Height at a single tile coordinate, in [0, 1]."""
        x, y = tile
        value = self._generator.noise2(x / self.map_scale.x, y / self.map_scale.y)
        return remap_unit(float(value))

    def sample_block(
        self, origin: Coordinate, width: int, height: int
    ) -> NDArray[np.float64]:
        """Heights for a width x height rectangle starting at origin.

        Args:
            origin: Tile coordinate of the top-left cell.
            width: Number of columns.
            height: Number of rows.

        Returns:
            Array of shape (height, width); [ly, lx] equals
            sample((origin_x + lx, origin_y + ly)).
        """
        ox, oy = origin
        xs = np.arange(ox, ox + width, dtype=np.float64) / self.map_scale.x
        ys = np.arange(oy, oy + height, dtype=np.float64) / self.map_scale.y
        values = np.asarray(self._generator.noise2array(xs, ys), dtype=np.float64)
        return np.clip((values + 1.0) / 2.0, 0.0, 1.0)
