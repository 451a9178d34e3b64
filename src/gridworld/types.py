"""Core types for the tile world."""

from enum import IntEnum

# Integer pair shared by tile, chunk and in-chunk offset spaces.
# Coordinate system: +X is right, +Y is down
Coordinate = tuple[int, int]

# Float pair for screen and world space.
Point = tuple[float, float]


class Direction(IntEnum):
    """4-direction camera movement."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
