"""Per-frame input snapshot."""

from dataclasses import dataclass

from .types import DIRECTION_DELTAS, Direction


@dataclass(frozen=True)
class Controls:
    """Which directional and zoom inputs are held this frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    zoom_in: bool = False
    zoom_out: bool = False

    @property
    def directions(self) -> frozenset[Direction]:
        held = {
            Direction.UP: self.up,
            Direction.DOWN: self.down,
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
        }
        return frozenset(d for d, active in held.items() if active)

    def axis(self) -> tuple[int, int]:
        """Net (dx, dy) in {-1, 0, 1}. Opposite directions cancel."""
        dx = dy = 0
        for direction in self.directions:
            ddx, ddy = DIRECTION_DELTAS[direction]
            dx += ddx
            dy += ddy
        return dx, dy

    @property
    def zoom(self) -> int:
        """Net zoom steps: +1 in, -1 out, 0 for none or both."""
        return int(self.zoom_in) - int(self.zoom_out)
