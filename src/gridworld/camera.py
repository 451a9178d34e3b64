"""World-space camera."""

from dataclasses import dataclass

from .controls import Controls
from .types import Point


@dataclass
class Camera:
    """Mutable focal point in world space. Unbounded."""

    x: float = 0.0
    y: float = 0.0
    move_speed: float = 5.25

    @property
    def center(self) -> Point:
        return (self.x, self.y)

    def apply_input(self, dx: float, dy: float) -> None:
        """Move by move_speed per unit of input on each axis independently."""
        self.x += self.move_speed * dx
        self.y += self.move_speed * dy

    def apply_controls(self, controls: Controls) -> None:
        self.apply_input(*controls.axis())
