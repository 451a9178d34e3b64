"""Dense fixed-size 2D container."""

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Grid2D(Generic[T]):
    """Fixed width x height grid backed by a flat row-major list.

    Cell (x, y) lives at index ``y * width + x``. Out-of-range access is a
    programming error and raises IndexError; callers compute offsets with
    true modulo so they are always in range.

    Every cell starts as the same ``fill`` object, so fill should be an
    immutable value. After ``freeze()`` the grid is read-only.
    """

    def __init__(self, width: int, height: int, fill: T):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._data: list[T] | tuple[T, ...] = [fill] * (width * height)

    @property
    def frozen(self) -> bool:
        return isinstance(self._data, tuple)

    def freeze(self) -> "Grid2D[T]":
        """Make the grid read-only. Returns self."""
        self._data = tuple(self._data)
        return self

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"({x}, {y}) out of bounds for {self.width}x{self.height} grid"
            )
        return y * self.width + x

    def at(self, x: int, y: int) -> T:
        """Get the value at (x, y)."""
        return self._data[self._index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        """Set the value at (x, y).

        Raises:
            TypeError: If the grid has been frozen.
        """
        if isinstance(self._data, tuple):
            raise TypeError("Cannot set a cell of a frozen grid")
        self._data[self._index(x, y)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[tuple[int, int, T]]:
        """Yield (x, y, value) in row-major order."""
        for i, value in enumerate(self._data):
            y, x = divmod(i, self.width)
            yield x, y, value

    def __repr__(self) -> str:
        return f"Grid2D(width={self.width}, height={self.height})"
