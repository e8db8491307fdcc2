"""Vector between two grid locations."""

from __future__ import annotations

from typing import Protocol

from board_game_grid.point import Direction


class Located(Protocol):
    """Anything with integer grid coordinates (points, squares)."""

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...


class Vector:
    """Displacement from *origin* to *destination*.

    Distance uses the Chebyshev metric, the natural one for pieces that
    move in eight directions.
    """

    __slots__ = ("origin", "destination")

    def __init__(self, origin: Located, destination: Located) -> None:
        self.origin = origin
        self.destination = destination

    @property
    def dx(self) -> int:
        """Distance on the x axis."""
        return self.destination.x - self.origin.x

    @property
    def dy(self) -> int:
        """Distance on the y axis."""
        return self.destination.y - self.origin.y

    @property
    def magnitude(self) -> int:
        return max(abs(self.dx), abs(self.dy))

    @property
    def direction(self) -> Direction:
        return Direction(self.dx, self.dy)

    # -- Classification -----------------------------------------------------

    @property
    def is_orthogonal(self) -> bool:
        return self.dx == 0 or self.dy == 0

    @property
    def is_diagonal(self) -> bool:
        return abs(self.dx) == abs(self.dy)

    @property
    def is_orthogonal_or_diagonal(self) -> bool:
        return self.is_orthogonal or self.is_diagonal

    @property
    def is_not_orthogonal_or_diagonal(self) -> bool:
        """True for L-shaped and other off-line displacements."""
        return not self.is_orthogonal_or_diagonal

    def __repr__(self) -> str:
        return f"Vector(dx={self.dx}, dy={self.dy})"
