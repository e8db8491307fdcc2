"""Grid coordinates and unit steps."""

from __future__ import annotations

from dataclasses import dataclass


def _sign(value: int) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """Immutable 2-D integer coordinate.

    Equality is structural on ``(x, y)`` across subclasses, so a
    :class:`Direction` equals the plain point with the same components.
    """

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __hash__(self) -> int:
        return hash((self.x, self.y))


class Direction(Point):
    """A single step towards a destination.

    Each component is clamped to -1, 0 or 1 by the sign of the raw delta,
    so ``Direction(5, -4) == Direction(1, -1)``.
    """

    __slots__ = ()

    def __init__(self, dx: int, dy: int) -> None:
        super().__init__(_sign(dx), _sign(dy))
