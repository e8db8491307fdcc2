"""SquareSet - an ordered, queryable collection of squares."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from board_game_grid.errors import InvalidSquaresError
from board_game_grid.matchers import nested
from board_game_grid.square import PieceType, Square
from board_game_grid.vector import Vector

_LOGGER = logging.getLogger(__name__)


def _build_squares(squares: Iterable[Square | Mapping[str, Any]]) -> tuple[Square, ...]:
    try:
        elements = tuple(squares)
    except TypeError:
        raise InvalidSquaresError(
            f"Squares must be an iterable, got {type(squares).__name__}"
        ) from None

    if all(isinstance(element, Mapping) for element in elements):
        return tuple(Square.from_json(record) for record in elements)
    if all(isinstance(element, Square) for element in elements):
        return elements
    raise InvalidSquaresError(
        "All squares must be of the same kind: either records or Square objects"
    )


def _dedupe(squares: Iterable[Square]) -> tuple[Square, ...]:
    return tuple(dict.fromkeys(squares))


class SquareSet:
    """Immutable sequence of squares with filtering and path helpers.

    Every query returns a new set; the receiver's element list never
    changes. The squares themselves are shared, so assigning
    ``square.piece`` on an element is visible through every set that
    holds it.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Square | Mapping[str, Any]] = ()) -> None:
        self._squares = _build_squares(squares)

    @classmethod
    def _of(cls, squares: Iterable[Square]) -> SquareSet:
        return cls(tuple(squares))

    @property
    def squares(self) -> tuple[Square, ...]:
        return self._squares

    # -- Collection protocol ------------------------------------------------

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    def __bool__(self) -> bool:
        return bool(self._squares)

    def __contains__(self, square: object) -> bool:
        return square in self._squares

    def __getitem__(self, index: int) -> Square:
        return self._squares[index]

    @property
    def is_empty(self) -> bool:
        return not self._squares

    def first(self) -> Square | None:
        return self._squares[0] if self._squares else None

    def find(self, predicate: Callable[[Square], bool]) -> Square | None:
        """First square satisfying *predicate*, or ``None``."""
        return next((square for square in self._squares if predicate(square)), None)

    # -- Set algebra --------------------------------------------------------

    def concat(self, other: SquareSet) -> SquareSet:
        return self._of(self._squares + other._squares)

    def difference(self, other: SquareSet) -> SquareSet:
        """Squares of this set that are not in *other* (all duplicates removed)."""
        excluded = set(other._squares)
        return self._of(square for square in self._squares if square not in excluded)

    def append(self, square: Square) -> SquareSet:
        """A new set with *square* pushed on the end."""
        return self._of(self._squares + (square,))

    def intersect(self, other: SquareSet) -> SquareSet:
        shared = set(other._squares)
        return self._of(_dedupe(square for square in self._squares if square in shared))

    def union(self, other: SquareSet) -> SquareSet:
        return self._of(_dedupe(self._squares + other._squares))

    __add__ = concat
    __sub__ = difference
    __lshift__ = append
    __and__ = intersect
    __or__ = union

    def select(self, predicate: Callable[[Square], bool]) -> SquareSet:
        return self._of(square for square in self._squares if predicate(square))

    def where(self, attributes: Mapping[str, Any] | None = None, **kwargs: Any) -> SquareSet:
        """Filter by attribute queries.

        Example: ``position.where(piece={"player_number": 1}, x=[1, 2])``
        keeps squares on files 1 and 2 holding a piece of player 1.
        """
        matcher = nested({**(attributes or {}), **kwargs})
        return self.select(matcher.matches)

    def uniq(self) -> SquareSet:
        """Drop repeated squares, keeping the first occurrence."""
        return self._of(_dedupe(self._squares))

    # -- Lookup -------------------------------------------------------------

    def find_by_id(self, id: Any) -> Square | None:
        return self.find(lambda square: square.id == id)

    def find_by_x_and_y(self, x: int, y: int) -> Square | None:
        return self.find(lambda square: square.x == x and square.y == y)

    def find_by_piece_id(self, piece_id: Any) -> Square | None:
        return self.find(
            lambda square: square.piece is not None and square.piece.id == piece_id
        )

    # -- Geometry -----------------------------------------------------------

    def in_range(self, origin: Square, distance: int) -> SquareSet:
        """Squares within *distance* (Chebyshev) of *origin*, origin included."""
        return self.select(lambda square: Vector(origin, square).magnitude <= distance)

    def at_range(self, origin: Square, distance: int) -> SquareSet:
        return self.select(lambda square: Vector(origin, square).magnitude == distance)

    def ranks_away(self, origin: Square, distance: int) -> SquareSet:
        return self.select(lambda square: abs(Vector(origin, square).dy) == distance)

    def files_away(self, origin: Square, distance: int) -> SquareSet:
        return self.select(lambda square: abs(Vector(origin, square).dx) == distance)

    def in_direction(self, origin: Square, direction_y: int) -> SquareSet:
        """Squares on the *direction_y* side of *origin* along the y axis.

        Pair with :attr:`Piece.forwards_direction` to get everything ahead
        of a piece.
        """
        return self.select(
            lambda square: Vector(origin, square).direction.y == direction_y
        )

    def orthogonal(self, origin: Square) -> SquareSet:
        return self.select(lambda square: Vector(origin, square).is_orthogonal)

    def diagonal(self, origin: Square) -> SquareSet:
        return self.select(lambda square: Vector(origin, square).is_diagonal)

    def orthogonal_or_diagonal(self, origin: Square) -> SquareSet:
        return self.select(
            lambda square: Vector(origin, square).is_orthogonal_or_diagonal
        )

    def not_orthogonal_or_diagonal(self, origin: Square) -> SquareSet:
        return self.select(
            lambda square: Vector(origin, square).is_not_orthogonal_or_diagonal
        )

    # -- Occupancy ----------------------------------------------------------

    def occupied(self) -> SquareSet:
        return self.select(lambda square: square.is_occupied)

    def unoccupied(self) -> SquareSet:
        return self.select(lambda square: square.is_unoccupied)

    def occupied_by_player(self, player_number: int) -> SquareSet:
        return self.select(lambda square: square.is_occupied_by_player(player_number))

    def occupied_by_opponent(self, player_number: int) -> SquareSet:
        return self.select(
            lambda square: square.is_occupied_by_opponent(player_number)
        )

    def unoccupied_or_occupied_by_opponent(self, player_number: int) -> SquareSet:
        return self.select(
            lambda square: square.is_unoccupied
            or square.is_occupied_by_opponent(player_number)
        )

    def occupied_by_piece(self, piece_type: PieceType) -> SquareSet:
        """Squares holding a piece of *piece_type* (class, classes or tag)."""
        return self.select(lambda square: square.is_occupied_by_piece(piece_type))

    def excluding_piece(self, piece_type: PieceType) -> SquareSet:
        """Empty squares plus squares holding anything but *piece_type*."""
        return self.select(lambda square: not square.is_occupied_by_piece(piece_type))

    # -- Paths --------------------------------------------------------------

    def between(self, origin: Square, destination: Square) -> SquareSet:
        """Squares strictly between *origin* and *destination*, in walk order.

        Call this on the full position. Only orthogonal and diagonal lines
        have squares between them; any other pair yields an empty set.
        Coordinates on the line with no square in this set are skipped.
        """
        vector = Vector(origin, destination)
        if not vector.is_orthogonal_or_diagonal:
            return SquareSet()

        target = destination.point
        step = vector.direction
        current = origin.point
        found: list[Square] = []

        while current != target:
            current = current + step
            square = self.find_by_x_and_y(current.x, current.y)
            if square is None:
                _LOGGER.debug(
                    "No square at (%d, %d) on the line from %r to %r",
                    current.x,
                    current.y,
                    origin,
                    destination,
                )
                continue
            if square.point != target:
                found.append(square)

        return self._of(found)

    def unblocked(self, origin: Square, position: SquareSet) -> SquareSet:
        """Squares of this set with no occupied square between them and *origin*.

        *position* is the board the path is traced on; the receiver only
        supplies the candidate destinations.
        """
        return self.select(
            lambda destination: all(
                square.is_unoccupied for square in position.between(origin, destination)
            )
        )

    # -- Serialisation ------------------------------------------------------

    def as_json(self) -> list[dict[str, Any]]:
        return [square.as_json() for square in self._squares]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareSet):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        return f"SquareSet({list(self._squares)!r})"
