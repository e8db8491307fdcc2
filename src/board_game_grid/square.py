"""A single grid cell, optionally holding a piece."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from board_game_grid.matchers import to_matcher
from board_game_grid.piece import Piece
from board_game_grid.point import Point

PieceType: TypeAlias = type[Piece] | tuple[type[Piece], ...] | str


def piece_is_a(piece: Piece | None, piece_type: PieceType) -> bool:
    """Whether *piece* is of *piece_type* (class, tuple of classes or tag)."""
    if piece is None:
        return False
    if isinstance(piece_type, str):
        return piece.type == piece_type
    return isinstance(piece, piece_type)


class Square:
    """Grid cell identified by ``id``.

    Squares compare and hash by ``id`` alone, so ids must be unique within
    a position. ``piece`` is the only field that may change after
    construction.
    """

    __slots__ = ("_id", "_x", "_y", "piece")

    def __init__(self, id: Any, x: int, y: int, piece: Piece | None = None) -> None:
        self._id = id
        self._x = x
        self._y = y
        self.piece = piece

    @property
    def id(self) -> Any:
        return self._id

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def point(self) -> Point:
        return Point(self._x, self._y)

    # -- Queries ------------------------------------------------------------

    def attribute_match(self, attribute: str, matcher: Any) -> bool:
        """Check *attribute* against a matcher or a plain query value.

        Example: ``square.attribute_match("piece", {"player_number": 1})``
        is true when the square holds a piece owned by player 1.
        """
        return to_matcher(matcher).matches(getattr(self, attribute))

    @property
    def is_occupied(self) -> bool:
        return self.piece is not None

    @property
    def is_unoccupied(self) -> bool:
        return self.piece is None

    def is_occupied_by_player(self, player_number: int) -> bool:
        return self.piece is not None and self.piece.player_number == player_number

    def is_occupied_by_opponent(self, player_number: int) -> bool:
        return self.piece is not None and self.piece.player_number != player_number

    def is_occupied_by_piece(self, piece_type: PieceType) -> bool:
        return piece_is_a(self.piece, piece_type)

    # -- Serialisation ------------------------------------------------------

    def as_json(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "x": self._x,
            "y": self._y,
            "piece": self.piece.as_json() if self.piece is not None else None,
        }

    @classmethod
    def from_json(cls, record: Mapping[str, Any]) -> Square:
        """Build a square from a ``{id, x, y, piece?}`` record.

        A mapping ``piece`` is rebuilt through :meth:`Piece.from_json`.
        """
        piece = record.get("piece")
        if isinstance(piece, Mapping):
            piece = Piece.from_json(piece)
        return cls(id=record["id"], x=record["x"], y=record["y"], piece=piece)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Square(id={self._id!r}, x={self._x}, y={self._y}, piece={self.piece!r})"
