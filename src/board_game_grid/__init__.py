"""Geometric data model for grid-based board games.

Quick start::

    from board_game_grid import Piece, SquareSet

    class Rook(Piece):
        def destinations(self, square, game_state):
            position = game_state
            return (
                position.orthogonal(square)
                .unblocked(square, position)
                .unoccupied_or_occupied_by_opponent(self.player_number)
            )

    position = SquareSet([{"id": 1, "x": 0, "y": 0}, {"id": 2, "x": 0, "y": 1}])
    rook = Rook(id=1, player_number=1)
    rook.destinations(position.find_by_id(1), position)
"""

from board_game_grid.errors import GridError, InvalidSquaresError, UnknownPieceTypeError
from board_game_grid.matchers import Equals, Matcher, Nested, OneOf, Predicate, to_matcher
from board_game_grid.piece import FORWARDS_DIRECTION, Piece
from board_game_grid.point import Direction, Point
from board_game_grid.square import Square
from board_game_grid.square_set import SquareSet
from board_game_grid.vector import Vector

__all__ = [
    # Geometry
    "Direction",
    "Point",
    "Vector",
    # Domain objects
    "FORWARDS_DIRECTION",
    "Piece",
    "Square",
    "SquareSet",
    # Matchers
    "Equals",
    "Matcher",
    "Nested",
    "OneOf",
    "Predicate",
    "to_matcher",
    # Errors
    "GridError",
    "InvalidSquaresError",
    "UnknownPieceTypeError",
]
